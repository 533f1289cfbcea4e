"""
Translation Schemas
"""

from typing import List

from pydantic import BaseModel

from deepl_client.languages import LanguageCode, parse_language


class Translation(BaseModel):
    text: str
    detected_source_language: str

    @property
    def source_language(self) -> LanguageCode:
        """Detected source language as a Language member when known"""
        return parse_language(self.detected_source_language)


class TranslateResponse(BaseModel):
    translations: List[Translation]
