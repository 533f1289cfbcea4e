"""
Translate options

Each option sets one form field of a translate request. Options are applied
in the order they are passed, so a later option overrides an earlier one on
the same field.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Union

from deepl_client.languages import LanguageCode, language_code

Payload = Dict[str, Union[str, List[str]]]


class Formality(str, Enum):
    """Register of the translated text"""

    DEFAULT = "default"
    LESS = "less"
    MORE = "more"

    def __str__(self) -> str:
        return self.value


class SplitSentences(str, Enum):
    """How DeepL segments the input into sentences"""

    NONE = "0"
    DEFAULT = "1"
    NO_NEWLINES = "nonewlines"

    def __str__(self) -> str:
        return self.value


class TagHandling(str, Enum):
    """Which kind of markup DeepL should parse in the input"""

    XML = "xml"
    HTML = "html"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TranslateOption:
    field: str
    value: str

    def apply(self, payload: Payload) -> None:
        payload[self.field] = self.value


def source_lang(lang: LanguageCode) -> TranslateOption:
    """Set the source language of the text"""
    return TranslateOption("source_lang", language_code(lang))


def split_sentences(split: SplitSentences) -> TranslateOption:
    return TranslateOption("split_sentences", SplitSentences(split).value)


def preserve_formatting(preserve: bool) -> TranslateOption:
    return TranslateOption("preserve_formatting", "1" if preserve else "0")


def formality(formal: Formality) -> TranslateOption:
    return TranslateOption("formality", Formality(formal).value)


def tag_handling(mode: TagHandling) -> TranslateOption:
    return TranslateOption("tag_handling", TagHandling(mode).value)
