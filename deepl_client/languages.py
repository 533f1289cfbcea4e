"""
DeepL language codes
"""

from enum import Enum
from typing import Union


class Language(str, Enum):
    BULGARIAN = "BG"
    CZECH = "CS"
    DANISH = "DA"
    GERMAN = "DE"
    GREEK = "EL"
    ENGLISH = "EN"
    ENGLISH_BRITISH = "EN-GB"
    ENGLISH_AMERICAN = "EN-US"
    SPANISH = "ES"
    ESTONIAN = "ET"
    FINNISH = "FI"
    FRENCH = "FR"
    HUNGARIAN = "HU"
    INDONESIAN = "ID"
    ITALIAN = "IT"
    JAPANESE = "JA"
    KOREAN = "KO"
    LITHUANIAN = "LT"
    LATVIAN = "LV"
    NORWEGIAN = "NB"
    DUTCH = "NL"
    POLISH = "PL"
    PORTUGUESE = "PT"
    PORTUGUESE_BRAZILIAN = "PT-BR"
    PORTUGUESE_EUROPEAN = "PT-PT"
    ROMANIAN = "RO"
    RUSSIAN = "RU"
    SLOVAK = "SK"
    SLOVENIAN = "SL"
    SWEDISH = "SV"
    TURKISH = "TR"
    UKRAINIAN = "UK"
    CHINESE = "ZH"

    def __str__(self) -> str:
        return self.value


# Plain strings are passed through untouched; DeepL rejects unknown codes.
LanguageCode = Union[Language, str]


def language_code(lang: LanguageCode) -> str:
    """Wire value of a language"""
    if isinstance(lang, Language):
        return lang.value
    return str(lang)


def parse_language(code: str) -> LanguageCode:
    """Map a code returned by DeepL to a Language member when one exists"""
    try:
        return Language(code.upper())
    except ValueError:
        return code
