"""
deepl_client - a small async client for the DeepL v2 translation API.

Build a client with an auth key, then translate one text or many:

    client = DeepLClient(auth_key)
    text, source = await client.translate("Hello", Language.GERMAN)
"""

__version__ = "0.1.0"

from deepl_client.core.config import V2, Settings, get_settings
from deepl_client.core.errors import (
    QUOTA_EXCEEDED,
    DecodeError,
    DeepLError,
    EmptyResponseError,
    StatusError,
    TransportError,
)
from deepl_client.languages import Language
from deepl_client.options import (
    Formality,
    SplitSentences,
    TagHandling,
    TranslateOption,
    formality,
    preserve_formatting,
    source_lang,
    split_sentences,
    tag_handling,
)
from deepl_client.schemas.translation import Translation, TranslateResponse
from deepl_client.services.client import DeepLClient

__all__ = [
    "V2",
    "Settings",
    "get_settings",
    "DeepLClient",
    "Translation",
    "TranslateResponse",
    "Language",
    "Formality",
    "SplitSentences",
    "TagHandling",
    "TranslateOption",
    "source_lang",
    "split_sentences",
    "preserve_formatting",
    "formality",
    "tag_handling",
    "DeepLError",
    "TransportError",
    "StatusError",
    "DecodeError",
    "EmptyResponseError",
    "QUOTA_EXCEEDED",
]
