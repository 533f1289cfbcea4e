"""
DeepL Client

Handles interactions with the DeepL v2 API for translation.
"""

from typing import List, Optional, Sequence, Tuple

import httpx
from pydantic import ValidationError

from deepl_client.core.config import V2, Settings, get_settings
from deepl_client.core.errors import (
    DecodeError,
    EmptyResponseError,
    StatusError,
    TransportError,
)
from deepl_client.core.logging import get_logger
from deepl_client.languages import LanguageCode, language_code
from deepl_client.options import Payload, TranslateOption
from deepl_client.schemas.translation import Translation, TranslateResponse

logger = get_logger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class DeepLClient:
    """
    A DeepL client.

    The client keeps no connection open between calls; every translate call
    opens its own httpx.AsyncClient. Calls are coroutines, so cancelling the
    awaiting task (or wrapping it in asyncio.timeout / asyncio.wait_for)
    aborts the in-flight request. No timeout is applied otherwise.
    """

    def __init__(
        self,
        auth_key: str,
        base_url: str = V2,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._auth_key = auth_key
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "DeepLClient":
        """Build a client from DEEPL_* environment settings"""
        settings = settings or get_settings()
        if not settings.auth_key:
            raise ValueError("DeepL auth key not provided")
        return cls(settings.auth_key, settings.base_url, transport=transport)

    @property
    def auth_key(self) -> str:
        return self._auth_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def translate_url(self) -> str:
        return f"{self._base_url}/translate"

    async def translate(
        self,
        text: str,
        target_lang: LanguageCode,
        *options: TranslateOption,
    ) -> Tuple[str, LanguageCode]:
        """
        Translate text into target_lang.
        Returns: (translated text, detected source language)
        """
        translations = await self.translate_many([text], target_lang, *options)
        if not translations:
            raise EmptyResponseError()

        first = translations[0]
        return first.text, first.source_language

    async def translate_many(
        self,
        texts: Sequence[str],
        target_lang: LanguageCode,
        *options: TranslateOption,
    ) -> List[Translation]:
        """
        Translate multiple texts into target_lang.

        The returned translations are in the same order as texts.
        """
        if isinstance(texts, str):
            raise TypeError("texts must be a sequence of strings, not a single string")

        payload = self._build_payload(texts, target_lang, options)

        logger.debug(
            f"POST {self.translate_url} texts={len(texts)} "
            f"target_lang={payload['target_lang']} "
            f"options={[opt.field for opt in options]}"
        )

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
                response = await client.post(
                    self.translate_url,
                    data=payload,
                    headers={"Content-Type": FORM_CONTENT_TYPE},
                )
        except httpx.HTTPError as e:
            raise TransportError(f"deepl translate: {e}") from e

        logger.debug(f"DeepL responded with status {response.status_code}")

        if not response.is_success:
            raise StatusError(response.status_code)

        try:
            decoded = TranslateResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f"decode deepl response: {e}") from e

        return decoded.translations

    def _build_payload(
        self,
        texts: Sequence[str],
        target_lang: LanguageCode,
        options: Sequence[TranslateOption],
    ) -> Payload:
        payload: Payload = {
            "auth_key": self._auth_key,
            "target_lang": language_code(target_lang),
            "text": list(texts),
        }

        for opt in options:
            opt.apply(payload)

        return payload
