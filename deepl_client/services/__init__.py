"""Services layer - DeepL API client."""

from deepl_client.services.client import DeepLClient

__all__ = ["DeepLClient"]
