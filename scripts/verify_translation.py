import asyncio
import sys

from deepl_client import DeepLClient, DeepLError, Language, get_settings
from deepl_client.core.logging import setup_logging


async def verify_deepl_translation() -> int:
    print("Testing REAL DeepL translation...")
    settings = get_settings()
    setup_logging(settings.log_level)

    # Note: Ensure DEEPL_AUTH_KEY is set in .env or environment variables
    if not settings.auth_key:
        print("ERROR: DEEPL_AUTH_KEY is missing!")
        return 1

    client = DeepLClient.from_settings(settings)

    text = "This is an example text."
    try:
        translated, source = await client.translate(text, Language.GERMAN)
    except DeepLError as e:
        print(f"FAILURE: {e}")
        return 1

    print(f"Original: {text}")
    print(f"Translated: {translated}")
    print(f"Detected source language: {source}")

    if translated == "Dies ist ein Beispieltext.":
        print("SUCCESS: DeepL translation working")
    else:
        print(f"WARNING: Unexpected translation result: {translated}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(verify_deepl_translation()))
