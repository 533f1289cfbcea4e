"""
Client errors

Every failure of a translate call is raised as a DeepLError subclass.
Cancellation and caller-imposed deadlines are not wrapped.
"""

import httpx

QUOTA_EXCEEDED = 456
QUOTA_EXCEEDED_MESSAGE = "Quota exceeded. The character limit has been reached."


class DeepLError(Exception):
    """Base class for all client errors"""


class TransportError(DeepLError):
    """The request could not be sent or the connection failed"""


class StatusError(DeepLError):
    """DeepL answered with a non-2xx status code"""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(status_message(status_code))

    @property
    def is_quota_exceeded(self) -> bool:
        return self.status_code == QUOTA_EXCEEDED

    def __repr__(self) -> str:
        return f"StatusError({self.status_code})"


class DecodeError(DeepLError):
    """A successful response carried a body that could not be decoded"""


class EmptyResponseError(DeepLError):
    """DeepL responded without any translations"""

    def __init__(self, message: str = "deepl responded with no translations"):
        super().__init__(message)


def status_message(status_code: int) -> str:
    """Human readable message for a DeepL status code"""
    if status_code == QUOTA_EXCEEDED:
        return QUOTA_EXCEEDED_MESSAGE
    return httpx.codes.get_reason_phrase(status_code)
