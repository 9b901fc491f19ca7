"""
Exceptions raised by the Urlbox client.
"""
from typing import Optional


class UrlboxError(Exception):
    """Base class for every error raised by this package."""


class InvalidRequestError(UrlboxError, ValueError):
    """A request was rejected before anything was sent."""


class UrlRequiredError(InvalidRequestError):
    def __init__(self, message: str = "a url must be passed in"):
        super().__init__(message)


class ImageQualityExceededError(InvalidRequestError):
    def __init__(self, message: str = "image quality cannot be greater than 100"):
        super().__init__(message)


class WebhookUrlRequiredError(InvalidRequestError):
    def __init__(self, message: str = "a webhook url must be passed in"):
        super().__init__(message)


class UrlboxRequestError(UrlboxError):
    """Building, sending or decoding an HTTP exchange failed.

    The original exception is kept as ``__cause__``.
    """


class UnsuccessfulResponseError(UrlboxError):
    """The service answered with a status that is not a success."""

    def __init__(self, message: str, status_code: int, body: Optional[bytes] = None):
        super().__init__(f"{message} (status {status_code})")
        self.status_code = status_code
        self.body = body


class AsyncUnsuccessfulError(UnsuccessfulResponseError):
    def __init__(self, status_code: int, body: Optional[bytes] = None):
        super().__init__("async screenshot request was unsuccessful", status_code, body)


class CredentialsRequiredError(InvalidRequestError):
    """The client has no api key or bearer token for the call being made."""
