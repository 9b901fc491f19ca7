"""
Client library for the Urlbox website screenshot API.
"""
from urlbox.dispatcher import ASYNC_ACCEPTED_MESSAGE, AsyncUrlboxClient, UrlboxClient
from urlbox.errors import (
    AsyncUnsuccessfulError,
    CredentialsRequiredError,
    ImageQualityExceededError,
    InvalidRequestError,
    UnsuccessfulResponseError,
    UrlboxError,
    UrlboxRequestError,
    UrlRequiredError,
    WebhookUrlRequiredError,
)
from urlbox.models import (
    AsyncRequest,
    AsyncResponse,
    Blocking,
    FileFormat,
    Image,
    Options,
    RenderMeta,
    RenderResult,
    ScreenshotRequest,
    ScreenshotResponse,
    Selector,
    Wait,
)
from urlbox.options import apply_defaults, require_credential, validate_async_request, validate_request

__version__ = "0.1.0"

__all__ = [
    "ASYNC_ACCEPTED_MESSAGE",
    "AsyncRequest",
    "AsyncResponse",
    "AsyncUnsuccessfulError",
    "AsyncUrlboxClient",
    "Blocking",
    "CredentialsRequiredError",
    "FileFormat",
    "Image",
    "ImageQualityExceededError",
    "InvalidRequestError",
    "Options",
    "RenderMeta",
    "RenderResult",
    "ScreenshotRequest",
    "ScreenshotResponse",
    "Selector",
    "UnsuccessfulResponseError",
    "UrlRequiredError",
    "UrlboxClient",
    "UrlboxError",
    "UrlboxRequestError",
    "Wait",
    "WebhookUrlRequiredError",
    "apply_defaults",
    "require_credential",
    "validate_async_request",
    "validate_request",
]
