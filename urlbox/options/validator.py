"""
Checks run on a request before it is defaulted and sent.
"""
from loguru import logger

from urlbox.errors import (
    CredentialsRequiredError,
    ImageQualityExceededError,
    UrlRequiredError,
    WebhookUrlRequiredError,
)
from urlbox.models import AsyncRequest, ScreenshotRequest

MAX_IMAGE_QUALITY = 100


def _require_url(url: str) -> None:
    if not url or not url.strip():
        logger.error("Rejected request without a target url")
        raise UrlRequiredError()


def validate_request(request: ScreenshotRequest) -> None:
    """Reject a screenshot request with no url or an out-of-range quality.

    Raises:
        UrlRequiredError: the target url is empty
        ImageQualityExceededError: the image quality is outside 0-100
    """
    _require_url(request.url)

    quality = request.options.image.quality
    if quality is not None and quality > MAX_IMAGE_QUALITY:
        logger.error(f"Rejected request for {request.url}: image quality {quality} is above {MAX_IMAGE_QUALITY}")
        raise ImageQualityExceededError()
    if quality is not None and quality < 0:
        logger.error(f"Rejected request for {request.url}: image quality {quality} is negative")
        raise ImageQualityExceededError("image quality cannot be lower than 0")


def validate_async_request(request: AsyncRequest) -> None:
    """Reject a webhook request missing either of its urls.

    Raises:
        UrlRequiredError: the target url is empty
        WebhookUrlRequiredError: the webhook url is empty
    """
    _require_url(request.url)

    if not request.webhook_url or not request.webhook_url.strip():
        logger.error(f"Rejected async request for {request.url}: no webhook url")
        raise WebhookUrlRequiredError()


def require_credential(value: str, name: str) -> None:
    """Reject a call the API would refuse for a missing credential.

    Raises:
        CredentialsRequiredError: ``value`` is empty
    """
    if not value:
        logger.error(f"Rejected call without {name}")
        raise CredentialsRequiredError(f"{name} must be set on the client")
