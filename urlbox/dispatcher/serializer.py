"""
Turns defaulted requests into what goes on the wire.

Shared by the blocking and the asyncio client so both send byte-identical
requests.
"""
import json
from typing import Any, Dict, List, Tuple, Type, TypeVar, Union
from urllib.parse import quote, urlencode

from pydantic import BaseModel

from urlbox.errors import AsyncUnsuccessfulError, UrlboxRequestError
from urlbox.models import AsyncRequest, ScreenshotRequest
from urlbox.utils import build_download_filename

RENDER_PATH = "render"
RENDER_SYNC_PATH = "render/sync"

ASYNC_ACCEPTED_STATUSES = (200, 201)
ASYNC_ACCEPTED_MESSAGE = "render request accepted, the result will be posted to the webhook url"

ModelT = TypeVar("ModelT", bound=BaseModel)


def _option_pairs(request: ScreenshotRequest) -> List[Tuple[str, Any]]:
    """Options of a defaulted request in the order the API documents them."""
    options = request.options
    pairs = [
        ("width", options.width),
        ("full_page", options.full_page),
        ("block_ads", options.blocking.block_ads),
        ("hide_cookie_banners", options.blocking.hide_cookie_banners),
        ("click_accept", options.blocking.click_accept),
        ("retina", options.image.retina),
        ("quality", options.image.quality),
        ("delay", options.wait.delay),
        ("timeout", options.wait.timeout),
        ("selector", options.selector.selector),
        ("fail_if_selector_missing", options.selector.fail_if_selector_missing),
    ]
    if options.download:
        pairs.append(("download", build_download_filename(options.download, request.format.value)))
    return pairs


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def screenshot_path(api_key: str, request: ScreenshotRequest) -> str:
    """Relative GET path, ``{api_key}/{format}``."""
    return f"{quote(api_key, safe='')}/{request.format.value}"


def build_query(request: ScreenshotRequest) -> str:
    """Flatten a defaulted request into its query string."""
    pairs = [("url", request.url)]
    pairs.extend((key, _query_value(value)) for key, value in _option_pairs(request))
    return urlencode(pairs)


def render_body(request: ScreenshotRequest) -> Dict[str, Any]:
    """JSON body for ``render/sync``: ``{url, format, options}``."""
    return {
        "url": request.url,
        "format": request.format.value,
        "options": dict(_option_pairs(request)),
    }


def webhook_body(request: AsyncRequest) -> Dict[str, Any]:
    return {"url": request.url, "webhook_url": request.webhook_url}


def encode_body(body: Dict[str, Any]) -> bytes:
    try:
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise UrlboxRequestError("http client ::: unable to marshal request body") from e


def bearer_headers(bearer_token: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {bearer_token}",
    }


def interpret_async_status(status_code: int, body: bytes) -> str:
    """Map the status of a webhook submission to the acceptance message.

    Raises:
        AsyncUnsuccessfulError: for any status other than 200 or 201
    """
    if status_code in ASYNC_ACCEPTED_STATUSES:
        return ASYNC_ACCEPTED_MESSAGE
    raise AsyncUnsuccessfulError(status_code, body)


def decode_model(model: Type[ModelT], payload: Union[bytes, str, Dict[str, Any]]) -> ModelT:
    """Decode a JSON payload into ``model``.

    Raises:
        UrlboxRequestError: the payload is not JSON or does not fit the model
    """
    try:
        if isinstance(payload, (bytes, str)):
            payload = json.loads(payload)
        return model.model_validate(payload)
    except ValueError as e:
        raise UrlboxRequestError("http client ::: unable to unmarshal response body") from e
