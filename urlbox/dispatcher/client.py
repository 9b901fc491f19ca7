"""
Blocking Urlbox client built on requests.
"""
from typing import Any, Dict, Optional, Union

import requests
from loguru import logger

from config.config import URLBOX_SETTINGS
from urlbox.dispatcher import serializer
from urlbox.errors import UnsuccessfulResponseError, UrlboxRequestError
from urlbox.models import (
    AsyncRequest,
    AsyncResponse,
    RenderResult,
    ScreenshotRequest,
    ScreenshotResponse,
)
from urlbox.options import apply_defaults, require_credential, validate_async_request, validate_request
from urlbox.utils import format_exception, mask_secret

_BUILD_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidHeader,
)
_READ_ERRORS = (
    requests.exceptions.ChunkedEncodingError,
    requests.exceptions.ContentDecodingError,
)


class UrlboxClient:
    """Client for the Urlbox screenshot API.

    Configuration is read-only after construction, so one client can be
    shared by threads issuing independent calls.
    """

    def __init__(self,
                 session: Optional[requests.Session] = None,
                 api_key: Optional[str] = None,
                 bearer_token: Optional[str] = None,
                 config: Optional[Dict] = None):
        """Initialize the client.

        Args:
            session: Optional requests session used as transport
            api_key: Publishable key embedded in GET urls
            bearer_token: Secret key sent as bearer token on POST calls
            config: Optional configuration to override defaults
        """
        self.config = {**URLBOX_SETTINGS, **(config or {})}
        self.base_url = self.config["base_url"].rstrip("/") + "/"
        self.api_key = api_key or self.config.get("api_key", "")
        self.bearer_token = bearer_token or self.config.get("bearer_token", "")

        if not self.api_key:
            logger.warning("URLBOX_API_KEY is not set. Screenshot calls will be rejected by the API.")

        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = self.config.get("user_agent", "urlbox-client")
        self.session = session

        logger.info(f"Urlbox client initialized for {self.base_url}")

    def _send(self, method: str, path: str,
              body: Optional[Dict[str, Any]] = None,
              headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """Execute one request against the base url and return the response."""
        url = self.base_url + path
        data = serializer.encode_body(body) if body is not None else None
        safe_url = mask_secret(url, self.api_key)

        logger.debug(f"{method} {safe_url}")
        try:
            response = self.session.request(method, url, data=data, headers=headers)
        except _BUILD_ERRORS as e:
            logger.error(f"Unable to create request for {safe_url}: {format_exception(e)}")
            raise UrlboxRequestError("http client ::: unable to create request") from e
        except _READ_ERRORS as e:
            logger.error(f"Unable to read response body from {safe_url}: {format_exception(e)}")
            raise UrlboxRequestError("http client ::: unable to read response body") from e
        except requests.RequestException as e:
            logger.error(f"Request to {safe_url} failed: {format_exception(e)}")
            raise UrlboxRequestError("http client ::: client failed to execute request") from e

        logger.debug(f"{method} {safe_url} -> {response.status_code}")
        return response

    def screenshot(self, request: ScreenshotRequest) -> ScreenshotResponse:
        """Take a synchronous screenshot.

        Args:
            request: Screenshot request, unset options are defaulted

        Returns:
            Raw payload and status code of the response
        """
        validate_request(request)
        require_credential(self.api_key, "api key")
        request = apply_defaults(request)

        path = f"{serializer.screenshot_path(self.api_key, request)}?{serializer.build_query(request)}"
        response = self._send("GET", path)

        if response.status_code >= 400:
            logger.warning(f"Screenshot of {request.url} answered with status {response.status_code}")
        else:
            logger.info(f"Screenshot of {request.url} received ({len(response.content)} bytes)")

        return ScreenshotResponse(
            content=response.content,
            status_code=response.status_code,
            content_type=response.headers.get("Content-Type"),
        )

    def render_sync(self, request: ScreenshotRequest) -> RenderResult:
        """Render through ``render/sync`` and return where the result is stored.

        Raises:
            UnsuccessfulResponseError: the API answered with a non-2xx status
        """
        validate_request(request)
        require_credential(self.bearer_token, "bearer token")
        request = apply_defaults(request)

        response = self._send(
            "POST",
            serializer.RENDER_SYNC_PATH,
            body=serializer.render_body(request),
            headers=serializer.bearer_headers(self.bearer_token),
        )
        if not response.ok:
            logger.error(f"Render of {request.url} failed with status {response.status_code}")
            raise UnsuccessfulResponseError("render request was unsuccessful",
                                            response.status_code, response.content)

        result = serializer.decode_model(RenderResult, response.content)
        logger.info(f"Render of {request.url} stored at {result.render_url}")
        return result

    def screenshot_async(self, request: AsyncRequest) -> str:
        """Submit a render whose result is posted to ``request.webhook_url``.

        Returns:
            A fixed acceptance message when the API answers 200 or 201

        Raises:
            AsyncUnsuccessfulError: for any other status
        """
        validate_async_request(request)
        require_credential(self.bearer_token, "bearer token")

        response = self._send(
            "POST",
            serializer.RENDER_PATH,
            body=serializer.webhook_body(request),
            headers=serializer.bearer_headers(self.bearer_token),
        )
        try:
            message = serializer.interpret_async_status(response.status_code, response.content)
        except UnsuccessfulResponseError:
            logger.error(f"Async render of {request.url} rejected with status {response.status_code}")
            raise

        logger.info(f"Async render of {request.url} accepted, webhook: {request.webhook_url}")
        return message

    @staticmethod
    def parse_webhook(payload: Union[bytes, str, Dict[str, Any]]) -> AsyncResponse:
        """Decode the body of a webhook callback."""
        return serializer.decode_model(AsyncResponse, payload)

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()
            logger.info("HTTP session closed")

    def __enter__(self) -> "UrlboxClient":
        return self

    def __exit__(self, *_) -> None:
        self.close()
