"""
Asyncio Urlbox client built on aiohttp.
"""
import asyncio
from typing import Any, Dict, Optional, Tuple, Union

import aiohttp
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


class AsyncUrlboxClient:
    """Coroutine counterpart of ``UrlboxClient``."""

    def __init__(self,
                 session: Optional[aiohttp.ClientSession] = None,
                 api_key: Optional[str] = None,
                 bearer_token: Optional[str] = None,
                 config: Optional[Dict] = None):
        """Initialize the client.

        Args:
            session: Optional aiohttp session used as transport; created on
                first use when omitted
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
        self.session = session

        logger.info(f"Async Urlbox client initialized for {self.base_url}")

    def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            self.session = aiohttp.ClientSession(
                headers={"User-Agent": self.config.get("user_agent", "urlbox-client")}
            )
        return self.session

    async def _send(self, method: str, path: str,
                    body: Optional[Dict[str, Any]] = None,
                    headers: Optional[Dict[str, str]] = None) -> Tuple[int, bytes, Optional[str]]:
        """Execute one request and return status, body and content type."""
        url = self.base_url + path
        data = serializer.encode_body(body) if body is not None else None
        safe_url = mask_secret(url, self.api_key)
        session = self._get_session()

        logger.debug(f"{method} {safe_url}")
        try:
            async with session.request(method, url, data=data, headers=headers) as response:
                try:
                    content = await response.read()
                except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                    logger.error(f"Unable to read response body from {safe_url}: {format_exception(e)}")
                    raise UrlboxRequestError("http client ::: unable to read response body") from e
                status = response.status
                content_type = response.headers.get("Content-Type")
        except aiohttp.InvalidURL as e:
            logger.error(f"Unable to create request for {safe_url}: {format_exception(e)}")
            raise UrlboxRequestError("http client ::: unable to create request") from e
        # The session's total timeout surfaces as asyncio.TimeoutError, not a ClientError
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Request to {safe_url} failed: {format_exception(e)}")
            raise UrlboxRequestError("http client ::: client failed to execute request") from e

        logger.debug(f"{method} {safe_url} -> {status}")
        return status, content, content_type

    async def screenshot(self, request: ScreenshotRequest) -> ScreenshotResponse:
        """Take a synchronous screenshot and return its raw payload."""
        validate_request(request)
        require_credential(self.api_key, "api key")
        request = apply_defaults(request)

        path = f"{serializer.screenshot_path(self.api_key, request)}?{serializer.build_query(request)}"
        status, content, content_type = await self._send("GET", path)

        if status >= 400:
            logger.warning(f"Screenshot of {request.url} answered with status {status}")
        else:
            logger.info(f"Screenshot of {request.url} received ({len(content)} bytes)")

        return ScreenshotResponse(content=content, status_code=status, content_type=content_type)

    async def render_sync(self, request: ScreenshotRequest) -> RenderResult:
        validate_request(request)
        require_credential(self.bearer_token, "bearer token")
        request = apply_defaults(request)

        status, content, _ = await self._send(
            "POST",
            serializer.RENDER_SYNC_PATH,
            body=serializer.render_body(request),
            headers=serializer.bearer_headers(self.bearer_token),
        )
        if not 200 <= status < 300:
            logger.error(f"Render of {request.url} failed with status {status}")
            raise UnsuccessfulResponseError("render request was unsuccessful", status, content)

        result = serializer.decode_model(RenderResult, content)
        logger.info(f"Render of {request.url} stored at {result.render_url}")
        return result

    async def screenshot_async(self, request: AsyncRequest) -> str:
        validate_async_request(request)
        require_credential(self.bearer_token, "bearer token")

        status, content, _ = await self._send(
            "POST",
            serializer.RENDER_PATH,
            body=serializer.webhook_body(request),
            headers=serializer.bearer_headers(self.bearer_token),
        )
        try:
            message = serializer.interpret_async_status(status, content)
        except UnsuccessfulResponseError:
            logger.error(f"Async render of {request.url} rejected with status {status}")
            raise

        logger.info(f"Async render of {request.url} accepted, webhook: {request.webhook_url}")
        return message

    @staticmethod
    def parse_webhook(payload: Union[bytes, str, Dict[str, Any]]) -> AsyncResponse:
        """Decode the body of a webhook callback."""
        return serializer.decode_model(AsyncResponse, payload)

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None
            logger.info("HTTP session closed")

    async def __aenter__(self) -> "AsyncUrlboxClient":
        return self

    async def __aexit__(self, *_) -> None:
        await self.close()
