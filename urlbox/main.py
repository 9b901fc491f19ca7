"""
Command line entry point for the Urlbox client.
"""
import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from urlbox.dispatcher import AsyncUrlboxClient
from urlbox.errors import UrlboxError
from urlbox.models import (
    AsyncRequest,
    Blocking,
    FileFormat,
    Image,
    Options,
    ScreenshotRequest,
    Selector,
    Wait,
)
from urlbox.utils import setup_logger


def _add_render_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by the screenshot and render commands.

    Every option defaults to None so the client applies its own defaults.
    """
    parser.add_argument("url", help="URL of the website to capture")
    parser.add_argument("--format", choices=[f.value for f in FileFormat], default=None,
                        help="Output format (default: png)")
    parser.add_argument("--width", type=int, default=None, help="Viewport width (default: 1280)")
    parser.add_argument("--full-page", action=argparse.BooleanOptionalAction, default=None,
                        help="Capture the full scrollable page")
    parser.add_argument("--block-ads", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--hide-cookie-banners", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--click-accept", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--selector", default=None, help="CSS selector of the element to capture")
    parser.add_argument("--fail-if-selector-missing", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--retina", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--quality", type=int, default=None, help="JPEG/WebP quality, 0-100 (default: 80)")
    parser.add_argument("--delay", type=int, default=None, help="Milliseconds to wait before capturing")
    parser.add_argument("--timeout", type=int, default=None, help="Milliseconds to wait for the page")
    parser.add_argument("--download", default=None, help="Serve the result as an attachment with this name")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Urlbox screenshot API client")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    screenshot_parser = subparsers.add_parser("screenshot", help="Take a screenshot and save it")
    _add_render_options(screenshot_parser)
    screenshot_parser.add_argument("--output", "-o", required=True, help="File to write the result to")

    render_parser = subparsers.add_parser("render", help="Render and print where the result is stored")
    _add_render_options(render_parser)

    webhook_parser = subparsers.add_parser("webhook", help="Submit a render delivered to a webhook")
    webhook_parser.add_argument("url", help="URL of the website to capture")
    webhook_parser.add_argument("--webhook-url", required=True, help="URL the result is posted to")

    return parser


def request_from_args(args: argparse.Namespace) -> ScreenshotRequest:
    """Build a screenshot request from parsed command line arguments."""
    return ScreenshotRequest(
        url=args.url,
        format=args.format,
        options=Options(
            full_page=args.full_page,
            width=args.width,
            blocking=Blocking(
                block_ads=args.block_ads,
                hide_cookie_banners=args.hide_cookie_banners,
                click_accept=args.click_accept,
            ),
            selector=Selector(
                selector=args.selector,
                fail_if_selector_missing=args.fail_if_selector_missing,
            ),
            image=Image(retina=args.retina, quality=args.quality),
            wait=Wait(delay=args.delay, timeout=args.timeout),
            download=args.download,
        ),
    )


async def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logger()
    client = AsyncUrlboxClient()

    try:
        if args.command == "screenshot":
            response = await client.screenshot(request_from_args(args))
            if not response.ok:
                print(f"Screenshot failed with status {response.status_code}", file=sys.stderr)
                return 1
            path = response.save(Path(args.output))
            print(f"Screenshot saved to: {path}")

        elif args.command == "render":
            result = await client.render_sync(request_from_args(args))
            print(f"Render URL: {result.render_url}")
            print(f"Size: {result.size} bytes")

        elif args.command == "webhook":
            message = await client.screenshot_async(
                AsyncRequest(url=args.url, webhook_url=args.webhook_url)
            )
            print(message)

    except UrlboxError as e:
        logger.error(f"Command {args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    finally:
        # Clean up
        await client.close()

    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
