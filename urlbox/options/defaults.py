"""
Fills unset request options with the documented defaults.
"""
from typing import Any, Dict, Optional

from config.config import SCREENSHOT_DEFAULTS
from urlbox.models import FileFormat, Options, ScreenshotRequest


def _pick(value: Any, default: Any) -> Any:
    return default if value is None else value


def apply_defaults(request: ScreenshotRequest,
                   defaults: Optional[Dict[str, Any]] = None) -> ScreenshotRequest:
    """Return a copy of ``request`` with every unset option filled in.

    Only ``None`` counts as unset, so applying this twice gives the same
    result as applying it once. The request is not validated here and the
    input is left untouched.

    Args:
        request: Request as built by the caller
        defaults: Optional mapping to override ``SCREENSHOT_DEFAULTS``

    Returns:
        The defaulted request
    """
    defaults = {**SCREENSHOT_DEFAULTS, **(defaults or {})}
    options = request.options

    blocking = options.blocking.model_copy(update={
        "block_ads": _pick(options.blocking.block_ads, defaults["block_ads"]),
        "hide_cookie_banners": _pick(options.blocking.hide_cookie_banners, defaults["hide_cookie_banners"]),
        "click_accept": _pick(options.blocking.click_accept, defaults["click_accept"]),
    })
    selector = options.selector.model_copy(update={
        "selector": _pick(options.selector.selector, defaults["selector"]),
        "fail_if_selector_missing": _pick(options.selector.fail_if_selector_missing,
                                          defaults["fail_if_selector_missing"]),
    })
    image = options.image.model_copy(update={
        "retina": _pick(options.image.retina, defaults["retina"]),
        "quality": _pick(options.image.quality, defaults["quality"]),
    })
    wait = options.wait.model_copy(update={
        "delay": _pick(options.wait.delay, defaults["delay"]),
        "timeout": _pick(options.wait.timeout, defaults["timeout"]),
    })

    defaulted: Options = options.model_copy(update={
        "full_page": _pick(options.full_page, defaults["full_page"]),
        "width": _pick(options.width, defaults["width"]),
        "blocking": blocking,
        "selector": selector,
        "image": image,
        "wait": wait,
    })

    return request.model_copy(update={
        "format": FileFormat(_pick(request.format, defaults["format"])),
        "options": defaulted,
    })
