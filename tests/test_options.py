"""
Tests for request validation and defaulting.
"""
import unittest

import pytest
from loguru import logger

from urlbox.errors import ImageQualityExceededError, UrlRequiredError, WebhookUrlRequiredError
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
from urlbox.options import apply_defaults, validate_async_request, validate_request

pytestmark = pytest.mark.unit


class TestApplyDefaults(unittest.TestCase):
    """Test cases for apply_defaults."""

    def setUp(self):
        """Set up test environment before each test."""
        # Disable logger for testing
        logger.remove()
        logger.add(lambda _: None, level="ERROR")

        self.test_url = "https://example.com"

    def test_all_unset_gives_documented_defaults(self):
        """An empty request is filled with every documented default."""
        request = apply_defaults(ScreenshotRequest(url=self.test_url))
        options = request.options

        self.assertEqual(request.format, FileFormat.PNG)
        self.assertEqual(options.width, 1280)
        self.assertFalse(options.full_page)
        self.assertTrue(options.blocking.block_ads)
        self.assertTrue(options.blocking.hide_cookie_banners)
        self.assertTrue(options.blocking.click_accept)
        self.assertEqual(options.selector.selector, "")
        self.assertFalse(options.selector.fail_if_selector_missing)
        self.assertFalse(options.image.retina)
        self.assertEqual(options.image.quality, 80)
        self.assertEqual(options.wait.delay, 0)
        self.assertEqual(options.wait.timeout, 30000)
        self.assertIsNone(options.download)

    def test_explicit_false_and_zero_are_kept(self):
        """False and 0 are caller choices, not unset values."""
        request = ScreenshotRequest(
            url=self.test_url,
            format="jpeg",
            options=Options(
                full_page=True,
                width=800,
                blocking=Blocking(block_ads=False, hide_cookie_banners=False, click_accept=False),
                selector=Selector(selector="#main", fail_if_selector_missing=True),
                image=Image(retina=True, quality=0),
                wait=Wait(delay=500, timeout=0),
            ),
        )
        defaulted = apply_defaults(request)

        self.assertEqual(defaulted.format, FileFormat.JPEG)
        self.assertTrue(defaulted.options.full_page)
        self.assertEqual(defaulted.options.width, 800)
        self.assertFalse(defaulted.options.blocking.block_ads)
        self.assertFalse(defaulted.options.blocking.hide_cookie_banners)
        self.assertFalse(defaulted.options.blocking.click_accept)
        self.assertEqual(defaulted.options.selector.selector, "#main")
        self.assertTrue(defaulted.options.selector.fail_if_selector_missing)
        self.assertTrue(defaulted.options.image.retina)
        self.assertEqual(defaulted.options.image.quality, 0)
        self.assertEqual(defaulted.options.wait.delay, 500)
        self.assertEqual(defaulted.options.wait.timeout, 0)

    def test_defaulting_is_idempotent(self):
        """Applying the defaults twice changes nothing."""
        request = ScreenshotRequest(
            url=self.test_url,
            options=Options(width=1024, image=Image(quality=55)),
        )
        once = apply_defaults(request)
        twice = apply_defaults(once)

        self.assertEqual(once, twice)

    def test_input_is_not_mutated(self):
        """The caller's request keeps its unset fields."""
        request = ScreenshotRequest(url=self.test_url)
        apply_defaults(request)

        self.assertIsNone(request.format)
        self.assertIsNone(request.options.width)
        self.assertIsNone(request.options.blocking.block_ads)

    def test_override_defaults(self):
        """A mapping passed in replaces individual defaults."""
        request = apply_defaults(ScreenshotRequest(url=self.test_url), defaults={"width": 1920})

        self.assertEqual(request.options.width, 1920)
        self.assertEqual(request.options.image.quality, 80)


class TestValidation(unittest.TestCase):
    """Test cases for request validation."""

    def setUp(self):
        logger.remove()
        logger.add(lambda _: None, level="ERROR")

    def test_empty_url_rejected(self):
        with self.assertRaises(UrlRequiredError):
            validate_request(ScreenshotRequest(url=""))

    def test_blank_url_rejected(self):
        with self.assertRaises(UrlRequiredError):
            validate_request(ScreenshotRequest(url="   "))

    def test_quality_above_100_rejected(self):
        request = ScreenshotRequest(url="https://example.com", options=Options(image=Image(quality=101)))

        with self.assertRaises(ImageQualityExceededError) as ctx:
            validate_request(request)
        self.assertEqual(str(ctx.exception), "image quality cannot be greater than 100")

    def test_negative_quality_rejected(self):
        request = ScreenshotRequest(url="https://example.com", options=Options(image=Image(quality=-1)))

        with self.assertRaises(ImageQualityExceededError):
            validate_request(request)

    def test_quality_bounds_accepted(self):
        for quality in (0, 100, None):
            request = ScreenshotRequest(url="https://example.com", options=Options(image=Image(quality=quality)))
            validate_request(request)

    def test_validation_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            validate_request(ScreenshotRequest())

    def test_async_request_requires_url(self):
        with self.assertRaises(UrlRequiredError):
            validate_async_request(AsyncRequest(url="", webhook_url="https://example.com/hook"))

    def test_async_request_requires_webhook_url(self):
        with self.assertRaises(WebhookUrlRequiredError):
            validate_async_request(AsyncRequest(url="https://example.com", webhook_url=""))

    def test_valid_async_request(self):
        validate_async_request(AsyncRequest(url="https://example.com", webhook_url="https://example.com/hook"))


if __name__ == '__main__':
    pytest.main(['-xvs', 'tests/test_options.py'])
