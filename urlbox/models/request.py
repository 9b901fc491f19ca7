"""
Request models for the Urlbox API.

Every optional field is tri-state: ``None`` means the caller left it unset and
the defaulter fills it in, while ``False`` and ``0`` are explicit choices.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class FileFormat(str, Enum):
    PNG = "png"
    JPEG = "jpeg"
    AVIF = "avif"
    WEBP = "webp"
    WEBM = "webm"
    PDF = "pdf"
    SVG = "svg"
    HTML = "html"
    MD = "md"
    MP4 = "mp4"


class Blocking(BaseModel):
    """Blocking or dismissing page elements before the capture."""
    block_ads: Optional[bool] = None
    hide_cookie_banners: Optional[bool] = None
    click_accept: Optional[bool] = None  # click accept buttons to dismiss pop-ups


class Selector(BaseModel):
    selector: Optional[str] = Field(default=None, examples=["#playground"])
    fail_if_selector_missing: Optional[bool] = None


class Image(BaseModel):
    """Options for PNG, WebP and JPEG output."""
    retina: Optional[bool] = None  # device pixel ratio of 2.0
    quality: Optional[int] = None  # JPEG/WebP only


class Wait(BaseModel):
    delay: Optional[int] = None    # ms to wait before capturing
    timeout: Optional[int] = None  # ms to wait for the page to respond


class Options(BaseModel):
    full_page: Optional[bool] = None
    width: Optional[int] = None
    blocking: Blocking = Field(default_factory=Blocking)
    selector: Selector = Field(default_factory=Selector)
    image: Image = Field(default_factory=Image)
    wait: Wait = Field(default_factory=Wait)
    # Name of the file the response is served as (content-disposition)
    download: Optional[str] = Field(default=None, examples=["myfilename"])


class ScreenshotRequest(BaseModel):
    url: str = Field(
        default="",
        examples=["https://example.com"]
    )
    format: Optional[FileFormat] = None
    options: Options = Field(default_factory=Options)


class AsyncRequest(BaseModel):
    url: str = Field(
        default="",
        examples=["https://example.com"]
    )
    webhook_url: str = Field(
        default="",
        examples=["https://example.com/webhooks/urlbox"]
    )
