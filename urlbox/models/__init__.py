"""
Request and response models for the Urlbox API.
"""
from urlbox.models.request import (
    AsyncRequest,
    Blocking,
    FileFormat,
    Image,
    Options,
    ScreenshotRequest,
    Selector,
    Wait,
)
from urlbox.models.response import AsyncResponse, RenderMeta, RenderResult, ScreenshotResponse

__all__ = [
    "AsyncRequest",
    "AsyncResponse",
    "Blocking",
    "FileFormat",
    "Image",
    "Options",
    "RenderMeta",
    "RenderResult",
    "ScreenshotRequest",
    "ScreenshotResponse",
    "Selector",
    "Wait",
]
