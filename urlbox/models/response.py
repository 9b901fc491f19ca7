"""
Response models for the Urlbox API.
"""
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RenderResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    render_url: str = Field(alias="renderUrl")
    size: int = 0


class RenderMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_time: Optional[str] = Field(default=None, alias="startTime")
    end_time: Optional[str] = Field(default=None, alias="endTime")


class AsyncResponse(BaseModel):
    """Body of a webhook callback sent once a render completes."""
    model_config = ConfigDict(populate_by_name=True)

    event: str
    render_id: str = Field(alias="renderId")
    result: RenderResult
    meta: RenderMeta = Field(default_factory=RenderMeta)


class ScreenshotResponse(BaseModel):
    """Raw payload of a synchronous screenshot."""
    content: bytes
    status_code: int
    content_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def save(self, path: Union[str, Path]) -> Path:
        """Write the payload to ``path``, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.content)
        return path
