from typing import List
from pydantic import BaseModel, ConfigDict, Field


class FormatDescriptor(BaseModel):
    """Una variante de codificación tal y como la entrega el proveedor."""
    itag: int | str | None = None
    container: str | None = None
    mime_type: str | None = None
    quality_label: str | None = None
    audio_bitrate: float | None = None
    bitrate: float | None = None
    video_codec: str | None = None
    audio_codec: str | None = None


class VideoInfo(BaseModel):
    """Resultado de get_info: título y lista de formatos en el orden del proveedor."""
    title: str
    formats: List[FormatDescriptor] = Field(default_factory=list)


class FormatSummary(BaseModel):
    itag: str
    ext: str
    resolution: str
    vcodec: str
    acodec: str


class ItagResponse(BaseModel):
    """Respuesta enviada al cliente."""
    model_config = ConfigDict(populate_by_name=True)

    video_id: str = Field(..., serialization_alias="videoId")
    title: str
    itags: List[FormatSummary]


class ErrorResponse(BaseModel):
    error: str
