from typing import List

from app.models.schemas import FormatDescriptor, FormatSummary, ItagResponse, VideoInfo

UNKNOWN = "unknown"
AUDIO_ONLY = "audio only"
NO_CODEC = "none"


# -----------------------------
# FILTRO
# -----------------------------
def has_quality_info(fmt: FormatDescriptor) -> bool:
    """
    Solo interesan formatos con itag y con algún dato de calidad
    (etiqueta de resolución, bitrate de audio o bitrate genérico).
    """
    if fmt.itag is None or fmt.itag == "":
        return False
    return bool(fmt.quality_label or fmt.audio_bitrate or fmt.bitrate)


# -----------------------------
# PROYECCIÓN
# -----------------------------
def container_extension(fmt: FormatDescriptor) -> str:
    if fmt.container:
        return fmt.container
    if fmt.mime_type and "/" in fmt.mime_type:
        # "audio/webm; codecs=opus" -> "webm"
        subtype = fmt.mime_type.split("/", 1)[1].split(";", 1)[0].strip()
        return subtype or UNKNOWN
    return UNKNOWN


def resolution_of(fmt: FormatDescriptor) -> str:
    if fmt.quality_label:
        return fmt.quality_label
    if fmt.audio_bitrate:
        return AUDIO_ONLY
    return UNKNOWN


def summarize(fmt: FormatDescriptor) -> FormatSummary:
    return FormatSummary(
        itag=str(fmt.itag),
        ext=container_extension(fmt),
        resolution=resolution_of(fmt),
        vcodec=fmt.video_codec or NO_CODEC,
        acodec=fmt.audio_codec or NO_CODEC,
    )


def list_formats(info: VideoInfo) -> List[FormatSummary]:
    return [summarize(f) for f in info.formats if has_quality_info(f)]


def build_payload(video_id: str, info: VideoInfo) -> ItagResponse:
    return ItagResponse(video_id=video_id, title=info.title, itags=list_formats(info))
