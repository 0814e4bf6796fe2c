import logging
import re
from typing import Any, Dict, Protocol

import yt_dlp

from app.core.exceptions import ProviderError
from app.models.schemas import FormatDescriptor, VideoInfo

logger = logging.getLogger(__name__)

WATCH_URL = "https://www.youtube.com/watch?v={}"


class MetadataProvider(Protocol):
    def get_info(self, video_id: str) -> VideoInfo: ...


# -----------------------------
# HELPERS
# -----------------------------
def extraer_video_id(value: str) -> str | None:
    """
    Extrae el ID de vídeo desde cualquier URL de YouTube
    (watch, shorts, embed, youtu.be, etc)
    """
    patterns = [
        r"[?&]v=([0-9A-Za-z_-]{11})",
        r"\/shorts\/([0-9A-Za-z_-]{11})",
        r"embed\/([0-9A-Za-z_-]{11})",
        r"youtu\.be\/([0-9A-Za-z_-]{11})",
    ]

    for pattern in patterns:
        match = re.search(pattern, value)
        if match:
            return match.group(1)

    return None


def watch_url(value: str) -> str:
    """URL limpia SOLO con ?v=VIDEO_ID. Si no hay ID reconocible se usa el valor tal cual."""
    return WATCH_URL.format(extraer_video_id(value) or value.strip())


def _codec(value: Any) -> str | None:
    # yt-dlp usa el literal "none" para "no hay pista"
    if not value or value == "none":
        return None
    return value


def to_descriptor(f: Dict[str, Any]) -> FormatDescriptor:
    vcodec = _codec(f.get("vcodec"))
    return FormatDescriptor(
        itag=f.get("format_id"),
        container=f.get("ext"),
        mime_type=f.get("mime_type"),
        quality_label=f.get("format_note") if vcodec else None,
        audio_bitrate=f.get("abr"),
        bitrate=f.get("tbr"),
        video_codec=vcodec,
        audio_codec=_codec(f.get("acodec")),
    )


# -----------------------------
# PROVEEDOR yt-dlp
# -----------------------------
class YtDlpProvider:
    def __init__(self, quiet: bool = True):
        self._ydl_opts: Dict[str, Any] = {
            "quiet": quiet,
            "no_warnings": quiet,
            "noplaylist": True,
            "skip_download": True,
        }

    def get_info(self, video_id: str) -> VideoInfo:
        url = watch_url(video_id)
        logger.debug("Fetching formats for %s", url)

        try:
            with yt_dlp.YoutubeDL(self._ydl_opts) as ydl:  # type: ignore
                info = ydl.extract_info(url, download=False)
        except Exception as exc:
            raise ProviderError(video_id, str(exc)) from exc

        if not info:
            raise ProviderError(video_id, f"No video id found: {video_id}")

        return VideoInfo(
            title=info.get("title") or "",
            formats=[to_descriptor(f) for f in info.get("formats") or []],
        )
