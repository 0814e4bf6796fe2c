"""
Tests for the yt-dlp adapter. YoutubeDL is replaced with a stub.
"""
import pytest

from app.core.exceptions import ProviderError
from app.services import provider as provider_module
from app.services.formats import list_formats
from app.services.provider import YtDlpProvider, extraer_video_id, to_descriptor, watch_url


YTDLP_INFO = {
    "id": "jNQXAC9IVRw",
    "title": "Me at the zoo",
    "formats": [
        {"format_id": "sb0", "ext": "mhtml", "format_note": "storyboard",
         "vcodec": "none", "acodec": "none"},
        {"format_id": "140", "ext": "m4a", "format_note": "medium",
         "vcodec": "none", "acodec": "mp4a.40.2", "abr": 129.5, "tbr": 129.5},
        {"format_id": "18", "ext": "mp4", "format_note": "360p",
         "vcodec": "avc1.42001E", "acodec": "mp4a.40.2", "tbr": 400.1},
    ],
}


class StubYoutubeDL:
    calls = []
    result = YTDLP_INFO
    error = None

    def __init__(self, opts):
        self.opts = opts

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def extract_info(self, url, download=True):
        StubYoutubeDL.calls.append((url, download, self.opts))
        if StubYoutubeDL.error is not None:
            raise StubYoutubeDL.error
        return StubYoutubeDL.result


@pytest.fixture
def ydl(monkeypatch):
    StubYoutubeDL.calls = []
    StubYoutubeDL.result = YTDLP_INFO
    StubYoutubeDL.error = None
    monkeypatch.setattr(provider_module.yt_dlp, "YoutubeDL", StubYoutubeDL)
    return StubYoutubeDL


@pytest.mark.parametrize(
    "value, expected",
    [
        ("https://www.youtube.com/watch?v=jNQXAC9IVRw&list=RDjNQXAC9IVRw", "jNQXAC9IVRw"),
        ("https://youtu.be/jNQXAC9IVRw", "jNQXAC9IVRw"),
        ("https://www.youtube.com/shorts/jNQXAC9IVRw", "jNQXAC9IVRw"),
        ("https://www.youtube.com/embed/jNQXAC9IVRw", "jNQXAC9IVRw"),
        ("jNQXAC9IVRw", None),
    ],
)
def test_extraer_video_id(value, expected):
    assert extraer_video_id(value) == expected


def test_watch_url_for_bare_id():
    assert watch_url("jNQXAC9IVRw") == "https://www.youtube.com/watch?v=jNQXAC9IVRw"


def test_to_descriptor_audio_only():
    fmt = to_descriptor(YTDLP_INFO["formats"][1])
    assert fmt.itag == "140"
    assert fmt.container == "m4a"
    assert fmt.quality_label is None
    assert fmt.audio_bitrate == 129.5
    assert fmt.video_codec is None
    assert fmt.audio_codec == "mp4a.40.2"


def test_get_info_maps_formats(ydl):
    info = YtDlpProvider().get_info("jNQXAC9IVRw")

    url, download, opts = ydl.calls[0]
    assert url == "https://www.youtube.com/watch?v=jNQXAC9IVRw"
    assert download is False
    assert opts["noplaylist"] is True

    assert info.title == "Me at the zoo"
    assert [f.itag for f in info.formats] == ["sb0", "140", "18"]

    summaries = [s.model_dump() for s in list_formats(info)]
    assert summaries == [
        {"itag": "140", "ext": "m4a", "resolution": "audio only", "vcodec": "none", "acodec": "mp4a.40.2"},
        {"itag": "18", "ext": "mp4", "resolution": "360p", "vcodec": "avc1.42001E", "acodec": "mp4a.40.2"},
    ]


def test_get_info_wraps_errors(ydl):
    ydl.error = RuntimeError("ERROR: [youtube] xyz: Video unavailable")
    with pytest.raises(ProviderError) as excinfo:
        YtDlpProvider().get_info("xyz")
    assert excinfo.value.video_id == "xyz"
    assert "Video unavailable" in str(excinfo.value)


def test_get_info_without_result(ydl):
    ydl.result = None
    with pytest.raises(ProviderError, match="No video id found"):
        YtDlpProvider().get_info("xyz")
