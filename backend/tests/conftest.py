import pytest
from fastapi.testclient import TestClient

from app.api.itag import get_provider
from app.main import app
from app.models.schemas import VideoInfo


class FakeProvider:
    """Proveedor en memoria: devuelve `info` o lanza `exc`, y anota las llamadas."""

    def __init__(self, info: VideoInfo | None = None, exc: Exception | None = None):
        self.info = info
        self.exc = exc
        self.calls = []

    def get_info(self, video_id: str) -> VideoInfo:
        self.calls.append(video_id)
        if self.exc is not None:
            raise self.exc
        return self.info


@pytest.fixture
def sample_info():
    return VideoInfo.model_validate({
        "title": "Me at the zoo",
        "formats": [
            {"itag": 18, "container": "mp4", "quality_label": "360p",
             "video_codec": "avc1", "audio_codec": "mp4a"},
            {"itag": None, "quality_label": "720p"},
            {"itag": 140, "audio_bitrate": 128},
        ],
    })


@pytest.fixture
def provider(sample_info):
    return FakeProvider(info=sample_info)


@pytest.fixture
def client(provider):
    app.dependency_overrides[get_provider] = lambda: provider
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
