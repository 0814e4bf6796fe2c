import logging

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.api.responses import CORS_HEADERS, PrettyJSONResponse, error_response
from app.core.config import get_settings
from app.core.exceptions import MissingParameterError
from app.services.error_policy import ClassifyingErrorPolicy, ErrorPolicy, GenericErrorPolicy
from app.services.formats import build_payload
from app.services.provider import MetadataProvider, YtDlpProvider

logger = logging.getLogger(__name__)

router = APIRouter()

classifying_policy = ClassifyingErrorPolicy()
generic_policy = GenericErrorPolicy()


def get_provider() -> MetadataProvider:
    return YtDlpProvider(quiet=get_settings().ytdlp_quiet)


async def handle(
    video_id: str | None,
    provider: MetadataProvider,
    policy: ErrorPolicy,
    endpoint: str,
) -> JSONResponse:
    # 1. PARÁMETRO OBLIGATORIO
    if not video_id:
        err = MissingParameterError("v", example=f"{endpoint}?v=xxxxxxxx")
        return error_response(err.status_code, err.message)

    # 2. METADATOS (yt-dlp es bloqueante, va al threadpool)
    try:
        info = await run_in_threadpool(provider.get_info, video_id)
    except Exception as exc:
        logger.error("Error fetching info for video ID %s: %s", video_id, exc)
        status_code, message = policy.classify(video_id, exc)
        return error_response(status_code, message)

    # 3. FILTRO + PROYECCIÓN
    payload = build_payload(video_id, info)

    return PrettyJSONResponse(
        status_code=200,
        content=payload.model_dump(by_alias=True),
        headers=CORS_HEADERS,
    )


# -----------------------------
# ENDPOINTS
# -----------------------------
@router.get("/itag")
async def list_itags(
    v: str | None = Query(None, description="ID (o URL) del vídeo de YouTube"),
    provider: MetadataProvider = Depends(get_provider),
):
    """Lista los itags del vídeo. Errores clasificados en 404/403/500."""
    return await handle(v, provider, classifying_policy, "/api/itag")


@router.get("/itag/plain")
async def list_itags_plain(
    v: str | None = Query(None, description="ID (o URL) del vídeo de YouTube"),
    provider: MetadataProvider = Depends(get_provider),
):
    """Misma respuesta que /itag pero cualquier fallo del proveedor es 500."""
    return await handle(v, provider, generic_policy, "/api/itag/plain")
