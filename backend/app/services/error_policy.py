"""
Traducción de fallos del proveedor a códigos HTTP.

Hay dos políticas para la misma ruta lógica: la que clasifica el texto
del error (404/403/500) y la genérica (siempre 500). Se sirven en rutas
distintas; ver DESIGN.md.
"""
from typing import Protocol, Tuple

# el orden importa: yt-dlp antepone "Video unavailable." a los bloqueos por país
REMOVED_PATTERNS = (
    "Status code: 410",
    "No video id found",
    "HTTP Error 410",
)

FORBIDDEN_PATTERNS = (
    "Status code: 403",
    "HTTP Error 403",
    "available in your country",
    "blocked it in your country",
)

UNAVAILABLE_PATTERNS = (
    "Video unavailable",
    "This video has been removed",
    "Private video",
    "Incomplete YouTube ID",
)


class ErrorPolicy(Protocol):
    def classify(self, video_id: str, exc: Exception) -> Tuple[int, str]: ...


class GenericErrorPolicy:
    def classify(self, video_id: str, exc: Exception) -> Tuple[int, str]:
        return 500, f"Error inesperado al obtener la información del vídeo: {exc}"


class ClassifyingErrorPolicy(GenericErrorPolicy):
    def classify(self, video_id: str, exc: Exception) -> Tuple[int, str]:
        text = str(exc)
        not_found = (404, f"El vídeo '{video_id}' no existe en YouTube o es privado/ha sido eliminado.")

        if any(p in text for p in REMOVED_PATTERNS):
            return not_found
        if any(p in text for p in FORBIDDEN_PATTERNS):
            return 403, f"Acceso denegado al vídeo '{video_id}' (restricción regional u otra)."
        if any(p in text for p in UNAVAILABLE_PATTERNS):
            return not_found

        return super().classify(video_id, exc)
