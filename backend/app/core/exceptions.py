"""
Excepciones propias del servicio de itags.
"""


class ItagApiError(Exception):
    """Excepción base del servicio."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingParameterError(ItagApiError):
    """Falta un parámetro obligatorio en la query string."""

    status_code = 400

    def __init__(self, name: str, example: str | None = None):
        message = f"Falta el parámetro '{name}' (ID de vídeo)."
        if example:
            message += f" Ejemplo: {example}"
        super().__init__(message)


class ProviderError(ItagApiError):
    """
    Fallo del proveedor de metadatos (yt-dlp).
    El texto del error de yt-dlp es la única señal para clasificarlo.
    """

    def __init__(self, video_id: str, reason: str):
        self.video_id = video_id
        super().__init__(reason)
