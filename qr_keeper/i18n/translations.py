"""English and Spanish message tables."""

import logging

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "scanningPrompt": "Point the camera at a QR code",
        "textCopied": "Scanned text copied to clipboard!",
        "errorScanning": "Error scanning QR code. Please try again.",
        "cameraWarning": "Camera not available or permission denied. Please enable camera permissions.",
        "codeSaved": "QR code saved to {path}",
        "totalScans": "Total Scans: {count}",
        "noHistory": "No history yet.",
        "generated": "GENERATED",
        "scanned": "SCANNED",
    },
    "es": {
        "scanningPrompt": "Apunta la cámara hacia un código QR",
        "textCopied": "¡Texto escaneado copiado al portapapeles!",
        "errorScanning": "Error al escanear el código QR. Inténtalo de nuevo.",
        "cameraWarning": "Cámara no disponible o permiso denegado. Habilite los permisos de la cámara.",
        "codeSaved": "Código QR guardado en {path}",
        "totalScans": "Escaneos Totales: {count}",
        "noHistory": "Aún no hay historial.",
        "generated": "GENERADO",
        "scanned": "ESCANEADO",
    },
}

SUPPORTED_LANGUAGES = tuple(TRANSLATIONS)


def translate(language: str, key: str, **kwargs) -> str:
    """Look up a message in the given language.

    Unknown languages fall back to English; unknown keys fall back to the
    key itself.

    Args:
        language: Language code ("en", "es")
        key: Message key
        **kwargs: Values substituted into ``{placeholder}`` fields

    Returns:
        The localised message
    """
    table = TRANSLATIONS.get(language)
    if table is None:
        logger.debug(f"Unsupported language '{language}', using {DEFAULT_LANGUAGE}")
        table = TRANSLATIONS[DEFAULT_LANGUAGE]
    message = table.get(key, key)
    return message.format(**kwargs) if kwargs else message
