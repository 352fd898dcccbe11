"""
Localized messages for the HTTP boundary.

Error kinds stay structured everywhere else; they are only turned into
text here, in the locale negotiated from the Accept-Language header.
"""

from typing import Dict, Optional

from card_deck.domain.exceptions import ErrorKind
from card_deck.infra.assets.card_presenter import SUPPORTED_LOCALES

MESSAGES: Dict[str, Dict[ErrorKind, str]] = {
    "en": {
        ErrorKind.NOT_FOUND: "Unable to find this deck of cards.",
        ErrorKind.INVALID_IDENTIFIER: "Invalid deck identifier.",
        ErrorKind.MISSING_PARAMETER: "Missing parameter.",
        ErrorKind.INVALID_PARAMETER: "Invalid parameter.",
        ErrorKind.CONFLICT: "The deck was modified by another request, please retry.",
        ErrorKind.CORRUPTED_STATE: "The stored deck is corrupted.",
        ErrorKind.PERSISTENCE_UNAVAILABLE: "Storage is unavailable, please try again later.",
        ErrorKind.INTERNAL: "An unexpected error occurred. Please try again later.",
    },
    "fr": {
        ErrorKind.NOT_FOUND: "Impossible de trouver ce paquet de carte.",
        ErrorKind.INVALID_IDENTIFIER: "Identifiant de paquet incorrect.",
        ErrorKind.MISSING_PARAMETER: "Paramètre manquant.",
        ErrorKind.INVALID_PARAMETER: "Paramètre incorrect.",
        ErrorKind.CONFLICT: "Le paquet a été modifié par une autre requête, veuillez réessayer.",
        ErrorKind.CORRUPTED_STATE: "Le paquet enregistré est corrompu.",
        ErrorKind.PERSISTENCE_UNAVAILABLE: "Stockage indisponible, veuillez réessayer plus tard.",
        ErrorKind.INTERNAL: "Une erreur inattendue est survenue. Veuillez réessayer plus tard.",
    },
}


def negotiate_locale(accept_language: Optional[str], default: str) -> str:
    """
    Pick the first supported language of an Accept-Language header.

    Quality values are honoured; ``fr-CA`` matches ``fr``.

    Args:
        accept_language: Raw header value, may be None
        default: Locale used when nothing in the header is supported

    Returns:
        str: A key of ``MESSAGES``
    """
    if not accept_language:
        return default

    candidates = []
    for position, part in enumerate(accept_language.split(",")):
        tag, _, params = part.strip().partition(";")
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        language = tag.strip().lower().split("-")[0]
        if language in SUPPORTED_LOCALES and quality > 0:
            candidates.append((-quality, position, language))

    if not candidates:
        return default
    return min(candidates)[2]


def message_for(kind: ErrorKind, locale: str) -> str:
    messages = MESSAGES.get(locale, MESSAGES["en"])
    return messages[kind]
