"""Card assets and presentation."""

from .card_presenter import CardPresenter, SUPPORTED_LOCALES

__all__ = ["CardPresenter", "SUPPORTED_LOCALES"]
