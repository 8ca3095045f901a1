"""Localised user-facing strings."""

from .translations import SUPPORTED_LANGUAGES, TRANSLATIONS, translate

__all__ = ["TRANSLATIONS", "SUPPORTED_LANGUAGES", "translate"]
