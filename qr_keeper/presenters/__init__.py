"""Presenter implementations for output handling."""

from .null_presenter import NullPresenter

__all__ = ["NullPresenter"]
