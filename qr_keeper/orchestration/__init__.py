"""Orchestration of session state and services."""

from .session_controller import SessionController

__all__ = ["SessionController"]
