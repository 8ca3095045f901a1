"""Utility functions for the GUI layer."""

from .service_factory import create_scan_session, create_session_controller, update_config

__all__ = ["create_session_controller", "create_scan_session", "update_config"]
