"""PyQt6 adapters for QR Keeper."""
