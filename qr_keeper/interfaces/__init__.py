"""Interface protocols for QR Keeper."""

from .clipboard import Clipboard
from .codec import CodeEncoder, FrameDecoderProtocol
from .navigation import NavigationActions
from .presenter import PresenterProtocol
from .store import KeyValueStore

__all__ = [
    "KeyValueStore",
    "NavigationActions",
    "PresenterProtocol",
    "CodeEncoder",
    "FrameDecoderProtocol",
    "Clipboard",
]
