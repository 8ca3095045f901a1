"""Protocol for the system clipboard."""

from typing import Protocol


class Clipboard(Protocol):
    """Destination for text copied by the user."""

    def set_text(self, text: str) -> None:
        """Replace the clipboard contents with text."""
        ...
