"""Protocol for platform navigation actions."""

from typing import Protocol


class NavigationActions(Protocol):
    """Side-effecting actions a scan result can trigger.

    Implementations are platform specific (desktop shell, browser, etc).
    """

    def open_in_new_context(self, url: str) -> None:
        """Open a URL in a new window/tab or external handler."""
        ...

    def open_in_same_context(self, url: str) -> None:
        """Open a URL in the current window/tab."""
        ...

    def confirm(self, prompt: str) -> bool:
        """Ask the user a yes/no question.

        Args:
            prompt: Question to display

        Returns:
            True if the user accepted, False otherwise.
        """
        ...
