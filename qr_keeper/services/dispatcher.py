"""Dispatch of navigation side effects for classified scan text."""

import logging
from collections.abc import Callable

from qr_keeper.interfaces import NavigationActions
from qr_keeper.models import ActionCategory

logger = logging.getLogger(__name__)

MAILTO_PREFIX = "mailto:"
MAIL_CONFIRM_PROMPT = "Do you want to open your mail client for {address}?"


def _open_telephone(text: str, actions: NavigationActions) -> None:
    actions.open_in_new_context(text)


def _open_mail(text: str, actions: NavigationActions) -> None:
    address = text[len(MAILTO_PREFIX) :] if text.startswith(MAILTO_PREFIX) else text
    if actions.confirm(MAIL_CONFIRM_PROMPT.format(address=address)):
        actions.open_in_same_context(text)
    else:
        logger.debug(f"Mail client declined for {address}")


def _open_web(text: str, actions: NavigationActions) -> None:
    actions.open_in_new_context(text)


_HANDLERS: dict[ActionCategory, Callable[[str, NavigationActions], None]] = {
    ActionCategory.TELEPHONE: _open_telephone,
    ActionCategory.MAIL: _open_mail,
    ActionCategory.WEB: _open_web,
}


def dispatch(category: ActionCategory, text: str, actions: NavigationActions) -> None:
    """Perform the navigation action implied by a category.

    PLAIN_TEXT has no handler: text that is not a recognized link is never
    navigated to.

    Args:
        category: Result of classifying ``text``
        text: The decoded text, passed to the action unchanged
        actions: Platform navigation capabilities
    """
    handler = _HANDLERS.get(category)
    if handler is None:
        logger.debug(f"No action for {category.value} content")
        return
    logger.debug(f"Dispatching {category.value} action")
    handler(text, actions)
