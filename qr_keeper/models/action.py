"""Action categories for decoded scan text."""

from enum import Enum


class ActionCategory(Enum):
    """What kind of link, if any, a decoded text represents."""

    TELEPHONE = "telephone"
    MAIL = "mail"
    WEB = "web"
    PLAIN_TEXT = "plain_text"
