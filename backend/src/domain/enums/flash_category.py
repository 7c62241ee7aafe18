"""Categories of the one-line messages shown after an operation."""

from enum import Enum


class FlashCategory(str, Enum):
    """Message category attached to an operation outcome."""

    INFO = "info"
    NOTICE = "notice"
    ALERT = "alert"

    def __str__(self) -> str:
        return self.value
