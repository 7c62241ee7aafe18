"""Domain Value Objects - Immutable objects without identity."""

from .outcome import Outcome, RedirectKind, RedirectTarget

__all__ = ["Outcome", "RedirectKind", "RedirectTarget"]
