"""Domain Enums - Constant values used across the domain."""

from .application_status import ApplicationStatus, ApplicationAction
from .actor_role import ActorRole
from .flash_category import FlashCategory

__all__ = ["ApplicationStatus", "ApplicationAction", "ActorRole", "FlashCategory"]
