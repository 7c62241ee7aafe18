"""Use cases for the job application workflow."""

from .application_lifecycle import ApplicationLifecycleService, OperationResult

__all__ = ["ApplicationLifecycleService", "OperationResult"]
