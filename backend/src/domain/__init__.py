"""
Domain Layer - Job application entities and business rules.

This layer holds the application state machine and the access policy.
It has no dependency on the other layers.
"""
