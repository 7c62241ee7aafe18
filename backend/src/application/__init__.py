"""
Application Layer - Job application workflows.

Coordinates domain entities, the access policy and the state machine.
Depends only on the domain layer and its repository interfaces.
"""
