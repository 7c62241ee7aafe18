"""
Presentation Layer - HTTP API.

Translates requests into lifecycle operations and lifecycle outcomes
into JSON responses.
"""
