"""Access token handling."""

from .tokens import create_access_token, decode_access_token, InvalidTokenError

__all__ = ["create_access_token", "decode_access_token", "InvalidTokenError"]
