"""
OAuth authentication against the Wahoo Cloud API.

This package contains the PKCE helpers, token persistence and the OAuth
client managing the access token lifecycle.
"""

from .oauth import OAuthClient
from .pkce import generate_code_challenge, generate_code_verifier
from .token_store import TokenStore

__all__ = [
    "OAuthClient",
    "TokenStore",
    "generate_code_challenge",
    "generate_code_verifier",
]
