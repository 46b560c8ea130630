"""PKCE code verifier and challenge generation (RFC 7636)."""

import base64
import hashlib
import secrets

from ..constants import PkceConstants


def base64url_encode(data: bytes) -> str:
    """URL-safe base64 without padding."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def generate_code_verifier(num_bytes: int = PkceConstants.VERIFIER_BYTES) -> str:
    """Generate a random code verifier from ``num_bytes`` of entropy."""
    return base64url_encode(secrets.token_bytes(num_bytes))


def generate_code_challenge(code_verifier: str) -> str:
    """Derive the S256 code challenge for a verifier."""
    digest = hashlib.sha256(code_verifier.encode("ascii")).digest()
    return base64url_encode(digest)
