"""
File-based persistence for OAuth tokens.

Tokens and the pending PKCE code verifier are kept in a single JSON file so
that a login survives between command invocations.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..exceptions import ConfigurationError
from ..models import TokenSet

logger = logging.getLogger(__name__)

_TOKEN_KEYS = ("access_token", "refresh_token", "expires_at")
_VERIFIER_KEY = "code_verifier"


class TokenStore:
    """Reads and writes the token JSON file."""

    def __init__(self, path: Path):
        self.path = path

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable token file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write token file {self.path}: {e}"
            ) from e

    def load_tokens(self) -> TokenSet | None:
        """Return the stored token set, or None if nothing usable is stored."""
        data = self._read()
        if not data.get("access_token") or data.get("expires_at") is None:
            return None
        try:
            return TokenSet(**{key: data.get(key) for key in _TOKEN_KEYS})
        except ValidationError as e:
            logger.warning(f"Ignoring invalid tokens in {self.path}: {e}")
            return None

    def load_refresh_token(self) -> str | None:
        return self._read().get("refresh_token") or None

    def save_tokens(self, tokens: TokenSet) -> None:
        data = self._read()
        new_tokens = tokens.model_dump()
        # A refresh response may omit the refresh token; keep the stored one
        if new_tokens.get("refresh_token") is None:
            new_tokens.pop("refresh_token", None)
        data.update(new_tokens)
        self._write(data)

    def load_verifier(self) -> str | None:
        return self._read().get(_VERIFIER_KEY) or None

    def save_verifier(self, code_verifier: str) -> None:
        data = self._read()
        data[_VERIFIER_KEY] = code_verifier
        self._write(data)

    def clear_verifier(self) -> None:
        data = self._read()
        if data.pop(_VERIFIER_KEY, None) is not None:
            self._write(data)

    def clear(self) -> None:
        """Remove tokens, expiry and verifier."""
        data = self._read()
        remaining = {
            key: value
            for key, value in data.items()
            if key not in (*_TOKEN_KEYS, _VERIFIER_KEY)
        }
        if remaining:
            self._write(remaining)
        elif self.path.exists():
            self.path.unlink()
