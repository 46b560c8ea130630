"""
OAuth 2.0 authorization code flow with PKCE against the Wahoo Cloud API.

Handles the full token lifecycle: building the authorization URL, exchanging
the returned code, refreshing expired tokens and logging out.
"""

import logging
from urllib.parse import parse_qs, urlencode, urlparse

import requests

from ..constants import PkceConstants
from ..exceptions import AuthenticationError
from ..models import AuthResult, TokenSet
from ..settings import Settings
from .pkce import generate_code_challenge, generate_code_verifier
from .token_store import TokenStore

logger = logging.getLogger(__name__)


class OAuthClient:
    """
    Manages OAuth tokens for the workout API.

    Tokens are persisted through a TokenStore so the access token can be
    reused, and refreshed, across invocations.
    """

    def __init__(
        self,
        settings: Settings,
        store: TokenStore | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the OAuth client.

        Args:
            settings: Application settings with client id and endpoints
            store: Token persistence; defaults to the configured token file
            session: HTTP session used for token requests
        """
        self.settings = settings
        self.store = store or TokenStore(settings.token_path)
        self.session = session or requests.Session()

    def build_authorization_url(self) -> str:
        """
        Start a login by generating a PKCE verifier and the authorize URL.

        The verifier is stored until the code is exchanged.
        """
        code_verifier = generate_code_verifier()
        self.store.save_verifier(code_verifier)

        params = {
            "client_id": self.settings.client_id,
            "redirect_uri": self.settings.redirect_uri,
            "response_type": "code",
            "scope": self.settings.scope,
            "code_challenge": generate_code_challenge(code_verifier),
            "code_challenge_method": PkceConstants.CHALLENGE_METHOD,
        }
        return f"{self.settings.auth_endpoint}?{urlencode(params)}"

    def _request_tokens(self, form: dict[str, str], action: str) -> TokenSet:
        try:
            response = self.session.post(
                self.settings.token_endpoint,
                data=form,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=self.settings.http_timeout,
            )
        except requests.RequestException as e:
            raise AuthenticationError(f"{action} failed: {e}") from e

        if not response.ok:
            raise AuthenticationError(f"{action} failed: {response.status_code}")

        try:
            tokens = TokenSet.from_response(response.json())
        except (ValueError, KeyError, TypeError) as e:
            raise AuthenticationError(f"{action} returned invalid tokens: {e}") from e

        self.store.save_tokens(tokens)
        return tokens

    def exchange_code(self, code: str) -> TokenSet:
        """
        Exchange an authorization code for tokens.

        Raises:
            AuthenticationError: If no verifier is pending or the request fails
        """
        code_verifier = self.store.load_verifier()
        if not code_verifier:
            raise AuthenticationError("Code verifier not found")

        tokens = self._request_tokens(
            {
                "client_id": self.settings.client_id,
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": self.settings.redirect_uri,
                "code_verifier": code_verifier,
            },
            action="Token request",
        )
        self.store.clear_verifier()
        logger.info("Obtained access token")
        return tokens

    def refresh(self, refresh_token: str) -> TokenSet:
        """Exchange a refresh token for a new token set."""
        return self._request_tokens(
            {
                "client_id": self.settings.client_id,
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
            },
            action="Token refresh",
        )

    def get_access_token(self) -> str | None:
        """
        Return a valid access token, refreshing it if it has expired.

        Returns:
            The access token, or None if there is no usable token
        """
        tokens = self.store.load_tokens()
        if tokens is not None and not tokens.is_expired():
            return tokens.access_token

        refresh_token = self.store.load_refresh_token()
        if not refresh_token:
            return None

        try:
            return self.refresh(refresh_token).access_token
        except AuthenticationError as e:
            logger.warning(f"Could not refresh access token: {e}")
            return None

    def handle_auth_redirect(self, redirect_url: str | None = None) -> AuthResult:
        """
        Complete a login from the URL the browser was redirected to.

        Without a code or error in the URL, reports whether a stored token is
        still usable.
        """
        query = parse_qs(urlparse(redirect_url or "").query)
        code = query.get("code", [None])[0]
        error = query.get("error", [None])[0]

        if error:
            return AuthResult(authenticated=False, error=error)

        if code:
            try:
                tokens = self.exchange_code(code)
            except AuthenticationError as e:
                return AuthResult(authenticated=False, error=str(e))
            return AuthResult(authenticated=True, token=tokens.access_token)

        token = self.get_access_token()
        return AuthResult(authenticated=token is not None, token=token)

    def logout(self) -> None:
        """Forget all stored tokens and any pending verifier."""
        self.store.clear()
        logger.info("Logged out")
