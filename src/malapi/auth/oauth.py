"""OAuth2 authorization code flow for MyAnimeList.

MyAnimeList only supports the ``plain`` PKCE method, so the code verifier is
sent unchanged as the challenge. Token requests go through Authlib's httpx
integration.

Typical flow::

    oauth = OAuthClient.from_env()
    request = oauth.generate_auth_url()
    # send the user to request.url, then capture the redirect URL
    response = RedirectResponse.from_url(redirect_url)
    token = await oauth.authenticate(request, response)
    token.save()
"""

import time
from pathlib import Path
from urllib.parse import parse_qs, urlsplit

import httpx
import tomli
import tomli_w
from authlib.common.errors import AuthlibBaseError
from authlib.common.security import generate_token
from authlib.integrations.httpx_client import AsyncOAuth2Client
from authlib.oauth2.rfc6749.parameters import prepare_grant_uri
from pydantic import BaseModel, ConfigDict, SecretStr

from malapi.auth.credentials import Credentials
from malapi.auth.settings import load_settings
from malapi.errors import CredentialError, MissingCredentialError, TokenExchangeError
from malapi.utils import config
from malapi.utils.debug import debug, info, warn

AUTHORIZE_URL = "https://myanimelist.net/v1/oauth2/authorize"
TOKEN_URL = "https://myanimelist.net/v1/oauth2/token"  # noqa: S105

# MyAnimeList access tokens are valid for 28 days.
DEFAULT_TOKEN_LIFETIME = 2419200
WRITE_SCOPE = "write:users"
CODE_VERIFIER_LENGTH = 128


def default_token_path() -> Path:
    """Location of the saved token file inside the config directory."""
    return config.CONFIG_DIR / "credentials.toml"


class AuthorizationRequest(BaseModel):
    """An authorization URL and the secrets needed to complete it."""

    model_config = ConfigDict(frozen=True)

    url: str
    state: str
    code_verifier: SecretStr


class RedirectResponse(BaseModel):
    """The ``code`` and ``state`` MyAnimeList appends to the redirect URL."""

    model_config = ConfigDict(frozen=True)

    code: str
    state: str

    @classmethod
    def from_url(cls, url: str) -> "RedirectResponse":
        """Parse the redirect URL the user was sent back to.

        Raises:
            TokenExchangeError: If authorization was denied or the URL does not
                carry both a code and a state.
        """
        params = parse_qs(urlsplit(url.strip()).query)
        if "error" in params:
            detail = params.get("message") or params.get("hint") or params["error"]
            raise TokenExchangeError(f"Authorization was denied: {detail[0]}")
        code = params.get("code", [""])[0]
        state = params.get("state", [""])[0]
        if not code or not state:
            raise TokenExchangeError(
                "Failed to get code and state from authorization redirect"
            )
        return cls(code=code, state=state)


class OAuthToken(BaseModel):
    """Access and refresh tokens with their expiry time (epoch seconds)."""

    model_config = ConfigDict(frozen=True)

    access_token: SecretStr
    refresh_token: SecretStr | None = None
    token_type: str = "Bearer"
    expires_at: int

    @classmethod
    def from_response(cls, token: dict, now: float | None = None) -> "OAuthToken":
        """Build a token from a token endpoint response."""
        if not token.get("access_token"):
            raise TokenExchangeError("Token response did not include an access token")
        issued = int(now if now is not None else time.time())
        expires_in = token.get("expires_in") or DEFAULT_TOKEN_LIFETIME
        return cls(
            access_token=SecretStr(token["access_token"]),
            refresh_token=(
                SecretStr(token["refresh_token"]) if token.get("refresh_token") else None
            ),
            token_type=token.get("token_type") or "Bearer",
            expires_at=issued + int(expires_in),
        )

    @classmethod
    def from_env(cls) -> "OAuthToken":
        """Load a token from ``MAL_ACCESS_TOKEN``, ``MAL_REFRESH_TOKEN`` and
        ``MAL_TOKEN_EXPIRES_AT``.

        Without an expiry time the token is assumed to be freshly issued.
        """
        settings = load_settings()
        settings.require_keys("MAL_ACCESS_TOKEN")
        expires_at = settings.MAL_TOKEN_EXPIRES_AT
        if expires_at is None:
            expires_at = int(time.time()) + DEFAULT_TOKEN_LIFETIME
        refresh = settings.MAL_REFRESH_TOKEN
        return cls(
            access_token=SecretStr(settings.MAL_ACCESS_TOKEN),  # type: ignore[arg-type]
            refresh_token=SecretStr(refresh) if refresh else None,
            expires_at=expires_at,
        )

    def is_expired(self, now: float | None = None) -> bool:
        current = now if now is not None else time.time()
        return current >= self.expires_at

    def to_credentials(self, client_id: str | None = None) -> Credentials:
        return Credentials.from_token(
            self.access_token.get_secret_value(), client_id=client_id
        )

    def save(self, path: Path | None = None) -> Path:
        """Write the token to a TOML file readable only by the current user."""
        target = path or default_token_path()
        target.parent.mkdir(parents=True, exist_ok=True)
        data: dict[str, object] = {
            "access_token": self.access_token.get_secret_value(),
            "token_type": self.token_type,
            "expires_at": self.expires_at,
        }
        if self.refresh_token is not None:
            data["refresh_token"] = self.refresh_token.get_secret_value()
        # Restrict the file before the secret is written to it.
        target.touch(mode=0o600, exist_ok=True)
        target.chmod(0o600)
        with target.open("wb") as f:
            tomli_w.dump({"token": data}, f)
        debug(f"Saved OAuth token to {target}")
        return target

    @classmethod
    def load(cls, path: Path | None = None) -> "OAuthToken":
        """Read a token saved with :meth:`save`.

        Raises:
            MissingCredentialError: If the file does not exist.
            CredentialError: If the file is not a valid token file.
        """
        source = path or default_token_path()
        if not source.exists():
            raise MissingCredentialError(str(source))
        try:
            with source.open("rb") as f:
                data = tomli.load(f)["token"]
            return cls.model_validate(data)
        except (tomli.TOMLDecodeError, KeyError, TypeError, ValueError) as exc:
            raise CredentialError(f"Invalid token file {source}: {exc}") from exc


class OAuthClient:
    """Runs the authorization code exchange and token refresh."""

    def __init__(
        self,
        client_id: str,
        client_secret: str | None = None,
        redirect_url: str | None = None,
    ) -> None:
        if not client_id or not client_id.strip():
            raise MissingCredentialError("MAL_CLIENT_ID")
        self.client_id = client_id
        self.client_secret = client_secret or None
        self.redirect_url = redirect_url or None

    @classmethod
    def from_env(cls) -> "OAuthClient":
        """Create a client from ``MAL_CLIENT_ID``, ``MAL_CLIENT_SECRET`` and
        ``MAL_REDIRECT_URL``."""
        settings = load_settings()
        settings.require_keys("MAL_CLIENT_ID")
        return cls(
            settings.MAL_CLIENT_ID,  # type: ignore[arg-type]
            client_secret=settings.MAL_CLIENT_SECRET,
            redirect_url=settings.MAL_REDIRECT_URL,
        )

    def _session(self) -> AsyncOAuth2Client:
        return AsyncOAuth2Client(
            client_id=self.client_id,
            client_secret=self.client_secret,
            redirect_uri=self.redirect_url,
            code_challenge_method="plain",
            token_endpoint_auth_method="client_secret_post",
        )

    def generate_auth_url(self, write: bool = False) -> AuthorizationRequest:
        """Create an authorization URL with a fresh PKCE verifier and state.

        Args:
            write: Also request the ``write:users`` scope.
        """
        verifier = generate_token(CODE_VERIFIER_LENGTH)
        state = generate_token(32)
        url = prepare_grant_uri(
            AUTHORIZE_URL,
            self.client_id,
            "code",
            redirect_uri=self.redirect_url,
            scope=WRITE_SCOPE if write else None,
            state=state,
            code_challenge=verifier,
            code_challenge_method="plain",
        )
        return AuthorizationRequest(url=url, state=state, code_verifier=SecretStr(verifier))

    async def authenticate(
        self, request: AuthorizationRequest, response: RedirectResponse
    ) -> OAuthToken:
        """Exchange the authorization code for a token.

        Raises:
            TokenExchangeError: If the state does not match or the exchange fails.
        """
        if response.state != request.state:
            raise TokenExchangeError("State does not match")
        token = await self._exchange(
            grant_type="authorization_code",
            code=response.code,
            code_verifier=request.code_verifier.get_secret_value(),
        )
        info("Authorized with MyAnimeList")
        return token

    async def refresh(self, token: OAuthToken | str) -> OAuthToken:
        """Exchange a refresh token for a new access token."""
        if isinstance(token, OAuthToken):
            if token.refresh_token is None:
                raise TokenExchangeError("Token has no refresh token")
            refresh_token = token.refresh_token.get_secret_value()
        else:
            refresh_token = token
        async with self._session() as session:
            try:
                data = await session.refresh_token(TOKEN_URL, refresh_token=refresh_token)
            except (AuthlibBaseError, httpx.HTTPError, ValueError) as exc:
                warn(f"Token refresh failed: {exc}")
                raise TokenExchangeError(f"Token refresh failed: {exc}") from exc
        return OAuthToken.from_response(dict(data))

    async def _exchange(self, **params: str) -> OAuthToken:
        async with self._session() as session:
            try:
                data = await session.fetch_token(TOKEN_URL, **params)
            except (AuthlibBaseError, httpx.HTTPError, ValueError) as exc:
                warn(f"Token exchange failed: {exc}")
                raise TokenExchangeError(f"Token exchange failed: {exc}") from exc
        return OAuthToken.from_response(dict(data))
