"""GitHub identity resolver adapter."""

import logging

import httpx

from vcsauth.config import GitHubConfig
from vcsauth.domain.account.model.account import Account
from vcsauth.domain.account.model.value import AccountId
from vcsauth.domain.account.port.directory import AccountDirectory
from vcsauth.domain.account.port.identity_resolver import IdentityResolver, UsernameLookup
from vcsauth.domain.shared.error import ExternalServiceError, NotFoundError

logger = logging.getLogger(__name__)


class GitHubIdentityResolver(IdentityResolver):
    """IdentityResolver implementation backed by the GitHub REST API (`GET /user`).

    Usernames are cached per account for as long as the account's token is
    unchanged; only successful lookups are cached.
    """

    def __init__(
        self,
        config: GitHubConfig,
        http_client: httpx.AsyncClient,
        directory: AccountDirectory,
    ) -> None:
        self._config = config
        self._http = http_client
        self._directory = directory
        self._cache: dict[AccountId, tuple[str, str]] = {}  # id -> (token, username)

    async def get_username(self, account: Account) -> UsernameLookup:
        try:
            token = await self._directory.get_token(account)
        except NotFoundError as e:
            # Account is gone from the directory
            self._cache.pop(account.id, None)
            return UsernameLookup.failure(e)

        cached = self._cache.get(account.id)
        if cached is not None and cached[0] == token:
            return UsernameLookup.success(cached[1])

        try:
            username = await self._fetch_login(account, token)
        except ExternalServiceError as e:
            return UsernameLookup.failure(e)

        self._cache[account.id] = (token, username)
        return UsernameLookup.success(username)

    def invalidate(self, account: Account) -> None:
        """Forget the cached username of an account."""
        self._cache.pop(account.id, None)

    async def _fetch_login(self, account: Account, token: str) -> str:
        url = f"{account.server.to_api_url()}/user"
        headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"token {token}",
            "User-Agent": self._config.user_agent,
        }

        try:
            response = await self._http.get(url, headers=headers)
        except httpx.RequestError as e:
            logger.debug("GitHub request failed for %s: %s", account, e)
            raise ExternalServiceError(
                f"Failed to connect to {account.server}",
                code="server_unavailable",
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            # ValueError covers tokens that cannot be encoded as a header
            raise ExternalServiceError(
                f"Cannot build GitHub request for {account}: {type(e).__name__}",
                code="invalid_request",
            ) from e

        if response.status_code != 200:
            raise ExternalServiceError(
                f"GitHub user lookup failed: {response.status_code}",
                code="unauthorized" if response.status_code == 401 else "lookup_failed",
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ExternalServiceError(
                "GitHub user response is not valid JSON",
                code="invalid_response",
            ) from e

        login = payload.get("login") if isinstance(payload, dict) else None
        if not isinstance(login, str) or not login:
            raise ExternalServiceError(
                "GitHub user response missing login field",
                code="invalid_response",
            )
        return login
