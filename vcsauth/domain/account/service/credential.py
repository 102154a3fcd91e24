"""Credential resolution: which stored account authenticates a request."""

import asyncio
import logging

import logfire

from vcsauth.domain.account.model.account import Account
from vcsauth.domain.account.model.value import AuthData, WorkspaceId
from vcsauth.domain.account.port.directory import AccountDirectory
from vcsauth.domain.account.port.identity_resolver import IdentityResolver, UsernameLookup
from vcsauth.domain.shared.error import ExternalServiceError, ValidationError, VcsAuthError
from vcsauth.domain.shared.service import Service

logger = logging.getLogger(__name__)


class CredentialResolver(Service):
    """Selects the account to use for an outbound request.

    - get_suitable_accounts: all accounts that apply, ambiguity included
    - get_auth_data: username + token of the single applicable account, or None

    Identity lookup failures never escape; they exclude the account (or yield
    None) and are logged.
    """

    _directory: AccountDirectory
    _identity_resolver: IdentityResolver

    async def get_suitable_accounts(
        self,
        workspace: WorkspaceId,
        url: str,
        login: str | None = None,
    ) -> frozenset[Account]:
        """Resolve the accounts that apply to a request.

        Args:
            workspace: Caller context used to look up the default account
            url: Target URL of the request
            login: If given, keep only accounts whose username is exactly this

        Returns:
            The default account alone if it survived filtering, otherwise every
            surviving account (possibly none)
        """
        _check_request(url, login)

        with logfire.span("ResolveAccounts", url=url, login=login):
            accounts = await self._directory.list_accounts()
            candidates = {account for account in accounts if account.server.matches(url)}

            if login is not None:
                candidates = await self._filter_by_login(candidates, login)

            default = await self._directory.get_default_account(workspace)
            if default is not None and default in candidates:
                return frozenset({default})
            return frozenset(candidates)

    async def get_auth_data(
        self,
        workspace: WorkspaceId,
        url: str,
        login: str | None = None,
    ) -> AuthData | None:
        """Get the username and token to authenticate a request with.

        Without `login` the username of the single applicable account is looked
        up. With `login` that login is returned as-is, since it was the filter key.

        Returns:
            AuthData, or None when no account or more than one account applies,
            or when the username lookup fails
        """
        accounts = await self.get_suitable_accounts(workspace, url, login)
        if len(accounts) != 1:
            logger.debug("No single account for %s: %d candidates", url, len(accounts))
            return None
        (account,) = accounts

        if login is not None:
            return AuthData(username=login, secret=await self._directory.get_token(account))

        (lookup,) = await self._lookup_usernames([account])
        if not lookup.ok or lookup.username is None:
            logger.info("Cannot load username for %s: %s", account, lookup.error)
            return None
        return AuthData(username=lookup.username, secret=await self._directory.get_token(account))

    async def _filter_by_login(self, candidates: set[Account], login: str) -> set[Account]:
        ordered = list(candidates)
        lookups = await self._lookup_usernames(ordered)

        matching: set[Account] = set()
        for account, lookup in zip(ordered, lookups):
            if not lookup.ok:
                logger.info("Cannot load username for %s: %s", account, lookup.error)
                continue
            if lookup.username == login:
                matching.add(account)
        return matching

    async def _lookup_usernames(self, accounts: list[Account]) -> list[UsernameLookup]:
        """Look up usernames concurrently; an adapter that raises counts as a failed lookup."""
        outcomes = await asyncio.gather(
            *(self._identity_resolver.get_username(account) for account in accounts),
            return_exceptions=True,
        )

        lookups: list[UsernameLookup] = []
        for outcome in outcomes:
            if isinstance(outcome, UsernameLookup):
                lookups.append(outcome)
            elif isinstance(outcome, Exception):
                lookups.append(UsernameLookup.failure(_as_lookup_error(outcome)))
            else:
                raise outcome
        return lookups


def _as_lookup_error(error: Exception) -> VcsAuthError:
    if isinstance(error, VcsAuthError):
        return error
    return ExternalServiceError(
        f"Identity lookup raised {type(error).__name__}", code="lookup_raised"
    )


def _check_request(url: str, login: str | None) -> None:
    if not url:
        raise ValidationError("Request URL must not be empty", field="url")
    if login is not None and not login:
        raise ValidationError("Login must not be empty when given", field="login")
