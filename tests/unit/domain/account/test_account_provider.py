"""Tests for AccountProvider wiring."""

from unittest.mock import AsyncMock

from vcsauth.domain.account.service.credential import CredentialResolver
from vcsauth.domain.account.util.di.provider import AccountProvider


class TestAccountProvider:
    def test_builds_credential_resolver_from_ports(self):
        directory = AsyncMock()
        identity_resolver = AsyncMock()

        resolver = AccountProvider().get_credential_resolver(directory, identity_resolver)

        assert isinstance(resolver, CredentialResolver)
        assert resolver._directory is directory
        assert resolver._identity_resolver is identity_resolver
