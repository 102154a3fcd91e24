"""Tests for the assembled DI container."""

import pytest

from vcsauth.application.di import create_container
from vcsauth.config import AccountEntry, AccountsConfig, Config
from vcsauth.domain.account.model.value import WorkspaceId
from vcsauth.domain.account.port.directory import AccountDirectory
from vcsauth.domain.account.port.identity_resolver import IdentityResolver
from vcsauth.domain.account.service.credential import CredentialResolver
from vcsauth.infrastructure.github.identity_resolver import GitHubIdentityResolver


def make_config() -> Config:
    return Config(
        accounts=AccountsConfig(
            accounts=[
                AccountEntry(name="personal", server="github.com", token="t1"),
                AccountEntry(name="work", server="github.com", token="t2"),
            ],
            defaults={"/home/dev/project": "work"},
        )
    )


class TestCreateContainer:
    @pytest.mark.asyncio
    async def test_resolves_adapters_for_ports(self):
        container = create_container(make_config())
        try:
            directory = await container.get(AccountDirectory)
            identity_resolver = await container.get(IdentityResolver)

            assert {a.name for a in await directory.list_accounts()} == {"personal", "work"}
            assert isinstance(identity_resolver, GitHubIdentityResolver)
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_credential_resolver_uses_configured_default(self):
        container = create_container(make_config())
        try:
            async with container() as request_container:
                resolver = await request_container.get(CredentialResolver)

                accounts = await resolver.get_suitable_accounts(
                    WorkspaceId("/home/dev/project"), "https://github.com/octo/repo.git"
                )

            assert [a.name for a in accounts] == ["work"]
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_directory_is_shared_across_requests(self):
        container = create_container(make_config())
        try:
            async with container() as first:
                a = await first.get(AccountDirectory)
            async with container() as second:
                b = await second.get(AccountDirectory)

            assert a is b
        finally:
            await container.close()
