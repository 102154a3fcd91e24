"""Unit tests for InMemoryAccountDirectory."""

import pytest

from vcsauth.config import AccountEntry, AccountsConfig
from vcsauth.domain.account.model.account import Account
from vcsauth.domain.account.model.value import ServerPath, WorkspaceId
from vcsauth.domain.shared.error import ConfigurationError, NotFoundError
from vcsauth.infrastructure.account.directory import InMemoryAccountDirectory

WORKSPACE = WorkspaceId("/home/dev/project")


def make_account(name: str = "work") -> Account:
    return Account.create(name, ServerPath.from_string("github.com"))


class TestInMemoryAccountDirectory:
    @pytest.mark.asyncio
    async def test_add_and_list(self):
        directory = InMemoryAccountDirectory()
        a, b = make_account("a"), make_account("b")

        directory.add(a, "ta")
        directory.add(b, "tb")

        assert await directory.list_accounts() == {a, b}
        assert await directory.get_token(b) == "tb"

    @pytest.mark.asyncio
    async def test_update_token(self):
        directory = InMemoryAccountDirectory()
        account = make_account()
        directory.add(account, "old")

        directory.update_token(account, "new")

        assert await directory.get_token(account) == "new"

    def test_update_token_unknown_account_raises(self):
        with pytest.raises(NotFoundError):
            InMemoryAccountDirectory().update_token(make_account(), "t")

    @pytest.mark.asyncio
    async def test_get_token_unknown_account_raises(self):
        with pytest.raises(NotFoundError):
            await InMemoryAccountDirectory().get_token(make_account())

    @pytest.mark.asyncio
    async def test_default_account_per_workspace(self):
        directory = InMemoryAccountDirectory()
        account = make_account()
        directory.add(account, "t")

        directory.set_default(WORKSPACE, account)

        assert await directory.get_default_account(WORKSPACE) == account
        assert await directory.get_default_account(WorkspaceId("/elsewhere")) is None

    @pytest.mark.asyncio
    async def test_clear_default(self):
        directory = InMemoryAccountDirectory()
        account = make_account()
        directory.add(account, "t")
        directory.set_default(WORKSPACE, account)

        directory.set_default(WORKSPACE, None)

        assert await directory.get_default_account(WORKSPACE) is None

    def test_set_default_unknown_account_raises(self):
        with pytest.raises(NotFoundError):
            InMemoryAccountDirectory().set_default(WORKSPACE, make_account())

    @pytest.mark.asyncio
    async def test_remove_drops_default(self):
        directory = InMemoryAccountDirectory()
        account = make_account()
        directory.add(account, "t")
        directory.set_default(WORKSPACE, account)

        directory.remove(account)

        assert await directory.list_accounts() == set()
        assert await directory.get_default_account(WORKSPACE) is None


class TestFromConfig:
    @pytest.mark.asyncio
    async def test_builds_accounts_and_defaults(self, monkeypatch):
        monkeypatch.setenv("WORK_GH_TOKEN", "from-env")
        config = AccountsConfig(
            accounts=[
                AccountEntry(name="personal", server="github.com", token="t1"),
                AccountEntry(name="work", server="https://ghe.example.com", token_env="WORK_GH_TOKEN"),
            ],
            defaults={"/home/dev/project": "work"},
        )

        directory = InMemoryAccountDirectory.from_config(config)

        accounts = {a.name: a for a in await directory.list_accounts()}
        assert set(accounts) == {"personal", "work"}
        assert accounts["work"].server.host == "ghe.example.com"
        assert await directory.get_token(accounts["personal"]) == "t1"
        assert await directory.get_token(accounts["work"]) == "from-env"
        assert await directory.get_default_account(WORKSPACE) == accounts["work"]

    def test_invalid_server_raises_configuration_error(self):
        config = AccountsConfig(accounts=[AccountEntry(name="broken", server="https://", token="t")])

        with pytest.raises(ConfigurationError, match="broken"):
            InMemoryAccountDirectory.from_config(config)
