"""Unit tests for account domain models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from vcsauth.domain.account.model.account import Account
from vcsauth.domain.account.model.value import AuthData, ServerPath, WorkspaceId
from vcsauth.domain.account.port.identity_resolver import UsernameLookup
from vcsauth.domain.shared.error import ExternalServiceError


class TestAccount:
    def test_create_generates_distinct_ids(self):
        server = ServerPath.from_string("github.com")

        a = Account.create("work", server)
        b = Account.create("work", server)

        assert a.id != b.id
        assert a != b

    def test_equality_and_hash_by_id(self):
        account = Account.create("work", ServerPath.from_string("github.com"))
        renamed = account.model_copy(update={"name": "renamed"})

        assert renamed == account
        assert {account, renamed} == {account}

    def test_immutable(self):
        account = Account.create("work", ServerPath.from_string("github.com"))

        with pytest.raises(PydanticValidationError):
            account.name = "other"  # type: ignore[misc]

    def test_str(self):
        account = Account.create("work", ServerPath.from_string("ghe.local:8080"))

        assert str(account) == "work@ghe.local:8080"


class TestWorkspaceId:
    def test_equal_ids_hash_equal(self):
        assert {WorkspaceId("/p"): 1}[WorkspaceId("/p")] == 1

    def test_blank_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            WorkspaceId("  ")


class TestAuthData:
    def test_repr_masks_secret(self):
        auth = AuthData(username="bob", secret="ghp_abcdef")

        assert "ghp_abcdef" not in repr(auth)
        assert "bob" in repr(auth)


class TestUsernameLookup:
    def test_success(self):
        lookup = UsernameLookup.success("bob")

        assert lookup.ok
        assert lookup.username == "bob"
        assert lookup.error is None

    def test_failure(self):
        error = ExternalServiceError("down", code="server_unavailable")
        lookup = UsernameLookup.failure(error)

        assert not lookup.ok
        assert lookup.username is None
        assert lookup.error is error
