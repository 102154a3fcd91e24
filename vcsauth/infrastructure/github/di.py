"""DI provider for GitHub infrastructure."""

from collections.abc import AsyncIterator
from typing import NewType

import httpx
from dishka import provide

from vcsauth.config import Config
from vcsauth.domain.account.port.directory import AccountDirectory
from vcsauth.domain.account.port.identity_resolver import IdentityResolver
from vcsauth.infrastructure.github.identity_resolver import GitHubIdentityResolver
from vcsauth.util.di.base import Provider
from vcsauth.util.di.scope import Scope

GitHubHttpClient = NewType("GitHubHttpClient", httpx.AsyncClient)


class GitHubProvider(Provider):
    """DI provider for GitHub API adapters."""

    @provide(scope=Scope.APP)
    async def get_github_http_client(self, config: Config) -> AsyncIterator[GitHubHttpClient]:
        """Shared HTTP client for GitHub API calls (connection pooling)."""
        timeout = httpx.Timeout(
            connect=config.github.connect_timeout,
            read=config.github.read_timeout,
            write=5.0,
            pool=5.0,
        )
        client = httpx.AsyncClient(timeout=timeout)
        yield GitHubHttpClient(client)
        await client.aclose()

    @provide(scope=Scope.APP, provides=IdentityResolver)
    def get_identity_resolver(
        self,
        config: Config,
        client: GitHubHttpClient,
        directory: AccountDirectory,
    ) -> GitHubIdentityResolver:
        return GitHubIdentityResolver(config=config.github, http_client=client, directory=directory)
