import logging

import logfire
from dishka import AsyncContainer, make_async_container

from vcsauth.config import Config, configure_logging
from vcsauth.domain.account.util.di import AccountProvider
from vcsauth.infrastructure.account.di import AccountInfraProvider
from vcsauth.infrastructure.github.di import GitHubProvider
from vcsauth.util.di.scope import Scope

logger = logging.getLogger(__name__)


def create_container(config: Config | None = None) -> AsyncContainer:
    """Assemble the DI container for the HTTP-layer credential provider."""
    if config is None:
        # Pydantic Settings populates from env vars at runtime
        config = Config()  # type: ignore[call-arg]

    configure_logging(config.logging)
    logfire.instrument_httpx()
    logger.info("Credential resolver starting with %d accounts", len(config.accounts.accounts))

    return make_async_container(
        AccountInfraProvider(),
        GitHubProvider(),
        AccountProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
