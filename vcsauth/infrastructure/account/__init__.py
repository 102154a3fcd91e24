"""Account infrastructure - directory adapter and DI provider.

Import modules directly:
    from vcsauth.infrastructure.account.di import AccountInfraProvider
    from vcsauth.infrastructure.account.directory import InMemoryAccountDirectory
"""

__all__: list[str] = []
