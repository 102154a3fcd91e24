"""Custom Dishka scopes for vcsauth."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """vcsauth dependency injection scopes.

    Hierarchy: APP -> REQUEST

    - APP: Application lifetime (HTTP client, account directory, username cache)
    - REQUEST: One credential lookup issued by the HTTP layer
    """

    APP = new_scope("APP")
    REQUEST = new_scope("REQUEST")
