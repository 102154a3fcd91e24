"""Base type for domain ports."""

from typing import Protocol


class Port(Protocol):
    """Marker for interfaces the domain depends on.

    Adapters live in infrastructure/ and subclass the concrete port explicitly.
    """
