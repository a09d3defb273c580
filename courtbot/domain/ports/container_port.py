from typing import Any, Protocol


class ServiceResolver(Protocol):
    """Name-based service lookup offered by the DI container."""

    def resolve(self, name: str) -> Any:
        """Return the service registered under ``name``.

        Raises:
            KeyError: If no service is registered under that name.
        """
        ...
