from __future__ import annotations

from typing import Any


class DataportError(Exception):
    """Base for all dataport exceptions."""


class PortConfigurationError(DataportError):
    """A configuration call was rejected (frozen port, empty route name)."""


class UnresolvedRouteError(DataportError):
    """`route` was called with a name that has no registered destination."""

    def __init__(self, port_name: str, route_name: str) -> None:
        super().__init__(
            f"Port '{port_name}' has no route named '{route_name}'."
        )
        self.port_name = port_name
        self.route_name = route_name


class MalformedConditionError(DataportError):
    """A condition is neither a callable nor a mapping (strict mode only)."""

    def __init__(self, raw: Any) -> None:
        super().__init__(
            f"Condition must be a callable or a mapping, "
            f"got {type(raw).__name__}: {raw!r}"
        )
        self.raw = raw
