from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from dataport.ports.conditions import Condition

if TYPE_CHECKING:
    from dataport.ports.port import Port

Handler = Callable[[Any], Any]
Destination = Callable[[Any, "Port"], Any]


@dataclass(frozen=True)
class ConditionEntry:
    """
    One step of a port's pipeline.
    - condition: decides whether the handler runs for a given payload
    - handler: returns the replacement payload, or something falsy to keep it
    """

    condition: Condition
    handler: Handler


@dataclass(frozen=True)
class RouteEntry:
    """
    Terminal destination of a named route, called as destination(data, port).
    """

    destination: Destination
