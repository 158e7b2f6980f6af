from dataport.errors import (
    DataportError,
    MalformedConditionError,
    PortConfigurationError,
    UnresolvedRouteError,
)
from dataport.events.lifecycle import LifecycleEvent
from dataport.ports.port import Port
from dataport.registry.port_registry import PortRegistry
from dataport.singletons import port_registry


def create_port(name: str) -> Port:
    """Create a port in the process-wide registry."""
    return port_registry().create_port(name)


__all__ = [
    "DataportError",
    "LifecycleEvent",
    "MalformedConditionError",
    "Port",
    "PortConfigurationError",
    "PortRegistry",
    "UnresolvedRouteError",
    "create_port",
    "port_registry",
]
