from __future__ import annotations

from typing import Optional

from starlette.config import Config

from dataport.config import load_port_settings
from dataport.registry.port_registry import PortRegistry

config = Config(".env")

_port_registry_singleton: Optional[PortRegistry] = None


def port_registry() -> PortRegistry:
    global _port_registry_singleton
    if _port_registry_singleton is None:
        _port_registry_singleton = PortRegistry(settings=load_port_settings(config))
    return _port_registry_singleton


def reset_port_registry() -> None:
    """Drop the process-wide registry; the next call builds a fresh one."""
    global _port_registry_singleton
    _port_registry_singleton = None
