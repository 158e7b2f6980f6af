from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from dataport.config import PortSettings
from dataport.ports.port import Port

logger = logging.getLogger(__name__)


class PortRegistry:
    """
    In-process mapping of port name -> Port. Registration is thread-safe.
    """

    def __init__(self, settings: Optional[PortSettings] = None) -> None:
        self._lock = threading.RLock()
        self._ports: Dict[str, Port] = {}
        self.settings = settings or PortSettings()

    def create_port(self, name: str) -> Port:
        """
        Build a brand-new Port and bind it under `name`, replacing any
        previous binding.
        """
        port = Port(
            name=name,
            strict_conditions=self.settings.strict_conditions,
            log_route_overwrites=self.settings.log_route_overwrites,
        )
        with self._lock:
            if name in self._ports:
                logger.debug("Replacing existing port binding '%s'", name)
            self._ports[name] = port
        return port

    def get_port(self, name: str) -> Port:
        with self._lock:
            try:
                return self._ports[name]
            except KeyError as exc:
                raise KeyError(f"Port not found for name='{name}'.") from exc

    def list_names(self) -> List[str]:
        """
        Snapshot of all registered port names.
        """
        with self._lock:
            return list(self._ports.keys())

    def clear(self) -> None:
        with self._lock:
            self._ports.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._ports

    def __len__(self) -> int:
        with self._lock:
            return len(self._ports)
