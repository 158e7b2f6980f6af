from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Iterator, List, Tuple

import pytest

from dataport.events.lifecycle import LifecycleEvent
from dataport.ports.port import Port
from dataport.registry.port_registry import PortRegistry
from dataport.singletons import reset_port_registry

_TEST_LOG_DIR = Path(tempfile.mkdtemp(prefix="dataport-logs-")).resolve()
os.environ.setdefault("LOG_DIR", str(_TEST_LOG_DIR))


class EventRecorder:
    """Collects (event, payload) pairs emitted by a port."""

    def __init__(self) -> None:
        self.events: List[Tuple[str, Any]] = []

    def listener(self, event: LifecycleEvent) -> Callable[[Any], None]:
        def _record(payload: Any) -> None:
            self.events.append((event.value, payload))

        return _record

    def attach(self, port: Port) -> "EventRecorder":
        for event in LifecycleEvent:
            port.on(event, self.listener(event))
        return self

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self.events]

    def payload_of(self, name: str) -> Any:
        for event_name, payload in self.events:
            if event_name == name:
                return payload
        raise AssertionError(f"event {name!r} was not emitted")


@pytest.fixture
def port() -> Port:
    return Port(name="test-port")


@pytest.fixture
def recorder(port: Port) -> EventRecorder:
    return EventRecorder().attach(port)


@pytest.fixture
def registry() -> PortRegistry:
    return PortRegistry()


@pytest.fixture(autouse=True)
def _fresh_default_registry() -> Iterator[None]:
    reset_port_registry()
    yield
    reset_port_registry()
