from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, PrivateAttr

Listener = Callable[..., Any]
EventName = Union[str, Enum]


def _key(event: EventName) -> str:
    return str(event.value) if isinstance(event, Enum) else str(event)


class _Registration:
    __slots__ = ("listener", "once")

    def __init__(self, listener: Listener, once: bool) -> None:
        self.listener = listener
        self.once = once


class EventEmitter(BaseModel):
    """
    Synchronous event source.

    Listeners run on the emitting thread in registration order. Exceptions
    raised by a listener propagate out of `emit`. Event names may be given
    as plain strings or as Enum members (their value is used).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _listeners: Dict[str, List[_Registration]] = PrivateAttr(default_factory=dict)

    def on(self, event: EventName, listener: Listener) -> "EventEmitter":
        if not callable(listener):
            raise TypeError(f"listener must be callable, got {type(listener).__name__}")
        self._listeners.setdefault(_key(event), []).append(
            _Registration(listener, once=False)
        )
        return self

    add_listener = on

    def once(self, event: EventName, listener: Listener) -> "EventEmitter":
        """Register a listener that is removed right before its first call."""
        if not callable(listener):
            raise TypeError(f"listener must be callable, got {type(listener).__name__}")
        self._listeners.setdefault(_key(event), []).append(
            _Registration(listener, once=True)
        )
        return self

    def off(self, event: EventName, listener: Listener) -> "EventEmitter":
        """Remove the most recent registration of `listener`, if any."""
        registrations = self._listeners.get(_key(event))
        if not registrations:
            return self
        for idx in range(len(registrations) - 1, -1, -1):
            if registrations[idx].listener == listener:
                del registrations[idx]
                break
        if not registrations:
            self._listeners.pop(_key(event), None)
        return self

    remove_listener = off

    def remove_all_listeners(self, event: Optional[EventName] = None) -> "EventEmitter":
        if event is None:
            self._listeners.clear()
        else:
            self._listeners.pop(_key(event), None)
        return self

    def listeners(self, event: EventName) -> List[Listener]:
        return [r.listener for r in self._listeners.get(_key(event), [])]

    def listener_count(self, event: EventName) -> int:
        return len(self._listeners.get(_key(event), []))

    def event_names(self) -> List[str]:
        return list(self._listeners.keys())

    def emit(self, event: EventName, *args: Any) -> bool:
        """
        Call every listener of `event` with `args`.
        Returns True if at least one listener was registered.
        """
        name = _key(event)
        # snapshot: listeners added or removed during emit apply to the next one
        registrations = list(self._listeners.get(name, []))
        if not registrations:
            return False

        for registration in registrations:
            if registration.once:
                self._drop(name, registration)
            registration.listener(*args)
        return True

    def _drop(self, name: str, registration: _Registration) -> None:
        current = self._listeners.get(name)
        if not current:
            return
        try:
            current.remove(registration)
        except ValueError:
            return
        if not current:
            self._listeners.pop(name, None)
