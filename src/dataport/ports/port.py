from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from pydantic import ConfigDict, Field, PrivateAttr

from dataport.errors import PortConfigurationError, UnresolvedRouteError
from dataport.events.emitter import EventEmitter
from dataport.events.lifecycle import LifecycleEvent
from dataport.metrics.port_metrics import PortMetrics
from dataport.ports.conditions import to_condition
from dataport.ports.entries import ConditionEntry, Destination, Handler, RouteEntry
from dataport.utils.coercion import is_truthy

logger = logging.getLogger(__name__)


class Port(EventEmitter):
    """
    Named pipeline: condition/handler pairs followed by named destinations.

    A `route(route_name, data)` call runs one synchronous pass:
      launch(data) -> filter conditions -> fold handlers -> landing(data)
      -> destination(data, port) -> arrived(output)

    Conditions are evaluated against the payload as it entered the pass.
    Handlers of the passing conditions are then applied in insertion order,
    each one seeing the result of the previous ones.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str = Field(..., min_length=1, description="Port identifier.")
    strict_conditions: bool = Field(
        default=False,
        description="Raise on malformed conditions instead of skipping them.",
    )
    log_route_overwrites: bool = Field(
        default=True,
        description="Log a warning when create_route replaces a destination.",
    )

    _conditions: List[ConditionEntry] = PrivateAttr(default_factory=list)
    _routes: Dict[str, RouteEntry] = PrivateAttr(default_factory=dict)
    _metrics: PortMetrics = PrivateAttr(default_factory=PortMetrics)
    _frozen: bool = PrivateAttr(default=False)

    @property
    def conditions(self) -> Tuple[ConditionEntry, ...]:
        return tuple(self._conditions)

    @property
    def routes(self) -> Mapping[str, RouteEntry]:
        return MappingProxyType(dict(self._routes))

    @property
    def metrics(self) -> PortMetrics:
        return self._metrics

    @property
    def frozen(self) -> bool:
        return self._frozen

    # configuration

    def set(self, condition: Any, handler: Handler) -> None:
        """
        Append a condition/handler pair. `condition` is a predicate callable
        or a field pattern mapping. Its shape is only checked while routing.
        """
        self._ensure_configurable("set")
        self._conditions.append(
            ConditionEntry(condition=to_condition(condition), handler=handler)
        )

    def create_route(self, route_name: str, destination: Destination) -> None:
        """
        Register `destination` under `route_name`. The last registration wins.
        """
        self._ensure_configurable("create_route")
        if not isinstance(route_name, str) or not route_name:
            raise PortConfigurationError(
                f"Port '{self.name}': route name must be a non-empty string"
            )
        if route_name in self._routes and self.log_route_overwrites:
            logger.warning(
                "Port '%s': overwriting destination of route '%s'",
                self.name,
                route_name,
            )
        self._routes[route_name] = RouteEntry(destination=destination)

    def freeze(self) -> "Port":
        """Reject any further set/create_route calls. Idempotent."""
        if not self._frozen:
            self._frozen = True
            logger.debug(
                "Port '%s' frozen with %d condition(s) and %d route(s)",
                self.name,
                len(self._conditions),
                len(self._routes),
            )
        return self

    def _ensure_configurable(self, operation: str) -> None:
        if self._frozen:
            raise PortConfigurationError(
                f"Port '{self.name}' is frozen; {operation}() is not allowed"
            )

    # routing

    def route(self, route_name: str, data: Any) -> Any:
        """
        Drive `data` through the pipeline to the destination of `route_name`.

        Returns the destination's output, which is also emitted as `arrived`.
        Raises UnresolvedRouteError (after `landing`, never `arrived`) when
        no destination is registered for `route_name`. Errors from
        predicates, handlers, destinations and listeners propagate unchanged.
        """
        metrics = self._metrics
        metrics.set_started()
        metrics.routes_launched += 1
        logger.debug("Port '%s': launching on route '%s'", self.name, route_name)

        try:
            self.emit(LifecycleEvent.LAUNCH, data)

            passed = self._passing_entries(self.conditions, data)
            payload = self._apply_handlers(passed, data)

            self.emit(LifecycleEvent.LANDING, payload)

            entry = self._routes.get(route_name)
            if entry is None:
                raise UnresolvedRouteError(self.name, route_name)
            output = entry.destination(payload, self)
            metrics.routes_arrived += 1

            self.emit(LifecycleEvent.ARRIVED, output)
        except Exception:
            metrics.set_finished(failed=True)
            logger.exception(
                "Port '%s': route '%s' failed", self.name, route_name
            )
            raise

        metrics.set_finished()
        logger.debug(
            "Port '%s': route '%s' arrived after %d handler(s)",
            self.name,
            route_name,
            len(passed),
        )
        return output

    def _passing_entries(
        self, entries: Sequence[ConditionEntry], data: Any
    ) -> List[ConditionEntry]:
        # every condition sees the payload as it entered the pass
        passed = [
            entry
            for entry in entries
            if entry.condition.matches(data, strict=self.strict_conditions)
        ]
        self._metrics.conditions_evaluated += len(entries)
        self._metrics.conditions_passed += len(passed)
        return passed

    def _apply_handlers(self, passed: Sequence[ConditionEntry], data: Any) -> Any:
        payload = data
        for entry in passed:
            result = entry.handler(payload)
            if is_truthy(result):
                payload = result
                self._metrics.handlers_applied += 1
        return payload
