from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Annotated, Any, Callable, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from dataport.errors import MalformedConditionError
from dataport.utils.coercion import is_truthy, loose_equals, read_field

logger = logging.getLogger(__name__)


class PredicateCondition(BaseModel):
    """Passes when the predicate returns a truthy value for the data."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal["predicate"] = "predicate"
    predicate: Callable[[Any], Any]

    def matches(self, data: Any, *, strict: bool = False) -> bool:
        return is_truthy(self.predicate(data))


class PatternCondition(BaseModel):
    """
    Field pattern. Passes when every pattern key is loosely equal to the
    same field of the data. Extra fields in the data are ignored and an
    empty pattern always passes.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal["pattern"] = "pattern"
    pattern: Dict[Any, Any] = Field(default_factory=dict)

    def matches(self, data: Any, *, strict: bool = False) -> bool:
        return all(
            loose_equals(read_field(data, key), expected)
            for key, expected in self.pattern.items()
        )


class MalformedCondition(BaseModel):
    """Anything that is neither callable nor a mapping. Never passes."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal["malformed"] = "malformed"
    raw: Any = None

    def matches(self, data: Any, *, strict: bool = False) -> bool:
        if strict:
            raise MalformedConditionError(self.raw)
        logger.warning(
            "Skipping malformed condition of type %s", type(self.raw).__name__
        )
        return False


Condition = Annotated[
    Union[PredicateCondition, PatternCondition, MalformedCondition],
    Field(discriminator="kind"),
]

_CONDITION_TYPES = (PredicateCondition, PatternCondition, MalformedCondition)


def to_condition(raw: Any) -> Condition:
    """
    Accept Condition | callable | Mapping | anything, cast to a Condition.
    """
    if isinstance(raw, _CONDITION_TYPES):
        return raw
    if callable(raw):
        return PredicateCondition(predicate=raw)
    if isinstance(raw, Mapping):
        return PatternCondition(pattern=dict(raw))
    return MalformedCondition(raw=raw)
