"""Wire Model Base — camelCase aliases with case-insensitive key matching.

Invariants:
    - An exact key match always wins over a case-folded one
    - Unknown keys are ignored, never rejected
    - Non-object input passes through untouched so Pydantic reports the shape error
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for every JSON body exchanged with API clients."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: Any) -> Any:
        """Accept `Description` for `description`, `profilelevel` for `profileLevel`."""
        if not isinstance(data, dict):
            return data
        known: dict[str, str] = {}
        for attr, field in cls.model_fields.items():
            alias = field.alias or attr
            known[alias.lower()] = alias
            known[attr.lower()] = alias
        folded: dict[str, Any] = {}
        exact: dict[str, Any] = {}
        for key, value in data.items():
            if not isinstance(key, str):
                continue
            target = known.get(key.lower())
            if target is None:
                continue
            if key == target:
                exact[target] = value
            else:
                folded[target] = value
        folded.update(exact)
        return folded
