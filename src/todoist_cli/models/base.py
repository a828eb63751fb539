"""Shared pydantic configuration for wire models."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Loosely typed references (section, assignee, ...) are either absent, a
# numeric id or a string id. Kept as a closed union instead of raw JSON.
Ref = Union[int, str, None]


class WireModel(BaseModel):
    """Base for models exchanged with the REST API.

    Field names are camelCase on the wire; snake_case names are accepted too.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )
