"""Payload shaping for each ping kind."""

from __future__ import annotations

import math
from typing import Any

from .errors import ValidationError
from .models import DemographicAnswer, PingKind

# Survey question id -> payload field name. "race" is multi-valued and handled separately.
DEMOGRAPHIC_FIELD_MAPPING: tuple[tuple[str, str], ...] = (
    ("age", "age"),
    ("gender", "gender"),
    ("hispanicLatinoSpanishOrigin", "origin"),
    ("school", "education"),
    ("income", "income"),
    ("zipCode", "zipCode"),
)

RACE_QUESTION = "race"
RACES_FIELD = "races"


def answer_key(value: Any) -> str:
    """Render a scalar answer the way a JSON consumer spells it as an object key."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


class PayloadShaper:
    """Builds the JSON body sent for a ping kind.

    Enrollment and deletion pings carry nothing: the event is conveyed by the
    schema name and namespace alone. Demographic answers are flattened into
    boolean-keyed maps so every reported value becomes its own column after
    ingestion, e.g. ``"race": ["a", "b"]`` becomes ``"races": {"a": True, "b": True}``.
    """

    def shape(self, kind: PingKind, data: DemographicAnswer | None = None) -> dict[str, Any]:
        if kind is PingKind.DEMOGRAPHIC_SURVEY:
            return self.shape_demographics(data or {})
        return {}

    @staticmethod
    def shape_demographics(data: DemographicAnswer) -> dict[str, Any]:
        processed: dict[str, Any] = {}
        for question, field_name in DEMOGRAPHIC_FIELD_MAPPING:
            if question in data:
                processed[field_name] = {answer_key(data[question]): True}

        if RACE_QUESTION in data:
            categories = data[RACE_QUESTION]
            if not isinstance(categories, (list, tuple)):
                raise ValidationError(f"race answer must be a list of categories, got {categories!r}")
            processed[RACES_FIELD] = {answer_key(category): True for category in categories}

        return processed
