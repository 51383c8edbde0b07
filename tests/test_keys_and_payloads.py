from __future__ import annotations

import pytest

from pioneer_pings.errors import ValidationError
from pioneer_pings.keys import CORE_KEY, DISCARD_KEY, KeySelector
from pioneer_pings.models import PingKind
from pioneer_pings.payloads import PayloadShaper


def test_core_namespace_uses_core_key() -> None:
    key = KeySelector().select_key("pioneer-core")

    assert key is CORE_KEY
    assert key.key_id == "core"
    assert key.public_key.to_dict()["kid"] == "core"


def test_study_namespaces_use_discard_key() -> None:
    selector = KeySelector()

    for namespace in ("rally-study-01", "", "PIONEER-CORE"):
        key = selector.select_key(namespace)
        assert key is DISCARD_KEY
        assert key.key_id == "discarded"
        assert "kid" not in key.public_key.to_dict()


def test_empty_kinds_shape_to_empty_payload() -> None:
    shaper = PayloadShaper()

    assert shaper.shape(PingKind.ENROLLMENT) == {}
    assert shaper.shape(PingKind.DELETION_REQUEST, {"age": "25-34"}) == {}


def test_demographics_flatten_scalars_and_rename_fields() -> None:
    payload = PayloadShaper().shape(
        PingKind.DEMOGRAPHIC_SURVEY,
        {
            "age": "25-34",
            "gender": "female",
            "hispanicLatinoSpanishOrigin": "other",
            "school": "graduate_degree",
            "income": "50000_74999",
            "zipCode": "94110",
        },
    )

    assert payload == {
        "age": {"25-34": True},
        "gender": {"female": True},
        "origin": {"other": True},
        "education": {"graduate_degree": True},
        "income": {"50000_74999": True},
        "zipCode": {"94110": True},
    }


def test_demographics_races_ignore_order_and_duplicates() -> None:
    shaper = PayloadShaper()

    forward = shaper.shape(PingKind.DEMOGRAPHIC_SURVEY, {"race": ["a", "b"]})
    backward = shaper.shape(PingKind.DEMOGRAPHIC_SURVEY, {"race": ["b", "a", "b"]})

    assert forward == backward == {"races": {"a": True, "b": True}}


def test_demographics_output_is_sparse_and_drops_unknown_fields() -> None:
    payload = PayloadShaper().shape(
        PingKind.DEMOGRAPHIC_SURVEY,
        {"income": "0_24999", "favoriteColor": "blue", "races": ["x"]},
    )

    assert payload == {"income": {"0_24999": True}}


def test_demographics_without_answers_is_empty() -> None:
    assert PayloadShaper().shape(PingKind.DEMOGRAPHIC_SURVEY) == {}
    assert PayloadShaper().shape(PingKind.DEMOGRAPHIC_SURVEY, {"race": []}) == {"races": {}}


def test_demographics_reject_race_that_is_not_a_list() -> None:
    shaper = PayloadShaper()

    with pytest.raises(ValidationError):
        shaper.shape(PingKind.DEMOGRAPHIC_SURVEY, {"race": "white"})
    with pytest.raises(ValidationError):
        shaper.shape(PingKind.DEMOGRAPHIC_SURVEY, {"race": {"white": True}})


def test_demographics_spell_scalar_answers_like_json() -> None:
    payload = PayloadShaper().shape(
        PingKind.DEMOGRAPHIC_SURVEY,
        {"age": 30.0, "gender": None, "income": True, "zipCode": 94110, "race": [False, 1.5]},
    )

    assert payload == {
        "age": {"30": True},
        "gender": {"null": True},
        "income": {"true": True},
        "zipCode": {"94110": True},
        "races": {"false": True, "1.5": True},
    }
