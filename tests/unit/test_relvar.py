"""Tests for the relvar body, iteration and export."""

from decimal import Decimal

import pandas as pd
import pytest

from relvar import (
    ConfigurationError,
    InvalidValueError,
    MalformedCandidateError,
    MissingAttributeError,
    NullValueError,
    Relvar,
    RelvarConfig,
    Tuple,
    UnknownAttributeError,
)


def test_parts_example(parts, nut, bolt):
    """Two good parts are added, two bad ones are rejected."""
    parts.add(nut)
    parts.add(bolt)

    with pytest.raises(MissingAttributeError, match="PNO"):
        parts.add({"PNAME": "Screw", "COLOR": "Blue", "WEIGHT": "17.0", "CITY": "Oslo"})
    with pytest.raises((InvalidValueError, NullValueError)):
        parts.add({"PNO": "S4", "PNAME": "Screw", "COLOR": "Red", "WEIGHT": None, "CITY": "London"})

    assert len(parts) == 2
    total_weight = sum(t.get("WEIGHT") for t in parts)
    assert total_weight == 29


def test_relvar_properties(parts, nut):
    assert parts.name == "P"
    assert parts.degree == 5
    assert parts.cardinality == 0
    parts.add(nut)
    assert parts.cardinality == 1
    assert str(parts) == "Relvar('P', degree=5, cardinality=1)"


@pytest.mark.parametrize("candidate", [
    {"PNAME": "Screw", "WEIGHT": "1.0", "CITY": "Oslo"},
    {"PNO": "P5", "PNAME": "Screw", "WEIGHT": None, "CITY": "Oslo"},
    {"PNO": "P5", "PNAME": "Screw", "WEIGHT": "1.0", "CITY": "Oslo", "STATUS": 20},
    {"PNO": "P5", "PNAME": "Screw", "WEIGHT": "1.05", "CITY": "Oslo"},
])
def test_failed_add_leaves_body_unchanged(parts, nut, candidate):
    parts.add(nut)
    before = list(parts)
    with pytest.raises(ValueError):
        parts.add(candidate)
    assert list(parts) == before


def test_unknown_attribute_is_rejected(parts, bolt):
    with pytest.raises(UnknownAttributeError):
        parts.add(dict(bolt, STATUS=20))
    assert len(parts) == 0


def test_re_adding_equal_tuple_is_a_no_op(parts, nut):
    parts.add(nut)
    parts.add({"pno": "P1", "COLOR": "Red", "PNAME": "Nut", "weight": "12.0", "CITY": "London"})
    parts.add(dict(nut, WEIGHT=12))
    assert len(parts) == 1


def test_iteration_is_restartable(parts, nut, bolt):
    parts.add(nut)
    parts.add(bolt)
    first = list(parts)
    second = list(parts)
    assert first == second
    assert len(first) == 2
    assert all(isinstance(t, Tuple) for t in first)


def test_iteration_uses_snapshot(parts, nut, bolt):
    parts.add(nut)
    seen = []
    for t in parts:
        seen.append(t)
        parts.add(bolt)
    assert len(seen) == 1
    assert len(parts) == 2


def test_tuple_view_is_read_only(parts, nut):
    parts.add(nut)
    t = next(iter(parts))
    assert t["pno"] == "P1"
    assert t.get("Weight") == Decimal("12.0")
    assert t.get("SNO") is None
    assert "color" in t
    with pytest.raises(TypeError):
        t["PNO"] = "P9"
    with pytest.raises(AttributeError):
        t.extra = 1


def test_tuple_to_dict_applies_write(parts, nut, bolt):
    parts.add(nut)
    parts.add(bolt)
    records = sorted(parts.to_records(), key=lambda r: r["PNO"])
    assert records == [
        {"PNO": "P1", "PNAME": "Nut", "COLOR": "Red", "WEIGHT": "12.0", "CITY": "London"},
        {"PNO": "P2", "PNAME": "Bolt", "COLOR": "Green", "WEIGHT": "17.0", "CITY": "Paris"},
    ]


def test_read_write_round_trip(parts, bolt):
    for weight in ["17.0", "17", 17, 17.0, Decimal("17.0")]:
        parts.add(dict(bolt, WEIGHT=weight))
    assert len(parts) == 1
    assert next(iter(parts)).to_dict()["WEIGHT"] == "17.0"


def test_membership(parts, nut, bolt):
    parts.add(nut)
    assert {"pno": "P1", "pname": "Nut", "color": "Red", "weight": 12, "city": "London"} in parts
    assert bolt not in parts
    assert {"PNO": "not a part"} not in parts
    assert next(iter(parts)) in parts


def test_to_dataframe(parts, nut, bolt):
    empty = parts.to_dataframe()
    assert list(empty.columns) == ["PNO", "PNAME", "COLOR", "WEIGHT", "CITY"]
    assert len(empty) == 0

    parts.add(nut)
    parts.add(bolt)
    df = parts.to_dataframe().sort_values("PNO").reset_index(drop=True)
    assert isinstance(df, pd.DataFrame)
    assert df.loc[0, "WEIGHT"] == Decimal("12.0")
    assert df.loc[1, "COLOR"] == "Green"

    serialized = parts.to_dataframe(serialize=True).sort_values("PNO").reset_index(drop=True)
    assert list(serialized["WEIGHT"]) == ["12.0", "17.0"]


def test_relvar_from_heading(parts_heading, nut):
    relvar = Relvar(parts_heading, name="P2")
    relvar.add(nut)
    assert relvar.heading is parts_heading
    assert len(relvar) == 1


def test_locale_from_config():
    config = RelvarConfig(locale="tr")
    cities = Relvar([{"name": "İL", "type": str}], config=config)
    cities.add({"il": "Ankara"})
    assert cities.heading.locale == "tr"

    english = Relvar([{"name": "İL", "type": str}], locale="en", config=config)
    with pytest.raises(MissingAttributeError):
        english.add({"il": "Ankara"})


@pytest.mark.parametrize("candidate", ["PNO", 5, [("PNO",)], None, b"P1"])
def test_membership_of_malformed_candidate_is_false(parts, nut, candidate):
    parts.add(nut)
    assert candidate not in parts


@pytest.mark.parametrize("candidate", ["PNO", 5, [("PNO",)], [("PNO", "P1", "extra")]])
def test_adding_malformed_candidate_is_rejected(parts, nut, candidate):
    parts.add(nut)
    with pytest.raises(MalformedCandidateError) as exc_info:
        parts.add(candidate)
    assert exc_info.value.attribute is None
    assert len(parts) == 1


def test_unhashable_values_are_stored_by_content():
    blobs = Relvar([{"name": "DATA", "type": bytearray}])
    blobs.add({"DATA": bytearray(b"x")})
    blobs.add({"data": bytearray(b"x")})
    assert len(blobs) == 1
    assert {"DATA": bytearray(b"x")} in blobs

    blobs.add({"DATA": bytearray(b"y")})
    assert len(blobs) == 2
    assert sorted(bytes(t["DATA"]) for t in blobs) == [b"x", b"y"]


def test_large_weight_is_accepted(parts, bolt):
    parts.add(dict(bolt, WEIGHT="1e30"))
    (part,) = list(parts)
    assert part["WEIGHT"] == Decimal(10) ** 30
    assert part.to_dict()["WEIGHT"] == "1000000000000000000000000000000.0"


def test_relvar_from_heading_with_conflicting_locale(parts_heading):
    with pytest.raises(ConfigurationError, match="conflicts"):
        Relvar(parts_heading, locale="tr")
    assert Relvar(parts_heading, locale="en").heading is parts_heading
    assert Relvar(parts_heading, locale="en_GB").heading is parts_heading
