from __future__ import annotations

import pytest

from imoveis_api.domain.properties import REQUIRED_FIELDS, new_property_id, validate_property


def test_valid_candidate_passes(sample_property):
    assert validate_property(sample_property) is None


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_missing_field_is_named(sample_property, field):
    sample_property.pop(field)
    error = validate_property(sample_property)
    assert error is not None
    assert f"'{field}'" in error


def test_first_failure_is_reported(sample_property):
    sample_property.pop("price")
    sample_property.pop("title")
    assert "'title'" in validate_property(sample_property)


@pytest.mark.parametrize("empty", [None, "", False, float("nan")])
def test_empty_values_count_as_missing(sample_property, empty):
    sample_property["address"] = empty
    assert "'address'" in validate_property(sample_property)


def test_zero_is_present(sample_property):
    sample_property.update(bedrooms=0, bathrooms=0, suites=0, price=0.0)
    assert validate_property(sample_property) is None


@pytest.mark.parametrize("value", ["3", True, [1]])
def test_numeric_fields_must_be_numbers(sample_property, value):
    sample_property["bathrooms"] = value
    error = validate_property(sample_property)
    assert error == "O campo 'bathrooms' deve ser um numero."


def test_price_type_is_checked(sample_property):
    sample_property["price"] = "100000"
    assert "'price'" in validate_property(sample_property)


def test_extra_fields_are_ignored(sample_property):
    sample_property["garage"] = "sim"
    assert validate_property(sample_property) is None


def test_non_object_is_rejected():
    assert validate_property(["title"]) is not None
    assert validate_property(None) is not None


def test_partial_checks_only_supplied_fields():
    assert validate_property({"price": 250000}, partial=True) is None
    assert validate_property({}, partial=True) is None
    assert "'price'" in validate_property({"price": "caro"}, partial=True)
    assert "'title'" in validate_property({"title": ""}, partial=True)


def test_new_property_id_is_timestamp_derived():
    assert new_property_id([], now_ms=1700000000000) == "1700000000000"


def test_new_property_id_skips_used_values():
    existing = ["1700000000000", "1700000000001"]
    assert new_property_id(existing, now_ms=1700000000000) == "1700000000002"


@pytest.mark.parametrize("value", [float("inf"), float("-inf")])
def test_non_finite_numbers_are_rejected(sample_property, value):
    sample_property["price"] = value
    assert validate_property(sample_property) == "O campo 'price' deve ser um numero."
    assert "'built_area'" in validate_property({"built_area": value}, partial=True)
