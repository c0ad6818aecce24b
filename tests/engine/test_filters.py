"""
Tests for filter descriptor validation
"""

import pytest

from ecosystem_api.engine.filters import (
    COMPOSITE_PREDICATES,
    SINGLE_PREDICATE,
    Predicate,
    collect_predicates,
    split_primary,
)
from ecosystem_api.errors import (
    EmptyFilterError,
    ErrorKind,
    TooManyFiltersError,
    ValidationError,
)


class TestCollectPredicates:
    """Tests for collect_predicates."""

    def test_single_field(self):
        """One present field becomes one predicate."""
        assert collect_predicates({"code": "SES-001"}, SINGLE_PREDICATE) == [
            Predicate("code", "SES-001")
        ]

    def test_keeps_supplied_order(self):
        """Predicates come out in the order the fields were supplied."""
        predicates = collect_predicates({"month": "2022-05-01", "cu_id": "1"}, 2)
        assert [p.field for p in predicates] == ["month", "cu_id"]

    def test_explicit_null_is_present(self):
        """A key supplied with a null value still counts."""
        assert collect_predicates({"comments": None}, SINGLE_PREDICATE) == [
            Predicate("comments", None)
        ]

    def test_unknown_field_is_not_rejected(self):
        """Field names are left to the record store."""
        assert collect_predicates({"no_such_field": 1}, 1) == [Predicate("no_such_field", 1)]

    def test_empty_descriptor_rejected(self):
        with pytest.raises(EmptyFilterError):
            collect_predicates({}, SINGLE_PREDICATE)

    def test_too_many_for_single(self):
        """Single-parameter queries accept exactly one field."""
        with pytest.raises(TooManyFiltersError, match="Choose one parameter only"):
            collect_predicates({"id": "1", "code": "SES-001"}, SINGLE_PREDICATE)

    def test_too_many_for_composite(self):
        with pytest.raises(TooManyFiltersError, match="no more than 2"):
            collect_predicates({"id": "1", "month": "x", "cu_id": "1"}, COMPOSITE_PREDICATES)

    @pytest.mark.parametrize("count", [1, 2])
    def test_composite_accepts_up_to_cap(self, count):
        descriptor = dict(list({"cu_id": "1", "month": "2022-05-01"}.items())[:count])
        assert len(collect_predicates(descriptor, COMPOSITE_PREDICATES)) == count

    def test_errors_are_validation_kind(self):
        """Filter rejections carry the validation kind for GraphQL extensions."""
        with pytest.raises(ValidationError) as exc_info:
            collect_predicates({}, SINGLE_PREDICATE)
        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert exc_info.value.extensions == {"code": "VALIDATION"}


class TestSplitPrimary:
    """Tests for split_primary."""

    def test_single(self):
        primary, secondary = split_primary([Predicate("id", 1)])
        assert primary == Predicate("id", 1)
        assert secondary is None

    def test_pair(self):
        primary, secondary = split_primary([Predicate("cu_id", 1), Predicate("month", "m")])
        assert primary.field == "cu_id"
        assert secondary is not None and secondary.field == "month"

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            split_primary([])
