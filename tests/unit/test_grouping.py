"""
Tests for endpoint keys and record grouping.
"""
import pytest
from pydantic import ValidationError

from radiolinks.data.schemas import Endpoint, UnidirectionalLinkRecord, format_coordinate
from radiolinks.links.grouping import (
    GroupKey,
    canonical_pair,
    group_key_for,
    group_records,
)


# -----------------------------
# Helper functions
# -----------------------------

SITE_A = Endpoint(latitude=52.0, longitude=21.0)
SITE_B = Endpoint(latitude=52.1, longitude=21.2)
SITE_C = Endpoint(latitude=51.9, longitude=20.8)


def make_record(record_id, tx, rx, freq=18000.0, **kwargs) -> UnidirectionalLinkRecord:
    """Create a record with sensible defaults."""
    kwargs.setdefault('operator_id', '26001')
    return UnidirectionalLinkRecord(id=record_id, tx=tx, rx=rx, frequency_mhz=freq, **kwargs)


# -----------------------------
# Endpoint keys
# -----------------------------

class TestEndpoint:
    """Endpoint value type."""

    def test_key_format(self):
        assert Endpoint(latitude=52.2297, longitude=21.0122).key == '52.2297,21.0122'

    def test_integral_values_have_no_decimals(self):
        assert Endpoint(latitude=52.0, longitude=21.0).key == '52,21'

    def test_rounded_to_six_decimals(self):
        site = Endpoint(latitude=52.12345678, longitude=21.98765432)
        assert site.latitude == 52.123457
        assert site.longitude == 21.987654

    def test_equality_after_rounding(self):
        """Coordinates differing beyond 6 decimals are the same site."""
        assert Endpoint(latitude=52.1000001, longitude=21.0) == Endpoint(latitude=52.1, longitude=21.0)

    def test_hashable(self):
        sites = {Endpoint(latitude=52.0, longitude=21.0), Endpoint(latitude=52.0, longitude=21.0)}
        assert len(sites) == 1

    def test_negative_zero(self):
        assert Endpoint(latitude=-0.0, longitude=0.0).key == '0,0'

    def test_out_of_range_latitude(self):
        with pytest.raises(ValidationError):
            Endpoint(latitude=95.0, longitude=21.0)

    def test_immutable(self):
        site = Endpoint(latitude=52.0, longitude=21.0)
        with pytest.raises(ValidationError):
            site.latitude = 53.0

    def test_format_coordinate(self):
        assert format_coordinate(0.000001) == '0.000001'
        assert format_coordinate(-19.5) == '-19.5'


# -----------------------------
# Canonical pair
# -----------------------------

class TestCanonicalPair:
    """Lexicographic ordering of endpoint keys."""

    def test_independent_of_direction(self):
        assert canonical_pair(SITE_A, SITE_B) == canonical_pair(SITE_B, SITE_A)

    def test_smaller_key_first(self):
        a, b = canonical_pair(SITE_B, SITE_A)
        # '52,21' < '52.1,21.2' because ',' sorts before '.'
        assert a == SITE_A
        assert b == SITE_B

    def test_string_not_numeric_order(self):
        """Keys compare as text: '10,1' sorts before '9.5,1'."""
        low = Endpoint(latitude=9.5, longitude=1.0)
        high = Endpoint(latitude=10.0, longitude=1.0)
        a, b = canonical_pair(low, high)
        assert a == high
        assert b == low


# -----------------------------
# Group keys
# -----------------------------

class TestGroupKey:
    """Key selection for a single record."""

    def test_permit_key(self):
        record = make_record(1, SITE_A, SITE_B, permit_number='R/100/2020')
        assert group_key_for(record) == GroupKey('26001', 'permit', 'R/100/2020')

    def test_path_key_when_no_permit(self):
        record = make_record(1, SITE_B, SITE_A)
        assert group_key_for(record) == GroupKey('26001', 'path', '52,21|52.1,21.2')

    def test_missing_operator_uses_sentinel(self):
        record = make_record(1, SITE_A, SITE_B, operator_id=None)
        key = group_key_for(record)
        assert key.operator == 'unknown'
        assert key.operator_missing is True

    def test_real_operator_named_like_sentinel(self):
        """An operator id equal to the label is still a real operator."""
        named = group_key_for(make_record(1, SITE_A, SITE_B, operator_id='unknown'))
        missing = group_key_for(make_record(2, SITE_B, SITE_A, operator_id=None))
        assert named.operator_missing is False
        assert named != missing
        assert str(named) == 'unknown:path:52,21|52.1,21.2'
        assert str(missing) == '(unknown):path:52,21|52.1,21.2'

    def test_custom_sentinel(self):
        record = make_record(1, SITE_A, SITE_B, operator_id=None)
        assert group_key_for(record, unknown_operator='n/a').operator == 'n/a'

    def test_string_form(self):
        assert str(GroupKey('26001', 'permit', 'R/1')) == '26001:permit:R/1'

    def test_blank_permit_falls_back_to_path(self):
        record = make_record(1, SITE_A, SITE_B, permit_number='  ')
        assert group_key_for(record).scope == 'path'


# -----------------------------
# Grouping
# -----------------------------

class TestGroupRecords:
    """Partitioning of record collections."""

    def test_empty(self):
        assert group_records([]) == {}

    def test_same_permit_one_group(self):
        records = [
            make_record(1, SITE_A, SITE_B, permit_number='P1'),
            make_record(2, SITE_B, SITE_A, permit_number='P1', freq=19000.0),
        ]
        groups = group_records(records)
        assert len(groups) == 1
        assert [r.id for r in groups[GroupKey('26001', 'permit', 'P1')]] == [1, 2]

    def test_same_permit_different_operators(self):
        records = [
            make_record(1, SITE_A, SITE_B, permit_number='P1', operator_id='26001'),
            make_record(2, SITE_B, SITE_A, permit_number='P1', operator_id='26002'),
        ]
        assert len(group_records(records)) == 2

    def test_reverse_directions_share_path(self):
        records = [
            make_record(1, SITE_A, SITE_B),
            make_record(2, SITE_B, SITE_A, freq=19000.0),
        ]
        assert len(group_records(records)) == 1

    def test_different_paths(self):
        records = [
            make_record(1, SITE_A, SITE_B),
            make_record(2, SITE_A, SITE_C),
        ]
        assert len(group_records(records)) == 2

    def test_unknown_operator_does_not_merge_with_real_operator(self):
        records = [
            make_record(1, SITE_A, SITE_B, operator_id='26001'),
            make_record(2, SITE_B, SITE_A, operator_id=None),
        ]
        groups = group_records(records)
        assert len(groups) == 2
        assert {k.operator for k in groups} == {'26001', 'unknown'}

    def test_operator_named_like_sentinel_not_merged(self):
        """A real operator called 'unknown' and a missing operator on one path stay apart."""
        records = [
            make_record(1, SITE_A, SITE_B, operator_id='unknown'),
            make_record(2, SITE_B, SITE_A, operator_id=None),
        ]
        groups = group_records(records)
        assert len(groups) == 2
        assert sorted(r.id for members in groups.values() for r in members) == [1, 2]
        assert {k.operator_missing for k in groups} == {False, True}

    def test_members_sorted_by_id(self):
        records = [
            make_record(30, SITE_A, SITE_B),
            make_record(10, SITE_B, SITE_A),
            make_record(20, SITE_A, SITE_B, freq=18200.0),
        ]
        (members,) = group_records(records).values()
        assert [r.id for r in members] == [10, 20, 30]

    def test_no_record_dropped(self):
        records = [
            make_record(i, SITE_A if i % 2 else SITE_B, SITE_C, operator_id=None if i % 3 == 0 else '26001',
                        permit_number='P9' if i % 4 == 0 else None)
            for i in range(1, 25)
        ]
        groups = group_records(records)
        grouped_ids = sorted(r.id for members in groups.values() for r in members)
        assert grouped_ids == list(range(1, 25))
