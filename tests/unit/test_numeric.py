"""Unit tests for numeric helpers and record validation."""

import math
import pytest
from campus_noc.models import Device
from campus_noc.utils.numeric import (
    coerce_percent,
    is_real_number,
    metric_or_zero,
    non_negative_int,
    percent_of,
    round_half_up,
)
from campus_noc.utils.validation import as_dict, as_list, validate_records


class TestRounding:
    """Test half-up rounding."""

    @pytest.mark.parametrize(
        'value, expected',
        [(0.5, 1), (1.5, 2), (2.5, 3), (2.4999, 2), (69.5, 70), (-2.5, -3), (0, 0)],
    )
    def test_round_half_up(self, value, expected):
        """Test halves round away from zero."""
        assert round_half_up(value) == expected

    def test_percent_of(self):
        """Test whole percentages."""
        assert percent_of(7, 10) == 70
        assert percent_of(1, 8) == 13
        assert percent_of(0, 0) == 0
        assert percent_of(3, 0) == 0


class TestNumberChecks:
    """Test number classification helpers."""

    def test_is_real_number(self):
        """Test that only finite ints/floats qualify."""
        assert is_real_number(3)
        assert is_real_number(3.5)
        assert not is_real_number(True)
        assert not is_real_number('42')
        assert not is_real_number(math.nan)
        assert not is_real_number(math.inf)
        assert not is_real_number(None)

    def test_coerce_percent(self):
        """Test percent range validation."""
        assert coerce_percent(0) == 0
        assert coerce_percent(100) == 100
        assert coerce_percent(42.5) == 42.5
        assert coerce_percent(101) is None
        assert coerce_percent(-1) is None
        assert coerce_percent('50') is None

    def test_metric_or_zero(self):
        """Test missing metrics read as zero."""
        assert metric_or_zero(None) == 0
        assert metric_or_zero(150) == 0
        assert metric_or_zero(35) == 35

    def test_non_negative_int(self):
        """Test count validation."""
        assert non_negative_int(4) == 4
        assert non_negative_int(-1) == 0
        assert non_negative_int(None, 9) == 9
        assert non_negative_int(False, 2) == 2
        assert non_negative_int(2.0, 5) == 2
        assert isinstance(non_negative_int(2.0), int)
        assert non_negative_int(2.5, 5) == 5
        assert non_negative_int(float('inf'), 5) == 5
        assert non_negative_int(-3.0, 5) == 5


class TestValidateRecords:
    """Test per-record validation."""

    def test_drops_malformed_records(self):
        """Test invalid records are dropped and counted, order kept."""
        items = [{'id': 'a'}, {'name': 'no id'}, 'garbage', {'id': 'b'}]

        records, dropped = validate_records(Device, items, 'devices')

        assert [record.id for record in records] == ['a', 'b']
        assert dropped == 2

    def test_none_is_empty(self):
        """Test a missing list validates to nothing."""
        assert validate_records(Device, None, 'devices') == ([], 0)

    def test_shape_helpers(self):
        """Test list/dict unwrapping."""
        assert as_list([1]) == [1]
        assert as_list({'a': 1}) == []
        assert as_dict({'a': 1}) == {'a': 1}
        assert as_dict(None) == {}
