import numpy as np
import pytest

from input_range.marks import mark_positions, mark_values
from input_range.state import RangeConfig, TrackGeometry
from input_range.value_transformer import position_from_value


def test_linear_mark_values_are_evenly_spaced(linear_config):
    np.testing.assert_allclose(mark_values(linear_config, 5), [0, 25, 50, 75, 100])


def test_log_mark_values_are_geometric(log_config):
    np.testing.assert_allclose(mark_values(log_config, 4), [1, 10, 100, 1000], rtol=1e-9)


def test_log_mark_values_keep_configured_minimum():
    config = RangeConfig(min_value=0, max_value=100, log_scale=True)
    values = mark_values(config, 3)
    assert values[0] == 0
    np.testing.assert_allclose(values[1:], [10, 100], rtol=1e-9)


@pytest.mark.parametrize("count", [0, 1])
def test_mark_values_requires_two_marks(linear_config, count):
    with pytest.raises(ValueError):
        mark_values(linear_config, count)


@pytest.mark.parametrize("fixture_name", ["linear_config", "log_config"])
def test_mark_positions_match_scalar_conversion(request, fixture_name, track):
    config = request.getfixturevalue(fixture_name)
    values = np.array([-5.0, 0.5, 1.0, 7.0, 42.0, 100.0, 999.0, 5000.0])
    expected = [position_from_value(config, track, float(v)).x for v in values]
    np.testing.assert_allclose(mark_positions(config, track, values), expected, atol=1e-9)


def test_mark_positions_degenerate_inputs_fall_back_to_zero(linear_config):
    values = np.array([10.0, np.nan])
    np.testing.assert_array_equal(mark_positions(linear_config, TrackGeometry(width=0), values), [0, 0])
    flat = RangeConfig(min_value=3, max_value=3)
    np.testing.assert_array_equal(mark_positions(flat, TrackGeometry(width=100), values), [0, 0])
