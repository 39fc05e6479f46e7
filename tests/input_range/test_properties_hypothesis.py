import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import assume, given, strategies as st  # type: ignore

from input_range.events import PointerEvent
from input_range.state import RangeConfig, TrackGeometry
from input_range.value_transformer import (
    log_value_from_percentage,
    percentage_from_log_value,
    percentage_from_value,
    position_from_event,
    position_from_value,
    value_from_position,
)

_bounds = st.tuples(
    st.floats(-1e6, 1e6, allow_nan=False), st.floats(1e-3, 1e6, allow_nan=False)
).map(lambda t: (t[0], t[0] + t[1]))


@given(bounds=_bounds, t=st.floats(0, 1), width=st.floats(1, 4000))
def test_linear_round_trip(bounds, t, width):
    lo, hi = bounds
    config = RangeConfig(min_value=lo, max_value=hi)
    geometry = TrackGeometry(width=width)
    value = lo + (hi - lo) * t
    back = value_from_position(config, geometry, position_from_value(config, geometry, value))
    assert back == pytest.approx(value, rel=1e-6, abs=1e-6 * (hi - lo))


@given(lo=st.floats(1e-3, 1e3), ratio=st.floats(1.5, 1e6), t=st.floats(1e-6, 1))
def test_log_round_trip(lo, ratio, t):
    hi = lo * ratio
    config = RangeConfig(min_value=lo, max_value=hi, log_scale=True)
    value = lo * ratio**t
    assume(value > lo)
    pct = percentage_from_log_value(config, value)
    assert log_value_from_percentage(config, pct * 100) == pytest.approx(value, rel=1e-6)


@given(
    bounds=_bounds,
    a=st.floats(-2e6, 2e6, allow_nan=False),
    b=st.floats(-2e6, 2e6, allow_nan=False),
    log_scale=st.booleans(),
)
def test_percentage_from_value_is_monotonic(bounds, a, b, log_scale):
    lo, hi = bounds
    config = RangeConfig(min_value=lo, max_value=hi, log_scale=log_scale)
    small, large = sorted((a, b))
    p_small = percentage_from_value(config, small)
    p_large = percentage_from_value(config, large)
    assert p_small <= p_large + 1e-12
    assert 0.0 <= p_small <= 1.0
    assert 0.0 <= p_large <= 1.0


@given(
    client_x=st.floats(-1e7, 1e7, allow_nan=False),
    left=st.floats(-1e4, 1e4, allow_nan=False),
    width=st.floats(0, 1e4, allow_nan=False),
)
def test_position_from_event_stays_on_track(client_x, left, width):
    position = position_from_event(TrackGeometry(width=width, left=left), PointerEvent(client_x=client_x))
    assert 0.0 <= position.x <= width
    assert position.y == 0
