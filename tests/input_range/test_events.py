import types

import pytest

from input_range.events import PointerEvent, TouchEvent, client_x_of
from input_range.state import Point, TrackGeometry
from input_range.value_transformer import position_from_event


def test_position_from_pointer_event_is_relative_to_track():
    geometry = TrackGeometry(width=200, left=50)
    assert position_from_event(geometry, PointerEvent(client_x=120)) == Point(x=70, y=0)


def test_position_from_touch_event_uses_first_contact():
    geometry = TrackGeometry(width=200, left=10)
    event = TouchEvent(touches=(PointerEvent(client_x=60), PointerEvent(client_x=190)))
    assert position_from_event(geometry, event).x == pytest.approx(50)


@pytest.mark.parametrize("client_x, expected", [(-500, 0), (200 + 500, 200), (10, 0), (210, 200)])
def test_position_from_event_clamps_to_track(client_x, expected):
    geometry = TrackGeometry(width=200, left=10)
    position = position_from_event(geometry, PointerEvent(client_x=client_x))
    assert position.x == expected
    assert position.y == 0


def test_position_from_mapping_events():
    geometry = TrackGeometry(width=100, left=0)
    assert position_from_event(geometry, {"clientX": 40}).x == 40
    assert position_from_event(geometry, {"touches": [{"clientX": 25}]}).x == 25


def test_position_from_foreign_event_object_with_camel_case_attribute():
    geometry = TrackGeometry(width=100, left=0)
    event = types.SimpleNamespace(clientX=70, touches=None)
    assert position_from_event(geometry, event).x == 70


def test_client_x_missing_or_invalid_is_zero():
    assert client_x_of({}) == 0.0
    assert client_x_of(TouchEvent()) == 0.0
    assert client_x_of({"clientX": float("nan")}) == 0.0


def test_position_from_event_zero_width_track():
    geometry = TrackGeometry(width=0, left=0)
    assert position_from_event(geometry, PointerEvent(client_x=90)).x == 0
