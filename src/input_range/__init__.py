"""
どこで: `input_range` パッケージの公開入口。
何を: 値変換レイヤ（value_transformer）とデータモデル、目盛り計算、ヘッドレスコントローラを再輸出。
なぜ: 描画/イベント配線側へ薄いファサードを提供し、内部実装の入れ替えを容易にするため。
"""

from .controller import RangeSliderController
from .events import PointerEvent, TouchEvent
from .marks import mark_positions, mark_values
from .state import (
    ConfigError,
    HandleValues,
    Point,
    Range,
    RangeConfig,
    TrackGeometry,
    validate_config,
)
from .value_transformer import (
    log_value_from_percentage,
    percentage_from_log_value,
    percentage_from_position,
    percentage_from_value,
    percentages_from_values,
    position_from_event,
    position_from_value,
    positions_from_values,
    step_value_from_value,
    value_from_position,
    values_from_props,
)

__all__ = [
    "RangeSliderController",
    "PointerEvent",
    "TouchEvent",
    "mark_positions",
    "mark_values",
    "ConfigError",
    "HandleValues",
    "Point",
    "Range",
    "RangeConfig",
    "TrackGeometry",
    "validate_config",
    "log_value_from_percentage",
    "percentage_from_log_value",
    "percentage_from_position",
    "percentage_from_value",
    "percentages_from_values",
    "position_from_event",
    "position_from_value",
    "positions_from_values",
    "step_value_from_value",
    "value_from_position",
    "values_from_props",
]
