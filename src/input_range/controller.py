"""
どこで: `input_range` のヘッドレス入力制御層。
何を: トラック押下/ハンドルドラッグ/キーボード/トラックドラッグを、値変換レイヤ経由で値の更新へ写像する。
なぜ: 描画やイベント配線に依存せず、スライダーの操作規則（最寄りハンドル、ステップ、範囲判定）を検証可能にするため。

補足:
- 構成は不変（RangeConfig）。更新を受理したときだけ `value` を差し替えた新しい構成を保持し購読者へ通知する。
- 範囲外/ステップ未満の更新は例外ではなく False で拒否する。
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Mapping

from .state import HandleId, HandleValues, Point, Range, RangeConfig, TrackGeometry, is_number
from .value_transformer import (
    position_from_event,
    positions_from_values,
    step_value_from_value,
    value_from_position,
    values_from_props,
)

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]

# ステップ差判定の相対許容誤差（0.1 刻み等の浮動小数誤差を吸収）
_STEP_TOLERANCE = 1e-9


class RangeSliderController:
    """単一/複数ハンドルのスライダー操作を値の更新へ変換する。"""

    def __init__(
        self,
        config: RangeConfig,
        geometry: TrackGeometry | None = None,
        *,
        on_change: Listener | None = None,
    ) -> None:
        self._config = config
        self._geometry = geometry or TrackGeometry(width=0.0)
        self._listeners: list[Listener] = []
        if on_change is not None:
            self._listeners.append(on_change)

    # --- 状態 ---
    @property
    def config(self) -> RangeConfig:
        return self._config

    @property
    def geometry(self) -> TrackGeometry:
        return self._geometry

    def set_config(self, config: RangeConfig) -> None:
        self._config = config

    def set_geometry(self, geometry: TrackGeometry) -> None:
        """レイアウト/リサイズ後のトラック矩形を反映する。"""
        self._geometry = geometry

    def values(self) -> HandleValues:
        return values_from_props(self._config)

    # --- リスナー ---
    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _notify(self, value: Any) -> None:
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                logger.exception("on_change listener failed")

    # --- 判定 ---
    def key_for_position(self, position: Point) -> HandleId:
        """位置に最も近いハンドルのキーを返す（単一モードは常に "max"、同距離は先のハンドル）。"""
        values = self.values()
        if isinstance(values, Range) or not values:
            return "max"
        positions = positions_from_values(self._config, self._geometry, values)
        return min(positions, key=lambda k: abs(positions[k].x - position.x))

    def is_within_range(self, values: HandleValues) -> bool:
        lo = self._config.min_value
        hi = self._config.max_value
        if isinstance(values, Range):
            return is_number(values.max) and lo <= values.max <= hi

        if not all(is_number(v) and lo <= v <= hi for v in values.values()):
            return False
        if set(values) == {"min", "max"}:
            ordered = [values["min"], values["max"]]
        else:
            ordered = list(values.values())
        for a, b in zip(ordered, ordered[1:]):
            if a > b or (a == b and not self._config.allow_same_values):
                return False
        return True

    def has_step_difference(self, values: HandleValues) -> bool:
        """現在値からいずれかのハンドルが 1 step 以上動いていれば True。"""
        threshold = float(self._config.step) * (1.0 - _STEP_TOLERANCE)
        current = self.values()
        if isinstance(values, Range):
            if not isinstance(current, Range) or not is_number(current.max):
                return True
            return abs(values.max - current.max) >= threshold
        if not isinstance(current, Mapping):
            return True
        for key, val in values.items():
            prev = current.get(key)
            if not is_number(prev) or abs(val - prev) >= threshold:
                return True
        return False

    # --- 更新 ---
    def update_values(self, values: HandleValues) -> bool:
        """範囲内かつステップ差のある値だけを受理し、通知する。"""
        if self._config.disabled:
            return False
        if not self.is_within_range(values):
            logger.debug("rejected out-of-range values: %r", values)
            return False
        if not self.has_step_difference(values):
            return False

        new_value: Any = values.max if isinstance(values, Range) else dict(values)
        self._config = replace(self._config, value=new_value)
        self._notify(new_value)
        return True

    def update_value(self, key: HandleId, value: float) -> bool:
        values = self.values()
        if isinstance(values, Range):
            if key != "max":
                return False
            return self.update_values(Range(min=values.min, max=value))
        if key not in values:
            logger.debug("unknown handle: %r", key)
            return False
        updated = dict(values)
        updated[key] = value
        return self.update_values(updated)

    def update_position(self, key: HandleId, position: Point) -> bool:
        value = value_from_position(self._config, self._geometry, position)
        return self.update_value(key, step_value_from_value(self._config, value))

    # --- 入力 ---
    def press_track(self, event: Any) -> bool:
        """トラック押下: 最寄りのハンドルを押下位置へ移動する。"""
        if self._config.disabled:
            return False
        position = position_from_event(self._geometry, event)
        return self.update_position(self.key_for_position(position), position)

    def drag_handle(self, key: HandleId, event: Any) -> bool:
        if self._config.disabled:
            return False
        return self.update_position(key, position_from_event(self._geometry, event))

    def increment(self, key: HandleId = "max") -> bool:
        return self._nudge(key, +1)

    def decrement(self, key: HandleId = "max") -> bool:
        return self._nudge(key, -1)

    def _nudge(self, key: HandleId, direction: int) -> bool:
        values = self.values()
        current = values.max if isinstance(values, Range) else values.get(key)
        if not is_number(current):
            return False
        return self.update_value(key, current + direction * self._config.step)

    def drag_track(self, prev_event: Any, event: Any) -> bool:
        """トラックドラッグ: min/max を同じ量だけずらす（複数モードの min/max ハンドルのみ）。"""
        values = self.values()
        if self._config.disabled or isinstance(values, Range) or set(values) != {"min", "max"}:
            return False
        prev_value = value_from_position(
            self._config, self._geometry, position_from_event(self._geometry, prev_event)
        )
        value = value_from_position(self._config, self._geometry, position_from_event(self._geometry, event))
        offset = step_value_from_value(self._config, prev_value) - step_value_from_value(self._config, value)
        return self.update_values({"min": values["min"] - offset, "max": values["max"] - offset})


__all__ = ["RangeSliderController", "Listener"]
