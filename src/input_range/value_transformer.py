"""
どこで: `input_range` の値変換レイヤ（ValueTransformer）。
何を: トラック上のピクセル位置・百分率・ドメイン値の相互変換（線形/対数、ステップ量子化、イベント位置抽出）。
なぜ: スライダーの描画/入力配線から数値ロジックを切り離し、往復精度と境界挙動をテスト可能に保つため。

補足:
- すべて純粋関数。構成（RangeConfig）とジオメトリ（TrackGeometry）は呼び出しごとに受け取り保持しない。
- 退化した入力（幅 0 のトラック、0/NaN/None の値、min >= max）では例外を投げず 0 か境界値へフォールバックする。
- 対数変換の順方向は 0..100、逆方向は 0..1 を扱う（非対称だが呼び出し側がこの契約に依存する）。
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from common.settings import get as get_settings

from .events import client_x_of
from .state import HandleValues, Point, Range, RangeConfig, TrackGeometry, is_number, is_number_mapping

logger = logging.getLogger(__name__)


def _debug(op: str, result: Any, **inputs: Any) -> None:
    if get_settings().DEBUG_TRANSFORM:
        args = ", ".join(f"{k}={v!r}" for k, v in inputs.items())
        logger.debug("%s(%s) -> %r", op, args, result)


def _clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def _is_falsy(value: Any) -> bool:
    # 0 / NaN / None / 非数値はすべて「値なし」
    if not is_number(value):
        return True
    return value == 0 or math.isnan(value)


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _log_bounds(config: RangeConfig) -> tuple[float, float] | None:
    # min_value <= 0 は対数の内側でのみ 1 に置き換える
    min_value = float(config.min_value)
    max_value = float(config.max_value)
    if max_value <= 0:
        return None
    minv = math.log(min_value if min_value > 0 else 1.0)
    maxv = math.log(max_value)
    return minv, maxv


# --- 対数スケール ---
def log_value_from_percentage(config: RangeConfig, percentage: Any) -> float:
    """百分率（0..100）を対数スケールの値へ変換する。

    `percentage` が 0/NaN/None の場合は 0 を返す（ln(0) を避けるための早期リターンで、極限値ではない）。
    """
    minp, maxp = 0.0, 100.0
    if _is_falsy(percentage):
        return 0.0
    percentage = float(percentage)
    bounds = _log_bounds(config)
    if bounds is None:
        return 0.0
    minv, maxv = bounds
    scale = (maxv - minv) / (maxp - minp)
    try:
        result = math.exp(minv + scale * (percentage - minp))
    except OverflowError:
        return 0.0
    return _finite_or_zero(result)


def percentage_from_log_value(config: RangeConfig, value: Any) -> float:
    """対数スケールの値を百分率（0..1）へ変換する。

    順方向 `log_value_from_percentage` の入力は 0..100 で、こちらの出力は 0..1。
    `value` が 0/NaN/None/負の場合は 0 を返す。
    """
    minp, maxp = 0.0, 1.0
    if _is_falsy(value) or value < 0:
        return 0.0
    value = float(value)
    bounds = _log_bounds(config)
    if bounds is None:
        return 0.0
    minv, maxv = bounds
    scale = (maxv - minv) / (maxp - minp)
    if scale == 0:
        return 0.0
    return _finite_or_zero((math.log(value) - minv) / scale + minp)


# --- 線形変換 ---
def percentage_from_position(config: RangeConfig, geometry: TrackGeometry, position: Point) -> float:
    """位置をトラック長に対する比率（0..1）へ変換する。幅 0 のトラックでは 0。"""
    width = float(geometry.width)
    if width == 0:
        return 0.0
    return _finite_or_zero(float(position.x) / width)


def percentage_from_value(config: RangeConfig, value: Any) -> float:
    """値を比率（0..1）へ変換する。値は [min_value, max_value] にクランプしてから変換する。"""
    if not is_number(value) or math.isnan(value):
        return 0.0
    lo = float(config.min_value)
    hi = float(config.max_value)
    clamped = _clamp(float(value), lo, hi)
    if config.log_scale:
        # min_value <= 0 の近似で (0, 1) の値が負になるため、表示域に収める
        return _clamp(percentage_from_log_value(config, clamped), 0.0, 1.0)
    span = hi - lo
    if span == 0:
        return 0.0
    return _finite_or_zero((clamped - lo) / span)


def percentages_from_values(config: RangeConfig, values: HandleValues | Mapping[str, Any]) -> HandleValues:
    """各ハンドルの値を比率へ変換する（大小関係は検査しない）。

    `Range` を渡せば `Range`、Mapping を渡せば同じキーの dict を返す。
    """
    if isinstance(values, Range):
        return Range(
            min=percentage_from_value(config, values.min),
            max=percentage_from_value(config, values.max),
        )
    if isinstance(values, Mapping):
        return {key: percentage_from_value(config, val) for key, val in values.items()}
    raise TypeError(f"Range または Mapping が必要です: {type(values).__name__}")


def position_from_value(config: RangeConfig, geometry: TrackGeometry, value: Any) -> Point:
    """値をトラック上の位置へ変換する。"""
    return Point(x=percentage_from_value(config, value) * float(geometry.width), y=0.0)


def positions_from_values(
    config: RangeConfig, geometry: TrackGeometry, values: HandleValues | Mapping[str, Any]
) -> Range | dict[str, Point]:
    """各ハンドルの値を位置へ変換する。形は `percentages_from_values` と同じ規則。"""
    if isinstance(values, Range):
        return Range(
            min=position_from_value(config, geometry, values.min),
            max=position_from_value(config, geometry, values.max),
        )
    if isinstance(values, Mapping):
        return {key: position_from_value(config, geometry, val) for key, val in values.items()}
    raise TypeError(f"Range または Mapping が必要です: {type(values).__name__}")


def value_from_position(config: RangeConfig, geometry: TrackGeometry, position: Point) -> float:
    """位置を値へ変換する（`position_from_value` の逆変換）。"""
    fraction = percentage_from_position(config, geometry, position)
    if config.log_scale:
        result = log_value_from_percentage(config, fraction * 100)
    else:
        lo = float(config.min_value)
        hi = float(config.max_value)
        result = lo + (hi - lo) * fraction
    _debug("value_from_position", result, x=position.x, width=geometry.width)
    return result


# --- 位置抽出 ---
def position_from_event(geometry: TrackGeometry, event: Any) -> Point:
    """ポインタ/タッチイベントからトラック上の位置を得る。

    x は常に [0, width] に収まる（ドラッグ中にポインタがトラック外へ出ても境界に留まる）。
    """
    width = max(float(geometry.width), 0.0)
    client_x = client_x_of(event)
    position = Point(x=_clamp(client_x - float(geometry.left), 0.0, width), y=0.0)
    _debug("position_from_event", position, client_x=client_x, left=geometry.left)
    return position


# --- 値抽出 / ステップ ---
def values_from_props(config: RangeConfig) -> HandleValues:
    """構成から現在値を取り出す。

    - 複数モード: `value` が空でない数値 Mapping ならその浅いコピー、そうでなければ `default_value` の
      浅いコピー（どちらも Mapping でなければ空 dict）。戻り値を変更しても構成には影響しない。
    - 単一モード: `Range(min=min_value, max=value or default_value)`。
    """
    if config.multi_value:
        values = config.value
        if not is_number_mapping(values):
            values = config.default_value
        if not isinstance(values, Mapping):
            return {}
        return dict(values)

    value = config.value if is_number(config.value) else config.default_value
    return Range(min=config.min_value, max=value)


def step_value_from_value(config: RangeConfig, value: float) -> float:
    """値を最も近い `step` の倍数へ丸める（クランプはしない）。

    丸めは四捨五入（x.5 は正方向）。step が正でない場合は値をそのまま返す。
    """
    step = config.step
    if not is_number(step) or step <= 0:
        return value
    value = float(value)
    if not math.isfinite(value):
        return 0.0
    q = value / step
    r = math.floor(q)
    if q - r >= 0.5:
        r += 1
    return r * step


__all__ = [
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
