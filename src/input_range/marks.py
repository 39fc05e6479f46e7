"""
どこで: `input_range.marks`
何を: トラック目盛り（等間隔の百分率に対応する値と位置）を NumPy でまとめて計算する。
なぜ: 対数スケールのトラックでも目盛りを見た目上等間隔に並べ、ラベル用の値を一括で得るため。

補足:
- 規則は `value_transformer` と同じ（値は [min, max] にクランプ、幅 0 のトラックでは位置 0）。
- 対数スケールの目盛り値は等比数列になる（先頭は `min_value`、min_value <= 0 なら 1 からの等比）。
"""

from __future__ import annotations

import numpy as np

from .state import RangeConfig, TrackGeometry
from .value_transformer import _log_bounds


def mark_values(config: RangeConfig, count: int) -> np.ndarray:
    """百分率空間で等間隔な `count` 個の値を返す（両端は min_value / max_value）。"""
    if count < 2:
        raise ValueError(f"count は 2 以上である必要があります: {count}")
    lo = float(config.min_value)
    hi = float(config.max_value)
    fractions = np.linspace(0.0, 1.0, int(count), dtype=np.float64)
    if not config.log_scale:
        return lo + (hi - lo) * fractions
    bounds = _log_bounds(config)
    if bounds is None:
        return np.zeros_like(fractions)
    minv, maxv = bounds
    values = np.exp(minv + (maxv - minv) * fractions)
    # 先頭は構成上の下限に揃える（対数の内側で 1 に置き換えた場合も含む）
    values[0] = lo
    return values


def mark_positions(config: RangeConfig, geometry: TrackGeometry, values: np.ndarray) -> np.ndarray:
    """値の配列をトラック上の x 座標配列へ変換する（`position_from_value` のベクトル版）。"""
    arr = np.asarray(values, dtype=np.float64)
    width = float(geometry.width)
    lo = float(config.min_value)
    hi = float(config.max_value)
    clamped = np.minimum(np.maximum(arr, lo), hi)

    with np.errstate(divide="ignore", invalid="ignore"):
        if config.log_scale:
            bounds = _log_bounds(config)
            if bounds is None or bounds[1] == bounds[0]:
                fractions = np.zeros_like(clamped)
            else:
                minv, maxv = bounds
                fractions = (np.log(clamped) - minv) / (maxv - minv)
                # 0 以下の値は ln が未定義なので 0 扱い
                fractions = np.where(clamped > 0, fractions, 0.0)
                fractions = np.clip(fractions, 0.0, 1.0)
        elif hi == lo:
            fractions = np.zeros_like(clamped)
        else:
            fractions = (clamped - lo) / (hi - lo)

    fractions = np.where(np.isfinite(fractions), fractions, 0.0)
    return fractions * width


__all__ = ["mark_values", "mark_positions"]
