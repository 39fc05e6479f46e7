"""
どこで: `input_range` のデータモデル層。
何を: Point/Range/TrackGeometry と、スライダー構成 `RangeConfig`（props の解釈/検証を含む）を定義。
なぜ: 変換レイヤ（value_transformer）が読むだけの入力を、型付き・不変の値として共有するため。

補足:
- 値の形は「単一（`Range`）」と「複数ハンドル（`dict[HandleId, float]`）」のタグ付き分岐で扱う。
- `RangeConfig` 自体は検証しない（退化した構成も変換レイヤはゼロへフォールバックして扱う）。
  検証は `from_props()`（例外）と `validate_config()`（問題の列挙）で明示的に行う。
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Mapping, Union

HandleId = str

# 構成キーの別名（ウィジェット props の camelCase → snake_case）
_PROP_ALIASES: dict[str, str] = {
    "minValue": "min_value",
    "maxValue": "max_value",
    "logScale": "log_scale",
    "defaultValue": "default_value",
    "allowSameValues": "allow_same_values",
    "isMultiValue": "multi_value",
    "multiValue": "multi_value",
}

_BUILTIN_DEFAULTS: dict[str, Any] = {
    "min_value": 0,
    "max_value": 10,
    "step": 1,
    "log_scale": False,
    "allow_same_values": False,
    "disabled": False,
}


class ConfigError(ValueError):
    """スライダーを表せない props が与えられた。"""


def is_number(value: Any) -> bool:
    """bool を除く実数（int/float/NumPy スカラー/Fraction など）なら True。"""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_number_mapping(value: Any) -> bool:
    """空でない `HandleId -> 数値` の Mapping なら True。"""
    if not isinstance(value, Mapping) or not value:
        return False
    return all(is_number(v) for v in value.values())


@dataclass(frozen=True)
class Point:
    """トラック原点からのピクセル座標。単一軸なので y は常に 0。"""

    x: float
    y: float = 0.0


@dataclass(frozen=True)
class Range:
    """2 つの値（百分率またはドメイン値、呼び出し側に依存）。"""

    min: Any
    max: Any


# 単一モードは Range、複数ハンドルは dict（キー順 = ハンドル順）
HandleValues = Union[Range, dict[HandleId, float]]


@dataclass(frozen=True)
class TrackGeometry:
    """描画済みトラックの外接矩形スナップショット（幅と左端）。"""

    width: float
    left: float = 0.0

    @classmethod
    def from_rect(cls, rect: Any) -> "TrackGeometry":
        """`width`/`left` を持つオブジェクトまたは Mapping から生成する。"""
        if isinstance(rect, Mapping):
            width = rect.get("width", 0.0)
            left = rect.get("left", 0.0)
        else:
            width = getattr(rect, "width", 0.0)
            left = getattr(rect, "left", 0.0)
        return cls(width=float(width or 0.0), left=float(left or 0.0))


@dataclass(frozen=True)
class RangeConfig:
    """スライダー構成。変換レイヤからは読み取り専用。

    - `value` / `default_value` は単一モードで数値、複数モードで `HandleId -> 数値` の Mapping。
    - `allow_same_values` / `disabled` はコントローラのみが参照する。
    """

    min_value: float = 0
    max_value: float = 10
    step: float = 1
    log_scale: bool = False
    multi_value: bool = False
    value: Any = None
    default_value: Any = None
    allow_same_values: bool = False
    disabled: bool = False

    @classmethod
    def from_props(
        cls, props: Mapping[str, Any], *, defaults: Mapping[str, Any] | None = None
    ) -> "RangeConfig":
        """ウィジェット props（camelCase/snake_case）から構成を生成する。

        優先順: `props` > `defaults`（通常は `util.utils.range_defaults()`）> 組み込み既定値。
        `multi_value` 未指定時は `value`/`default_value` が Mapping かどうかで推定する。

        Raises
        ------
        ConfigError
            境界が数値でない、`min_value >= max_value`、`step <= 0` のいずれか。
        """
        merged: dict[str, Any] = dict(_BUILTIN_DEFAULTS)
        for source in (defaults or {}, props):
            for key, val in source.items():
                merged[_PROP_ALIASES.get(key, key)] = val

        min_value = merged.get("min_value")
        max_value = merged.get("max_value")
        step = merged.get("step")
        if not is_number(min_value) or not is_number(max_value):
            raise ConfigError(
                f"min_value/max_value は数値である必要があります: {min_value!r}, {max_value!r}"
            )
        if not min_value < max_value:
            raise ConfigError(f"min_value < max_value である必要があります: {min_value} >= {max_value}")
        if not is_number(step) or step <= 0:
            raise ConfigError(f"step は正の数値である必要があります: {step!r}")

        value = merged.get("value")
        default_value = merged.get("default_value")
        multi_value = merged.get("multi_value")
        if multi_value is None:
            multi_value = isinstance(value, Mapping) or isinstance(default_value, Mapping)

        return cls(
            min_value=min_value,
            max_value=max_value,
            step=step,
            log_scale=bool(merged.get("log_scale")),
            multi_value=bool(multi_value),
            value=dict(value) if isinstance(value, Mapping) else value,
            default_value=dict(default_value) if isinstance(default_value, Mapping) else default_value,
            allow_same_values=bool(merged.get("allow_same_values")),
            disabled=bool(merged.get("disabled")),
        )


def validate_config(config: RangeConfig) -> list[str]:
    """構成の問題点を人間向けの文字列で列挙する（例外は投げない）。"""
    problems: list[str] = []
    if not is_number(config.min_value) or not is_number(config.max_value):
        problems.append("min_value/max_value must be numbers")
        return problems
    if config.min_value >= config.max_value:
        problems.append(f"min_value ({config.min_value}) must be less than max_value ({config.max_value})")
    if not is_number(config.step) or config.step <= 0:
        problems.append(f"step must be a positive number, got {config.step!r}")
    if config.log_scale and config.max_value <= 0:
        problems.append("log_scale requires a positive max_value")

    for name in ("value", "default_value"):
        raw = getattr(config, name)
        if raw is None:
            continue
        if config.multi_value:
            if not isinstance(raw, Mapping):
                problems.append(f"{name} must be a mapping of handle values in multi-value mode")
                continue
            items = [(f"{name}[{key}]", val) for key, val in raw.items()]
        else:
            items = [(name, raw)]
        for label, val in items:
            if not is_number(val) or math.isnan(val):
                problems.append(f"{label} is not a number: {val!r}")
            elif not config.min_value <= val <= config.max_value:
                problems.append(
                    f"{label}={val} is outside [{config.min_value}, {config.max_value}]"
                )
    return problems


__all__ = [
    "ConfigError",
    "HandleId",
    "HandleValues",
    "Point",
    "Range",
    "RangeConfig",
    "TrackGeometry",
    "is_number",
    "is_number_mapping",
    "validate_config",
]
