"""
どこで: `input_range.events`
何を: ポインタ/タッチイベントの最小表現と、イベントから `client_x` を取り出すヘルパ。
なぜ: GUI ツールキットごとのイベント型に依存せず、変換レイヤが同じ規則で位置を得られるようにするため。

補足:
- イベントは属性（`client_x` / `clientX`）でも Mapping（`"clientX"` / `"client_x"`）でもよい。
- タッチイベントは `touches` の先頭の接点のみを使う。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

_CLIENT_X_KEYS = ("client_x", "clientX")


@dataclass(frozen=True)
class PointerEvent:
    """マウス等のポインタイベント（ビューポート座標）。"""

    client_x: float
    client_y: float = 0.0


@dataclass(frozen=True)
class TouchEvent:
    """マルチタッチイベント。先頭の接点が位置を決める。"""

    touches: Sequence[PointerEvent] = field(default_factory=tuple)


def _lookup(obj: Any, keys: Sequence[str]) -> Any:
    if isinstance(obj, Mapping):
        for k in keys:
            if k in obj:
                return obj[k]
        return None
    for k in keys:
        val = getattr(obj, k, None)
        if val is not None:
            return val
    return None


def contact_of(event: Any) -> Any:
    """位置を持つ接点を返す（タッチなら先頭の接点、それ以外はイベント自身）。"""
    touches = _lookup(event, ("touches",))
    if touches:
        return touches[0]
    return event


def client_x_of(event: Any) -> float:
    """イベントの `client_x` を float で返す。取り出せなければ 0.0。"""
    raw = _lookup(contact_of(event), _CLIENT_X_KEYS)
    try:
        val = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return val if math.isfinite(val) else 0.0


__all__ = ["PointerEvent", "TouchEvent", "client_x_of", "contact_of"]
