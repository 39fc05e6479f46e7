"""スライダー構成の目盛り値/比率/位置を一覧する開発用コマンド（`input-range-probe`）。

前提: 事前に `pip install -e .[dev]` を実行しておく。既定値は `configs/default.yaml` の
`range` / `probe` セクションから読み、CLI 引数で上書きする。
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Sequence

from common.logging import setup_default_logging
from common.settings import get as get_settings
from util.utils import load_config, range_defaults

from .marks import mark_positions, mark_values
from .state import ConfigError, RangeConfig, TrackGeometry, validate_config
from .value_transformer import percentage_from_value

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print mark values and track positions for a slider.")
    parser.add_argument("--min", dest="min_value", type=float, help="minimum value")
    parser.add_argument("--max", dest="max_value", type=float, help="maximum value")
    parser.add_argument("--step", type=float, help="step size")
    parser.add_argument("--log", dest="log_scale", action="store_true", default=None, help="use log scale")
    parser.add_argument("--width", type=float, help="track width in pixels")
    parser.add_argument("--marks", type=int, help="number of marks (>= 2)")
    parser.add_argument("--json", action="store_true", help="emit JSON instead of text")
    parser.add_argument("--log-level", default=None, help="logging level (default: IR_LOG_LEVEL)")
    return parser


def build_rows(config: RangeConfig, geometry: TrackGeometry, count: int) -> list[dict[str, float]]:
    values = mark_values(config, count)
    positions = mark_positions(config, geometry, values)
    return [
        {
            "value": float(value),
            "percentage": percentage_from_value(config, float(value)),
            "x": float(x),
        }
        for value, x in zip(values, positions)
    ]


def _print_human_readable(config: RangeConfig, rows: Sequence[dict[str, float]]) -> None:
    scale = "log" if config.log_scale else "linear"
    print(f"range [{config.min_value}, {config.max_value}] step={config.step} scale={scale}")
    for row in rows:
        print(f"  {row['value']:>14.4f}  {row['percentage'] * 100:>7.2f}%  x={row['x']:.1f}")


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    loaded = load_config()
    probe_cfg: dict[str, Any] = loaded.get("probe") if isinstance(loaded.get("probe"), dict) else {}
    overrides = {
        k: v
        for k, v in {
            "min_value": args.min_value,
            "max_value": args.max_value,
            "step": args.step,
            "log_scale": args.log_scale,
        }.items()
        if v is not None
    }
    try:
        config = RangeConfig.from_props(overrides, defaults=range_defaults(loaded))
    except ConfigError as exc:
        logger.error("invalid range: %s", exc)
        return 2
    for problem in validate_config(config):
        logger.warning("%s", problem)

    width = args.width if args.width is not None else float(probe_cfg.get("width", 400))
    count = args.marks if args.marks is not None else int(probe_cfg.get("marks", get_settings().DEFAULT_MARKS))
    if count < 2:
        logger.error("--marks must be at least 2, got %d", count)
        return 2

    rows = build_rows(config, TrackGeometry(width=width), count)
    if args.json:
        print(json.dumps(rows, indent=2))
        return 0
    _print_human_readable(config, rows)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
