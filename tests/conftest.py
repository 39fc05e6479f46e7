"""共通フィクスチャ。

- 代表的なスライダー構成（線形 0..100 / 対数 1..1000）
- 幅 200px のトラック
- 環境変数で書き換えた設定を各テスト後に既定へ戻す
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from input_range.state import RangeConfig, TrackGeometry


@pytest.fixture(autouse=True)
def reset_settings() -> Iterator[None]:
    yield
    settings.reload_from_env()


@pytest.fixture()
def linear_config() -> RangeConfig:
    return RangeConfig(min_value=0, max_value=100, step=1)


@pytest.fixture()
def log_config() -> RangeConfig:
    return RangeConfig(min_value=1, max_value=1000, step=1, log_scale=True)


@pytest.fixture()
def track() -> TrackGeometry:
    return TrackGeometry(width=200, left=0)
