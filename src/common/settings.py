"""
どこで: `common.settings`
何を: プロジェクトの環境変数（`IR_*`）を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # 変換ログ（DEBUG）
    DEBUG_TRANSFORM: bool = False

    # ランナー/CLI のログレベル
    LOG_LEVEL: str = "INFO"

    # 目盛り数の既定値（probe）
    DEFAULT_MARKS: int = 5


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int` を使用。
    - 目盛り数は 2 未満にならないよう下限丸めする。
    """
    _settings.DEBUG_TRANSFORM = env_bool("IR_DEBUG_TRANSFORM", False)
    _settings.LOG_LEVEL = env_str("IR_LOG_LEVEL", "INFO").upper()
    _settings.DEFAULT_MARKS = env_int("IR_DEFAULT_MARKS", 5, min_value=2) or 5


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
