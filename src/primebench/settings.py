from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.models import PoolKind, Range
from .core.utils import hardware_concurrency


class Settings(BaseSettings):
    # ---- scan range (inclusive) ----
    start: int = 1
    end: int = 1_000_000

    # ---- benchmark loop ----
    test_runs: int = Field(default=5, ge=1)
    workers: Optional[int] = Field(default=None, ge=1)  # None -> os.cpu_count()
    pool: PoolKind = PoolKind.PROCESS
    join_timeout_s: float = Field(default=60.0, gt=0)

    # ---- logging ----
    log_level: str = "INFO"
    log_json: bool = True

    # env prefix PBENCH_*
    model_config = SettingsConfigDict(env_prefix="PBENCH_", extra="ignore")

    @model_validator(mode="after")
    def _check_range(self) -> "Settings":
        if self.start > self.end:
            raise ValueError(f"start ({self.start}) must be <= end ({self.end})")
        return self

    @property
    def range(self) -> Range:
        return Range(self.start, self.end)

    @property
    def worker_count(self) -> int:
        return self.workers or hardware_concurrency()


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    if not isinstance(data, dict):
        return {}
    # accept a top-level "benchmark:" block as well as flat keys
    bench = data.get("benchmark")
    if isinstance(bench, dict):
        data = {**{k: v for k, v in data.items() if k != "benchmark"}, **bench}
    return data


def apply_overrides(s: Settings, **overrides: Any) -> Settings:
    """Return a re-validated copy of s with the non-None overrides applied."""
    update = {k: v for k, v in overrides.items() if v is not None}
    if not update:
        return s
    return Settings(**{**s.model_dump(), **update})


def load_settings(config_path: Optional[Path] = None) -> Settings:
    # 0) base values from env PBENCH_*
    s = Settings()

    # 1) conf/primebench.yaml (or PRIMEBENCH_CONF), optional
    path = config_path or Path(os.environ.get("PRIMEBENCH_CONF", "conf/primebench.yaml"))
    data = _read_yaml(path)

    # 2) merge the YAML keys we know about
    known = {k: v for k, v in data.items() if k in Settings.model_fields}
    return apply_overrides(s, **known)
