import pytest
from pydantic import ValidationError

from primebench.core.models import PoolKind, Range
from primebench.settings import Settings, apply_overrides, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("PBENCH_START", "PBENCH_END", "PBENCH_TEST_RUNS", "PBENCH_WORKERS", "PBENCH_POOL", "PRIMEBENCH_CONF"):
        monkeypatch.delenv(key, raising=False)


def test_defaults(tmp_path):
    s = load_settings(tmp_path / "missing.yaml")
    assert s.range == Range(1, 1_000_000)
    assert s.test_runs == 5
    assert s.workers is None
    assert s.pool is PoolKind.PROCESS
    assert s.join_timeout_s == 60.0


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("PBENCH_END", "500")
    monkeypatch.setenv("PBENCH_WORKERS", "3")
    monkeypatch.setenv("PBENCH_POOL", "thread")
    s = load_settings(tmp_path / "missing.yaml")
    assert s.end == 500
    assert s.worker_count == 3
    assert s.pool is PoolKind.THREAD


def test_yaml_benchmark_block(tmp_path):
    cfg = tmp_path / "bench.yaml"
    cfg.write_text("benchmark:\n  start: 10\n  end: 20\n  test_runs: 2\nlog_json: false\nunknown: 1\n")
    s = load_settings(cfg)
    assert s.range == Range(10, 20)
    assert s.test_runs == 2
    assert s.log_json is False


def test_conf_path_from_env(monkeypatch, tmp_path):
    cfg = tmp_path / "bench.yaml"
    cfg.write_text("end: 77\n")
    monkeypatch.setenv("PRIMEBENCH_CONF", str(cfg))
    assert load_settings().end == 77


def test_non_mapping_yaml_is_ignored(tmp_path):
    cfg = tmp_path / "bench.yaml"
    cfg.write_text("- 1\n- 2\n")
    assert load_settings(cfg).end == 1_000_000


def test_apply_overrides_skips_none():
    s = Settings(start=1, end=100)
    s2 = apply_overrides(s, start=None, end=50, workers=4)
    assert (s2.start, s2.end, s2.workers) == (1, 50, 4)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"start": 10, "end": 1},
        {"test_runs": 0},
        {"workers": 0},
        {"pool": "fiber"},
        {"join_timeout_s": 0},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        Settings(**kwargs)
