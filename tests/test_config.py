# tests/test_config.py

import pytest

from adaptive_core.config import AdaptiveSettings, load_settings
from adaptive_core.difficulty_policy import DifficultyPolicy


def test_defaults_without_environment(tmp_path):
    settings = load_settings(tmp_path / "missing.env")

    assert settings == AdaptiveSettings()
    assert settings.policy() == DifficultyPolicy()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("ADAPTIVE_UPPER_THRESHOLD", "0.9")
    monkeypatch.setenv("ADAPTIVE_LOWER_THRESHOLD", "0.5")
    monkeypatch.setenv("ADAPTIVE_WINDOW", "8")
    monkeypatch.setenv("ADAPTIVE_SEED", "123")
    monkeypatch.setenv("ADAPTIVE_LOG_LEVEL", "debug")

    settings = load_settings(tmp_path / "missing.env")

    assert settings.policy() == DifficultyPolicy(upper_threshold=0.9, lower_threshold=0.5, window=8)
    assert settings.seed == 123
    assert settings.log_level == "DEBUG"


def test_malformed_values_fall_back(monkeypatch, tmp_path):
    monkeypatch.setenv("ADAPTIVE_WINDOW", "five")
    monkeypatch.setenv("ADAPTIVE_UPPER_THRESHOLD", "high")

    settings = load_settings(tmp_path / "missing.env")

    assert settings.window == 5
    assert settings.upper_threshold == 0.85


def test_env_file_is_loaded(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ADAPTIVE_TOP_K=4\nADAPTIVE_PASSING_SCORE=75\n", encoding="utf-8")

    settings = load_settings(env_file)

    assert settings.top_k == 4
    assert settings.passing_score == 75.0


def test_invalid_thresholds_surface_from_policy(monkeypatch, tmp_path):
    monkeypatch.setenv("ADAPTIVE_UPPER_THRESHOLD", "0.3")

    settings = load_settings(tmp_path / "missing.env")

    with pytest.raises(ValueError):
        settings.policy()
