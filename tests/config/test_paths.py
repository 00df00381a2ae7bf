"""Tests for configuration path resolution helpers."""

from pathlib import Path

from datafilter.config.paths import default_config_path, default_log_dir, resolve_overridable_path


def test_default_log_dir(portable_repo_root: Path) -> None:
    """Log files live under the repository logs/ folder."""

    assert default_log_dir() == portable_repo_root / "logs"


def test_default_config_path_under_repo_root(portable_repo_root: Path) -> None:
    assert default_config_path(env={}) == portable_repo_root / "config" / "config.toml"


def test_default_config_path_env_override(tmp_path: Path) -> None:
    custom = tmp_path / "custom.toml"

    assert default_config_path(env={"DATAFILTER_CONFIG": str(custom)}) == custom


def test_blank_env_value_is_ignored(portable_repo_root: Path) -> None:
    resolved = default_config_path(env={"DATAFILTER_CONFIG": "   "})

    assert resolved == portable_repo_root / "config" / "config.toml"


def test_env_var_wins_over_default(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        env={"SOME_VAR": str(tmp_path / "env.toml")},
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == tmp_path / "env.toml"


def test_default_used_without_env_var(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        env={"SOME_VAR": str(tmp_path / "env.toml")},
        env_var=None,
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == tmp_path / "default.toml"
