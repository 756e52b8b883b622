"""Pytest configuration and shared fixtures for cjk-fontsel tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner

ALIASES = {
    "sans": {"noto": "  Noto Sans CJK JP\n", "ipa": "IPAexGothic\n"},
    "serif": {"noto": "Noto Serif CJK JP\n", "ipa": "IPAexMincho"},
    "monospace": {"sarasa": "Sarasa Mono J\n"},
}


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config root at a temporary directory.

    Also clears cjk-fontsel environment overrides so a developer's own
    settings never leak into the tests.
    """
    config_home = tmp_path / "config-home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for name in ("CJK_FONTSEL_CONFIG", "CJK_FONTSEL_ALIAS_DIR", "CJK_FONTSEL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return config_home


@pytest.fixture
def alias_root(tmp_path: Path) -> Path:
    """Create an alias tree with a few known aliases per category."""
    root = tmp_path / "aliases"
    for category, entries in ALIASES.items():
        category_dir = root / category
        category_dir.mkdir(parents=True)
        for alias, content in entries.items():
            (category_dir / alias).write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner instance for testing CLI commands."""
    return CliRunner()
