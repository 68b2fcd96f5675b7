"""Tests for the packaging metadata."""
import os
import re

ROOT = os.path.join(os.path.dirname(__file__), "..")


def _pyproject():
    with open(os.path.join(ROOT, "pyproject.toml"), encoding="utf-8") as f:
        return f.read()


def test_readme_if_declared_ships_with_the_project():
    match = re.search(r'^readme\s*=\s*"([^"]+)"', _pyproject(), re.MULTILINE)
    if match:
        assert match.group(1).upper().startswith("README")
        assert os.path.isfile(os.path.join(ROOT, match.group(1)))


def test_every_top_level_module_is_installed():
    text = _pyproject()
    for name in ("main", "cli", "settings"):
        assert f'"{name}"' in text
    for package in ("algorithms", "engine", "store", "ui"):
        assert f'"{package}"' in text
