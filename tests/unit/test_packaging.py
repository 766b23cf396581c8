"""Packaging metadata checks for pyproject.toml."""

import tomllib
from fnmatch import fnmatch
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def _packages() -> list[str]:
    """Dotted names of every directory under ROOT that has an __init__.py."""
    return [
        ".".join(init.parent.relative_to(ROOT).parts)
        for init in ROOT.rglob("__init__.py")
        if "tests" not in init.parts
    ]


def test_every_included_pattern_matches_a_package() -> None:
    config = tomllib.loads((ROOT / "pyproject.toml").read_text())
    include = config["tool"]["setuptools"]["packages"]["find"]["include"]
    packages = _packages()
    for pattern in include:
        assert any(fnmatch(name, pattern) for name in packages), pattern


def test_migration_template_is_shipped() -> None:
    config = tomllib.loads((ROOT / "pyproject.toml").read_text())
    for package, files in config["tool"]["setuptools"]["package-data"].items():
        base = ROOT.joinpath(*package.split("."))
        for name in files:
            assert (base / name).is_file(), f"{package}: {name}"
