"""Checks on the distribution metadata in pyproject.toml."""

import tomllib
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def test_readme_is_project_readme():
    with (PROJECT_ROOT / "pyproject.toml").open("rb") as f:
        project = tomllib.load(f)["project"]

    readme = PROJECT_ROOT / project["readme"]
    assert readme.name == "README.md"
    assert readme.read_text(encoding="utf-8").startswith("# finlink")
