# topmark:header:start
#
#   project      : AraReport
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""AraReport developer automation.

Sessions:
  - `lint`: ruff checks.
  - `format_check` / `format`: verify or apply ruff formatting.
  - `qa`: pytest (fast tests) and pyright, once per supported Python.
  - `property_test`: the slow hypothesis suites only.
  - `package_check`: build the distributions and validate their metadata.

Examples:
  - `nox -s qa-3.12 -- -k emitter`
  - `nox -s property_test`
"""

from __future__ import annotations

import pathlib
import sys
from typing import Any

import nox
import tomlkit

PYPROJECT: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
CURRENT_PYTHON: str = f"{sys.version_info.major}.{sys.version_info.minor}"
CLASSIFIER_PREFIX: str = "Programming Language :: Python :: "


def supported_pythons() -> list[str]:
    """Return the ``X.Y`` versions listed in the trove classifiers, oldest first."""
    project: Any = tomlkit.parse(PYPROJECT.read_text(encoding="utf-8")).unwrap().get("project", {})
    versions: set[tuple[int, int]] = set()
    for classifier in project.get("classifiers", []):
        major, _, minor = classifier.removeprefix(CLASSIFIER_PREFIX).partition(".")
        if classifier.startswith(CLASSIFIER_PREFIX) and major.isdigit() and minor.isdigit():
            versions.add((int(major), int(minor)))
    return [f"{major}.{minor}" for major, minor in sorted(versions)] or [CURRENT_PYTHON]


PYTHONS: list[str] = supported_pythons()

nox.options.sessions = ["lint", "format_check"]


@nox.session
def lint(session: nox.Session) -> None:
    """Run ruff."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Fail if ruff would reformat anything."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Apply ruff formatting in place."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", ".")


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Fast tests plus strict type checking for one interpreter."""
    session.install("-e", ".[dev]")
    session.run("pytest", "-q", "-m", "not hypothesis_slow", *session.posargs)
    session.run("pyright", "--pythonversion", str(session.python))


@nox.session(python=CURRENT_PYTHON)
def property_test(session: nox.Session) -> None:
    """Slow hypothesis suites."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "-m", "hypothesis_slow", *session.posargs)


@nox.session(python=CURRENT_PYTHON)
def package_check(session: nox.Session) -> None:
    """Build sdist and wheel into a fresh ``dist/`` and run ``twine check``."""
    session.install("build", "twine")
    dist: pathlib.Path = pathlib.Path("dist")
    for stale in dist.glob("*"):
        stale.unlink()
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", *(str(path) for path in dist.glob("*")))
