"""Test and lint setup."""

import nox

PYTHON_VERSIONS = ["3.9", "3.10", "3.11", "3.12"]


@nox.session(python=PYTHON_VERSIONS, tags=["lint"])
def lint(session):
    session.install(".[lint]")
    session.run("black", "--check", ".")
    session.run("ruff", "check", ".")


@nox.session(python=PYTHON_VERSIONS, tags=["lint"])
def mypy(session):
    """Run mypy"""
    # all required packages should be provided through the optional "mypy" dependency
    session.install(".[mypy]")
    session.run("mypy", ".")


@nox.session(python=PYTHON_VERSIONS, tags=["test"])
def pytest(session):
    session.install(".[test]")
    session.run("pytest")
