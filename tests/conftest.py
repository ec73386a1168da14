"""Shared pytest fixtures for npm-updates tests."""

import logging

import pytest

from npm_updates.models import IdentifiedDependency


@pytest.fixture(autouse=True)
def _reset_logging():
    # The CLI points the root handler at CliRunner's temporary stderr.
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)


@pytest.fixture
def snapshot_records():
    return [
        IdentifiedDependency(
            id=0, name="chalk", current="4.1.2", wanted="4.1.2", latest="5.3.0",
            location="node_modules/chalk", type="dependencies",
        ),
        IdentifiedDependency(
            id=1, name="eslint", current="8.0.0", wanted="8.57.0", latest="9.1.0",
            location="node_modules/eslint", type="devDependencies",
        ),
        IdentifiedDependency(
            id=2, name="fsevents", current="2.3.2", wanted="2.3.3", latest="2.3.3",
            location="node_modules/fsevents", type="optionalDependencies",
        ),
    ]


@pytest.fixture
def lodash_outdated():
    return (
        '{"lodash":{"current":"4.0.0","wanted":"4.1.0","latest":"5.0.0",'
        '"location":"node_modules/lodash","type":"dependencies"}}'
    )
