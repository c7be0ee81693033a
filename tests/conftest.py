"""Pytest configuration and fixtures."""

import pytest
from shared.domain.models import Problem
from shared.domain.consts import SolutionFormType
from qaengine.infrastructure.cache import SolutionCache


@pytest.fixture
def cache_path(tmp_path):
    """Path of a YAML cache file inside a per-test directory."""
    return str(tmp_path / "qacache.yaml")


@pytest.fixture
def cache(cache_path):
    """Empty cache that does not persist passwords."""
    return SolutionCache(cache_path)


@pytest.fixture
def port_problem():
    """Unresolved input problem."""
    return Problem(
        id="services.api.port",
        type=SolutionFormType.INPUT,
        desc="port?",
        default="8080",
    )


@pytest.fixture
def port_solution(port_problem):
    """Resolved counterpart of port_problem."""
    return port_problem.with_answer("8080")
