"""
Pytest configuration for fuzzy_systems tests.
"""

import pytest

from fuzzy_systems import Hamacher1
from fuzzy_systems.config import Config
from fuzzy_systems.expr.tags import TagA, TagB, TagC, TagD


@pytest.fixture
def abc():
    """The three numeric atoms used throughout: 0.1, 0.6, 0.4 under Hamacher1."""
    return Hamacher1.atom(0.1), Hamacher1.atom(0.6), Hamacher1.atom(0.4)


@pytest.fixture
def tagged_abcd():
    """Four tagged leaves rendering as a, b, c, d."""
    return (
        Hamacher1.atom(0.1).with_label(TagA),
        Hamacher1.atom(0.2).with_label(TagB),
        Hamacher1.atom(0.3).with_label(TagC),
        Hamacher1.atom(0.4).with_label(TagD),
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Isolated configuration: no FUZZY_* variables, no .env file in the
    working directory, fresh Config singleton.
    """
    for key in ("FUZZY_LOG_LEVEL", "FUZZY_LOG_DIR", "FUZZY_LOG_TO_FILE",
                "FUZZY_DEFAULT_OPSET", "FUZZY_LABEL_ATOMS"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    Config._instance = None
    yield tmp_path
    Config._instance = None
