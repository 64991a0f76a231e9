# tests/conftest.py

"""
Pytest Fixtures - Shared transformers and settings for all scoring tests

REFERENCE CONFIGURATIONS:
- Friends:     max 100, 80 points at 10, no threshold
- Thresholded: max 100, 80 points at 10, raw scores below 5 score 0
"""

import pytest

from reco.config import get_settings
from reco.scoring.pareto import ParetoScoreTransformer


# =============================================================================
# TRANSFORMER FIXTURES
# =============================================================================

@pytest.fixture
def friends_transformer():
    """Common-friends style transformer: 80 of 100 points at 10 friends."""
    return ParetoScoreTransformer(max_score=100, eighty_percent_level=10)


@pytest.fixture
def thresholded_transformer():
    """Same curve, but raw scores under 5 are suppressed."""
    return ParetoScoreTransformer(
        max_score=100, eighty_percent_level=10, minimum_threshold=5
    )


@pytest.fixture
def item():
    """Opaque recommended item; transformers must not care what it is."""
    return {"id": "person-42", "name": "Adam"}


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Isolate settings from the developer's shell and any local .env file.

    Runs from an empty directory, strips the scoring variables and clears the
    cached settings before and after the test.
    """
    monkeypatch.chdir(tmp_path)
    for name in (
        "APP_ENV",
        "PARETO_MAX_SCORE",
        "PARETO_EIGHTY_PERCENT_LEVEL",
        "PARETO_MINIMUM_THRESHOLD",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
