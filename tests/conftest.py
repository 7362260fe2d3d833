# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared result sets shaped like the output of pipeline stages.
# ==============================================

import pytest

from stage_inspector.config import reset_config


@pytest.fixture
def sample_record() -> dict:
    """A nested document like a single stage result."""
    return {
        "_id": "65a1f0c2e4b0a1b2c3d4e5f6",
        "username": "johndoe",
        "steps": 11994,
        "is_active": True,
        "metadata": {
            "sensor_data": {"version": "2.1", "readings": [10, 8, 10]},
            "tags": ["fitness"],
        },
    }


@pytest.fixture
def grouped_results() -> list:
    """Output of a $group stage."""
    return [
        {"_id": "electronics", "count": 10, "avg_price": 199.5},
        {"_id": "books", "count": 20, "avg_price": 12.0},
        {"_id": "toys", "count": 5, "avg_price": 25.25},
    ]


@pytest.fixture
def time_series_results() -> list:
    """Daily totals, deliberately out of order."""
    return [
        {"date": "2023-01-03", "value": 120},
        {"date": "2023-01-01", "value": 100},
        {"date": "2023-01-02", "value": 150},
    ]


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Keep configuration from leaking between tests."""
    for name in ("MAX_DOCUMENT_DEPTH", "CHART_PALETTE", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
