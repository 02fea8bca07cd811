"""
Tests for startup validation
"""

from unittest.mock import AsyncMock, patch

import pytest

from portfolio_api import validation
from portfolio_api.config import settings


@pytest.fixture
def production(monkeypatch):
    monkeypatch.setattr(settings, "environment", "production")
    monkeypatch.setattr(settings, "debug", False)
    monkeypatch.setattr(settings, "cors_origins", ["https://portfolio.example"])
    return monkeypatch


def test_development_has_no_deployment_warnings(monkeypatch):
    monkeypatch.setattr(settings, "environment", "development")
    monkeypatch.setattr(settings, "debug", True)

    assert validation.validate_deployment_configuration()["warnings"] == []


def test_locked_down_production_has_no_warnings(production):
    assert validation.validate_deployment_configuration()["warnings"] == []


def test_production_debug_and_open_cors_are_flagged(production):
    production.setattr(settings, "debug", True)
    production.setattr(settings, "cors_origins", ["*"])

    results = validation.validate_deployment_configuration()

    assert results["valid"] is True
    assert len(results["warnings"]) == 2
    assert any("GraphiQL" in warning for warning in results["warnings"])


@pytest.mark.asyncio
async def test_startup_results_include_environment(production, owner_email):
    production.setattr(settings, "cors_origins", ["*"])

    with patch.object(
        validation, "check_database_connection", AsyncMock(return_value=(True, None))
    ):
        results = await validation.validate_startup_configuration()

    assert results["overall_valid"] is True
    assert results["environment"] == {"environment": "production", "debug": False}
    assert any(
        "PORTFOLIO_CORS_ORIGINS" in recommendation
        for recommendation in validation.get_startup_recommendations(results)
    )


def test_unset_owner_email_is_a_warning_not_an_error(monkeypatch):
    monkeypatch.setattr(settings, "user_email", None)

    results = validation.validate_owner_configuration()

    assert results["valid"] is True
    assert results["warnings"]
