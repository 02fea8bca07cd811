"""
Startup validation for the Portfolio API.

Only missing configuration is fatal, and that already fails when the
settings are loaded. The checks here report problems that affect
individual requests (an unreachable database, an unset owner email)
without stopping the server.
"""

from __future__ import annotations

from typing import Any

from .config import settings
from .database.connection import check_database_connection
from .logging import get_logger

logger = get_logger(__name__)


async def validate_database_connection() -> dict[str, Any]:
    """
    Validate that the database is accessible and responsive.

    Returns a dictionary with validation results and connection details.
    """
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "connection_info": None,
    }

    success, error_message = await check_database_connection()

    if success:
        results["connection_info"] = {
            "status": "connected",
            "database": settings.database_name,
        }
        logger.info("Database connection validation successful")
    else:
        results["valid"] = False
        results["errors"].append(error_message)
        logger.error("Database connection validation failed", error=error_message)

    return results


def validate_owner_configuration() -> dict[str, Any]:
    """Check that queries are scoped to a real owner email."""
    results: dict[str, Any] = {"valid": True, "warnings": [], "errors": []}

    if not settings.user_email:
        results["warnings"].append(
            "USER_EMAIL is not set; queries are scoped to a placeholder and will return no content"
        )
    elif "@" not in settings.user_email:
        results["warnings"].append(f"USER_EMAIL {settings.user_email!r} does not look like an email")

    for warning in results["warnings"]:
        logger.warning("Owner configuration warning", warning=warning)

    return results


def validate_deployment_configuration() -> dict[str, Any]:
    """Flag development conveniences left on outside development."""
    results: dict[str, Any] = {"valid": True, "warnings": [], "errors": []}

    if settings.environment.lower() in ("production", "prod"):
        if settings.debug:
            results["warnings"].append(
                "Debug mode is enabled in production; GraphiQL is served at /graphql"
            )
        if "*" in settings.cors_origins:
            results["warnings"].append("CORS allows any origin in production")
    else:
        logger.info(
            "Deployment validation: non-production environment",
            environment=settings.environment,
        )

    for warning in results["warnings"]:
        logger.warning("Deployment configuration warning", warning=warning)

    return results


async def validate_startup_configuration() -> dict[str, Any]:
    """Run all startup checks and collect their results."""
    database = await validate_database_connection()
    owner = validate_owner_configuration()
    deployment = validate_deployment_configuration()

    return {
        "database": database,
        "owner": owner,
        "deployment": deployment,
        "environment": {"environment": settings.environment, "debug": settings.debug},
        "overall_valid": database["valid"] and owner["valid"],
    }


def get_startup_recommendations(validation_results: dict[str, Any]) -> list[str]:
    """Turn validation results into short operator hints."""
    recommendations: list[str] = []

    if not validation_results["database"]["valid"]:
        recommendations.append(
            "Check MONGO_DB_URI and that the MongoDB server is reachable; "
            "GraphQL fields will return errors until it is"
        )

    if validation_results["owner"]["warnings"]:
        recommendations.append("Set USER_EMAIL to the email of the portfolio owner")

    if validation_results.get("deployment", {}).get("warnings"):
        recommendations.append(
            "Disable PORTFOLIO_DEBUG and restrict PORTFOLIO_CORS_ORIGINS before serving production traffic"
        )

    return recommendations
