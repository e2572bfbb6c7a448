"""
Logfire observability configuration for slidemend.

Provides tracing for:
- Build attempts (normal, stripped, minimal fallback)
- Markup repair passes run by the orchestrator

Usage:
    # At CLI startup
    from slidemend.core.observability import setup_logfire
    setup_logfire()

    # In services
    lf = get_logfire()
    with lf.span("build_attempt", strategy="normal"):
        lf.info("Build finished with {returncode}", returncode=result.returncode)

Environment Variables:
    LOGFIRE_TOKEN: Your Logfire write token (spans are only exported when set)
    LOGFIRE_PROJECT_NAME: Project name in Logfire dashboard
    LOGFIRE_ENVIRONMENT: Environment name (development, staging, production)
"""

import os
import logging
from typing import Optional

import logfire

logger = logging.getLogger(__name__)

_logfire_configured = False
_logfire_exporting = False


def setup_logfire(
    project_name: Optional[str] = None,
    environment: Optional[str] = None,
    service_name: str = "slidemend"
) -> bool:
    """
    Configure Logfire for observability.

    Without LOGFIRE_TOKEN logfire is still configured, but locally and
    silently, so spans in the services cost nothing and print nothing.

    Args:
        project_name: Logfire project name (or LOGFIRE_PROJECT_NAME env var)
        environment: Environment name (or LOGFIRE_ENVIRONMENT env var)
        service_name: Service name for tracing

    Returns:
        True if spans are exported to Logfire, False if configured locally only
    """
    global _logfire_configured, _logfire_exporting

    if _logfire_configured:
        logger.debug("Logfire already configured")
        return _logfire_exporting

    token = os.environ.get("LOGFIRE_TOKEN")
    env = environment or os.environ.get("LOGFIRE_ENVIRONMENT", "development")
    project = project_name or os.environ.get("LOGFIRE_PROJECT_NAME", "slidemend")

    if token:
        try:
            logfire.configure(
                token=token,
                service_name=service_name,
                environment=env,
                send_to_logfire=True,
                console=False,
            )
            _logfire_configured = True
            _logfire_exporting = True
            logger.info(f"Logfire configured: project={project}, environment={env}")
            return True
        except Exception as e:
            logger.error(f"Failed to configure Logfire: {e}")
    else:
        logger.info("LOGFIRE_TOKEN not set, Logfire configured without export")

    logfire.configure(
        send_to_logfire=False,
        console=False,
        service_name=service_name,
        environment=env,
    )
    _logfire_configured = True
    return False


def get_logfire():
    """
    Get the logfire module, configuring it locally first if needed.

    Usage:
        lf = get_logfire()
        with lf.span("operation"):
            lf.info("message")
    """
    if not _logfire_configured:
        setup_logfire()
    return logfire
