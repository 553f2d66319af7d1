"""
Behave environment configuration for PorkDyn integration tests.
"""

import logging

from porkdyn.core.dns_manager import DNSManager
from porkdyn.providers.mock_provider import MockDNSProvider

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.test_config = {
        "dns_providers": {"mock": {}},
        "default_provider": "mock",
        "reconciliation": {"parallel": False},
    }
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Give each scenario a fresh in-memory provider."""
    context.provider = MockDNSProvider()
    context.dns_manager = DNSManager(context.test_config, provider=context.provider)
    context.credentials = {}
    context.result = None
    context.error = None

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Log the end of each test scenario."""
    logger.info(f"Completed scenario: {scenario.name}")
