"""
DNS Client - Provider selection

This module builds the configured DNS provider for a request's credentials.
"""

import logging
from typing import Dict

from .base_provider import DNSProvider
from .mock_provider import MockDNSProvider
from .porkbun_provider import PorkbunProvider
from ..exceptions import ConfigError
from ..models import Credentials

logger = logging.getLogger(__name__)


class DNSClient:
    """Creates the DNS provider named in the configuration."""

    def __init__(self, config: Dict):
        """Initialize DNS client with configuration."""
        self.config = config

    def get_provider(self, credentials: Credentials) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "porkbun")
        provider_config = (self.config.get("dns_providers") or {}).get(provider_name) or {}

        if provider_name == "porkbun":
            return PorkbunProvider(provider_config, credentials)
        elif provider_name == "mock":
            return MockDNSProvider(provider_config, credentials)
        else:
            logger.error(f"Unknown provider '{provider_name}'")
            raise ConfigError(f"Unknown provider '{provider_name}'")
