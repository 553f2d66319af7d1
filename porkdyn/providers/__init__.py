"""
DNS provider implementations.

This package contains the provider interface, the Porkbun API provider
and an in-memory mock provider.
"""

from .base_provider import DNSProvider
from .dns_client import DNSClient
from .mock_provider import MockDNSProvider
from .porkbun_provider import PorkbunProvider

__all__ = ["DNSClient", "DNSProvider", "MockDNSProvider", "PorkbunProvider"]
