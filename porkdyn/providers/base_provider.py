"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
Every method is a single remote round trip and may raise a ProviderError.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import DnsRecordType, ExistingRecord, QualifiedDomain


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def fetch(self, domain: QualifiedDomain, record_type: DnsRecordType) -> Optional[ExistingRecord]:
        """Get the record of the given type for a name, or None if absent."""
        pass

    @abstractmethod
    def create(self, domain: QualifiedDomain, record_type: DnsRecordType, value: str, ttl: int) -> str:
        """Create a new DNS record and return its id."""
        pass

    @abstractmethod
    def update(self, record_id: str, domain: QualifiedDomain, record_type: DnsRecordType, value: str, ttl: int) -> None:
        """Update an existing DNS record."""
        pass

    def close(self) -> None:
        """Release any resources held by the provider."""
        pass
