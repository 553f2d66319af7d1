"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that stores records in memory
for safe testing and demonstration purposes.
"""

import itertools
import logging
from typing import Dict, List, Optional, Tuple

from .base_provider import DNSProvider
from ..exceptions import ProviderError
from ..models import DnsRecordType, ExistingRecord, QualifiedDomain

logger = logging.getLogger(__name__)


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None, credentials=None):
        """Initialize mock provider."""
        self.records: Dict[Tuple[str, DnsRecordType], ExistingRecord] = {}
        self.ttls: Dict[str, int] = {}
        self.calls: List[Tuple] = []
        self._failures: Dict[DnsRecordType, ProviderError] = {}
        self._ids = itertools.count(1)
        logger.info("Mock DNS provider initialized")

    def seed(self, full_name: str, record_type: DnsRecordType, value: str, record_id: Optional[str] = None) -> ExistingRecord:
        """Publish a record directly, without going through create()."""
        record = ExistingRecord(
            id=record_id or str(next(self._ids)), type=record_type, value=value
        )
        self.records[(full_name, record_type)] = record
        return record

    def fail_on(self, record_type: DnsRecordType, error: ProviderError):
        """Make every subsequent call for record_type raise error."""
        self._failures[record_type] = error

    def _check_failure(self, record_type: DnsRecordType):
        error = self._failures.get(record_type)
        if error is not None:
            logger.info(f"Mock: Failing {record_type.value} call with {error!r}")
            raise error

    def fetch(self, domain: QualifiedDomain, record_type: DnsRecordType) -> Optional[ExistingRecord]:
        """Get the record of the given type for a name."""
        self.calls.append(("fetch", domain.full_name, record_type))
        self._check_failure(record_type)
        record = self.records.get((domain.full_name, record_type))
        logger.info(f"Mock: Retrieved {record_type.value} record for {domain}: {record}")
        return record

    def create(self, domain: QualifiedDomain, record_type: DnsRecordType, value: str, ttl: int) -> str:
        """Create a new DNS record."""
        self.calls.append(("create", domain.full_name, record_type, value, ttl))
        self._check_failure(record_type)
        key = (domain.full_name, record_type)
        if key in self.records:
            raise ValueError(f"Record {domain} {record_type.value} already exists")

        record = self.seed(domain.full_name, record_type, value)
        self.ttls[record.id] = ttl
        logger.info(f"Mock: Created record {domain} {record_type.value} -> {value}")
        return record.id

    def update(self, record_id: str, domain: QualifiedDomain, record_type: DnsRecordType, value: str, ttl: int) -> None:
        """Update an existing DNS record."""
        self.calls.append(("update", record_id, domain.full_name, record_type, value, ttl))
        self._check_failure(record_type)
        key = (domain.full_name, record_type)
        existing = self.records.get(key)
        if existing is None or existing.id != record_id:
            raise ValueError(f"Record {record_id} not found for update")

        self.records[key] = ExistingRecord(id=record_id, type=record_type, value=value)
        self.ttls[record_id] = ttl
        logger.info(f"Mock: Updated record {domain} {record_type.value} -> {value}")
