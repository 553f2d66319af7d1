"""
Record Manager - Core decision logic for a single DNS record

This module decides whether the record for one address family must be
created, updated or left alone, and applies that decision through a DNS
provider.
"""

import logging

from ..exceptions import ProviderError
from ..models import DnsRecordType, QualifiedDomain, ReconciliationOutcome
from ..providers.base_provider import DNSProvider

logger = logging.getLogger(__name__)

DEFAULT_TTL = 600


class RecordReconciler:
    """Reconciles one DNS record with a desired address."""

    def __init__(self, provider: DNSProvider, ttl: int = DEFAULT_TTL):
        """Initialize reconciler with a DNS provider."""
        self.provider = provider
        self.ttl = ttl

    def reconcile(
        self, domain: QualifiedDomain, record_type: DnsRecordType, desired_value: str
    ) -> ReconciliationOutcome:
        """
        Bring the provider's record in line with desired_value.

        The current record is fetched once; a missing record is created and
        a differing one is updated. Values are compared as exact strings, so
        two spellings of the same IPv6 address count as a change.

        Args:
            domain: Qualified name owning the record
            record_type: A or AAAA
            desired_value: Address the record should point to

        Returns:
            ReconciliationOutcome; provider errors are returned as a failed
            outcome rather than raised
        """
        label = record_type.family.value
        try:
            existing = self.provider.fetch(domain, record_type)

            if existing is None:
                logger.info(f"Create needed: {domain} {record_type.value} -> {desired_value}")
                record_id = self.provider.create(domain, record_type, desired_value, self.ttl)
                logger.info(f"{label} record {record_id} created for {domain}")
                return ReconciliationOutcome.created(record_id)

            if existing.value == desired_value:
                logger.info(
                    f"No change needed: {domain} {record_type.value} -> {desired_value} "
                    f"(record {existing.id})"
                )
                return ReconciliationOutcome.skipped(existing.id)

            logger.info(
                f"Update needed: {domain} {record_type.value} {existing.value} -> {desired_value}"
            )
            self.provider.update(existing.id, domain, record_type, desired_value, self.ttl)
            logger.info(f"{label} record {existing.id} updated for {domain}")
            return ReconciliationOutcome.updated(existing.id)

        except ProviderError as e:
            logger.error(f"Failed to reconcile {record_type.value} record for {domain}: {e}")
            return ReconciliationOutcome.failed(e)
