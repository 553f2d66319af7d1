"""
Data model for DNS record reconciliation.

Value objects passed between the validators, the reconciler and the
orchestrator. None of them outlive a single invocation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class AddressFamily(Enum):
    """IP address family."""

    IPV4 = "IPv4"
    IPV6 = "IPv6"


class DnsRecordType(Enum):
    """DNS record types managed by PorkDyn."""

    A = "A"
    AAAA = "AAAA"

    @classmethod
    def for_family(cls, family: AddressFamily) -> "DnsRecordType":
        return cls.A if family is AddressFamily.IPV4 else cls.AAAA

    @property
    def family(self) -> AddressFamily:
        return AddressFamily.IPV4 if self is DnsRecordType.A else AddressFamily.IPV6


@dataclass(frozen=True)
class QualifiedDomain:
    """A host name split into subdomain and registrable domain."""

    subdomain: str
    registrable_domain: str
    full_name: str

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class ClassifiedAddress:
    """An IP literal together with the family it parsed as."""

    family: AddressFamily
    textual_form: str

    @property
    def record_type(self) -> DnsRecordType:
        return DnsRecordType.for_family(self.family)


@dataclass(frozen=True)
class ExistingRecord:
    """A DNS record as currently published by the provider."""

    id: str
    type: DnsRecordType
    value: str


@dataclass(frozen=True)
class Credentials:
    """Provider API credentials, passed through unchanged."""

    api_key: str
    secret_key: str = field(repr=False)


@dataclass(frozen=True)
class UpdateRequest:
    """A request that passed validation and is ready for reconciliation."""

    credentials: Credentials
    domain: QualifiedDomain
    addresses: Dict[DnsRecordType, ClassifiedAddress]


class OutcomeKind(Enum):
    SKIPPED = "skipped"
    CREATED = "created"
    UPDATED = "updated"
    FAILED = "failed"


@dataclass(frozen=True)
class ReconciliationOutcome:
    """
    Result of reconciling one address family.

    Build instances with the ``skipped``/``created``/``updated``/``failed``
    constructors rather than directly.
    """

    kind: OutcomeKind
    record_id: Optional[str] = None
    reason: Optional[str] = None
    error: Optional[Exception] = None

    @classmethod
    def skipped(cls, record_id: Optional[str] = None, reason: str = "unchanged") -> "ReconciliationOutcome":
        return cls(OutcomeKind.SKIPPED, record_id=record_id, reason=reason)

    @classmethod
    def created(cls, record_id: str) -> "ReconciliationOutcome":
        return cls(OutcomeKind.CREATED, record_id=record_id)

    @classmethod
    def updated(cls, record_id: str) -> "ReconciliationOutcome":
        return cls(OutcomeKind.UPDATED, record_id=record_id)

    @classmethod
    def failed(cls, error: Exception) -> "ReconciliationOutcome":
        return cls(OutcomeKind.FAILED, error=error)

    @property
    def succeeded(self) -> bool:
        return self.kind is not OutcomeKind.FAILED

    def describe(self) -> str:
        """Human-readable summary without the family label."""
        if self.kind is OutcomeKind.SKIPPED:
            return f"skipped ({self.reason})"
        if self.kind is OutcomeKind.FAILED:
            return f"failed ({self.error})"
        return f"{self.kind.value} successfully"


class OverallStatus(Enum):
    SUCCESS = "success"
    PARTIAL = "partial"
    ERROR = "error"


@dataclass(frozen=True)
class CombinedResult:
    """Aggregated outcome of one invocation."""

    outcomes: Dict[DnsRecordType, ReconciliationOutcome]

    @property
    def overall_status(self) -> OverallStatus:
        results = [outcome.succeeded for outcome in self.outcomes.values()]
        if results and all(results):
            return OverallStatus.SUCCESS
        if not any(results):
            return OverallStatus.ERROR
        return OverallStatus.PARTIAL

    @property
    def message(self) -> str:
        parts: List[str] = []
        for record_type in DnsRecordType:
            outcome = self.outcomes.get(record_type)
            if outcome is not None:
                parts.append(f"{record_type.family.value} {outcome.describe()}")
        return ", ".join(parts)

    def to_response(self) -> Dict[str, str]:
        return {"status": self.overall_status.value, "message": self.message}
