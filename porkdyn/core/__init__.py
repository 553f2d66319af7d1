"""
Core DNS update functionality.

This package contains the decision logic for reconciling DNS records.
"""

from .dns_manager import DNSManager
from .record_manager import DEFAULT_TTL, RecordReconciler

__all__ = ["DNSManager", "RecordReconciler", "DEFAULT_TTL"]
