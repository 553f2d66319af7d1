"""
PorkDyn - Dynamic DNS for Porkbun

Keeps the A and AAAA records of a single host name on Porkbun in line with
the addresses a client reports, creating records that do not exist yet and
leaving unchanged ones alone.
"""

__version__ = "1.0.0"
__author__ = "PorkDyn Team"
__description__ = "Dynamic DNS updates for Porkbun-hosted domains"

from .core.dns_manager import DNSManager
from .core.record_manager import RecordReconciler
from .providers.dns_client import DNSClient

__all__ = [
    "DNSManager",
    "RecordReconciler",
    "DNSClient",
]
