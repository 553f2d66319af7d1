"""
DNS Manager - Dynamic DNS update orchestration

This module validates an update request, reconciles the A and/or AAAA
record for the requested name and combines the per-family outcomes into a
single result.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Mapping, Optional, Tuple, Union

from .record_manager import RecordReconciler
from ..config import get_default_config, load_config
from ..exceptions import MissingRequiredParameter, ValidationError
from ..models import (
    CombinedResult,
    Credentials,
    DnsRecordType,
    OverallStatus,
    UpdateRequest,
)
from ..providers.base_provider import DNSProvider
from ..providers.dns_client import DNSClient
from ..utils.validators import classify_expected, parse_domain

logger = logging.getLogger(__name__)

# Request parameter carrying the address for each record type
ADDRESS_PARAMETERS = {
    DnsRecordType.A: "ip",
    DnsRecordType.AAAA: "ipv6",
}


def _param(request: Mapping[str, Optional[str]], name: str) -> Optional[str]:
    value = request.get(name)
    if value is None or not str(value).strip():
        return None
    return value


class DNSManager:
    """Main class that orchestrates a dynamic DNS update."""

    def __init__(self, config: Union[Dict, str, None] = None, provider: Optional[DNSProvider] = None):
        """
        Initialize the DNS manager.

        Args:
            config: Configuration dict, path to a YAML file, or None for defaults
            provider: Fixed provider to use for every request instead of
                building one from the configuration
        """
        if isinstance(config, str):
            config = load_config(config)
        self.config = config if config is not None else get_default_config()
        self.dns_client = DNSClient(self.config)
        self.provider = provider
        self.parallel = bool((self.config.get("reconciliation") or {}).get("parallel", False))

    def validate(self, request: Mapping[str, Optional[str]]) -> UpdateRequest:
        """
        Check required parameters and parse the domain and addresses.

        Raises:
            MissingRequiredParameter: apikey, secretapikey or domain absent,
                or neither ip nor ipv6 given
            InvalidDomainFormat: domain cannot be decomposed
            InvalidAddressFormat: ip is not IPv4 or ipv6 is not IPv6
        """
        logger.info("Validating request")
        for name in ("apikey", "secretapikey", "domain"):
            if _param(request, name) is None:
                raise MissingRequiredParameter(name)

        raw_addresses = {
            record_type: _param(request, parameter)
            for record_type, parameter in ADDRESS_PARAMETERS.items()
        }
        if all(value is None for value in raw_addresses.values()):
            raise MissingRequiredParameter(*ADDRESS_PARAMETERS.values())

        domain = parse_domain(request["domain"])

        addresses = {}
        for record_type, value in raw_addresses.items():
            if value is not None:
                addresses[record_type] = classify_expected(
                    value, ADDRESS_PARAMETERS[record_type], record_type.family
                )

        credentials = Credentials(api_key=request["apikey"], secret_key=request["secretapikey"])
        logger.info(
            f"Valid request received for updating {domain} to "
            + ", ".join(f"{t.value}={a.textual_form}" for t, a in addresses.items())
        )
        return UpdateRequest(credentials=credentials, domain=domain, addresses=addresses)

    def run(self, request: Mapping[str, Optional[str]]) -> CombinedResult:
        """
        Validate a request and reconcile every requested record.

        Validation errors propagate before any provider call. Provider
        errors only fail the family they occurred in.
        """
        update = self.validate(request)
        if self.provider is not None:
            provider = self.provider
        else:
            provider = self.dns_client.get_provider(update.credentials)
        reconciler = RecordReconciler(provider)

        def reconcile(record_type: DnsRecordType):
            address = update.addresses[record_type]
            return reconciler.reconcile(update.domain, record_type, address.textual_form)

        record_types = list(update.addresses)
        try:
            if self.parallel and len(record_types) > 1:
                with ThreadPoolExecutor(max_workers=len(record_types)) as executor:
                    outcomes = dict(zip(record_types, executor.map(reconcile, record_types)))
            else:
                outcomes = {record_type: reconcile(record_type) for record_type in record_types}
        finally:
            # Providers built per request are not reused
            if provider is not self.provider:
                provider.close()

        result = CombinedResult(outcomes=outcomes)
        logger.info(f"Reconciliation finished with status {result.overall_status.value}: {result.message}")
        return result

    def respond(self, request: Mapping[str, Optional[str]]) -> Tuple[int, Dict[str, str]]:
        """Run a request and map the result to an HTTP status code and JSON body."""
        try:
            result = self.run(request)
        except ValidationError as e:
            logger.error(f"Invalid request: {e}")
            return 400, {"status": OverallStatus.ERROR.value, "message": str(e)}

        if result.overall_status is OverallStatus.ERROR:
            return 500, result.to_response()
        return 200, result.to_response()
