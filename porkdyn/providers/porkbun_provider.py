"""
Porkbun DNS provider implementation.

This module talks to the Porkbun JSON API (v3) using the requests library.
Every call is a single POST carrying the API credentials in its body; there
is no retry.
"""

import logging
from typing import Any, Dict, Optional

import requests

from .base_provider import DNSProvider
from ..exceptions import ProviderRateLimited, ProviderRejected, ProviderUnavailable
from ..models import Credentials, DnsRecordType, ExistingRecord, QualifiedDomain

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.porkbun.com/api/json/v3"
DEFAULT_TIMEOUT = 10


class PorkbunProvider(DNSProvider):
    """Porkbun DNS provider implementation using the requests library."""

    def __init__(self, config: Dict, credentials: Credentials, session: Optional[requests.Session] = None):
        """Initialize Porkbun provider."""
        self.config = config or {}
        self.credentials = credentials
        self.base_url = self.config.get("base_url", API_BASE_URL).rstrip("/")
        self.timeout = self.config.get("timeout", DEFAULT_TIMEOUT)
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

        logger.info(f"Porkbun provider initialized for {self.base_url} (timeout {self.timeout}s)")

    def close(self) -> None:
        """Close the HTTP session if this provider created it."""
        if self._owns_session:
            self.session.close()

    def _auth_body(self) -> Dict[str, Any]:
        return {
            "apikey": self.credentials.api_key,
            "secretapikey": self.credentials.secret_key,
        }

    def _record_body(self, domain: QualifiedDomain, record_type: DnsRecordType, value: str, ttl: int) -> Dict[str, Any]:
        body = self._auth_body()
        body.update(
            {
                "name": domain.subdomain,
                "type": record_type.value,
                "content": value,
                "ttl": ttl,
            }
        )
        return body

    def _post(self, endpoint: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """POST to the API and return the decoded body of a SUCCESS response."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        try:
            response = self.session.post(url, json=body, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.error(f"Request to {url} timed out after {self.timeout}s")
            raise ProviderUnavailable(f"Request timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise ProviderUnavailable(f"Request failed: {e}") from e

        logger.debug(f"POST {url} - Status: {response.status_code}")

        try:
            payload = response.json()
        except ValueError:
            payload = None
        message = self._error_message(payload, response)

        if response.status_code == 429:
            raise ProviderRateLimited(message, status_code=429)
        if response.status_code >= 500:
            raise ProviderUnavailable(message, status_code=response.status_code)
        if response.status_code >= 400:
            raise ProviderRejected(message, status_code=response.status_code)
        if not isinstance(payload, dict):
            raise ProviderRejected(
                f"Unexpected response from provider: {response.text[:200]}",
                status_code=response.status_code,
            )
        if payload.get("status") != "SUCCESS":
            raise ProviderRejected(message, status_code=response.status_code)

        return payload

    @staticmethod
    def _error_message(payload: Any, response: requests.Response) -> str:
        if isinstance(payload, dict) and payload.get("message"):
            return f"{payload['message']} (HTTP {response.status_code})"
        return f"HTTP {response.status_code}"

    def fetch(self, domain: QualifiedDomain, record_type: DnsRecordType) -> Optional[ExistingRecord]:
        """Get the record of the given type for a name."""
        endpoint = (
            f"dns/retrieveByNameType/{domain.registrable_domain}/"
            f"{record_type.value}/{domain.subdomain}"
        )
        logger.info(f"Get existing '{record_type.value}' record for {domain}")
        payload = self._post(endpoint, self._auth_body())

        records = payload.get("records") or []
        if not isinstance(records, list):
            raise ProviderRejected(f"Malformed response from provider: records is {type(records).__name__}")

        for record in records:
            logger.debug(f"Checking record {record} for {domain}")
            if not isinstance(record, dict):
                raise ProviderRejected(f"Malformed response from provider: record {record!r}")
            if record.get("name") == domain.full_name:
                if record.get("id") is None:
                    raise ProviderRejected(f"Malformed response from provider: record for {domain} has no id")
                logger.info(f"Found matching record for {domain}: id {record['id']}")
                return ExistingRecord(
                    id=str(record["id"]),
                    type=record_type,
                    value=record.get("content", ""),
                )

        logger.info(f"No existing '{record_type.value}' record found for {domain}")
        return None

    def create(self, domain: QualifiedDomain, record_type: DnsRecordType, value: str, ttl: int) -> str:
        """Create a new DNS record."""
        logger.info(f"Create {record_type.value} record for {domain} -> {value}")
        payload = self._post(
            f"dns/create/{domain.registrable_domain}",
            self._record_body(domain, record_type, value, ttl),
        )
        if payload.get("id") is None:
            raise ProviderRejected(f"Malformed response from provider: created {record_type.value} record has no id")
        record_id = str(payload["id"])
        logger.info(f"Created DNS record with id: {record_id}")
        return record_id

    def update(self, record_id: str, domain: QualifiedDomain, record_type: DnsRecordType, value: str, ttl: int) -> None:
        """Update an existing DNS record."""
        logger.info(f"Update {record_type.value} record {record_id} for {domain} -> {value}")
        self._post(
            f"dns/edit/{domain.registrable_domain}/{record_id}",
            self._record_body(domain, record_type, value, ttl),
        )
        logger.info(f"Updated DNS record with id: {record_id}")
