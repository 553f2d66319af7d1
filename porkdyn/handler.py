"""
Serverless entry point.

Receives a request with query parameters and updates the DNS records for the
given domain. A record that does not exist yet is created.

Query parameters:
- apikey: The API key for the Porkbun API
- secretapikey: The secret API key for the Porkbun API
- domain: The qualified domain name to update, e.g. home.example.com
- ip: IPv4 address for the A record (optional)
- ipv6: IPv6 address for the AAAA record (optional)

At least one of ip/ipv6 must be given.
"""

import json
import logging
import os
from typing import Any, Dict

from .config import load_config
from .core.dns_manager import DNSManager
from .exceptions import PorkDynError
from .models import OverallStatus

logger = logging.getLogger(__name__)


def _build_manager() -> DNSManager:
    config_path = os.environ.get("PORKDYN_CONFIG")
    return DNSManager(load_config(config_path) if config_path else None)


def json_response(status_code: int, body: Dict[str, str]) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def lambda_handler(event: Dict[str, Any], context: Any = None, manager: DNSManager = None) -> Dict[str, Any]:
    """Handle one update request."""
    params = (event or {}).get("queryStringParameters") or {}
    try:
        manager = manager or _build_manager()
        status_code, body = manager.respond(params)
    except PorkDynError as e:
        logger.error(f"Request failed: {e}")
        status_code, body = 500, {"status": OverallStatus.ERROR.value, "message": str(e)}
    logger.info(f"Responding {status_code}: {body['message']}")
    return json_response(status_code, body)
