"""
Validators - Input validation for dynamic DNS requests

This module splits qualified domain names into subdomain and registrable
domain, and validates and classifies IP address literals.
"""

import ipaddress
import logging
import re

from ..models import AddressFamily, ClassifiedAddress, QualifiedDomain
from ..exceptions import InvalidAddressFormat, InvalidDomainFormat

logger = logging.getLogger(__name__)

_LABEL_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def parse_domain(full_name: str) -> QualifiedDomain:
    """
    Split a qualified domain name into subdomain and registrable domain.

    The registrable domain is always the last two labels, everything before
    them is the subdomain.

    Args:
        full_name: The qualified name, e.g. "home.example.com"

    Returns:
        QualifiedDomain for the name

    Raises:
        InvalidDomainFormat: fewer than 3 labels, an empty label, or a label
            with characters that cannot appear in a host name
    """
    if not full_name or not isinstance(full_name, str):
        raise InvalidDomainFormat(str(full_name), "domain is empty")

    labels = full_name.split(".")

    if len(labels) < 3:
        logger.warning(f"Domain must have at least 3 labels: {full_name}")
        raise InvalidDomainFormat(
            full_name, "domain must have at least 3 parts (e.g., sub.example.com)"
        )

    # Leading, trailing or consecutive dots
    if any(label == "" for label in labels):
        logger.warning(f"Domain contains empty labels: {full_name}")
        raise InvalidDomainFormat(full_name, "domain contains empty parts")

    for label in labels:
        if not _LABEL_PATTERN.match(label):
            logger.warning(f"Invalid label '{label}' in domain: {full_name}")
            raise InvalidDomainFormat(full_name, f"invalid label '{label}'")

    return QualifiedDomain(
        subdomain=".".join(labels[:-2]),
        registrable_domain=".".join(labels[-2:]),
        full_name=full_name,
    )


def classify_address(text: str, parameter: str = "ip") -> ClassifiedAddress:
    """
    Validate an IP literal and determine its family.

    Only plain dotted-quad IPv4 and colon-hex IPv6 literals are accepted.
    Host names, CIDR blocks and scoped IPv6 addresses are rejected.

    Args:
        text: The address to classify
        parameter: Request parameter the value came from, used in errors

    Returns:
        ClassifiedAddress with the caller's text unchanged

    Raises:
        InvalidAddressFormat: if text is not an IP literal
    """
    if not text or not isinstance(text, str):
        raise InvalidAddressFormat(parameter, str(text))

    # Scoped literals ("fe80::1%lo0") parse on Python 3.9+
    if "/" in text or "%" in text or text != text.strip():
        logger.warning(f"Invalid IP address: {text}")
        raise InvalidAddressFormat(parameter, text)

    try:
        address = ipaddress.ip_address(text)
    except ValueError:
        logger.warning(f"Invalid IP address: {text}")
        raise InvalidAddressFormat(parameter, text) from None

    family = AddressFamily.IPV4 if address.version == 4 else AddressFamily.IPV6
    return ClassifiedAddress(family=family, textual_form=text)


def classify_expected(text: str, parameter: str, family: AddressFamily) -> ClassifiedAddress:
    """Classify text and require it to belong to the given family."""
    try:
        classified = classify_address(text, parameter)
    except InvalidAddressFormat:
        raise InvalidAddressFormat(parameter, text, expected=family.value) from None

    if classified.family is not family:
        logger.warning(
            f"Parameter '{parameter}' expects {family.value}, got {classified.family.value}: {text}"
        )
        raise InvalidAddressFormat(parameter, text, expected=family.value)
    return classified
