"""
Exception classes for PorkDyn.

Exception Hierarchy:
    PorkDynError (Base)
    ├─ ConfigError                  - Configuration file unreadable or unparsable
    ├─ ValidationError              - Request rejected before any provider call
    │  ├─ MissingRequiredParameter  - Required query parameter absent or empty
    │  ├─ InvalidDomainFormat       - Domain is not a sub.domain.tld name
    │  └─ InvalidAddressFormat      - IP parameter is not a literal of its family
    └─ ProviderError                - DNS provider call failed (one family only)
       ├─ ProviderUnavailable       - Network fault, timeout or 5xx
       ├─ ProviderRejected          - Authentication or request rejected remotely
       └─ ProviderRateLimited       - Provider asked us to slow down (429)
"""

from typing import Optional


class PorkDynError(Exception):
    """Base exception for all PorkDyn errors."""
    pass


class ConfigError(PorkDynError):
    """Configuration error (YAML parsing, unreadable file)."""
    pass


class ValidationError(PorkDynError):
    """Request parameter failed validation."""
    pass


class MissingRequiredParameter(ValidationError):
    """A required query parameter was not supplied.

    With several names, at least one of them was required.
    """

    def __init__(self, parameter: str, *alternatives: str):
        self.parameter = parameter
        self.alternatives = alternatives
        names = " or ".join(f"'{name}'" for name in (parameter,) + alternatives)
        super().__init__(f"Missing query-parameter {names}")


class InvalidDomainFormat(ValidationError):
    """Domain could not be split into subdomain and registrable domain."""

    def __init__(self, domain: str, reason: str):
        self.domain = domain
        self.reason = reason
        super().__init__(f"Invalid domain format '{domain}': {reason}")


class InvalidAddressFormat(ValidationError):
    """Value is not an IP literal, or not one of the expected family."""

    def __init__(self, parameter: str, value: str, expected: Optional[str] = None):
        self.parameter = parameter
        self.value = value
        self.expected = expected
        if expected:
            message = f"Invalid {expected} address for '{parameter}': {value}"
        else:
            message = f"Invalid IP address for '{parameter}': {value}"
        super().__init__(message)


class ProviderError(PorkDynError):
    """DNS provider API communication error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ProviderUnavailable(ProviderError):
    """Provider could not be reached or did not answer in time."""
    pass


class ProviderRejected(ProviderError):
    """Provider refused the request (bad credentials, malformed request)."""
    pass


class ProviderRateLimited(ProviderError):
    """Provider rejected the request because of rate limiting."""
    pass
