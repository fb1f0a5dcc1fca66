"""
Endpoint parser and validator.

Grammar: <address>:<port>
  address: "*" or four dot-separated decimal octets, each 0-255
  port:    "*" or a decimal number 0-65535
"""
import logging

from simple_nat.utils.tokenizer import split_tokens
from simple_nat.utils.parsers.endpoint_models import Endpoint, WILDCARD, FIELD_SEPARATOR
from simple_nat.utils.parsers.errors import EndpointFormatError

logger = logging.getLogger(__name__)

OCTET_SEPARATOR = "."
OCTET_COUNT = 4
MAX_OCTET = 255
MAX_PORT = 65535

_DIGITS = frozenset("0123456789")


def is_unsigned_integer(token: str) -> bool:
    """True for a non-empty string of ASCII digits (no sign, no whitespace)."""
    return bool(token) and set(token) <= _DIGITS


def _at_most(token: str, maximum: int) -> bool:
    """Range check for a digit string of any length; leading zeros are ignored."""
    significant = token.lstrip("0") or "0"
    if len(significant) > len(str(maximum)):
        return False
    return int(significant) <= maximum


def is_valid_port(port: str) -> bool:
    """Check that a port token is the wildcard or a number in 0-65535."""
    if port == WILDCARD:
        return True
    if not is_unsigned_integer(port):
        return False
    return _at_most(port, MAX_PORT)


def is_valid_address(address: str) -> bool:
    """Check that an address token is the wildcard or a dotted quad."""
    if address == WILDCARD:
        return True

    octets = split_tokens(address, OCTET_SEPARATOR)
    if len(octets) != OCTET_COUNT:
        return False

    for octet in octets:
        if not is_unsigned_integer(octet):
            return False
        if not _at_most(octet, MAX_OCTET):
            return False

    return True


def parse_endpoint(text: str) -> Endpoint:
    """
    Parse '<address>:<port>' into an Endpoint.

    Wildcards are accepted on either field; role constraints (source may not be
    fully wildcard, destination and queries must be concrete) are enforced by
    the callers.

    Args:
        text: Endpoint text

    Returns:
        Validated Endpoint

    Raises:
        EndpointFormatError: if the text does not match the grammar
    """
    fields = split_tokens(text, FIELD_SEPARATOR)
    if len(fields) != 2:
        raise EndpointFormatError(text, f"expected '<address>:<port>', got {len(fields)} field(s)")

    address, port = fields
    if not is_valid_address(address):
        raise EndpointFormatError(text, f"invalid address {address!r}")
    if not is_valid_port(port):
        raise EndpointFormatError(text, f"invalid port {port!r}")

    return Endpoint(address=address, port=port)
