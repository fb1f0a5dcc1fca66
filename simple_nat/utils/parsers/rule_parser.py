"""
Translation rule parser.

Format: <source endpoint>,<destination endpoint>
e.g. 10.0.1.1:8080,192.168.0.1:80
     10.0.1.1:*,192.168.0.1:81
     *:8082,192.168.0.1:81
"""
import logging

from simple_nat.utils.tokenizer import split_tokens
from simple_nat.utils.parsers.endpoint_models import Endpoint, ParsedRule
from simple_nat.utils.parsers.endpoint_parser import parse_endpoint
from simple_nat.utils.parsers.errors import EndpointFormatError, RuleFormatError

logger = logging.getLogger(__name__)

RULE_SEPARATOR = ","


def _parse_side(text: str, raw_line: str, side: str) -> Endpoint:
    try:
        return parse_endpoint(text)
    except EndpointFormatError as e:
        raise RuleFormatError(raw_line, f"{side}: {e.reason}") from e


def parse_rule(text: str) -> ParsedRule:
    """
    Parse and validate a rule line.

    The source may wildcard its address or its port but not both. The
    destination must be concrete.

    Args:
        text: Rule text

    Returns:
        ParsedRule with validated source and destination

    Raises:
        RuleFormatError: if the line is malformed or breaks a wildcard constraint
    """
    parts = split_tokens(text, RULE_SEPARATOR)
    if len(parts) != 2:
        raise RuleFormatError(text, f"expected '<source>,<destination>', got {len(parts)} part(s)")

    source = _parse_side(parts[0], text, "source")
    if source.is_fully_wildcard:
        raise RuleFormatError(text, "source: address and port cannot both be wildcards")

    destination = _parse_side(parts[1], text, "destination")
    if not destination.is_concrete:
        raise RuleFormatError(text, "destination: wildcards are not allowed")

    return ParsedRule(source=source, destination=destination, raw_line=text)
