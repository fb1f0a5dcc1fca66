"""
Translation table: rule storage and lookup with wildcard fallback.
"""
import logging
from typing import Callable, Dict, Iterator, List, Tuple

from simple_nat.schemas.translation import RuleResult, TranslationResult, TranslationStatus
from simple_nat.utils.parsers.endpoint_models import Endpoint, WILDCARD, make_key
from simple_nat.utils.parsers.endpoint_parser import parse_endpoint
from simple_nat.utils.parsers.errors import EndpointFormatError, RuleFormatError
from simple_nat.utils.parsers.rule_parser import parse_rule

logger = logging.getLogger(__name__)


def exact_key(query: Endpoint) -> str:
    """address:port"""
    return make_key(query.address, query.port)


def any_port_key(query: Endpoint) -> str:
    """address:*"""
    return make_key(query.address, WILDCARD)


def any_address_key(query: Endpoint) -> str:
    """*:port"""
    return make_key(WILDCARD, query.port)


# Lookup order for a concrete query; the first key present in the table wins.
# "*:*" is absent because such a rule is rejected at definition time.
LOOKUP_STRATEGIES: List[Callable[[Endpoint], str]] = [
    exact_key,
    any_port_key,
    any_address_key,
]


def candidate_keys(query: Endpoint) -> List[str]:
    """Table keys tried for a query, in precedence order."""
    return [strategy(query) for strategy in LOOKUP_STRATEGIES]


class TranslationTable:
    """
    Static address translation table.

    Built by repeated define_rule() calls, then queried with translate().
    Neither operation raises on bad input; the outcome is carried by the
    returned result's status.
    """

    def __init__(self):
        self._entries: Dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, source_key: str) -> bool:
        return source_key in self._entries

    def items(self) -> Iterator[Tuple[str, str]]:
        """Iterate (source key, destination) pairs in insertion order."""
        return iter(self._entries.items())

    def define_rule(self, text: str) -> RuleResult:
        """
        Parse, validate and store a '<source>,<destination>' rule.

        An existing rule with the same source is overwritten. Invalid text
        leaves the table untouched.

        Args:
            text: Rule text

        Returns:
            RuleResult with status OK or INVALID
        """
        try:
            rule = parse_rule(text)
        except RuleFormatError as e:
            logger.debug(f"Rejected rule {text!r}: {e.reason}")
            return RuleResult(status=TranslationStatus.INVALID, rule=text, reason=e.reason)

        source_key = rule.source.key
        destination = rule.destination.key
        previous = self._entries.get(source_key)
        if previous is not None and previous != destination:
            logger.debug(f"Overwriting rule for {source_key}: {previous} -> {destination}")
        self._entries[source_key] = destination

        return RuleResult(status=TranslationStatus.OK, rule=text)

    def translate(self, text: str) -> TranslationResult:
        """
        Translate a concrete '<address>:<port>' query.

        Lookup order: exact rule, then address with wildcard port, then
        wildcard address with port.

        Args:
            text: Query text

        Returns:
            TranslationResult with status OK (destination set), INVALID or NO_MATCH
        """
        try:
            query = parse_endpoint(text)
        except EndpointFormatError as e:
            logger.debug(f"Rejected query {text!r}: {e.reason}")
            return TranslationResult(status=TranslationStatus.INVALID, query=text)

        if not query.is_concrete:
            logger.debug(f"Rejected query {text!r}: wildcards are not allowed in queries")
            return TranslationResult(status=TranslationStatus.INVALID, query=text)

        for key in candidate_keys(query):
            destination = self._entries.get(key)
            if destination is not None:
                return TranslationResult(
                    status=TranslationStatus.OK,
                    query=text,
                    destination=destination,
                    matched_key=key,
                )

        return TranslationResult(status=TranslationStatus.NO_MATCH, query=text)
