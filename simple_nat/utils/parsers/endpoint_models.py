"""
Pydantic models for parsed endpoints and rules.
"""
from pydantic import BaseModel

WILDCARD = "*"
FIELD_SEPARATOR = ":"


def make_key(address: str, port: str) -> str:
    """Join address and port text into a canonical table key."""
    return f"{address}{FIELD_SEPARATOR}{port}"


class Endpoint(BaseModel):
    """Validated (address, port) pair; either field may be the wildcard."""
    address: str  # dotted quad or "*"
    port: str  # 0-65535 or "*"

    model_config = {"frozen": True}

    @property
    def address_is_wildcard(self) -> bool:
        return self.address == WILDCARD

    @property
    def port_is_wildcard(self) -> bool:
        return self.port == WILDCARD

    @property
    def is_fully_wildcard(self) -> bool:
        return self.address_is_wildcard and self.port_is_wildcard

    @property
    def is_partially_wildcard(self) -> bool:
        return self.address_is_wildcard != self.port_is_wildcard

    @property
    def is_concrete(self) -> bool:
        return not (self.address_is_wildcard or self.port_is_wildcard)

    @property
    def key(self) -> str:
        """Canonical text form, exactly as validated."""
        return make_key(self.address, self.port)

    def __str__(self) -> str:
        return self.key


class ParsedRule(BaseModel):
    """Structured representation of a parsed translation rule."""
    source: Endpoint
    destination: Endpoint  # always concrete
    raw_line: str
