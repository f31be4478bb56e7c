"""
Format checks for watch-target fields.

Each helper returns the value to store or raises ValueError, so they can be
used directly inside pydantic field validators. Values are not trimmed;
surrounding whitespace makes a value invalid.
"""
from urllib.parse import urlparse

from eth_utils import (
    is_checksum_address,
    is_hex,
    is_hex_address,
    remove_0x_prefix,
    to_checksum_address,
)

ENDPOINT_SCHEMES = ("ws", "wss", "http", "https")

EVENT_TYPE_LENGTH = 64


def validate_chain_endpoint(value: str) -> str:
    """Accept ws/wss/http/https URIs with a host. Stored unchanged."""
    # urlparse drops some whitespace silently, so check before parsing
    if any(c.isspace() for c in value):
        raise ValueError("chain_endpoint must not contain whitespace")
    parsed = urlparse(value)
    if parsed.scheme not in ENDPOINT_SCHEMES:
        raise ValueError(
            f"chain_endpoint scheme must be one of {', '.join(ENDPOINT_SCHEMES)}"
        )
    if not parsed.hostname:
        raise ValueError("chain_endpoint must include a host")
    return value


def validate_contract_address(value: str) -> str:
    """
    Accept a 0x-prefixed 20-byte hex address and return its EIP-55 form.

    All-lower or all-upper input carries no checksum and is accepted.
    Mixed-case input must be a valid checksum address.
    """
    if not value.startswith("0x") or not is_hex_address(value):
        raise ValueError("contract_address must be 0x followed by 40 hex digits")

    digits = remove_0x_prefix(value)
    if digits != digits.lower() and digits != digits.upper():
        if not is_checksum_address(value):
            raise ValueError("contract_address has an invalid EIP-55 checksum")
    return to_checksum_address(value)


def normalize_event_type(value: str) -> str:
    """Accept a 32-byte topic hash with or without 0x; store lower-case, unprefixed."""
    digits = remove_0x_prefix(value).lower()
    if len(digits) != EVENT_TYPE_LENGTH or not is_hex(digits):
        raise ValueError("event_type must be 64 hex digits")
    return digits
