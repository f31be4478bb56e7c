"""
Core module - logging setup and field validators.
"""
from analog.core.logging import configure_logging
from analog.core.validators import (
    validate_chain_endpoint,
    validate_contract_address,
    normalize_event_type,
)

__all__ = [
    "configure_logging",
    "validate_chain_endpoint",
    "validate_contract_address",
    "normalize_event_type",
]
