"""
Contract Validation Module

Модуль для валидации JSON payload'ов, приходящих из формы и чтений контракта.
"""

from .validators import (
    ContractValidator,
    FeeConfigValidator,
    SchemaLoader,
    TokenomicsFormValidator,
    validate_fee_config_payload,
    validate_tokenomics_form_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TokenomicsFormValidator",
    "FeeConfigValidator",
    # Functions
    "validate_tokenomics_form_payload",
    "validate_fee_config_payload",
]
