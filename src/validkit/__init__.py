"""validkit: stateless validation predicates and a record self-validation adapter."""

from .errors import ValidationError, ensure
from .validator import DefaultValidator, EvaluableStruct, Validator, struct
from .validations import validate_bitcoin_address, validate_credit_card

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ValidationError",
    "ensure",
    "DefaultValidator",
    "EvaluableStruct",
    "Validator",
    "struct",
    "validate_bitcoin_address",
    "validate_credit_card",
]
