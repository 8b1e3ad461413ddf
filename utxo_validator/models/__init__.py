from utxo_validator.models.transaction import (
    Amount,
    UTXOId,
    TransactionInput,
    TransactionOutput,
    Transaction
)
from utxo_validator.models.utxo import UTXO
from utxo_validator.models.validation import ValidationErrorKind, ValidationError, ValidationResult

__all__ = [
    'Amount',
    'UTXOId',
    'TransactionInput',
    'TransactionOutput',
    'Transaction',
    'UTXO',
    'ValidationErrorKind',
    'ValidationError',
    'ValidationResult'
]
