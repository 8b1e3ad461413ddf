# utxo_validator/__init__.py
from utxo_validator.models import (
    UTXOId,
    TransactionInput,
    TransactionOutput,
    Transaction,
    UTXO,
    ValidationErrorKind,
    ValidationError,
    ValidationResult
)
from utxo_validator.pool import UTXOPool, InMemoryUTXOPool
from utxo_validator.crypto import SignatureVerifier, ECDSAVerifier
from utxo_validator.encoding import CANONICAL_ENCODING_VERSION, encode_unsigned
from utxo_validator.validation import TransactionValidator, validate
from utxo_validator.config import Settings, load_settings
from utxo_validator.exceptions import ValidatorError, ConfigError, CryptoError, EncodingError, PoolError

__version__ = "1.0.0"
__all__ = [
    'UTXOId',
    'TransactionInput',
    'TransactionOutput',
    'Transaction',
    'UTXO',
    'ValidationErrorKind',
    'ValidationError',
    'ValidationResult',
    'UTXOPool',
    'InMemoryUTXOPool',
    'SignatureVerifier',
    'ECDSAVerifier',
    'CANONICAL_ENCODING_VERSION',
    'encode_unsigned',
    'TransactionValidator',
    'validate',
    'Settings',
    'load_settings',
    'ValidatorError',
    'ConfigError',
    'CryptoError',
    'EncodingError',
    'PoolError'
]
