from utxo_validator.exceptions.custom_errors import (
    ValidatorError,
    ConfigError,
    CryptoError,
    EncodingError,
    PoolError
)

__all__ = [
    'ValidatorError',
    'ConfigError',
    'CryptoError',
    'EncodingError',
    'PoolError'
]
