class ValidatorError(Exception):
    """Base class for runtime failures of the validator package"""
    pass

class ConfigError(ValidatorError):
    """Raised when settings cannot be loaded or are invalid"""
    pass

class CryptoError(ValidatorError):
    """Raised for unsupported curves, hash algorithms or unusable keys"""
    pass

class EncodingError(ValidatorError, ValueError):
    """Raised when a transaction cannot be canonically encoded"""
    pass

class PoolError(ValidatorError):
    """Raised when a UTXO pool snapshot cannot be built"""
    pass
