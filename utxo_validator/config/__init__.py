from utxo_validator.config.settings import (
    Settings,
    CryptoConfig,
    EncodingConfig,
    LoggingConfig,
    load_settings
)

__all__ = ['Settings', 'CryptoConfig', 'EncodingConfig', 'LoggingConfig', 'load_settings']
