from utxo_validator.utils.logging_config import logger, setup_logging, LogManager, JSONFormatter, timed

__all__ = ['logger', 'setup_logging', 'LogManager', 'JSONFormatter', 'timed']
