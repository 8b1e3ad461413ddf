from utxo_validator.validation.transaction_validator import TransactionValidator, validate

__all__ = ['TransactionValidator', 'validate']
