from utxo_validator.pool.interfaces import UTXOPool
from utxo_validator.pool.memory import InMemoryUTXOPool

__all__ = ['UTXOPool', 'InMemoryUTXOPool']
