from abc import ABC, abstractmethod
from typing import Optional

from utxo_validator.models.utxo import UTXO


class UTXOPool(ABC):
    """Read-only view of the currently unspent outputs"""

    @abstractmethod
    def get_utxo(self, tx_id: str, output_index: int) -> Optional[UTXO]:
        """Get an unspent output, or None when it is not in the pool"""
        pass
