# utxo_validator/pool/memory.py
import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Optional

from utxo_validator.exceptions import PoolError
from utxo_validator.models.transaction import UTXOId
from utxo_validator.models.utxo import UTXO
from utxo_validator.pool.interfaces import UTXOPool

logger = logging.getLogger('utxo_validator.pool')


class InMemoryUTXOPool(UTXOPool):
    """Immutable snapshot of a UTXO pool held in memory.

    Built once from its entries and never mutated afterwards, so concurrent
    readers need no locking.
    """

    def __init__(self, utxos: Iterable[UTXO] = ()):
        entries: Dict[UTXOId, UTXO] = {}
        for utxo in utxos:
            if utxo.id in entries:
                raise PoolError(f"Duplicate UTXO in pool: {utxo.id.key}")
            entries[utxo.id] = utxo

        self._utxos = MappingProxyType(entries)
        logger.debug(f"Built UTXO pool snapshot with {len(entries)} entries")

    @classmethod
    def from_dicts(cls, data: List[Dict[str, Any]]) -> 'InMemoryUTXOPool':
        return cls(UTXO.from_dict(item) for item in data)

    def get_utxo(self, tx_id: str, output_index: int) -> Optional[UTXO]:
        return self._utxos.get(UTXOId(tx_id, output_index))

    def total_amount(self):
        return sum((utxo.amount for utxo in self._utxos.values()), 0)

    def __contains__(self, utxo_id: object) -> bool:
        return utxo_id in self._utxos

    def __len__(self) -> int:
        return len(self._utxos)

    def __iter__(self) -> Iterator[UTXO]:
        return iter(self._utxos.values())

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [utxo.to_dict() for utxo in self._utxos.values()]
