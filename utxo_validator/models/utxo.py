# utxo_validator/models/utxo.py
from dataclasses import dataclass
from typing import Any, Dict

from utxo_validator.models.transaction import Amount, UTXOId


@dataclass(frozen=True)
class UTXO:
    tx_id: str
    output_index: int
    owner: str
    amount: Amount

    @property
    def id(self) -> UTXOId:
        return UTXOId(self.tx_id, self.output_index)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'txId': self.tx_id,
            'outputIndex': self.output_index,
            'owner': self.owner,
            'amount': self.amount
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UTXO':
        utxo_id = UTXOId.from_dict(data)
        return cls(
            tx_id=utxo_id.tx_id,
            output_index=utxo_id.output_index,
            owner=data['owner'],
            amount=data['amount']
        )
