# utxo_validator/models/transaction.py
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable, Tuple, Union

Amount = Union[int, Decimal]


def _pick(data: Dict[str, Any], *names: str) -> Any:
    """Return the first key present in data, accepting wire and snake_case names"""
    for name in names:
        if name in data:
            return data[name]
    raise KeyError(names[0])


@dataclass(frozen=True)
class UTXOId:
    """Composite key of an unspent output: producing transaction id + output index"""
    tx_id: str
    output_index: int

    @property
    def key(self) -> str:
        return f"{self.tx_id}:{self.output_index}"

    def __str__(self) -> str:
        return self.key

    def to_dict(self) -> Dict[str, Any]:
        return {
            'txId': self.tx_id,
            'outputIndex': self.output_index
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UTXOId':
        return cls(
            tx_id=_pick(data, 'txId', 'tx_id'),
            output_index=_pick(data, 'outputIndex', 'output_index')
        )


@dataclass(frozen=True)
class TransactionInput:
    """Reference to a spent output, the claimed owner and the owner's signature"""
    utxo_id: UTXOId
    owner: str
    signature: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'utxoId': self.utxo_id.to_dict(),
            'owner': self.owner,
            'signature': self.signature
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TransactionInput':
        return cls(
            utxo_id=UTXOId.from_dict(_pick(data, 'utxoId', 'utxo_id')),
            owner=data['owner'],
            signature=data.get('signature', '')
        )


@dataclass(frozen=True)
class TransactionOutput:
    # Zero amounts are accepted here so the validator can report them.
    recipient: str
    amount: Amount

    def to_dict(self) -> Dict[str, Any]:
        return {
            'recipient': self.recipient,
            'amount': self.amount
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TransactionOutput':
        return cls(recipient=data['recipient'], amount=data['amount'])


@dataclass(frozen=True)
class Transaction:
    """Immutable candidate transaction.

    Inputs and outputs are stored as tuples so that nothing downstream,
    the validator included, can reorder or mutate them.
    """
    id: str
    inputs: Tuple[TransactionInput, ...] = field(default_factory=tuple)
    outputs: Tuple[TransactionOutput, ...] = field(default_factory=tuple)
    timestamp: int = 0

    def __post_init__(self):
        object.__setattr__(self, 'inputs', tuple(self.inputs))
        object.__setattr__(self, 'outputs', tuple(self.outputs))

    def total_output_amount(self) -> Amount:
        return sum((out.amount for out in self.outputs), 0)

    def spent_ids(self) -> Iterable[UTXOId]:
        """Referenced UTXO ids in input order, repeats included"""
        return (inp.utxo_id for inp in self.inputs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'inputs': [inp.to_dict() for inp in self.inputs],
            'outputs': [out.to_dict() for out in self.outputs],
            'timestamp': self.timestamp
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Transaction':
        return cls(
            id=data['id'],
            inputs=tuple(TransactionInput.from_dict(i) for i in data.get('inputs', [])),
            outputs=tuple(TransactionOutput.from_dict(o) for o in data.get('outputs', [])),
            timestamp=data.get('timestamp', 0)
        )
