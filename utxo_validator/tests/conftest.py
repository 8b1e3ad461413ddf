"""
Shared fixtures for the validator tests.
"""

import pytest

from utxo_validator.crypto import generate_keypair, sign_message
from utxo_validator.encoding import encode_unsigned
from utxo_validator.models import (
    UTXO,
    UTXOId,
    Transaction,
    TransactionInput,
    TransactionOutput
)
from utxo_validator.pool import InMemoryUTXOPool
from utxo_validator.validation import TransactionValidator


class Wallet:
    """Key pair with a readable label"""

    def __init__(self, label):
        self.label = label
        self.private_key, self.identity = generate_keypair()


def build_transaction(tx_id, spends, outputs, timestamp=1700000000000, signatures=None):
    """Build and sign a transaction.

    Args:
        spends: list of (UTXOId, Wallet) pairs, one per input
        outputs: list of (recipient, amount) pairs
        signatures: optional list overriding the computed signatures
    """
    unsigned = Transaction(
        id=tx_id,
        inputs=[TransactionInput(utxo_id, wallet.identity, "") for utxo_id, wallet in spends],
        outputs=[TransactionOutput(recipient, amount) for recipient, amount in outputs],
        timestamp=timestamp
    )
    message = encode_unsigned(unsigned)

    if signatures is None:
        signatures = [sign_message(wallet.private_key, message) for _, wallet in spends]

    return Transaction(
        id=tx_id,
        inputs=[TransactionInput(utxo_id, wallet.identity, sig)
                for (utxo_id, wallet), sig in zip(spends, signatures)],
        outputs=unsigned.outputs,
        timestamp=timestamp
    )


@pytest.fixture(scope="session")
def alice():
    return Wallet("A")


@pytest.fixture(scope="session")
def bob():
    return Wallet("B")


@pytest.fixture
def tx0_out0():
    return UTXOId("tx0", 0)


@pytest.fixture
def pool(alice, bob):
    """Pool with (tx0,0)=100 and (tx0,1)=50 owned by A, (tx1,0)=30 owned by B"""
    return InMemoryUTXOPool([
        UTXO("tx0", 0, alice.identity, 100),
        UTXO("tx0", 1, alice.identity, 50),
        UTXO("tx1", 0, bob.identity, 30),
    ])


@pytest.fixture
def validator():
    return TransactionValidator()


@pytest.fixture
def make_tx():
    return build_transaction
