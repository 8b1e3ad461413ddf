"""
Canonical unsigned representation of a transaction.

The bytes produced here are the message every input signature covers, so the
signer and the verifier must derive them independently and identically.
Version 1 is compact JSON with a fixed field order::

    {"id":..,"inputs":[{"utxoId":{"txId":..,"outputIndex":..},"owner":..}],
     "outputs":[{"recipient":..,"amount":..}],"timestamp":..}

Signatures are never part of the encoding. For integer amounts the result is
identical to ``JSON.stringify`` of the same object. Fractional amounts are
rendered in Python's notation (``0.0000001`` for a Decimal, ``1e-07`` for a
float) where ``JSON.stringify`` would give ``1e-7``, so signers in other
languages should only be relied on for integer amounts.
"""

import json
import math
from decimal import Decimal
from typing import Any, List, Tuple

from utxo_validator.exceptions import EncodingError
from utxo_validator.models.transaction import Transaction

CANONICAL_ENCODING_VERSION = 1
SUPPORTED_VERSIONS = (1,)


def _integer_text(value: int) -> str:
    try:
        return str(value)
    except ValueError as e:
        # int-to-str digit limit
        raise EncodingError(f"Integer too large to encode: {e}")


def encode_number(value: Any) -> str:
    """Render a numeric value in the stable textual form used for signing"""
    if isinstance(value, bool):
        raise EncodingError(f"Boolean is not a valid numeric value: {value!r}")

    if isinstance(value, int):
        return _integer_text(value)

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise EncodingError(f"Non-finite amount cannot be encoded: {value}")
        if value == value.to_integral_value():
            return _integer_text(int(value))
        return format(value.normalize(), 'f')

    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError(f"Non-finite amount cannot be encoded: {value}")
        if value.is_integer():
            return _integer_text(int(value))
        return repr(value)

    raise EncodingError(f"Unsupported numeric type: {type(value).__name__}")


def encode_string(value: Any) -> str:
    if not isinstance(value, str):
        raise EncodingError(f"Expected a string, got {type(value).__name__}")
    return json.dumps(value, ensure_ascii=False)


def _encode_object(fields: List[Tuple[str, str]]) -> str:
    # fields are pre-encoded values in their fixed order
    return '{' + ','.join(f'{encode_string(name)}:{value}' for name, value in fields) + '}'


def _encode_array(items: List[str]) -> str:
    return '[' + ','.join(items) + ']'


def _encode_v1(transaction: Transaction) -> str:
    inputs = [
        _encode_object([
            ('utxoId', _encode_object([
                ('txId', encode_string(inp.utxo_id.tx_id)),
                ('outputIndex', encode_number(inp.utxo_id.output_index))
            ])),
            ('owner', encode_string(inp.owner))
        ])
        for inp in transaction.inputs
    ]
    outputs = [
        _encode_object([
            ('recipient', encode_string(out.recipient)),
            ('amount', encode_number(out.amount))
        ])
        for out in transaction.outputs
    ]

    return _encode_object([
        ('id', encode_string(transaction.id)),
        ('inputs', _encode_array(inputs)),
        ('outputs', _encode_array(outputs)),
        ('timestamp', encode_number(transaction.timestamp))
    ])


def encode_unsigned(transaction: Transaction, version: int = CANONICAL_ENCODING_VERSION) -> bytes:
    """Encode the signed-over content of a transaction as bytes.

    Raises:
        EncodingError: for an unknown version or content that has no
            canonical form (non-finite amounts, wrong field types).
    """
    if version not in SUPPORTED_VERSIONS:
        raise EncodingError(f"Unsupported canonical encoding version: {version}")

    return _encode_v1(transaction).encode('utf-8')
