# utxo_validator/validation/transaction_validator.py
import logging
from decimal import Decimal
from typing import List, Optional, Set

from utxo_validator.crypto.signatures import ECDSAVerifier, SignatureVerifier
from utxo_validator.encoding.canonical import CANONICAL_ENCODING_VERSION, encode_unsigned
from utxo_validator.exceptions import EncodingError
from utxo_validator.models.transaction import Transaction, UTXOId
from utxo_validator.models.utxo import UTXO
from utxo_validator.models.validation import ValidationError, ValidationErrorKind, ValidationResult
from utxo_validator.pool.interfaces import UTXOPool
from utxo_validator.utils.logging_config import timed

logger = logging.getLogger('utxo_validator.validation')


def _is_signaling(amount) -> bool:
    # comparing or adding a signaling NaN raises decimal.InvalidOperation
    return isinstance(amount, Decimal) and amount.is_snan()


class TransactionValidator:
    """Checks a transaction against a UTXO pool snapshot.

    The validator holds no state besides its signature verifier, so one
    instance can serve any number of concurrent calls. Every rule runs on
    every call and all findings are reported, in rule order:

    1. zero-amount outputs
    2. UTXO existence
    3. balance conservation (missing UTXOs count as 0)
    4. signature authorization over the canonical unsigned encoding
    5. double spending within the transaction
    """

    def __init__(self, verifier: Optional[SignatureVerifier] = None,
                 encoding_version: int = CANONICAL_ENCODING_VERSION):
        self.verifier = verifier if verifier is not None else ECDSAVerifier()
        self.encoding_version = encoding_version

    @classmethod
    def from_settings(cls, settings) -> 'TransactionValidator':
        return cls(
            verifier=ECDSAVerifier.from_settings(settings),
            encoding_version=settings.encoding.version
        )

    def validate(self, transaction: Transaction, pool: UTXOPool) -> ValidationResult:
        errors: List[ValidationError] = []

        with timed(f"Validation of {transaction.id}", logger):
            self._check_zero_amounts(transaction, errors)

            # One lookup per input, shared by the existence and balance rules.
            found = [pool.get_utxo(inp.utxo_id.tx_id, inp.utxo_id.output_index)
                     for inp in transaction.inputs]

            self._check_existence(transaction, found, errors)
            self._check_balance(transaction, found, errors)
            self._check_signatures(transaction, errors)
            self._check_double_spending(transaction, errors)

        result = ValidationResult.from_errors(errors)
        logger.debug(f"Transaction {transaction.id} valid={result.valid} errors={len(result.errors)}")
        return result

    def _record(self, errors: List[ValidationError], kind: ValidationErrorKind, message: str) -> None:
        logger.debug(f"{kind.value}: {message}")
        errors.append(ValidationError(kind, message))

    def _check_zero_amounts(self, transaction: Transaction, errors: List[ValidationError]) -> None:
        for out in transaction.outputs:
            if not _is_signaling(out.amount) and out.amount == 0:
                self._record(errors, ValidationErrorKind.ZERO_AMOUNT_OUTPUT,
                             f"Zero amount output: {out.amount}-{out.recipient}")

    def _check_existence(self, transaction: Transaction, found: List[Optional[UTXO]],
                         errors: List[ValidationError]) -> None:
        for inp, utxo in zip(transaction.inputs, found):
            if utxo is None:
                self._record(errors, ValidationErrorKind.UTXO_NOT_FOUND,
                             f"UTXO not found in pool: {inp.utxo_id.key}")

    def _check_balance(self, transaction: Transaction, found: List[Optional[UTXO]],
                       errors: List[ValidationError]) -> None:
        input_amounts = [utxo.amount for utxo in found if utxo is not None]
        output_amounts = [out.amount for out in transaction.outputs]

        if any(_is_signaling(amount) for amount in input_amounts + output_amounts):
            balanced = False
        else:
            balanced = sum(input_amounts, 0) == sum(output_amounts, 0)

        if not balanced:
            self._record(errors, ValidationErrorKind.AMOUNT_MISMATCH,
                         "Invalid transaction: the amount of inputs must equal outputs.")

    def _check_signatures(self, transaction: Transaction, errors: List[ValidationError]) -> None:
        try:
            message = encode_unsigned(transaction, self.encoding_version)
        except EncodingError as e:
            # Content with no canonical form cannot carry a valid signature.
            logger.warning(f"Transaction {transaction.id} has no canonical encoding: {e}")
            message = None

        for inp in transaction.inputs:
            if message is None or not self.verifier.verify(message, inp.signature, inp.owner):
                self._record(errors, ValidationErrorKind.INVALID_SIGNATURE,
                             f"Invalid sign: {inp.owner} - {inp.signature}")

    def _check_double_spending(self, transaction: Transaction, errors: List[ValidationError]) -> None:
        seen: Set[UTXOId] = set()
        for utxo_id in transaction.spent_ids():
            if utxo_id in seen:
                self._record(errors, ValidationErrorKind.DOUBLE_SPENDING,
                             f"UTXO repeated: {utxo_id.key}")
            seen.add(utxo_id)


def validate(transaction: Transaction, pool: UTXOPool,
             verifier: Optional[SignatureVerifier] = None) -> ValidationResult:
    """Validate a transaction against a pool with a one-off validator"""
    return TransactionValidator(verifier).validate(transaction, pool)
