# utxo_validator/crypto/signatures.py
import logging
from abc import ABC, abstractmethod
from typing import Union

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from utxo_validator.exceptions import CryptoError

logger = logging.getLogger('utxo_validator.crypto')

SUPPORTED_CURVES = {
    'secp256k1': ec.SECP256K1,
    'secp256r1': ec.SECP256R1,
    'secp384r1': ec.SECP384R1,
}

SUPPORTED_HASHES = {
    'sha256': hashes.SHA256,
    'sha384': hashes.SHA384,
    'sha512': hashes.SHA512,
    'sha3_256': hashes.SHA3_256,
}


def get_curve(name: str) -> ec.EllipticCurve:
    try:
        return SUPPORTED_CURVES[name.lower()]()
    except (KeyError, AttributeError):
        raise CryptoError(f"Unsupported curve: {name}")


def get_hash_algorithm(name: str) -> hashes.HashAlgorithm:
    try:
        return SUPPORTED_HASHES[name.lower()]()
    except (KeyError, AttributeError):
        raise CryptoError(f"Unsupported hash algorithm: {name}")


class SignatureVerifier(ABC):
    """Capability that checks a signature over a message for a public identity"""

    @abstractmethod
    def verify(self, message: Union[bytes, str], signature: str, public_identity: str) -> bool:
        """Return True iff signature is valid; must return False, not raise, on bad input"""
        pass


class ECDSAVerifier(SignatureVerifier):
    """ECDSA verification for hex X9.62 public points and hex DER signatures"""

    def __init__(self, curve: str = "secp256k1", hash_algorithm: str = "sha256"):
        self.curve_name = curve
        self.hash_name = hash_algorithm
        self.curve = get_curve(curve)
        self.hash_algorithm = get_hash_algorithm(hash_algorithm)

    @classmethod
    def from_settings(cls, settings) -> 'ECDSAVerifier':
        return cls(curve=settings.crypto.curve, hash_algorithm=settings.crypto.hash_algorithm)

    def verify(self, message: Union[bytes, str], signature: str, public_identity: str) -> bool:
        if isinstance(message, str):
            message = message.encode('utf-8')

        try:
            signature_bytes = bytes.fromhex(signature)
            public_key = ec.EllipticCurvePublicKey.from_encoded_point(
                self.curve, bytes.fromhex(public_identity)
            )
            public_key.verify(signature_bytes, message, ec.ECDSA(self.hash_algorithm))
            return True
        except InvalidSignature:
            logger.debug(f"Signature mismatch for {public_identity}")
            return False
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            logger.debug(f"Unusable signature or public key for {public_identity}: {e}")
            return False

    def __repr__(self) -> str:
        return f"ECDSAVerifier(curve={self.curve_name!r}, hash_algorithm={self.hash_name!r})"
