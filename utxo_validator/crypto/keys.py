"""
Key helpers for producing identities and signatures the default verifier accepts.

The validator itself only verifies; these are for callers that hold keys
(wallets, test fixtures).
"""

from typing import Tuple, Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from utxo_validator.crypto.signatures import get_curve, get_hash_algorithm
from utxo_validator.exceptions import CryptoError


def generate_keypair(curve: str = "secp256k1") -> Tuple[ec.EllipticCurvePrivateKey, str]:
    """Generate a private key and its hex public identity"""
    try:
        private_key = ec.generate_private_key(get_curve(curve))
    except CryptoError:
        raise
    except Exception as e:
        raise CryptoError(f"Failed to generate keys: {e}")

    return private_key, public_key_to_hex(private_key.public_key())


def public_key_to_hex(public_key: ec.EllipticCurvePublicKey) -> str:
    """Hex X9.62 uncompressed point, the identity format used by ECDSAVerifier"""
    return public_key.public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint
    ).hex()


def sign_message(private_key: ec.EllipticCurvePrivateKey, message: Union[bytes, str],
                 hash_algorithm: str = "sha256") -> str:
    """Sign message and return the hex DER signature"""
    if isinstance(message, str):
        message = message.encode('utf-8')

    try:
        signature = private_key.sign(message, ec.ECDSA(get_hash_algorithm(hash_algorithm)))
    except CryptoError:
        raise
    except Exception as e:
        raise CryptoError(f"Failed to sign message: {e}")

    return signature.hex()
