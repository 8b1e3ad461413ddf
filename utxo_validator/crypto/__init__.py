# utxo_validator/crypto/__init__.py
from utxo_validator.crypto.signatures import SignatureVerifier, ECDSAVerifier, SUPPORTED_CURVES, SUPPORTED_HASHES
from utxo_validator.crypto.keys import generate_keypair, public_key_to_hex, sign_message

__all__ = [
    'SignatureVerifier',
    'ECDSAVerifier',
    'SUPPORTED_CURVES',
    'SUPPORTED_HASHES',
    'generate_keypair',
    'public_key_to_hex',
    'sign_message'
]
