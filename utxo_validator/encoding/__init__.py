from utxo_validator.encoding.canonical import (
    CANONICAL_ENCODING_VERSION,
    SUPPORTED_VERSIONS,
    encode_unsigned,
    encode_number
)

__all__ = ['CANONICAL_ENCODING_VERSION', 'SUPPORTED_VERSIONS', 'encode_unsigned', 'encode_number']
