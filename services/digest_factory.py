"""
This module is responsible for instantiating the digest accumulator for a resolved algorithm.

The lookup table is internal to the digest engine; callers resolve user-facing names with
services.algorithm_registry.resolve() first and pass the resulting AlgorithmKind here.
"""

import logging
from typing import Dict, Type
from models.hash_result import AlgorithmKind
from services.digest_implementations.digest_interface import DigestInterface
from services.digest_implementations.md5_implementation import MD5Digest
from services.digest_implementations.sha1_implementation import SHA1Digest
from services.digest_implementations.sha256_implementation import SHA256Digest
from services.digest_implementations.sha512_implementation import SHA512Digest
from services.hashing_errors import UnsupportedAlgorithmError

logger = logging.getLogger(__name__)

_DIGEST_IMPLEMENTATIONS: Dict[AlgorithmKind, Type[DigestInterface]] = {
    AlgorithmKind.MD5: MD5Digest,
    AlgorithmKind.SHA1: SHA1Digest,
    AlgorithmKind.SHA256: SHA256Digest,
    AlgorithmKind.SHA512: SHA512Digest,
}


def create_digest_accumulator(kind: AlgorithmKind) -> DigestInterface:
    """
    Create a fresh digest accumulator for the given algorithm.

    Args:
        kind (AlgorithmKind): Resolved algorithm.

    Returns:
        DigestInterface: A new, unused accumulator.

    Raises:
        UnsupportedAlgorithmError: If no implementation is registered for kind.
    """
    try:
        implementation = _DIGEST_IMPLEMENTATIONS[AlgorithmKind(kind)]
    except (KeyError, ValueError):
        raise UnsupportedAlgorithmError(str(kind), [k.value for k in _DIGEST_IMPLEMENTATIONS])
    logger.debug(f"Creating {implementation.__name__} accumulator for {kind}")
    return implementation()
