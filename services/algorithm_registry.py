"""
Algorithm registry: maps user-facing algorithm names to AlgorithmKind values.

Names are matched case-insensitively and both the bare form (sha256) and the
hyphenated display form (SHA-256) are accepted.
"""

import logging
from typing import Dict, List
from models.hash_result import AlgorithmKind
from services.hashing_errors import UnsupportedAlgorithmError

logger = logging.getLogger(__name__)

_ALGORITHM_ALIASES: Dict[str, AlgorithmKind] = {
    "md5": AlgorithmKind.MD5,
    "sha1": AlgorithmKind.SHA1,
    "sha-1": AlgorithmKind.SHA1,
    "sha256": AlgorithmKind.SHA256,
    "sha-256": AlgorithmKind.SHA256,
    "sha512": AlgorithmKind.SHA512,
    "sha-512": AlgorithmKind.SHA512,
}


def supported_algorithms() -> List[str]:
    """Return the canonical names of all supported algorithms."""
    return [kind.value for kind in AlgorithmKind]


def resolve(name: str) -> AlgorithmKind:
    """
    Resolve an algorithm name to its AlgorithmKind.

    Args:
        name (str): Algorithm name, e.g. "sha256", "SHA-256" or "md5".

    Returns:
        AlgorithmKind: The matching algorithm.

    Raises:
        UnsupportedAlgorithmError: If the name is not a recognised spelling.
    """
    if isinstance(name, AlgorithmKind):
        return name
    key = name.lower() if isinstance(name, str) else ""
    kind = _ALGORITHM_ALIASES.get(key)
    if kind is None:
        logger.debug(f"Rejected algorithm name: {name!r}")
        raise UnsupportedAlgorithmError(str(name), supported_algorithms())
    logger.debug(f"Resolved algorithm {name!r} -> {kind.value}")
    return kind
