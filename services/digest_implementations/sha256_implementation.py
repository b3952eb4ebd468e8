import hashlib
from services.digest_implementations.base_digest import BaseDigest


class SHA256Digest(BaseDigest):
    """SHA-256 accumulator backed by hashlib.sha256 (32-byte digest)."""
    HASH_CONSTRUCTOR = hashlib.sha256
    DIGEST_SIZE = 32
