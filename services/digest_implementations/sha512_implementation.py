import hashlib
from services.digest_implementations.base_digest import BaseDigest


class SHA512Digest(BaseDigest):
    """SHA-512 accumulator backed by hashlib.sha512 (64-byte digest)."""
    HASH_CONSTRUCTOR = hashlib.sha512
    DIGEST_SIZE = 64
