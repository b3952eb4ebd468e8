import hashlib
from services.digest_implementations.base_digest import BaseDigest


class SHA1Digest(BaseDigest):
    """SHA-1 accumulator backed by hashlib.sha1 (20-byte digest)."""
    HASH_CONSTRUCTOR = hashlib.sha1
    DIGEST_SIZE = 20
