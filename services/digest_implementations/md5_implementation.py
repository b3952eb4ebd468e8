import hashlib
from services.digest_implementations.base_digest import BaseDigest


class MD5Digest(BaseDigest):
    """MD5 accumulator backed by hashlib.md5 (16-byte digest)."""
    HASH_CONSTRUCTOR = hashlib.md5
    DIGEST_SIZE = 16
