"""
HashResult model for Hashculate, representing the outcome of a single file digest computation.
"""
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict


class AlgorithmKind(str, Enum):
    """Supported digest algorithms, keyed by their canonical lowercase name."""
    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def digest_size(self) -> int:
        """Length of the raw digest in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def display_name(self) -> str:
        """Human readable algorithm name (e.g. SHA-256)."""
        return _DISPLAY_NAMES[self]

    @property
    def hex_length(self) -> int:
        """Length of the lowercase hex digest string."""
        return self.digest_size * 2


_DIGEST_SIZES = {
    AlgorithmKind.MD5: 16,
    AlgorithmKind.SHA1: 20,
    AlgorithmKind.SHA256: 32,
    AlgorithmKind.SHA512: 64,
}

_DISPLAY_NAMES = {
    AlgorithmKind.MD5: "MD5",
    AlgorithmKind.SHA1: "SHA-1",
    AlgorithmKind.SHA256: "SHA-256",
    AlgorithmKind.SHA512: "SHA-512",
}


class HashResult(BaseModel):
    """
    Represents a completed file digest.

    Attributes:
        algorithm (AlgorithmKind): Algorithm used to compute the digest.
        hash (str): Lowercase hex digest.
        filename (str): Base name of the hashed file (no directory component).
        file_size (int): Number of bytes actually read from the file.
        chunk_size (int): Read size in bytes used for the computation.
        description (str): Rendered one-sentence description of the result.

    Methods:
        summary(): Multi-line File/Algorithm/Hash/Size block.
    """

    model_config = ConfigDict(
        frozen=True,
        extra='forbid'
    )

    algorithm: AlgorithmKind = Field(..., description="Algorithm used to compute the digest")
    hash: str = Field(..., pattern=r"^[0-9a-f]+$", description="Lowercase hex digest")
    filename: str = Field(..., description="Base name of the hashed file")
    file_size: int = Field(..., ge=0, description="Bytes read from the file")
    chunk_size: int = Field(..., gt=0, description="Read size in bytes")
    description: str = Field(..., description="Rendered description sentence")

    def summary(self) -> str:
        """Return the File/Algorithm/Hash/Size block for this result."""
        from utils.result_formatter import format_summary
        return format_summary(self)

    def __str__(self) -> str:
        return self.summary()
