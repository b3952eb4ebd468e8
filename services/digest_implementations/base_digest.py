from typing import Callable
from services.digest_implementations.digest_interface import DigestInterface


class BaseDigest(DigestInterface):
    """
    Base class for hashlib-backed digest accumulators.

    Subclasses only declare the hashlib constructor and the expected digest size.

    Attributes:
        HASH_CONSTRUCTOR (Callable): hashlib constructor, e.g. hashlib.sha256.
        DIGEST_SIZE (int): Expected raw digest length in bytes.
    """
    HASH_CONSTRUCTOR: Callable = None
    DIGEST_SIZE: int = 0

    def __init__(self):
        if self.HASH_CONSTRUCTOR is None:
            raise TypeError(f"{type(self).__name__} does not define HASH_CONSTRUCTOR")
        self._hasher = type(self).HASH_CONSTRUCTOR()
        self._finalized = False

    def absorb(self, data: bytes) -> None:
        """
        Feed the next chunk of input to the underlying hashlib object.

        Raises:
            RuntimeError: If the accumulator has already been finalized.
        """
        if self._finalized:
            raise RuntimeError(f"{type(self).__name__} cannot absorb data after finalize()")
        self._hasher.update(data)

    def finalize(self) -> bytes:
        """
        Return the raw digest. The accumulator cannot be reused afterwards.

        Raises:
            RuntimeError: If finalize() was already called.
        """
        if self._finalized:
            raise RuntimeError(f"{type(self).__name__} has already been finalized")
        self._finalized = True
        return self._hasher.digest()
