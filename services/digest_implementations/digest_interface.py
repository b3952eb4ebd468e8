from abc import ABC, abstractmethod


class DigestInterface(ABC):
    """
    Abstract base class defining the interface for streaming digest accumulators.

    An accumulator ingests the file bytes in sequential, non-overlapping chunks (in file
    order) and produces the raw digest exactly once. A fresh instance is required for
    every computation.

    Methods:
        absorb(data): Feed the next chunk of input.
        finalize(): Produce the raw digest bytes.
    """

    @abstractmethod
    def absorb(self, data: bytes) -> None:
        """
        Feed the next chunk of input to the digest.
        Args:
            data: Bytes-like chunk (bytes, bytearray or memoryview)
        """
        pass

    @abstractmethod
    def finalize(self) -> bytes:
        """
        Finish the computation and return the raw digest.
        Returns:
            bytes: Raw digest bytes
        """
        pass
