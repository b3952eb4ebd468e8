"""
HashingService: streaming file digests with a bounded, configurable chunk size.

Defaults to a 4 MiB chunk size. Memory use is one reusable buffer of chunk_size bytes,
independent of file size. Progress is reported as bytes read / file size after every chunk.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional, Union

from models.hash_result import AlgorithmKind, HashResult
from services.algorithm_registry import resolve
from services.digest_factory import create_digest_accumulator
from services.hashing_errors import ConfigError, FileAccessError, ReadError
from utils.result_formatter import build_description

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 4 * 1024 * 1024

ProgressObserver = Callable[[float], None]


def validate_chunk_size(chunk_size: int) -> int:
    """
    Check that chunk_size is a positive integer byte count.

    Raises:
        ConfigError: If chunk_size is not an int or is zero/negative.
    """
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise ConfigError(f"Chunk size must be an integer byte count, got {chunk_size!r}", chunk_size)
    if chunk_size <= 0:
        raise ConfigError(f"Chunk size must be greater than zero, got {chunk_size}", chunk_size)
    return chunk_size


class HashingService:
    """
    Provides streaming digest computation for large files.

    - Output digests are lowercase hex strings
    - Supported algorithms: MD5, SHA-1, SHA-256, SHA-512
    - Each call owns its buffer and accumulator, so one service may be shared across threads
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self.chunk_size = validate_chunk_size(chunk_size)

    def compute(
        self,
        file_path: Union[str, os.PathLike],
        algorithm: Union[AlgorithmKind, str],
        observer: Optional[ProgressObserver] = None,
    ) -> HashResult:
        """
        Compute the digest of file_path.

        Args:
            file_path: Path of the file to hash.
            algorithm: AlgorithmKind, or a name accepted by algorithm_registry.resolve().
            observer: Optional callable receiving the progress fraction in [0.0, 1.0]
                after every chunk. Never called for an empty file.

        Returns:
            HashResult: The completed digest with file metadata.

        Raises:
            UnsupportedAlgorithmError: If algorithm is not supported.
            FileAccessError: If the file cannot be opened or stat'ed.
            ReadError: If reading fails part way through.
        """
        kind = resolve(algorithm)
        path = os.fspath(file_path)
        logger.info(f"Calculating {kind.display_name} hash for {path} (chunk size {self.chunk_size} bytes)")

        try:
            f = open(path, "rb")
        except FileNotFoundError as e:
            logger.error(f"File not found: {path}")
            raise FileAccessError(path, FileAccessError.NOT_FOUND) from e
        except IsADirectoryError as e:
            logger.error(f"Path is a directory: {path}")
            raise FileAccessError(path, FileAccessError.IS_DIRECTORY) from e
        except PermissionError as e:
            logger.error(f"Permission denied opening {path}")
            raise FileAccessError(path, FileAccessError.PERMISSION_DENIED) from e
        except OSError as e:
            logger.error(f"Failed to open {path}: {e}")
            raise FileAccessError(path, FileAccessError.IO_ERROR, str(e)) from e

        with f:
            try:
                file_size = os.fstat(f.fileno()).st_size
            except OSError as e:
                logger.error(f"Failed to stat {path}: {e}")
                raise FileAccessError(path, FileAccessError.STAT_FAILED, str(e)) from e

            accumulator = create_digest_accumulator(kind)
            total_read = self._absorb_file(f, path, accumulator, file_size, observer)

        digest = accumulator.finalize().hex()
        filename = os.path.basename(path)
        if total_read != file_size:
            logger.warning(f"{path} changed size during hashing: stat reported {file_size}, read {total_read}")

        result = HashResult(
            algorithm=kind,
            hash=digest,
            filename=filename,
            file_size=total_read,
            chunk_size=self.chunk_size,
            description=build_description(filename, total_read, kind, digest),
        )
        logger.info(f"{kind.display_name} of {filename}: {digest}")
        return result

    def _absorb_file(self, f, path: str, accumulator, file_size: int,
                     observer: Optional[ProgressObserver]) -> int:
        """Feed f to accumulator chunk by chunk and return the number of bytes read."""
        try:
            buffer = bytearray(self.chunk_size)
        except (MemoryError, OverflowError) as e:
            logger.error(f"Cannot allocate a {self.chunk_size} byte read buffer: {e!r}")
            raise ConfigError(f"Chunk size {self.chunk_size} bytes cannot be allocated", self.chunk_size) from e
        view = memoryview(buffer)
        total_read = 0
        while True:
            try:
                bytes_read = f.readinto(buffer)
            except OSError as e:
                logger.error(f"Read failed for {path} after {total_read} bytes: {e}")
                raise ReadError(path, total_read, str(e)) from e
            if not bytes_read:
                break

            accumulator.absorb(view[:bytes_read])
            total_read += bytes_read

            if observer is not None and file_size > 0:
                observer(min(total_read / file_size, 1.0))
        logger.debug(f"Read {total_read} bytes from {path}")
        return total_read


def compute_file_digest(
    file_path: Union[str, os.PathLike],
    algorithm: Union[AlgorithmKind, str],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    observer: Optional[ProgressObserver] = None,
) -> HashResult:
    """Functional wrapper around HashingService(chunk_size).compute()."""
    return HashingService(chunk_size=chunk_size).compute(file_path, algorithm, observer)
