"""
Result formatting helpers: human-readable sizes, algorithm display names and the
description sentence attached to every HashResult.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Union
from models.hash_result import AlgorithmKind

if TYPE_CHECKING:
    from models.hash_result import HashResult

DESCRIPTION_TEMPLATE = (
    '"{filename}", with size of {size}, and file hash using the hashing algorithm '
    '{algorithm} has the value : {digest}.'
)


def format_bytes(num_bytes: int) -> str:
    """
    Render a byte count for display.

    Counts below 1024 render as "<n> bytes"; anything larger is divided by 1024 and shown
    with one decimal as "<x.x> kb (kilobytes)". The "kb" label is kept for compatibility
    even though the divisor is 1024.

    Examples:
        >>> format_bytes(1023)
        '1023 bytes'
        >>> format_bytes(1536)
        '1.5 kb (kilobytes)'
    """
    if num_bytes < 1024:
        return f"{num_bytes} bytes"
    return f"{num_bytes / 1024.0:.1f} kb (kilobytes)"


def algorithm_display_name(kind: Union[AlgorithmKind, str]) -> str:
    """Return the display name for an algorithm, or "Unknown" for anything unrecognised."""
    try:
        return AlgorithmKind(kind).display_name
    except ValueError:
        return "Unknown"


def build_description(filename: str, file_size: int, kind: AlgorithmKind, digest: str) -> str:
    """Render the one-sentence description for a digest."""
    return DESCRIPTION_TEMPLATE.format(
        filename=filename,
        size=format_bytes(file_size),
        algorithm=algorithm_display_name(kind),
        digest=digest,
    )


def describe(result: "HashResult") -> str:
    """Render the description sentence for a completed HashResult."""
    return build_description(result.filename, result.file_size, result.algorithm, result.hash)


def format_summary(result: "HashResult") -> str:
    """Render the File/Algorithm/Hash/Size block for a HashResult."""
    return (
        f"File: {result.filename}\n"
        f"Algorithm: {algorithm_display_name(result.algorithm)}\n"
        f"Hash: {result.hash}\n"
        f"Size: {format_bytes(result.file_size)}\n"
    )


def format_report_lines(result: "HashResult") -> list:
    """Return the lines of the completion report printed by the CLI, without separators."""
    return [
        f"File: {result.filename}",
        f"Size: {format_bytes(result.file_size)}",
        f"Algorithm: {algorithm_display_name(result.algorithm)}",
        f"Hash: {result.hash}",
    ]
