"""Byte-order helpers, map-file checksum and path utilities."""

from __future__ import annotations

MAP_FILE_LENGTH = 118798
"""Size in bytes of a complete map file image."""

_CHECKSUM_SPAN = MAP_FILE_LENGTH - 2


def _swap(word: int) -> int:
    if not 0 <= word <= 0xFFFF:
        raise ValueError(f"not a 16-bit word: {word!r}")
    return ((word & 0xFF) << 8) | (word >> 8)


def lohi_to_hilo(word: int) -> int:
    """Swap the two bytes of a little-endian 16-bit word."""
    return _swap(word)


def hilo_to_lohi(word: int) -> int:
    """Swap the two bytes of a big-endian 16-bit word."""
    return _swap(word)


def checksum(data: bytes | bytearray | memoryview) -> int:
    """Return the 16-bit byte-sum checksum of a map file image.

    Every byte except the final two (which hold the checksum itself) is
    summed and the low 16 bits of the total are returned.
    """
    view = memoryview(data).cast("B")
    if len(view) < _CHECKSUM_SPAN:
        raise ValueError(
            f"map image too short: {len(view)} bytes, need at least {_CHECKSUM_SPAN}"
        )
    return sum(view[:_CHECKSUM_SPAN]) & 0xFFFF


def extract_file_name(path: str) -> str:
    """Return the part of ``path`` after the last forward slash."""
    return path.rpartition("/")[2]