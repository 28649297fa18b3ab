"""CRC-32 (IEEE) and CRC-64 (ECMA) checksums."""

from __future__ import annotations

import sys
import zlib

DEFAULT_TEXT = "Isto é um teste"
EXPECTED_CRC32 = 0xCF20B55

_ECMA_POLY = 0xC96C5795D7870F42
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _reflected_entry(index: int, poly: int) -> int:
    crc = index
    for _ in range(8):
        crc = (crc >> 1) ^ poly if crc & 1 else crc >> 1
    return crc


_ECMA_TABLE = tuple(_reflected_entry(i, _ECMA_POLY) for i in range(256))


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def crc32_ieee(data: bytes | str) -> int:
    """CRC-32 with the IEEE polynomial."""
    return zlib.crc32(_as_bytes(data)) & 0xFFFFFFFF


def crc64_ecma(data: bytes | str) -> int:
    """CRC-64 with the ECMA polynomial, reflected, with inverted init and output."""
    crc = _MASK64
    for byte in _as_bytes(data):
        crc = _ECMA_TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ _MASK64


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    value = args[0] if args else DEFAULT_TEXT
    checksum = crc32_ieee(value)
    print(f"Checksum 32 bits: 0x{checksum:X}")
    print("CRC ok!" if checksum == EXPECTED_CRC32 else "CRC Falhou!")
    print(f"Checksum 64 bits: 0x{crc64_ecma(value):x}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())