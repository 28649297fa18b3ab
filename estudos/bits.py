"""Bit manipulation demos: 7-bit packing, binary formatting and UTF-8 bytes."""

from __future__ import annotations

import argparse
from collections.abc import Iterable

DEFAULT_TEXT = "teste de string"
SEPARATOR = "-=-=-=-=-=-=-=-=-=-"

_BITWISE_OPERATIONS = (
    ("AND", lambda v, b: v & b),
    ("OR", lambda v, b: v | b),
    ("NOT AND", lambda v, b: v & ~b),
    ("LEFT SHIFT", lambda v, b: v << 2),
    ("RIGHT SHIFT", lambda v, b: v >> 2),
    ("XOR", lambda v, b: v ^ b),
)


def _as_bytes(data: bytes | str | Iterable[int]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def format_bin(value: int) -> str:
    """Format the low byte of ``value`` as two nibbles, e.g. ``0011-1100``."""
    value &= 0xFF
    return f"{value >> 4:04b}-{value & 0x0F:04b}"


def to_ascii7(data: bytes | str | Iterable[int]) -> bytes:
    """Pack bytes into the GSM 7-bit alphabet, dropping the high bit of each."""
    packed = bytearray()
    count = 0
    accumulator = 0
    for byte in _as_bytes(data):
        accumulator |= (byte & 0x7F) << count
        count += 7
        if count >= 8:
            packed.append(accumulator & 0xFF)
            count -= 8
            accumulator >>= 8
    if count > 0:
        packed.append(accumulator & 0xFF)
    return bytes(packed)


def bitwise_table(v: int, b: int) -> list[tuple[str, int]]:
    """Apply each bitwise operation to two bytes, keeping byte-sized results."""
    return [(label, op(v & 0xFF, b & 0xFF) & 0xFF) for label, op in _BITWISE_OPERATIONS]


def utf8_bits(text: str) -> list[str]:
    """Describe each UTF-8 byte of ``text``, flagging multi-byte sequences."""
    lines = []
    for byte in text.encode("utf-8"):
        if byte >> 7 == 1:
            lines.append(f"{byte:08b} <- UTF-8")
        else:
            lines.append(f'{byte:08b} = "{chr(byte)}"')
    return lines


def _ascii7_demo(text: str) -> None:
    original = _as_bytes(text)
    if len(original) % 7 != 0:
        print("não divisivel por 7")
    for index, byte in enumerate(original):
        print(f'{index:02d} = {format_bin(byte)} = {byte:02X} = "{chr(byte)}"')
    print(SEPARATOR)
    packed = to_ascii7(original)
    for index, byte in enumerate(packed):
        print(f"{index:02d} = {format_bin(byte)} = {byte:02X}")
    print(SEPARATOR)
    print("string......:", text)
    print("ASCII 8 bits: " + original.hex().upper())
    print("ASCII 7 bits: " + packed.hex().upper())


def _bitwise_demo(v: int = 60, b: int = 13) -> None:
    print(f"valor de v = {v:3d} em binario {format_bin(v)}")
    for label, result in bitwise_table(v, b):
        print(
            f"valor de c = {result:3d} em binario {format_bin(result)} | "
            f"{format_bin(v)} {label:<11} {format_bin(b)} = {format_bin(result)}"
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Bit manipulation demos.")
    parser.add_argument("demo", nargs="?", default="ascii7", choices=("ascii7", "binarios", "utf8"))
    parser.add_argument("text", nargs="?", default=None)
    args = parser.parse_args(argv)
    if args.demo == "ascii7":
        _ascii7_demo(args.text if args.text is not None else DEFAULT_TEXT)
    elif args.demo == "binarios":
        _bitwise_demo()
    else:
        for line in utf8_bits(args.text if args.text is not None else "isto é um teste!"):
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())