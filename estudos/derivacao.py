"""Key derivation and hashing: HKDF, PBKDF2, HMAC and SHA-256 over SHA-256."""

from __future__ import annotations

import argparse
import hashlib
import hmac
import sys

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

KEY_SIZE = 256 // 8


def hkdf_sha256(master: bytes, salt: bytes = b"", info: bytes = b"") -> bytes:
    """Derive a 256-bit key from ``master`` with HKDF-SHA256."""
    return HKDF(
        algorithm=hashes.SHA256(),
        length=KEY_SIZE,
        salt=salt or None,
        info=info,
    ).derive(master)


def pbkdf2_sha256(password: bytes, salt: bytes, iterations: int = 1) -> bytes:
    """Derive a 256-bit key from a password with PBKDF2-HMAC-SHA256."""
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    return hashlib.pbkdf2_hmac("sha256", password, salt, iterations, KEY_SIZE)


def hmac_sha256(key: bytes, data: bytes) -> bytes:
    """Return the HMAC-SHA256 tag of ``data``."""
    return hmac.new(key, data, hashlib.sha256).digest()


def sha256_hex(data: bytes) -> str:
    """Return the SHA-256 digest of ``data`` as lower-case hex."""
    return hashlib.sha256(data).hexdigest()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Derive keys and hashes.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_hkdf = sub.add_parser("hkdf", help="HKDF-SHA256 of a master key")
    p_hkdf.add_argument("--key", default="", help="master key")
    p_hkdf.add_argument("--salt", default="", help="salt")
    p_hkdf.add_argument("--info", default="", help="additional info")

    p_pbkdf2 = sub.add_parser("pbkdf2", help="PBKDF2-SHA256 of a password")
    p_pbkdf2.add_argument("--key", default="", help="password")
    p_pbkdf2.add_argument("--salt", default="", help="salt")
    p_pbkdf2.add_argument("--iter", type=int, default=1, help="iterations")

    p_hmac = sub.add_parser("hmac", help="HMAC-SHA256 of standard input")
    p_hmac.add_argument("--key", default="", help="key (hex)")

    sub.add_parser("sha256", help="SHA-256 of standard input")

    args = parser.parse_args(argv)
    try:
        if args.command == "hkdf":
            derived = hkdf_sha256(
                args.key.encode("utf-8"), args.salt.encode("utf-8"), args.info.encode("utf-8")
            )
            print(derived.hex())
        elif args.command == "pbkdf2":
            derived = pbkdf2_sha256(args.key.encode("utf-8"), args.salt.encode("utf-8"), args.iter)
            print(derived.hex())
        elif args.command == "hmac":
            key = bytes.fromhex(args.key)
            print("MAC:", hmac_sha256(key, sys.stdin.buffer.read()).hex())
        else:
            print(sha256_hex(sys.stdin.buffer.read()))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())