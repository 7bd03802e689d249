"""
fschacha.cli
命令行工具：输出 ChaCha20 块，或用 FSChaCha20 依次处理一组 chunk（hex 输入/输出）。
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .chacha20 import chacha20_block
from .fschacha20 import FSChaCha20, REKEY_INTERVAL


def _hex(ap: argparse.ArgumentParser, name: str, value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        ap.error(f"{name}: invalid hex string")


def cmd_block(ap: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    key = _hex(ap, "--key", args.key)
    nonce = _hex(ap, "--nonce", args.nonce)
    print(chacha20_block(key, nonce, args.counter).hex())


def cmd_crypt(ap: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    key = _hex(ap, "--key", args.key)
    chunks = [_hex(ap, "chunk", c) for c in args.chunks]
    cipher = FSChaCha20(key, args.rekey_interval)
    for chunk in chunks:
        for _ in range(args.repeat):
            print(cipher.crypt(chunk).hex())


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(prog="fschacha-tool")
    ap.add_argument("-v", "--verbose", action="store_true", help="log rekey events")
    sub = ap.add_subparsers(dest="command", required=True)

    bp = sub.add_parser("block", help="print one ChaCha20 block (hex)")
    bp.add_argument("--key", required=True, help="32-byte key (hex)")
    bp.add_argument("--nonce", required=True, help="12-byte nonce (hex)")
    bp.add_argument("--counter", type=int, default=0)
    bp.set_defaults(func=cmd_block)

    cp = sub.add_parser("crypt", help="run chunks through one FSChaCha20 instance")
    cp.add_argument("--key", required=True, help="32-byte initial key (hex)")
    cp.add_argument("--rekey-interval", type=int, default=REKEY_INTERVAL)
    cp.add_argument("--repeat", type=int, default=1, help="process each chunk N times")
    cp.add_argument("chunks", nargs="+", help="chunk (hex)")
    cp.set_defaults(func=cmd_crypt)

    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        args.func(ap, args)
    except ValueError as e:
        ap.error(str(e))


if __name__ == "__main__":
    main()
