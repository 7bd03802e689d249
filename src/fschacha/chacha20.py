"""
fschacha.chacha20
ChaCha20 block function（RFC 8439）：(key, nonce, counter) -> 64 字节块。

纯函数，无状态，可重入。纯 Python 实现，性能不是目标。
"""
from __future__ import annotations

from typing import List

from .errors import InvalidKeyLength, InvalidNonceLength

KEY_SIZE = 32
NONCE_SIZE = 12
BLOCK_SIZE = 64

CHACHA20_CONSTANTS = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)

# 4 column rounds + 4 diagonal rounds = 1 double round
CHACHA20_INDICES = (
    (0, 4, 8, 12), (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15),
    (0, 5, 10, 15), (1, 6, 11, 12), (2, 7, 8, 13), (3, 4, 9, 14),
)

MASK32 = 0xFFFFFFFF


def check_key(key: bytes) -> bytes:
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(len(key))
    return bytes(key)


def check_nonce(nonce: bytes) -> bytes:
    if len(nonce) != NONCE_SIZE:
        raise InvalidNonceLength(len(nonce))
    return bytes(nonce)


def rotl32(v: int, bits: int) -> int:
    return ((v << bits) & MASK32) | (v >> (32 - bits))


def quarter_round(x: List[int], a: int, b: int, c: int, d: int) -> None:
    x[a] = (x[a] + x[b]) & MASK32
    x[d] = rotl32(x[d] ^ x[a], 16)
    x[c] = (x[c] + x[d]) & MASK32
    x[b] = rotl32(x[b] ^ x[c], 12)
    x[a] = (x[a] + x[b]) & MASK32
    x[d] = rotl32(x[d] ^ x[a], 8)
    x[c] = (x[c] + x[d]) & MASK32
    x[b] = rotl32(x[b] ^ x[c], 7)


def double_round(x: List[int]) -> None:
    for a, b, c, d in CHACHA20_INDICES:
        quarter_round(x, a, b, c, d)


def initial_state(key: bytes, nonce: bytes, counter: int) -> List[int]:
    """16 个 32-bit word：常量(4) + key(8, LE) + counter(1) + nonce(3, LE)。"""
    state = list(CHACHA20_CONSTANTS)
    state += [int.from_bytes(key[i:i+4], "little") for i in range(0, KEY_SIZE, 4)]
    state.append(counter)
    state += [int.from_bytes(nonce[i:i+4], "little") for i in range(0, NONCE_SIZE, 4)]
    return state


def chacha20_block(key: bytes, nonce: bytes, counter: int) -> bytes:
    """
    计算一个 64 字节 keystream 块。
    key: 32 bytes, nonce: 12 bytes, counter: 0 <= counter < 2**32
    """
    key = check_key(key)
    nonce = check_nonce(nonce)
    if isinstance(counter, bool) or not isinstance(counter, int) or not 0 <= counter <= MASK32:
        raise ValueError(f"block counter must be a 32-bit unsigned int, got {counter!r}")

    init = initial_state(key, nonce, counter)
    working = list(init)
    for _ in range(10):
        double_round(working)

    return b"".join(
        ((w + i) & MASK32).to_bytes(4, "little") for w, i in zip(working, init)
    )


generate_block = chacha20_block
