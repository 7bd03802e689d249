"""
fschacha.keystream
keystream 缓冲区：尾部整块追加，头部整段取出（FIFO），取出的字节不再复用。
"""
from __future__ import annotations


class KeystreamBuffer:
    def __init__(self) -> None:
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def append(self, block: bytes) -> None:
        self._buf += block

    def take(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("n must be non-negative")
        if n > len(self._buf):
            raise ValueError(f"keystream underflow: need {n}, have {len(self._buf)}")
        out = bytes(self._buf[:n])
        # deleting the head of a bytearray only moves its start offset
        del self._buf[:n]
        return out
