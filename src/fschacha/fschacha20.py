"""
fschacha.fschacha20
FSChaCha20：基于 ChaCha20 keystream 的分块异或加解密，每 rekey_interval 个 chunk
从同一条 keystream 中取 32 字节作为新 key（前向安全），无需额外密钥交换。

注意：
- 实例是可变状态，只能由一个有序的数据流独占使用；多线程共享时由调用方加锁。
- 不做完整性校验。两端的 chunk 顺序、chunk 边界、rekey_interval 必须一致，
  否则解密结果是无意义的字节，且不会报错（由调用方保证同步）。
"""
from __future__ import annotations

import logging

from .chacha20 import chacha20_block, check_key, KEY_SIZE
from .errors import InvalidRekeyInterval
from .keystream import KeystreamBuffer

log = logging.getLogger(__name__)

REKEY_INTERVAL = 224  # chunks per key epoch


def check_rekey_interval(rekey_interval: int) -> int:
    if isinstance(rekey_interval, bool) or not isinstance(rekey_interval, int) or rekey_interval <= 0:
        raise InvalidRekeyInterval(rekey_interval)
    return rekey_interval


class FSChaCha20:
    """Rekeying wrapper stream cipher around ChaCha20."""

    def __init__(self, initial_key: bytes, rekey_interval: int = REKEY_INTERVAL):
        self._key = check_key(initial_key)
        self._rekey_interval = check_rekey_interval(rekey_interval)
        self._block_counter = 0
        self._chunk_counter = 0
        self._keystream = KeystreamBuffer()

    @property
    def rekey_interval(self) -> int:
        return self._rekey_interval

    @property
    def chunk_counter(self) -> int:
        return self._chunk_counter

    @property
    def block_counter(self) -> int:
        return self._block_counter

    @property
    def epoch(self) -> int:
        return self._chunk_counter // self._rekey_interval

    @property
    def buffered(self) -> int:
        return len(self._keystream)

    def _nonce(self) -> bytes:
        # bytes 0..8: epoch (LE), bytes 8..12: zero
        return self.epoch.to_bytes(8, "little") + bytes(4)

    def _get_keystream_bytes(self, nbytes: int) -> bytes:
        while len(self._keystream) < nbytes:
            self._keystream.append(chacha20_block(self._key, self._nonce(), self._block_counter))
            self._block_counter += 1
        return self._keystream.take(nbytes)

    def crypt(self, chunk: bytes) -> bytes:
        chunk = bytes(chunk)
        n = len(chunk)
        ks = self._get_keystream_bytes(n)
        out = (int.from_bytes(chunk, "little") ^ int.from_bytes(ks, "little")).to_bytes(n, "little")

        if (self._chunk_counter + 1) % self._rekey_interval == 0:
            self._key = self._get_keystream_bytes(KEY_SIZE)
            self._block_counter = 0
            log.debug("rekey after chunk %d, entering epoch %d", self._chunk_counter + 1, self.epoch + 1)
        self._chunk_counter += 1
        return out

    def encrypt(self, chunk: bytes) -> bytes:
        return self.crypt(chunk)

    def decrypt(self, chunk: bytes) -> bytes:
        return self.crypt(chunk)


def new_cipher(initial_key: bytes, rekey_interval: int = REKEY_INTERVAL) -> FSChaCha20:
    return FSChaCha20(initial_key, rekey_interval)


def encrypt(cipher: FSChaCha20, chunk: bytes) -> bytes:
    return cipher.encrypt(chunk)


def decrypt(cipher: FSChaCha20, chunk: bytes) -> bytes:
    return cipher.decrypt(chunk)
