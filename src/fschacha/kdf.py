"""
fschacha.kdf
从调用方提供的共享密钥派生双向初始 key（HKDF-SHA256）。

共享密钥如何获得（握手/预置）不在本库范围内。
"""
from __future__ import annotations

from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF, HKDFExpand

from .chacha20 import KEY_SIZE


def hkdf_extract_expand(ikm: bytes, salt: bytes, info: bytes, length: int) -> bytes:
    """HKDF-Extract + HKDF-Expand (SHA-256)."""
    hkdf = HKDF(algorithm=hashes.SHA256(), length=length, salt=salt or None, info=info)
    return hkdf.derive(ikm)


def hkdf_expand(prk: bytes, info: bytes, length: int) -> bytes:
    """Expand-only HKDF (SHA-256)."""
    exp = HKDFExpand(algorithm=hashes.SHA256(), length=length, info=info)
    return exp.derive(prk)


@dataclass
class ChannelKeys:
    send_key: bytes  # 32 bytes
    recv_key: bytes  # 32 bytes


def derive_channel_keys(secret: bytes, salt: bytes = b"", initiator: bool = True) -> ChannelKeys:
    """
    initiator 发送方向使用 i2r，responder 发送方向使用 r2i；两端用同一 secret/salt
    调用后，一端的 send_key 恰好是另一端的 recv_key。
    """
    if not secret:
        raise ValueError("secret must not be empty")

    master = hkdf_extract_expand(ikm=secret, salt=salt, info=b"fschacha|master", length=KEY_SIZE)
    k_i2r = hkdf_expand(master, info=b"fschacha|key|i2r", length=KEY_SIZE)
    k_r2i = hkdf_expand(master, info=b"fschacha|key|r2i", length=KEY_SIZE)

    if initiator:
        return ChannelKeys(send_key=k_i2r, recv_key=k_r2i)
    return ChannelKeys(send_key=k_r2i, recv_key=k_i2r)
