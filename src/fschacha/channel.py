"""
fschacha.channel
双向数据通道：发送/接收各一个 FSChaCha20。

只做 keystream 异或，不做 framing、不带认证 tag；两端必须按相同顺序处理 chunk。
"""
from __future__ import annotations

from dataclasses import dataclass

from .fschacha20 import FSChaCha20, REKEY_INTERVAL
from .kdf import ChannelKeys


@dataclass
class SecureChannel:
    send: FSChaCha20
    recv: FSChaCha20

    @staticmethod
    def from_channel_keys(keys: ChannelKeys, rekey_interval: int = REKEY_INTERVAL) -> "SecureChannel":
        return SecureChannel(
            send=FSChaCha20(keys.send_key, rekey_interval),
            recv=FSChaCha20(keys.recv_key, rekey_interval),
        )

    def encrypt(self, chunk: bytes) -> bytes:
        return self.send.encrypt(chunk)

    def decrypt(self, chunk: bytes) -> bytes:
        return self.recv.decrypt(chunk)
