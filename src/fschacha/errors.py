"""
fschacha.errors
错误类型：长度/参数不合法在构造边界上直接抛出（均为 ValueError 子类）。
"""
from __future__ import annotations


class FSChaChaError(ValueError):
    pass


class InvalidKeyLength(FSChaChaError):
    def __init__(self, got: int):
        super().__init__(f"key must be 32 bytes, got {got}")
        self.got = got


class InvalidNonceLength(FSChaChaError):
    def __init__(self, got: int):
        super().__init__(f"nonce must be 12 bytes, got {got}")
        self.got = got


class InvalidRekeyInterval(FSChaChaError):
    def __init__(self, value):
        super().__init__(f"rekey_interval must be a positive integer, got {value!r}")
        self.value = value
