"""Register protocol between an I2C master and a slave holding demo registers."""

from __future__ import annotations

import random
import struct
from typing import Optional, Union

REQUEST_FORMAT = "<iB"
REQUEST_SIZE = struct.calcsize(REQUEST_FORMAT)
DUMMY_COMMAND = 255
STRING_LENGTH = 5

REGISTER_TYPES: tuple[str, ...] = ("req. count", "int", "byte", "char", "double", "string")

RegisterValue = Union[int, float, str]


def pack_request(request_count: int, command: int) -> bytes:
    """Wire form of a request: little-endian int32 counter then a command byte."""
    if not 0 <= command <= 255:
        raise ValueError(f"command must be in 0..255, got {command}")
    return struct.pack(REQUEST_FORMAT, request_count, command)


def unpack_request(data: bytes) -> tuple[int, int]:
    """Inverse of :func:`pack_request`."""
    if len(data) != REQUEST_SIZE:
        raise ValueError(f"request must be {REQUEST_SIZE} bytes, got {len(data)}")
    count, command = struct.unpack(REQUEST_FORMAT, data)
    return count, command


_SIZES = {0: 4, 1: 4, 2: 1, 3: 1, 4: 8, 5: STRING_LENGTH}


def decode_register(register: int, data: bytes) -> RegisterValue:
    """Decode the bytes a slave returned for ``register``."""
    if register not in _SIZES:
        raise ValueError(f"unknown register {register}")
    if len(data) != _SIZES[register]:
        raise ValueError(
            f"register {register} needs {_SIZES[register]} bytes, got {len(data)}"
        )
    if register in (0, 1):
        return struct.unpack("<i", data)[0]
    if register == 2:
        return data[0]
    if register == 3:
        return chr(data[0])
    if register == 4:
        return struct.unpack("<d", data)[0]
    return data.split(b"\x00", 1)[0].decode("latin-1")


def format_screen(request: int, register: int, value: RegisterValue) -> tuple[str, str, str]:
    """The three lines the master shows for a response."""
    if not 0 <= register < len(REGISTER_TYPES):
        raise ValueError(f"unknown register {register}")
    text = f"{value:.2f}" if isinstance(value, float) else str(value)
    label = "C" if register == 0 else f"r{register}"
    return f"Req {request}", f"{label}: {text}", f"Type: {REGISTER_TYPES[register]}"


class RegisterBank:
    """Slave-side registers answering the last command it received."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random(0)
        self.request_count = 0
        self.command = 0
        self.req_count = 0
        self.reg1 = 0
        self.reg2 = 0
        self.reg3 = "\x00"
        self.reg4 = 0.0
        self.reg5 = ""
        self.flash_count = 0
        self.update()

    def update(self) -> None:
        """Refill registers 1 to 5 with fresh random values."""
        rng = self._rng
        self.reg1 = 55500 + rng.randrange(0, 99)
        self.reg2 = 250 + rng.randrange(0, 5)
        self.reg3 = chr(rng.randrange(97, 122))
        self.reg4 = 22.0 + rng.randrange(0, 1000) / 1000.0
        self.reg5 = "".join(chr(rng.randrange(97, 122)) for _ in range(STRING_LENGTH - 1))

    def on_receive(self, data: bytes) -> None:
        """Store a request if it is well formed; the counter register follows it."""
        if len(data) == REQUEST_SIZE:
            self.request_count, self.command = unpack_request(data)
        self.req_count = self.request_count

    def on_request(self) -> bytes:
        """Bytes sent back for the current command."""
        command = self.command
        if command == 0:
            self.flash_count = 0
            return struct.pack("<i", self.req_count)
        if command == 1:
            return struct.pack("<i", self.reg1)
        if command == 2:
            return bytes([self.reg2])
        if command == 3:
            return self.reg3.encode("latin-1")
        if command == 4:
            return struct.pack("<d", self.reg4)
        if command == 5:
            return self.reg5.encode("latin-1") + b"\x00"
        return b"\x00"