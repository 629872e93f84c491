"""I2C device access over a pluggable bus transport."""

from __future__ import annotations

from dataclasses import dataclass, field


class I2CError(IOError):
    """Raised when a transfer moves fewer bytes than requested."""


@dataclass(frozen=True)
class I2CConfig:
    """Settings of one I2C device and the bus it sits on."""

    bus_id: int
    address: int
    frequency: int
    pin_sda: int
    pin_scl: int


@dataclass
class MemoryTransport:
    """An in-memory bus: records writes and serves reads from ``incoming``."""

    incoming: bytearray = field(default_factory=bytearray)
    writes: list[tuple[int, bytes, bool]] = field(default_factory=list)
    reads: list[tuple[int, int, bool]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.incoming = bytearray(self.incoming)

    def write(self, address: int, data: bytes, nostop: bool) -> int:
        """Record a write and report every byte as sent."""
        self.writes.append((address, bytes(data), nostop))
        return len(data)

    def read(self, address: int, length: int, nostop: bool) -> bytes:
        """Return up to ``length`` queued bytes."""
        self.reads.append((address, length, nostop))
        chunk = bytes(self.incoming[:length])
        del self.incoming[:length]
        return chunk


class I2CDevice:
    """One addressed device on an I2C bus.

    The transport needs ``write(address, data, nostop) -> int`` and
    ``read(address, length, nostop) -> bytes``.
    """

    def __init__(self, config: I2CConfig, transport) -> None:
        self.config = config
        self.address = config.address
        self.bus = 1 if config.bus_id else 0
        self.transport = transport

    def write_byte(self, value: int) -> None:
        """Write a single byte and release the bus."""
        self._write(bytes([value]), nostop=False)

    def read_byte(self) -> int:
        """Read a single byte, keeping the bus."""
        return self._read(1, nostop=True)[0]

    def write(self, data: bytes) -> None:
        """Write ``data``, keeping the bus."""
        self._write(bytes(data), nostop=True)

    def read(self, length: int) -> bytes:
        """Read ``length`` bytes and release the bus."""
        return self._read(length, nostop=False)

    def _write(self, data: bytes, nostop: bool) -> None:
        sent = self.transport.write(self.address, data, nostop)
        if sent != len(data):
            raise I2CError(f"wrote {sent} of {len(data)} bytes to 0x{self.address:02X}")

    def _read(self, length: int, nostop: bool) -> bytes:
        data = bytes(self.transport.read(self.address, length, nostop))
        if len(data) != length:
            raise I2CError(f"read {len(data)} of {length} bytes from 0x{self.address:02X}")
        return data