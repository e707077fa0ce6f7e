"""Linux i2c-dev access with SMBus byte transfers and retry on busy devices."""

from __future__ import annotations

import errno
import fcntl
import os
import struct
import time
from array import array
from typing import Protocol

I2C_SLAVE = 0x0703
I2C_SMBUS = 0x0720
_SMBUS_WRITE = 0
_SMBUS_READ = 1
_SMBUS_BYTE_DATA = 2
_SMBUS_DATA_SIZE = 34
_IOCTL_LAYOUT = "@BBIP"

_RETRY_LIMIT_MS = 10000


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


class SMBusDevice(Protocol):
    def smbus_write_byte_data(self, register: int, value: int) -> None: ...

    def smbus_read_byte_data(self, register: int) -> int: ...


class LinuxI2CDevice:
    """An open ``/dev/i2c-N`` character device talking to one slave address."""

    def __init__(self, path: str | os.PathLike[str], address: int) -> None:
        self._fd: int | None = os.open(os.fspath(path), os.O_RDWR)
        try:
            self.set_slave_address(address)
        except BaseException:
            self.close()
            raise

    def _descriptor(self) -> int:
        if self._fd is None:
            raise ValueError("I/O operation on closed I2C device")
        return self._fd

    def set_slave_address(self, address: int) -> None:
        """Direct further transfers at ``address``."""
        fcntl.ioctl(self._descriptor(), I2C_SLAVE, address)

    def _smbus_access(self, read_write: int, register: int, data: array) -> None:
        request = struct.pack(
            _IOCTL_LAYOUT, read_write, register, _SMBUS_BYTE_DATA, data.buffer_info()[0]
        )
        fcntl.ioctl(self._descriptor(), I2C_SMBUS, request)

    def smbus_write_byte_data(self, register: int, value: int) -> None:
        """Write one byte to a register of the current slave."""
        _check_byte("register", register)
        _check_byte("value", value)
        data = array("B", bytes(_SMBUS_DATA_SIZE))
        data[0] = value
        self._smbus_access(_SMBUS_WRITE, register, data)

    def smbus_read_byte_data(self, register: int) -> int:
        """Read one byte from a register of the current slave."""
        _check_byte("register", register)
        data = array("B", bytes(_SMBUS_DATA_SIZE))
        self._smbus_access(_SMBUS_READ, register, data)
        return data[0]

    def close(self) -> None:
        if self._fd is not None:
            fd, self._fd = self._fd, None
            os.close(fd)

    def __enter__(self) -> LinuxI2CDevice:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _retry_on_enxio(operation):
    retry_ms = 1
    while True:
        try:
            return operation()
        except OSError as exc:
            if exc.errno != errno.ENXIO:
                raise
            time.sleep(retry_ms / 1000)
            retry_ms <<= 1
            if retry_ms > _RETRY_LIMIT_MS:
                raise


def force_write_byte_data(device: SMBusDevice, register: int, value: int) -> None:
    """Write a register, retrying with doubling back-off while the device answers ENXIO."""
    _retry_on_enxio(lambda: device.smbus_write_byte_data(register, value))


def force_read_byte_data(device: SMBusDevice, register: int) -> int:
    """Read a register, retrying with doubling back-off while the device answers ENXIO."""
    return _retry_on_enxio(lambda: device.smbus_read_byte_data(register))