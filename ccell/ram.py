#!/usr/bin/env python3

"""
RAM Emulator

Supports reading and writing of blocks of memory or individual cells.  The
same class backs both system RAM (4096 cells of 8 bits) and video memory (one
1-bit cell per pixel).

Reads of more than one cell are packed into a single big-endian integer, so a
2-byte opcode can be fetched with one call.  Every access is bounds-checked, and
every write is width-checked, so nothing wraps or truncates silently.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .cell import check_width
from .constants import RAM_SIZE


class RAMError(Exception):
    pass


class AddressOutOfRangeError(RAMError):
    pass


class Memory:
    def __init__(self, mem_size, item_bits=8, name="RAM"):
        self.item_bits = item_bits
        self.name = name
        self.mem = memoryview(bytearray(mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def check_overflow(self, location):
        if location < 0 or location > self.mem_top:
            raise AddressOutOfRangeError("{} address 0x{:x} out of range".format(self.name, location))

    def read(self, location, length=1):
        self.check_overflow(location)
        self.check_overflow(location + length - 1)
        item_bits = self.item_bits
        value = 0

        for item in self.mem[location:location + length]:
            value = (value << item_bits) | item

        return value

    def read_block(self, location, size=1):
        self.check_overflow(location)
        self.check_overflow(location + size - 1)
        return bytes(self.mem[location:location + size])

    def write(self, location, value):
        self.check_overflow(location)
        check_width(value, self.item_bits, self.name)
        self.mem[location] = value

    def write_block(self, location, block):
        if not block:
            return

        block_top = location + len(block)
        self.check_overflow(location)
        self.check_overflow(block_top - 1)

        for value in block:
            check_width(value, self.item_bits, self.name)

        self.mem[location:block_top] = bytes(block)

    def clear_all(self):
        self.mem[:] = bytes(self.mem_size)


class RAM(Memory):
    def __init__(self):
        super().__init__(RAM_SIZE, 8, "RAM")
