#!/usr/bin/env python3

"""
Register File

Holds the 16 general-purpose data registers (V0 to Vf), the program counter,
the index (memory address) register, and one single-bit register per hex key.

Vf doubles as the flag register, and is overwritten by arithmetic, shift and
drawing instructions.  Key registers are only written by the input port.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .cell import Cell
from .constants import (
    ADDRESS_REGISTER_BITS, DATA_REGISTER_BITS, KEY_REGISTER_BITS, NUM_DATA_REGISTERS, NUM_KEYS, PROGRAM_COUNTER_BITS,
    PROGRAM_START
)
from .ram import AddressOutOfRangeError


class Registers:
    def __init__(self):
        self.v = [Cell(DATA_REGISTER_BITS, name="V{:x}".format(n)) for n in range(NUM_DATA_REGISTERS)]
        self.pc = Cell(PROGRAM_COUNTER_BITS, PROGRAM_START, name="PC")
        self.i = Cell(ADDRESS_REGISTER_BITS, name="I")
        self.keys = [Cell(KEY_REGISTER_BITS, name="K{:x}".format(n)) for n in range(NUM_KEYS)]

    def reset(self):
        for reg in self.v:
            reg.write(0)

        for key in self.keys:
            key.write(0)

        self.pc.write(PROGRAM_START)
        self.i.write(0)

    def _check_index(self, bank, index, label):
        if index < 0 or index >= len(bank):
            raise AddressOutOfRangeError("{} register index 0x{:x} out of range".format(label, index))

    def read(self, index):
        self._check_index(self.v, index, "Data")
        return self.v[index].read()

    def write(self, index, value):
        self._check_index(self.v, index, "Data")
        self.v[index].write(value)

    def is_key_down(self, key):
        self._check_index(self.keys, key, "Key")
        return self.keys[key].read() == 1

    def set_key(self, key, down):
        self._check_index(self.keys, key, "Key")
        self.keys[key].write(int(bool(down)))

    def get_pressed_key(self):
        # Lowest numbered key wins if several are held
        for key_num, key in enumerate(self.keys):
            if key.read():
                return key_num

        return None

    def get_values(self):
        # For debugging
        return [reg.read() for reg in self.v]
