#!/usr/bin/env python3

"""
Cell Emulator

A cell is the smallest unit of emulated storage: a single register, or one
location of RAM or video memory.  Every cell has a declared width in bits, and
will refuse any value that does not fit, rather than quietly truncating it.

Instructions which need wraparound arithmetic must mask their results before
writing them.  Anything else reaching a cell with a wide value is a bug, and
should halt emulation.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class CellError(Exception):
    pass


class ValueTooWideError(CellError):
    pass


def check_width(value, width, name="Cell"):
    # Negative numbers never shift down to zero, so these are caught too
    if value >> width != 0:
        raise ValueTooWideError("{} cannot hold 0x{:x} in {} bit(s)".format(name, value, width))


class Cell:
    def __init__(self, width, value=0, name="Cell"):
        self.width = width
        self.name = name
        check_width(value, width, name)
        self.value = value

    def read(self):
        return self.value

    def write(self, value):
        check_width(value, self.width, self.name)
        self.value = value

    def add(self, delta):
        self.write(self.value + delta)

    def __repr__(self):
        return "{}(0x{:x})".format(self.name, self.value)
