#!/usr/bin/env python3

"""
Timer Emulator

Both the delay timer and the sound timer are 8-bit down-counters.  They are
decremented once per scheduler tick while above zero, and sit at zero
otherwise.  The scheduler must ask whether a timer is ticking before counting
it down.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .cell import Cell


class TimerError(Exception):
    pass


class Timer:
    def __init__(self, name):
        self.cell = Cell(8, name=name)

    def read(self):
        return self.cell.read()

    def set(self, value):
        self.cell.write(value)

    def ticking(self):
        return self.cell.read() > 0

    def count_down(self):
        if not self.ticking():
            raise TimerError("{} counted down while already at zero".format(self.cell.name))

        self.cell.add(-1)
