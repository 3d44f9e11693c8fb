#!/usr/bin/env python3

"""
Machine State

Everything an instruction can touch lives here: RAM, video memory, the register
file, the call stack, both timers and the random number source.  The CPU owns
one Machine for the whole run and hands it to each instruction as it executes.

The random source is injected so that RND results can be reproduced with a
seed.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import Random
from .constants import FONT, FONT_LOCATION, PROGRAM_START, STACK_DEPTH
from .framebuffer import Framebuffer
from .ram import RAM
from .registers import Registers
from .stack import Stack
from .timers import Timer


class Machine:
    def __init__(self, framebuffer=None, rng=None):
        self.ram = RAM()
        self.framebuffer = Framebuffer() if framebuffer is None else framebuffer
        self.registers = Registers()
        self.stack = Stack(STACK_DEPTH)
        self.delay_timer = Timer("DT")
        self.sound_timer = Timer("ST")
        self.rng = Random() if rng is None else rng

        # Index of the register waiting for a keypress (LD Vx, K), otherwise None
        self.awaiting_key = None

    def boot(self, rom=b""):
        self.ram.clear_all()
        self.framebuffer.clear()
        self.framebuffer.schedule_redraw()
        self.registers.reset()
        self.stack.clear()
        self.delay_timer.set(0)
        self.sound_timer.set(0)
        self.awaiting_key = None

        # Write system font, then the ROM binary.  Oversized ROMs fail the RAM bounds check here
        self.ram.write_block(FONT_LOCATION, FONT)
        self.ram.write_block(PROGRAM_START, rom)

    def random_byte(self):
        return self.rng.randint(0, 0xFF)
