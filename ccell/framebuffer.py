#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here by the CPU, and only handed over to the host display
when a redraw has been scheduled.  Unlike other computers, programs for this
system cannot write directly into video RAM.  Instead, sprites are drawn to the
screen using an XOR method, and collisions (where a set pixel was unset by the
XOR) are reported back.

Sprite pixels which fall off the right or bottom edges wrap around to the
opposite side.

Drawing instructions call schedule_redraw().  Once per tick the scheduler calls
draw(), which publishes a snapshot of the whole bit grid to the display slot
if a redraw is pending.  The host thread renders whatever snapshot is newest.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_HEIGHT, VID_WIDTH
from .ports import LatestValue
from .ram import Memory


class Framebuffer:
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT, display_slot=None):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.vram = Memory(self.vid_size, 1, "VRAM")
        self.display_slot = LatestValue() if display_slot is None else display_slot
        self.redraw_pending = False

    def clear(self):
        self.vram.clear_all()

    def xor_pixel(self, x, y):
        # Returns True on collision
        x %= self.vid_width
        y %= self.vid_height
        vram_loc = y * self.vid_width + x
        pixel = self.vram.read(vram_loc)
        self.vram.write(vram_loc, pixel ^ 1)
        return pixel == 1

    def get_pixel(self, x, y):
        return self.vram.read(y * self.vid_width + x)

    def schedule_redraw(self):
        self.redraw_pending = True

    def draw(self):
        if not self.redraw_pending:
            return False

        self.display_slot.put(self.snapshot())
        self.redraw_pending = False
        return True

    def snapshot(self):
        # One byte per pixel, row-major.  Immutable, so safe to hand to another thread
        return self.vram.read_block(0, self.vid_size)

    def get_vid_size(self):
        return self.vid_width, self.vid_height
