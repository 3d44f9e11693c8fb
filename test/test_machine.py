#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from random import Random
from ccell.constants import FONT
from ccell.machine import Machine
from ccell.ram import AddressOutOfRangeError


def _lit_pixels(framebuffer):
    # Coordinates of every set pixel, row by row
    vid_width = framebuffer.vid_width
    return [(loc % vid_width, loc // vid_width) for loc, pixel in enumerate(framebuffer.snapshot()) if pixel]


class TestMachine(unittest.TestCase):
    def setUp(self):
        self.machine = Machine(rng=Random(7))

    def test_machine_boot(self):
        self.machine.boot(b"\x12\x00")
        self.assertEqual(FONT, self.machine.ram.read_block(0x000, 80))
        self.assertEqual(0x1200, self.machine.ram.read(0x200, 2))
        self.assertEqual(0x200, self.machine.registers.pc.read())
        self.assertEqual(0x000, self.machine.registers.i.read())
        self.assertEqual([0] * 16, self.machine.registers.get_values())
        self.assertTrue(self.machine.framebuffer.redraw_pending)

    def test_machine_font_glyphs(self):
        self.machine.boot()
        # 0 and F, at 5 bytes per glyph
        self.assertEqual(b"\xF0\x90\x90\x90\xF0", self.machine.ram.read_block(0x00, 5))
        self.assertEqual(b"\xF0\x80\xF0\x80\x80", self.machine.ram.read_block(0x4B, 5))

    def test_machine_reboot(self):
        self.machine.boot(b"\xAA\xBB")
        self.machine.registers.write(0x3, 0x33)
        self.machine.stack.push(0x222)
        self.machine.delay_timer.set(0x10)
        self.machine.framebuffer.xor_pixel(1, 1)
        self.machine.awaiting_key = 0x3
        self.machine.boot(b"\xCC")
        self.assertEqual(0, self.machine.registers.read(0x3))
        self.assertEqual([], self.machine.stack.get_items())
        self.assertEqual(0, self.machine.delay_timer.read())
        self.assertEqual([], _lit_pixels(self.machine.framebuffer))
        self.assertIsNone(self.machine.awaiting_key)
        self.assertEqual(0xCC00, self.machine.ram.read(0x200, 2))

    def test_machine_boot_largest_rom(self):
        self.machine.boot(bytes([0xAB]) * 3584)
        self.assertEqual(0xAB, self.machine.ram.read(0xFFF))

    def test_machine_boot_oversized_rom(self):
        self.assertRaises(AddressOutOfRangeError, self.machine.boot, bytes(3585))

    def test_machine_random_byte(self):
        expected = Random(7)
        self.assertEqual([expected.randint(0, 0xFF) for _ in range(8)],
                         [self.machine.random_byte() for _ in range(8)])
