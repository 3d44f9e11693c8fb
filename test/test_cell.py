#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from ccell.cell import Cell, ValueTooWideError, check_width


class TestCell(unittest.TestCase):
    def setUp(self):
        self.cell = Cell(8, name="V0")

    def test_cell_init(self):
        self.assertEqual(0, self.cell.read())
        self.assertEqual(0x200, Cell(16, 0x200).read())
        self.assertRaises(ValueTooWideError, Cell, 4, 0x10)

    def test_cell_write(self):
        self.cell.write(0xFF)
        self.assertEqual(0xFF, self.cell.read())

    def test_cell_write_too_wide(self):
        self.cell.write(0x12)
        self.assertRaises(ValueTooWideError, self.cell.write, 0x100)
        # Failed writes leave the old value in place
        self.assertEqual(0x12, self.cell.read())

    def test_cell_write_negative(self):
        self.assertRaises(ValueTooWideError, self.cell.write, -1)

    def test_cell_add(self):
        self.cell.write(0xFE)
        self.cell.add(1)
        self.assertEqual(0xFF, self.cell.read())
        self.assertRaises(ValueTooWideError, self.cell.add, 1)
        self.cell.add(-0xFF)
        self.assertEqual(0, self.cell.read())

    def test_cell_single_bit(self):
        cell = Cell(1)
        cell.write(1)
        self.assertEqual(1, cell.read())
        self.assertRaises(ValueTooWideError, cell.write, 2)

    def test_check_width_message(self):
        with self.assertRaises(ValueTooWideError) as context:
            check_width(0x1000, 12, "I")

        self.assertIn("I cannot hold 0x1000", str(context.exception))
