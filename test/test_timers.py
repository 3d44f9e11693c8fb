#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from ccell.cell import ValueTooWideError
from ccell.timers import Timer, TimerError


class TestTimer(unittest.TestCase):
    def setUp(self):
        self.timer = Timer("DT")

    def test_timer_init(self):
        self.assertEqual(0, self.timer.read())
        self.assertFalse(self.timer.ticking())

    def test_timer_count_down(self):
        self.timer.set(2)
        self.assertTrue(self.timer.ticking())
        self.timer.count_down()
        self.assertEqual(1, self.timer.read())
        self.timer.count_down()
        self.assertEqual(0, self.timer.read())
        self.assertFalse(self.timer.ticking())

    def test_timer_count_down_at_zero(self):
        self.assertRaises(TimerError, self.timer.count_down)

    def test_timer_set_validates_value(self):
        self.timer.set(0xFF)
        self.assertRaises(ValueTooWideError, self.timer.set, 0x100)
        self.assertRaises(ValueTooWideError, self.timer.set, -1)
        self.assertEqual(0xFF, self.timer.read())
