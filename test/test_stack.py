#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from ccell.cell import ValueTooWideError
from ccell.stack import Stack, StackError, StackOverflowError, StackUnderflowError


class TestStack(unittest.TestCase):
    def setUp(self):
        self.stack = Stack(16)

    def _populate_stack(self):
        self.stack.push(0x200)
        self.stack.push(0x210)
        self.stack.push(0x220)

    def test_stack_push_pop(self):
        self._populate_stack()
        self.assertEqual(0x220, self.stack.pop())
        self.assertEqual(0x210, self.stack.pop())
        self.assertEqual(0x200, self.stack.pop())
        self.assertRaises(StackUnderflowError, self.stack.pop)

    def test_stack_overflow(self):
        for i in range(16):
            self.stack.push(i)

        self.assertRaises(StackOverflowError, self.stack.push, 0x1)
        self.assertEqual(16, len(self.stack.get_items()))

    def test_stack_underflow(self):
        self.assertRaises(StackError, self.stack.pop)

    def test_stack_item_too_wide(self):
        self.stack.push(0xFFFF)
        self.assertRaises(ValueTooWideError, self.stack.push, 0x10000)

    def test_stack_clear(self):
        self._populate_stack()
        self.stack.clear()
        self.assertEqual([], self.stack.get_items())
