#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from threading import Thread
from ccell.ports import AudioPort, InputPort, LatestValue, PortError
from ccell.registers import Registers


class TestLatestValue(unittest.TestCase):
    def test_latest_value_take(self):
        slot = LatestValue()
        self.assertIsNone(slot.take())
        slot.put(1)
        slot.put(2)
        # Only the newest value is kept
        self.assertEqual(2, slot.take())
        self.assertIsNone(slot.take())

    def test_latest_value_initial(self):
        slot = LatestValue(False)
        self.assertFalse(slot.take())
        self.assertIsNone(slot.take())

    def test_latest_value_across_threads(self):
        slot = LatestValue()

        def producer():
            for i in range(1000):
                slot.put(i)

        thread = Thread(target=producer)
        thread.start()
        thread.join()
        self.assertEqual(999, slot.take())


class TestInputPort(unittest.TestCase):
    def setUp(self):
        self.regs = Registers()
        self.input_port = InputPort(self.regs)

    def test_input_port_update(self):
        key_states = [False] * 16
        key_states[0xA] = True
        self.input_port.publish(key_states)
        self.assertFalse(self.regs.is_key_down(0xA))
        self.input_port.update()
        self.assertTrue(self.regs.is_key_down(0xA))

    def test_input_port_update_without_snapshot(self):
        self.regs.set_key(0x3, True)
        self.input_port.update()
        self.assertTrue(self.regs.is_key_down(0x3))

    def test_input_port_release(self):
        self.input_port.publish([True] * 16)
        self.input_port.update()
        self.input_port.publish([False] * 16)
        self.input_port.update()
        self.assertIsNone(self.regs.get_pressed_key())

    def test_input_port_bad_snapshot(self):
        self.assertRaises(PortError, self.input_port.publish, [False] * 15)


class TestAudioPort(unittest.TestCase):
    def test_audio_port(self):
        audio_port = AudioPort()
        self.assertFalse(audio_port.poll())
        self.assertIsNone(audio_port.poll())
        audio_port.play()
        audio_port.play()
        self.assertTrue(audio_port.poll())
        self.assertIsNone(audio_port.poll())
        audio_port.stop()
        self.assertFalse(audio_port.poll())
