#!/usr/bin/env python3

"""
Peripheral Ports

The CPU runs on its own thread, while the host window, keyboard and speaker are
serviced from the main thread.  Everything crossing between the two goes
through a single-slot channel holding the latest value only, so neither side
ever sees a half-written frame or key state, and neither side waits on the
other.

Older values are simply overwritten.  The display only needs the newest frame,
the key bank only needs the newest key states, and the speaker only needs to
know whether it should currently be on.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from threading import Lock
from .constants import NUM_KEYS


class PortError(Exception):
    pass


class LatestValue:
    def __init__(self, value=None):
        self.lock = Lock()
        self.value = value
        self.fresh = value is not None

    def put(self, value):
        with self.lock:
            self.value = value
            self.fresh = True

    def take(self):
        # Returns None if nothing new has been put since the last take
        with self.lock:
            if not self.fresh:
                return None

            self.fresh = False
            return self.value


class InputPort:
    def __init__(self, registers, slot=None):
        self.registers = registers
        self.slot = LatestValue() if slot is None else slot

    def publish(self, key_states):
        # Host side
        if len(key_states) != NUM_KEYS:
            raise PortError("Key state snapshots must hold exactly 16 keys")

        self.slot.put(tuple(bool(state) for state in key_states))

    def update(self):
        # CPU side.  Called once per tick to refresh the key register bank
        key_states = self.slot.take()

        if key_states is None:
            return

        for key_num, state in enumerate(key_states):
            self.registers.set_key(key_num, state)


class AudioPort:
    def __init__(self, slot=None):
        self.slot = LatestValue(False) if slot is None else slot
        self.playing = False

    def play(self):
        if not self.playing:
            self.playing = True
            self.slot.put(True)

    def stop(self):
        if self.playing:
            self.playing = False
            self.slot.put(False)

    def poll(self):
        # Host side.  Returns True/False when the buzzer state changes, otherwise None
        return self.slot.take()
