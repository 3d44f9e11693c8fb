#!/usr/bin/env python3

"""
PyGame Input Plugin

The 16-key snapshot is read straight from PyGame's keyboard state, so a key
counts as held for exactly as long as it is physically down.  Events are only
pumped to keep the window responsive and to spot a request to quit.

If the window is closed, or Escape is released, this reports that the program
should quit, and the host loop will stop the CPU.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .i_null import Inputs as InputsBase


class Inputs(InputsBase):
    def process_messages(self):
        quit_program = False

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_program = True
            elif event.type == pygame.KEYUP and event.key == pygame.K_ESCAPE:
                quit_program = True

        return quit_program

    def get_key_states(self):
        # Keymap codes are PyGame key constants, which index the pressed-key table directly
        pressed = pygame.key.get_pressed()

        for host_key, hex_key in self.keymap_dict.items():
            self.key_down[hex_key] = bool(pressed[host_key])

        return super().get_key_states()
