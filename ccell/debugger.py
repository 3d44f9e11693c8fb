#!/usr/bin/env python3

"""
CPU Debugger

If enabled, this will log information before each instruction executed:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * PC - Program counter
    * OP - OpCode number
    * IN - Decoded instruction

If a crash occurs, all of the above will be logged, with the addition of the
stack contents and any pending keypress wait.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import logging

logger = logging.getLogger(__name__)


class Debugger:
    def __init__(self):
        self.live = False

    def debug(self, machine, opcode, instruction, verbose=False):
        regs = machine.registers
        debug_str = (
            "V: 0x" + ("{:02x}" * 16) + " I: 0x{:03x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: {} IN: {}"
        ).format(
            *list(reversed(regs.get_values())) +
            [regs.i.read(), machine.delay_timer.read(), machine.sound_timer.read(), regs.pc.read(),
             "----" if opcode is None else "0x{:04x}".format(opcode),
             instruction]
        )

        if verbose:
            stack_items = machine.stack.get_items()
            stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
            debug_str += "\nStack:{}".format(stack_str or " (Empty)")

            if machine.awaiting_key is not None:
                debug_str += "\nWaiting for keypress into V{:x}".format(machine.awaiting_key)

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def output(self, machine, opcode, instruction):
        logger.debug(self.debug(machine, opcode, instruction))
