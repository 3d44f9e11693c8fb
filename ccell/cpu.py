#!/usr/bin/env python3

"""
CPU Emulator (CHIP-8)

Like a real computer, this is where most of the processing happens.  Each tick
of the scheduler fetches one opcode, decodes it through the dispatch table and
executes it, then services the peripherals:

    1. Publish the framebuffer to the display, if a redraw was scheduled
    2. Count down the delay timer, if it is ticking
    3. Count down the sound timer, if it is ticking, keeping the buzzer on
       while it does (and off otherwise)
    4. Refresh the key registers from the input port

Ticks are paced at a fixed rate.  If a tick overruns its time slot, the next
one starts straight away, with no attempt to catch up on lost time.

Any failure inside a tick halts emulation.  There is no retrying, since a
program which has hit an unknown opcode or blown the stack cannot sensibly
continue.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import logging
from threading import Event
from time import perf_counter
from .cell import CellError
from .constants import APP_INTRO, DEFAULT_RATE
from .instructions import INSTRUCTION_SET, DispatchTable, InstructionError, UnknownInstructionError, decode
from .ports import PortError
from .ram import RAMError
from .stack import StackError
from .timers import TimerError

logger = logging.getLogger(__name__)

HALTING_ERRORS = (CellError, RAMError, StackError, TimerError, InstructionError, PortError)


class CPUError(Exception):
    pass


class CPU:
    def __init__(self, machine, input_port, audio_port, debugger, rate=DEFAULT_RATE, instructions=INSTRUCTION_SET):
        self.machine = machine
        self.input_port = input_port
        self.audio_port = audio_port
        self.debugger = debugger
        self.live_debug = self.debugger.is_live()

        # Built once.  Raises DispatchError if any two instructions could match the same opcode
        self.dispatch_table = DispatchTable(instructions)

        # A rate of 0 (or less) runs uncapped
        self.tick_interval = None if rate <= 0 else 1.0 / rate
        self.stop_event = Event()

        # Program counter and opcode of the instruction being executed, kept for crash reports
        self.debug_pc = 0
        self.opcode = None
        self.instruction = None
        self.ticks = 0

    def fetch(self):
        return self.machine.ram.read(self.machine.registers.pc.read(), 2)

    def step(self):
        # Fetch, decode, execute
        self.debug_pc = self.machine.registers.pc.read()
        self.instruction = None
        self.opcode = None  # Unknown until the fetch succeeds
        self.opcode = self.fetch()
        self.instruction = self.dispatch_table.lookup(self.opcode)
        op = decode(self.opcode)

        if self.live_debug:
            self.debugger.output(self.machine, self.opcode, self.instruction.describe(op))

        self.instruction.execute(self.machine, op)

    def tick(self):
        machine = self.machine
        self.step()
        machine.framebuffer.draw()

        if machine.delay_timer.ticking():
            machine.delay_timer.count_down()

        if machine.sound_timer.ticking():
            self.audio_port.play()
            machine.sound_timer.count_down()
        else:
            self.audio_port.stop()

        self.input_port.update()
        self.ticks += 1

    def is_waiting_for_key(self):
        return self.machine.awaiting_key is not None

    def stop(self):
        # Safe to call from another thread.  The run loop exits at the next tick boundary
        self.stop_event.set()

    def run(self, max_ticks=None):
        tick_interval = self.tick_interval
        stop_event = self.stop_event
        ticks_run = 0
        logger.info("Starting emulation at 0x%03x", self.machine.registers.pc.read())

        try:
            while not stop_event.is_set():
                if max_ticks is not None and ticks_run >= max_ticks:
                    break

                tick_start = perf_counter()
                self.tick()
                ticks_run += 1

                if tick_interval is not None:
                    # Sleep off whatever is left of this tick's time slot.  Overruns are not made up later
                    remaining = tick_interval - (perf_counter() - tick_start)

                    if remaining > 0:
                        stop_event.wait(remaining)
        except HALTING_ERRORS as err:
            self._halt(err)
        finally:
            self.audio_port.stop()

        logger.info("Emulation stopped after %d ticks", ticks_run)

    def _halt(self, err):
        debug_info = self.debugger.debug(
            self.machine, self.opcode, "???" if self.instruction is None else self.instruction.name, verbose=True
        )

        if isinstance(err, UnknownInstructionError):
            reason = "Opcode 0x{:04x} at address 0x{:03x} is not emulated.".format(err.opcode, self.debug_pc)
        else:
            reason = "{} at address 0x{:03x} failed: {}".format(
                "Fetch" if self.instruction is None else "Instruction " + self.instruction.name, self.debug_pc, err
            )

        message = "Emulation halted.\n\n{}Debug info:\n{}\n\n{}".format(APP_INTRO, debug_info, reason)
        logger.error(message)
        raise CPUError(message) from err
