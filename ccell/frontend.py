#!/usr/bin/env python3

"""
Host Frontend

Runs on the main thread, since window systems generally insist on it, while the
CPU runs on a thread of its own.  Once per host frame this:

    * Pumps window and keyboard events, and publishes the key states
    * Renders the newest framebuffer snapshot, if there is one
    * Switches the buzzer on or off if the CPU asked for it

Closing the window (or pressing Escape) stops the CPU.  If the CPU halts with an
error, the frontend stops too, and the error is raised again on the main thread
once the CPU thread has finished.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import logging
from threading import Thread
from time import perf_counter, sleep
from .constants import APP_NAME, HOST_FREQ

logger = logging.getLogger(__name__)

HOST_INTERVAL = 1.0 / HOST_FREQ


class Frontend:
    def __init__(self, renderer, inputs, audio, display_slot, input_port, audio_port):
        self.renderer = renderer
        self.inputs = inputs
        self.audio = audio
        self.display_slot = display_slot
        self.input_port = input_port
        self.audio_port = audio_port
        self.cpu_error = None

    def refresh(self):
        # Returns True if the user has asked to quit
        if self.inputs.process_messages():
            return True

        self.input_port.publish(self.inputs.get_key_states())
        frame = self.display_slot.take()

        if frame is not None:
            self.renderer.draw_frame(frame)

        buzzer = self.audio_port.poll()

        if buzzer is not None:
            self.audio.enable_buzzer(buzzer)

        return False

    def _run_cpu(self, cpu, max_ticks):
        try:
            cpu.run(max_ticks)
        except Exception as err:  # pylint: disable=broad-except
            # Handed back to the main thread, and raised from there
            self.cpu_error = err

    def run(self, cpu, max_ticks=None):
        self.renderer.set_title(APP_NAME)
        cpu_thread = Thread(target=self._run_cpu, args=(cpu, max_ticks), name="cpu")
        cpu_thread.daemon = True
        cpu_thread.start()

        try:
            while cpu_thread.is_alive():
                frame_start = perf_counter()

                if self.refresh():
                    logger.info("Quit requested")
                    break

                remaining = HOST_INTERVAL - (perf_counter() - frame_start)

                if remaining > 0:
                    sleep(remaining)
        finally:
            cpu.stop()
            cpu_thread.join()
            self.audio.enable_buzzer(False)

        # Show whatever was drawn last before the CPU stopped
        frame = self.display_slot.take()

        if frame is not None:
            self.renderer.draw_frame(frame)

        if self.cpu_error is not None:
            raise self.cpu_error
