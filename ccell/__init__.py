#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import logging
from random import Random
from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_KEYMAP, DEFAULT_RATE
from .cpu import CPU
from .debugger import Debugger
from .framebuffer import Framebuffer
from .frontend import Frontend
from .hostio import Loader
from .machine import Machine
from .ports import AudioPort, InputPort, LatestValue
from .ram import AddressOutOfRangeError

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


class StartupError(Exception):
    pass


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    logging.basicConfig(level=logging.DEBUG if args["debug"] else logging.INFO, format=LOG_FORMAT)
    opt_renderer = args["renderer"] or "pygame"
    mute_audio = bool(args["mute"])

    if opt_renderer == "pygame":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_pygame import Inputs
        from .renderers.r_pygame import Renderer

        if mute_audio:
            from .audio.a_null import Audio
        else:
            from .audio.a_pygame import Audio
    elif opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        from .audio.a_null import Audio
    else:
        raise StartupError("Unknown renderer '{}'".format(opt_renderer))

    # Read ROM binary before anything opens a window
    try:
        rom = Loader().load_binary(args["filename"])
    except OSError as err:
        raise StartupError("Unable to read ROM: {}".format(err)) from None

    # Channels crossing between the CPU thread and this (host) thread
    display_slot = LatestValue()

    seed = args["seed"]
    machine = Machine(framebuffer=Framebuffer(display_slot=display_slot), rng=Random(seed))

    # Writes the font, then the ROM at the program start address
    try:
        machine.boot(rom)
    except AddressOutOfRangeError:
        raise StartupError("ROM is too large to fit in RAM ({} bytes)".format(len(rom))) from None

    input_port = InputPort(machine.registers)
    audio_port = AudioPort()

    # Set up a new rendering system
    renderer = Renderer(scale=args["scale"], palette=args["palette"])
    renderer.set_resolution(*machine.framebuffer.get_vid_size())
    inputs = Inputs(args["keymap"] or DEFAULT_KEYMAP, renderer)
    audio = Audio()

    # Set up debugger and live output if necessary
    debugger = Debugger()
    debugger.set_live(args["debug"])

    rate = DEFAULT_RATE if args["rate"] is None else args["rate"]
    cpu = CPU(machine, input_port, audio_port, debugger, rate=rate)
    frontend = Frontend(renderer, inputs, audio, display_slot, input_port, audio_port)

    try:
        frontend.run(cpu)
    finally:
        # The CPU has quit, so shut down the rendering framework.  __del__ cannot be relied upon when using PyPy
        audio.shutdown()
        inputs.shutdown()
        renderer.shutdown()
