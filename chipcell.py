#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

import sys
from argparse import ArgumentParser
from ccell import main, StartupError
from ccell.constants import DEFAULT_KEYMAP, DEFAULT_RATE
from ccell.cpu import CPUError
from ccell.inputs.i_null import InputsError
from ccell.renderers.r_null import RendererError


def parse_args(argv=None):
    parser = ArgumentParser()
    parser.add_argument("filename", help="ROM to execute (normally ending in .ch8 or .c8)")
    parser.add_argument(
        "-r", "--rate", type=int, default=DEFAULT_RATE,
        help="set the scheduler speed in ticks/second (default {}, 0 = uncapped).  Timers count down once per tick"
        .format(DEFAULT_RATE)
    )
    parser.add_argument(
        "--renderer", choices=["pygame", "null"], default="pygame",
        help="set the rendering, input, and audio systems (pygame by default, null for headless runs)"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the window width in pixels (default 640)"
    )
    parser.add_argument(
        "-m", "--mute", type=int, choices=[0, 1], default=0,
        help="mute the emulated audio.  0 = unmuted (default), 1 = muted"
    )
    parser.add_argument(
        "-k", "--keymap", default=DEFAULT_KEYMAP,
        help="redefine the 16 keyscan codes for keys 0-F.  Separate each decimal with a comma"
    )
    parser.add_argument(
        "--palette",
        help="redefine the background and foreground colours in comma-separated hex, e.g. 000000,00FF00"
    )
    parser.add_argument(
        "--seed", type=int,
        help="seed the random number generator used by RND, for repeatable runs"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live debug logging of every instruction.  Slows CPU execution"
    )
    return parser.parse_args(argv)  # Can call sys.exit(2) if args are incorrect


def cli():
    args = vars(parse_args())

    # It is possible to start the emulator from a GUI by calling this with a dictionary
    try:
        main(args)
    except (StartupError, CPUError, InputsError, RendererError) as err:
        sys.exit(str(err).splitlines()[-1])


if __name__ == "__main__":
    cli()
