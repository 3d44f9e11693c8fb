#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import contextlib
import io
import os
import tempfile
import unittest
from unittest import mock
from ccell import StartupError, main
from ccell.cpu import CPUError
from ccell.inputs.i_null import InputsError
from chipcell import cli, parse_args


class TestMain(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)

    def _write_rom(self, rom):
        filename = os.path.join(self.tmp_dir.name, "test.ch8")

        with open(filename, "wb") as f:
            f.write(rom)

        return filename

    def _main(self, *argv):
        with contextlib.redirect_stdout(io.StringIO()):
            main(vars(parse_args(list(argv))))

    def test_parse_args_defaults(self):
        args = vars(parse_args(["game.ch8"]))
        self.assertEqual("game.ch8", args["filename"])
        self.assertEqual("pygame", args["renderer"])
        self.assertFalse(args["debug"])

    def test_main_unknown_renderer(self):
        args = vars(parse_args([self._write_rom(b"\x12\x00")]))
        args["renderer"] = "nonexistent"

        with contextlib.redirect_stdout(io.StringIO()):
            self.assertRaises(StartupError, main, args)

    def test_main_missing_rom(self):
        self.assertRaises(StartupError, self._main, os.path.join(self.tmp_dir.name, "missing.ch8"), "--renderer", "null")

    def test_main_halts(self):
        filename = self._write_rom(b"\x60\x01\xFF\xFF")

        with self.assertLogs("ccell.cpu", level="ERROR"):
            self.assertRaises(CPUError, self._main, filename, "--renderer", "null", "--rate", "0")

    def test_main_oversized_rom(self):
        filename = self._write_rom(bytes(4000))

        with self.assertRaises(StartupError) as context:
            self._main(filename, "--renderer", "null")

        self.assertIn("4000 bytes", str(context.exception))

    def test_main_bad_keymap(self):
        filename = self._write_rom(b"\x12\x00")
        self.assertRaises(InputsError, self._main, filename, "--renderer", "null", "-k", "1,2,3")

    def test_cli_error_message(self):
        filename = self._write_rom(bytes(4000))

        with mock.patch("sys.argv", ["chipcell.py", filename, "--renderer", "null"]):
            with contextlib.redirect_stdout(io.StringIO()):
                with self.assertRaises(SystemExit) as context:
                    cli()

        self.assertEqual("ROM is too large to fit in RAM (4000 bytes)", context.exception.code)

    def test_cli_bad_keymap(self):
        filename = self._write_rom(b"\x12\x00")

        with mock.patch("sys.argv", ["chipcell.py", filename, "--renderer", "null", "-k", "x"]):
            with contextlib.redirect_stdout(io.StringIO()):
                with self.assertRaises(SystemExit) as context:
                    cli()

        self.assertIn("16 required", context.exception.code)
