#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if you only want to see
log output.  It keeps the last frame it was given, which is handy for tests.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.frame = None
        self.frames_drawn = 0
        self.set_resolution(0, 0)

    def set_resolution(self, width, height):
        self.width = width
        self.height = height

    def draw_frame(self, frame):
        # Frame is one byte per pixel, row-major, 0 for off and 1 for on
        if len(frame) != self.width * self.height:
            raise RendererError("Frame does not match the display resolution")

        self.frame = frame
        self.frames_drawn += 1

    def set_title(self, title):
        pass

    def shutdown(self):
        pass
