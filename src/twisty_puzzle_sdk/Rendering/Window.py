#!/usr/bin/env python3
# Window.py – glfw window + GL context for the puzzle viewer
import logging
import sys
from typing import Callable, Tuple

import glfw
from OpenGL.GL import *


class Window:
    def __init__(self, width: int, height: int, title: str,
                 gl_major: int = 3, gl_minor: int = 3, core_profile: bool = True):
        if not glfw.init():
            raise RuntimeError("Failed to initialize GLFW")

        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, gl_major)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, gl_minor)
        if core_profile:
            glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
        if sys.platform == "darwin":
            glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, glfw.TRUE)

        glfw.window_hint(glfw.DOUBLEBUFFER, glfw.TRUE)
        glfw.window_hint(glfw.SAMPLES, 4)

        self._window = glfw.create_window(width, height, title, None, None)
        if not self._window:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")

        glfw.make_context_current(self._window)
        glfw.swap_interval(1)  # v-sync

        logging.info("OpenGL : %s", glGetString(GL_VERSION).decode())
        logging.info("GLSL   : %s", glGetString(GL_SHADING_LANGUAGE_VERSION).decode())

    @property
    def handle(self):
        return self._window

    def should_close(self) -> bool:
        return glfw.window_should_close(self._window)

    def request_close(self) -> None:
        glfw.set_window_should_close(self._window, True)

    def swap_buffers(self) -> None:
        glfw.swap_buffers(self._window)

    def poll_events(self) -> None:
        glfw.poll_events()

    def framebuffer_size(self) -> Tuple[int, int]:
        return glfw.get_framebuffer_size(self._window)

    def set_title(self, title: str) -> None:
        glfw.set_window_title(self._window, title)

    # ===== Keyboard Input =====
    def is_key_pressed(self, key: int) -> bool:
        return glfw.get_key(self._window, key) == glfw.PRESS

    def set_key_callback(self, callback: Callable) -> None:
        glfw.set_key_callback(self._window, callback)

    # ===== Mouse Input =====
    def get_mouse_pos(self) -> Tuple[float, float]:
        return glfw.get_cursor_pos(self._window)

    def is_mouse_button_pressed(self, button: int) -> bool:
        return glfw.get_mouse_button(self._window, button) == glfw.PRESS

    def show_cursor(self) -> None:
        glfw.set_input_mode(self._window, glfw.CURSOR, glfw.CURSOR_NORMAL)

    def disable_cursor(self) -> None:
        glfw.set_input_mode(self._window, glfw.CURSOR, glfw.CURSOR_DISABLED)

    def is_cursor_locked(self) -> bool:
        return glfw.get_input_mode(self._window, glfw.CURSOR) == glfw.CURSOR_DISABLED

    # ===== Cleanup =====
    def terminate(self) -> None:
        if self._window:
            glfw.destroy_window(self._window)
            self._window = None
        glfw.terminate()

    # ===== Context Management =====
    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.terminate()
