#!/usr/bin/env python3
# Render.py – draws a generated puzzle: one shared material, one directional light
import logging
import math
import time
from typing import Any, Dict, List, Optional

import glfw
import numpy as np
from OpenGL import GL

from ..Config import CameraSettings, ViewerSettings
from ..Puzzles import Puzzle
from .Camera import CameraMode, FlyCamera, ViewRotation, look_at, perspective
from .Mesh import GpuMesh
from .Shader import Shader
from .Texture import Texture2D
from .Window import Window

# illuminance that maps to a light intensity of 1.0 in the shader
_REFERENCE_ILLUMINANCE = 50_000.0

_FLY_KEYS = {
    glfw.KEY_W: "forward",
    glfw.KEY_S: "back",
    glfw.KEY_A: "left",
    glfw.KEY_D: "right",
    glfw.KEY_SPACE: "up",
    glfw.KEY_LEFT_SHIFT: "down",
}


class Render:
    def __init__(self, puzzle: Puzzle,
                 camera: Optional[CameraSettings] = None,
                 settings: Optional[ViewerSettings] = None):
        self.camera = camera or CameraSettings()
        self.settings = settings or ViewerSettings()
        self.puzzle = puzzle

        self.window = Window(self.settings.width, self.settings.height, self.settings.title)
        GL.glEnable(GL.GL_DEPTH_TEST)
        GL.glEnable(GL.GL_CULL_FACE)
        GL.glEnable(GL.GL_MULTISAMPLE)
        GL.glEnable(GL.GL_FRAMEBUFFER_SRGB)

        self.shader = Shader()

        # ---- puzzle assets: texture → material → meshes
        self.texture = Texture2D.from_raw_image(puzzle.create_texture())
        self.material = puzzle.create_material(self.texture)
        self._objects: List[Dict[str, Any]] = []
        for mesh, placement in puzzle.create_meshes():
            self._objects.append({"mesh": GpuMesh(mesh), "model": placement.matrix()})
        logging.info("%r: %d meshes uploaded", puzzle, len(self._objects))

        # ---- camera state
        self.view_rotation = ViewRotation(self.camera.view_sensitivity)
        self.fly_camera = FlyCamera(self.camera.static.pos, self.camera.static.looking_at,
                                    self.camera.flying.movement_speed, self.camera.flying.sensitivity)
        self.mode = CameraMode.STATIC
        if self.camera.mode is CameraMode.FLYING:
            self._toggle_mode()

        self._last_mouse = self.window.get_mouse_pos()
        self.window.set_key_callback(self._on_key)

    # -------------------------------------------------------------- input
    def _toggle_mode(self) -> None:
        if self.mode is CameraMode.STATIC:
            self.fly_camera.reset()
            self.window.disable_cursor()
            self.mode = CameraMode.FLYING
        else:
            self.window.show_cursor()
            self.mode = CameraMode.STATIC
        logging.info("camera mode: %s", self.mode.value)

    def _on_key(self, window, key, scancode, action, mods) -> None:
        if action != glfw.PRESS:
            return
        if key == glfw.KEY_C:
            self._toggle_mode()
        elif key == glfw.KEY_ESCAPE:
            if self.mode is CameraMode.FLYING:
                if self.window.is_cursor_locked():
                    self.window.show_cursor()
                else:
                    self.window.disable_cursor()
            else:
                self.window.request_close()

    def _process_input(self, delta_time: float) -> None:
        x, y = self.window.get_mouse_pos()
        dx, dy = x - self._last_mouse[0], y - self._last_mouse[1]
        self._last_mouse = (x, y)

        if self.mode is CameraMode.FLYING:
            if self.window.is_cursor_locked():
                self.fly_camera.look(dx, dy, delta_time)
                pressed = [d for key, d in _FLY_KEYS.items() if self.window.is_key_pressed(key)]
                self.fly_camera.move(pressed, delta_time)
        elif self.window.is_mouse_button_pressed(glfw.MOUSE_BUTTON_LEFT):
            self.view_rotation.drag(dx, dy, delta_time)

    # -------------------------------------------------------------- drawing
    def _view(self) -> np.ndarray:
        if self.mode is CameraMode.FLYING:
            return self.fly_camera.view_matrix()
        return look_at(self.camera.static.pos, self.camera.static.looking_at)

    def _camera_position(self) -> np.ndarray:
        if self.mode is CameraMode.FLYING:
            return self.fly_camera.position
        return np.asarray(self.camera.static.pos, dtype=np.float32)

    def _draw_objects(self, view: np.ndarray, proj: np.ndarray, wireframe: bool = False) -> None:
        s = self.shader
        s.use()
        s.set_uniform_matrix("u_view", view)
        s.set_uniform_matrix("u_proj", proj)
        s.set_bool("u_override", wireframe)
        if wireframe:
            s.set_vec4("u_overrideColor", (0.0, 0.0, 0.0, 1.0))
        else:
            m = self.material
            self.texture.bind(0)
            s.set_int("u_baseColorTexture", 0)
            s.set_vec4("u_baseColor", m.base_color)
            s.set_float("u_roughness", m.perceptual_roughness)
            s.set_float("u_metallic", m.metallic)
            s.set_vec3("u_lightDir", self.settings.light_direction)
            s.set_float("u_lightIntensity", self.settings.light_illuminance / _REFERENCE_ILLUMINANCE)
            s.set_vec3("u_cameraPos", self._camera_position())

        puzzle_rotation = self.view_rotation.matrix()
        for obj in self._objects:
            mesh = obj["mesh"]
            s.set_uniform_matrix("u_model", puzzle_rotation @ obj["model"])
            if not wireframe:
                s.set_bool("u_useTexture", mesh.has_uvs)
            mesh.draw()

    def render_frame(self, delta_time: float) -> None:
        self._process_input(delta_time)

        fbw, fbh = self.window.framebuffer_size()
        GL.glViewport(0, 0, fbw, fbh)
        GL.glClearColor(0.1, 0.1, 0.1, 1.0)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT | GL.GL_DEPTH_BUFFER_BIT)

        view = self._view()
        proj = perspective(math.radians(self.camera.fov), fbw / max(fbh, 1),
                           self.camera.near, self.camera.far)
        self._draw_objects(view, proj)

        if self.settings.wireframe:
            GL.glPolygonMode(GL.GL_FRONT_AND_BACK, GL.GL_LINE)
            GL.glEnable(GL.GL_POLYGON_OFFSET_LINE)
            GL.glPolygonOffset(-1.0, -1.0)
            self._draw_objects(view, proj, wireframe=True)
            GL.glDisable(GL.GL_POLYGON_OFFSET_LINE)
            GL.glPolygonMode(GL.GL_FRONT_AND_BACK, GL.GL_FILL)

        if self.settings.debug:
            err = GL.glGetError()
            if err != GL.GL_NO_ERROR:
                logging.warning("GL error 0x%04x", err)

        self.window.swap_buffers()
        self.window.poll_events()

    def run(self) -> None:
        last = time.perf_counter()
        while not self.window.should_close():
            now = time.perf_counter()
            self.render_frame(now - last)
            last = now

    def close(self) -> None:
        for obj in self._objects:
            obj["mesh"].delete()
        self._objects.clear()
        self.texture.delete()
        self.shader.delete()
        self.window.terminate()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
