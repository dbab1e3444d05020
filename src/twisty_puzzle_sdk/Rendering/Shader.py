#!/usr/bin/env python3
# Shader.py – GLSL program wrapper plus the flat-tile lighting shader

import numpy as np
from OpenGL.GL import *


PUZZLE_VERTEX_SRC = """
#version 330 core
layout(location=0) in vec3 aPosition;
layout(location=1) in vec3 aNormal;
layout(location=2) in vec2 aUV;
layout(location=3) in vec4 aColor;

uniform mat4 u_model;
uniform mat4 u_view;
uniform mat4 u_proj;

out vec3 vWorldPos;
out vec3 vNormal;
out vec2 vUV;
out vec4 vColor;

void main()
{
    vec4 world = u_model * vec4(aPosition, 1.0);
    vWorldPos = world.xyz;
    vNormal = mat3(u_model) * aNormal;
    vUV = aUV;
    vColor = aColor;
    gl_Position = u_proj * u_view * world;
}
"""

PUZZLE_FRAGMENT_SRC = """
#version 330 core
in vec3 vWorldPos;
in vec3 vNormal;
in vec2 vUV;
in vec4 vColor;
out vec4 FragColor;

uniform sampler2D u_baseColorTexture;
uniform bool  u_useTexture;
uniform vec4  u_baseColor;
uniform float u_roughness;
uniform float u_metallic;
uniform vec3  u_lightDir;
uniform float u_lightIntensity;
uniform vec3  u_cameraPos;
uniform vec4  u_overrideColor;
uniform bool  u_override;

void main()
{
    if (u_override) { FragColor = u_overrideColor; return; }

    vec4 albedo = u_baseColor * vColor;
    if (u_useTexture) albedo *= texture(u_baseColorTexture, vUV);

    vec3 n = normalize(vNormal);
    vec3 l = normalize(-u_lightDir);
    vec3 v = normalize(u_cameraPos - vWorldPos);
    vec3 h = normalize(l + v);

    float diffuse = max(dot(n, l), 0.0);
    float shininess = mix(256.0, 4.0, u_roughness);
    float specular = pow(max(dot(n, h), 0.0), shininess) * (1.0 - u_roughness);

    vec3 diffuseColor = albedo.rgb * (1.0 - u_metallic);
    vec3 specColor = mix(vec3(0.04), albedo.rgb, u_metallic);
    vec3 ambient = albedo.rgb * 0.25;

    vec3 color = ambient + u_lightIntensity * (diffuseColor * diffuse + specColor * specular);
    FragColor = vec4(color, albedo.a);
}
"""


class Shader:
    def __init__(self, vertex_src: str = PUZZLE_VERTEX_SRC, fragment_src: str = PUZZLE_FRAGMENT_SRC):
        self.id = glCreateProgram()
        vert = self._compile(vertex_src, GL_VERTEX_SHADER)
        frag = self._compile(fragment_src, GL_FRAGMENT_SHADER)
        glAttachShader(self.id, vert)
        glAttachShader(self.id, frag)
        glLinkProgram(self.id)
        if not glGetProgramiv(self.id, GL_LINK_STATUS):
            log = glGetProgramInfoLog(self.id).decode()
            glDeleteProgram(self.id)
            glDeleteShader(vert)
            glDeleteShader(frag)
            raise RuntimeError(f"Program link failed:\n{log}")
        glDeleteShader(vert)
        glDeleteShader(frag)

    # --------------------------------------------------------------------- internal
    def _compile(self, src: str, shader_type):
        shader = glCreateShader(shader_type)
        glShaderSource(shader, src)
        glCompileShader(shader)
        if not glGetShaderiv(shader, GL_COMPILE_STATUS):
            log = glGetShaderInfoLog(shader).decode()
            glDeleteShader(shader)
            numbered_src = '\n'.join(f"{i + 1:4d}: {line}"
                                     for i, line in enumerate(src.splitlines()))
            type_name = {GL_VERTEX_SHADER: "vertex",
                         GL_FRAGMENT_SHADER: "fragment"}.get(shader_type,
                                                             str(shader_type))
            raise RuntimeError(f"{type_name.capitalize()} shader compile failed:\n"
                               f"{log}\nSource with line numbers:\n{numbered_src}")
        return shader

    def _location(self, name: str) -> int:
        loc = glGetUniformLocation(self.id, name)
        if loc == -1:
            raise ValueError(f"Uniform '{name}' not found in program")
        return loc

    # --------------------------------------------------------------------- program use
    def use(self):
        glUseProgram(self.id)

    def delete(self):
        glDeleteProgram(self.id)

    # --------------------------------------------------------------------- simple setters
    def set_int(self, name: str, value: int):
        glUniform1i(self._location(name), int(value))

    def set_bool(self, name: str, value: bool):
        glUniform1i(self._location(name), 1 if value else 0)

    def set_float(self, name: str, value: float):
        glUniform1f(self._location(name), float(value))

    def set_vec3(self, name: str, value):
        x, y, z = (float(v) for v in value)
        glUniform3f(self._location(name), x, y, z)

    def set_vec4(self, name: str, value):
        x, y, z, w = (float(v) for v in value)
        glUniform4f(self._location(name), x, y, z, w)

    # --------------------------------------------------------------------- matrix setters
    def set_uniform_matrix(self, name: str, matrix, transpose: bool = True):
        """
        Upload a 4×4 float matrix uniform.

        NumPy matrices are row-major and GL expects column-major, hence
        ``transpose=True`` by default.
        """
        mat = np.asarray(matrix, dtype=np.float32)
        if mat.shape != (4, 4):
            raise ValueError(f"Matrix uniform '{name}' must be 4×4")
        glUniformMatrix4fv(self._location(name), 1,
                           GL_TRUE if transpose else GL_FALSE,
                           mat)
