"""Scene drawing: shader programs, GPU mesh buffers and GL error reporting."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .camera import Camera
from .lights import AmbientLight, DirectionalLight
from .mesh import MeshData
from .world import SceneObject, World

GL_NO_ERROR = 0
GL_INVALID_ENUM = 0x0500
GL_INVALID_VALUE = 0x0501
GL_INVALID_OPERATION = 0x0502
GL_STACK_OVERFLOW = 0x0503
GL_STACK_UNDERFLOW = 0x0504
GL_OUT_OF_MEMORY = 0x0505
GL_INVALID_FRAMEBUFFER_OPERATION = 0x0506

_ERROR_NAMES = {
    GL_INVALID_ENUM: "INVALID_ENUM",
    GL_INVALID_VALUE: "INVALID_VALUE",
    GL_INVALID_OPERATION: "INVALID_OPERATION",
    GL_STACK_OVERFLOW: "STACK_OVERFLOW",
    GL_STACK_UNDERFLOW: "STACK_UNDERFLOW",
    GL_OUT_OF_MEMORY: "OUT_OF_MEMORY",
    GL_INVALID_FRAMEBUFFER_OPERATION: "INVALID_FRAMEBUFFER_OPERATION",
}

VERTEX_SHADER_SOURCE = (
    "#version 330 core\n"
    "layout (location = 0) in vec3 aPos;\n"
    "layout (location = 1) in vec3 aNormal;\n"
    "uniform mat4 model;\n"
    "uniform mat4 view;\n"
    "uniform mat4 projection;\n"
    "out vec3 Normal;\n"
    "void main(){\n"
    "Normal = mat3(transpose(inverse(model))) * aNormal;\n"
    "gl_Position = projection * view * model * vec4(aPos, 1.0);}\n"
)

FRAGMENT_SHADER_SOURCE = (
    "#version 330 core\n"
    "out vec4 FragColor;\n"
    "in vec3 Normal;\n"
    "uniform vec4 objectColor;\n"
    "uniform vec3 lightDirection;\n"
    "uniform vec3 lightColor;\n"
    "uniform vec3 ambientColor;\n"
    "void main(){\n"
    "vec3 normal = normalize(Normal);\n"
    "vec3 lightDir = normalize(-lightDirection);\n"
    "float diffuse = max(dot(normal, lightDir), 0.0);\n"
    "vec3 lighting = ambientColor + diffuse * lightColor;\n"
    "FragColor = vec4(lighting * objectColor.rgb, objectColor.a);}\n"
)

_CLEAR_COLOR = (0.2, 0.3, 0.3, 1.0)


def highlighted_color(color) -> np.ndarray:
    """Return a copy of an RGBA colour with its RGB channels set to white."""
    result = np.array(color, dtype=np.float64).reshape(4)
    result[:3] = 1.0
    return result


def gl_error_name(code: int) -> str:
    """Return the symbolic name of a GL error code, or "UNKNOWN"."""
    return _ERROR_NAMES.get(code, "UNKNOWN")


def _report_gl_errors(backend, location: str) -> list[str]:
    names = []
    while (code := backend.get_error()) != GL_NO_ERROR:
        name = gl_error_name(code)
        print(f"{name} | {location}")
        names.append(name)
    return names


def check_gl_errors(location: str) -> list[str]:
    """Drain the current context's GL error queue, printing each error.

    Returns the names of the errors found, oldest first.
    """
    return _report_gl_errors(_PygletGL(), location)


def _global_indices(data: MeshData) -> list[int]:
    """Indices offset by each sub-mesh's base vertex, so one draw covers them all."""
    indices = list(data.indices)
    for mesh in data.meshes:
        start = mesh.base_index
        for position in range(start, start + mesh.num_indices):
            indices[position] += mesh.base_vertex
    return indices


class _PygletGL:
    """Drawing operations on the current OpenGL context."""

    def __init__(self) -> None:
        from pyglet import gl
        from pyglet.graphics import shader

        self._gl = gl
        self._shader = shader

    def enable_depth_test(self) -> None:
        self._gl.glEnable(self._gl.GL_DEPTH_TEST)

    def compile_shader(self, kind: str, source: str) -> tuple[Any, bool, str]:
        shader_type = "vertex" if kind == "VERTEX" else "fragment"
        try:
            return self._shader.Shader(source, shader_type), True, ""
        except self._shader.ShaderException as error:
            return None, False, str(error)

    def link_program(self, shaders) -> tuple[Any, bool, str]:
        compiled = [shader for shader in shaders if shader is not None]
        if len(compiled) != len(tuple(shaders)):
            return None, False, "a shader stage failed to compile"
        try:
            return self._shader.ShaderProgram(*compiled), True, ""
        except self._shader.ShaderException as error:
            return None, False, str(error)

    def delete_shader(self, handle) -> None:
        if handle is not None:
            handle.delete()

    def delete_program(self, program) -> None:
        if program is not None:
            program.delete()

    def use_program(self, program) -> None:
        if program is not None:
            program.use()

    def uniform_location(self, program, name: str):
        return program, name

    def _set(self, location, value) -> None:
        program, name = location
        if program is None:
            return
        try:
            program[name] = value
        except (KeyError, self._shader.ShaderException):
            # Like a uniform location of -1: silently ignored.
            pass

    def set_uniform_int(self, location, value: int) -> None:
        self._set(location, int(value))

    def set_uniform_float(self, location, value: float) -> None:
        self._set(location, float(value))

    def set_uniform_vec3(self, location, values) -> None:
        self._set(location, tuple(float(v) for v in np.asarray(values).reshape(3)))

    def set_uniform_vec4(self, location, values) -> None:
        self._set(location, tuple(float(v) for v in np.asarray(values).reshape(4)))

    def set_uniform_mat4(self, location, matrix) -> None:
        column_major = np.asarray(matrix, dtype=np.float64).reshape(4, 4).flatten(order="F")
        self._set(location, tuple(float(v) for v in column_major))

    def clear(self, color) -> None:
        gl = self._gl
        gl.glClearColor(*color)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

    def upload_mesh(self, data: MeshData, program) -> Any:
        positions = [float(c) for vector in data.positions for c in vector]
        normals = [float(c) for vector in data.normals for c in vector]
        return program.vertex_list_indexed(
            len(data.positions),
            self._gl.GL_TRIANGLES,
            _global_indices(data),
            aPos=("f", positions),
            aNormal=("f", normals),
        )

    def draw_mesh(self, handle) -> None:
        handle.draw(self._gl.GL_TRIANGLES)

    def delete_mesh(self, handle) -> None:
        handle.delete()

    def unbind_vertex_array(self) -> None:
        self._gl.glBindVertexArray(0)

    def get_error(self) -> int:
        return int(self._gl.glGetError())


class Shader:
    """A linked vertex + fragment program with uniform setters.

    Compile and link failures are reported on standard output, not raised.
    """

    def __init__(self, vertex_code: str, fragment_code: str, *, backend=None) -> None:
        self._backend = backend if backend is not None else _PygletGL()
        vertex, ok, log = self._backend.compile_shader("VERTEX", vertex_code)
        self._report(ok, "compilation", "VERTEX", log)
        fragment, ok, log = self._backend.compile_shader("FRAGMENT", fragment_code)
        self._report(ok, "compilation", "FRAGMENT", log)
        self.program: Optional[Any]
        self.program, ok, log = self._backend.link_program((vertex, fragment))
        self._report(ok, "linking", "PROGRAM", log)
        self._backend.delete_shader(vertex)
        self._backend.delete_shader(fragment)

    @staticmethod
    def _report(ok: bool, stage: str, kind: str, log: str) -> None:
        if not ok:
            print(f"Error in shader {stage}: {kind}\n{log}")

    def _location(self, name: str):
        return self._backend.uniform_location(self.program, name)

    def use(self) -> None:
        self._backend.use_program(self.program)

    def set_bool(self, name: str, value: bool) -> None:
        self._backend.set_uniform_int(self._location(name), int(bool(value)))

    def set_int(self, name: str, value: int) -> None:
        self._backend.set_uniform_int(self._location(name), int(value))

    def set_float(self, name: str, value: float) -> None:
        self._backend.set_uniform_float(self._location(name), float(value))

    def set_vec3(self, name: str, value) -> None:
        self._backend.set_uniform_vec3(self._location(name), np.asarray(value).reshape(3))

    def set_vec4(self, name: str, value) -> None:
        self._backend.set_uniform_vec4(self._location(name), np.asarray(value).reshape(4))

    def set_mat4(self, name: str, value) -> None:
        self._backend.set_uniform_mat4(self._location(name), np.asarray(value).reshape(4, 4))

    def close(self) -> None:
        """Delete the program; further use is an error."""
        if self.program is not None:
            self._backend.delete_program(self.program)
            self.program = None

    def __enter__(self) -> "Shader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Renderer:
    """Draws every object of a world through a camera with simple lighting."""

    def __init__(
        self, world: World, camera: Camera, *, backend=None, debug: bool = False
    ) -> None:
        self._backend = backend if backend is not None else _PygletGL()
        self._world = world
        self._camera = camera
        self.debug = debug
        self.shader = Shader(VERTEX_SHADER_SOURCE, FRAGMENT_SHADER_SOURCE, backend=self._backend)
        self.light = DirectionalLight()
        self.ambient_light = AmbientLight()
        self._gpu_meshes: dict[SceneObject, Any] = {}
        self._backend.enable_depth_test()

    def _gpu_mesh(self, obj: SceneObject):
        handle = self._gpu_meshes.get(obj)
        if handle is None:
            handle = self._backend.upload_mesh(obj.mesh_data, self.shader.program)
            self._gpu_meshes[obj] = handle
        return handle

    def _release_stale(self) -> None:
        live = set(self._world)
        for obj in [obj for obj in self._gpu_meshes if obj not in live]:
            self._backend.delete_mesh(self._gpu_meshes.pop(obj))

    def draw_scene(self, viewport_size, highlighted_object: Optional[SceneObject] = None) -> None:
        """Clear the frame and draw all objects; the highlighted one is drawn white."""
        width, height = viewport_size
        shader = self.shader
        self._backend.clear(_CLEAR_COLOR)

        shader.use()
        shader.set_mat4("view", self._camera.view_matrix())
        shader.set_mat4("projection", self._camera.projection_matrix(float(width), float(height)))
        shader.set_vec3("lightDirection", self.light.direction)
        shader.set_vec3("lightColor", self.light.color)
        shader.set_vec3("ambientColor", self.ambient_light.color)

        for obj in self._world:
            shader.set_mat4("model", obj.transform.matrix())
            color = obj.color
            if obj is highlighted_object:
                color = highlighted_color(color)
            shader.set_vec4("objectColor", color)
            self._backend.draw_mesh(self._gpu_mesh(obj))

        self._backend.unbind_vertex_array()
        self._release_stale()
        if self.debug:
            _report_gl_errors(self._backend, "draw_scene")

    def close(self) -> None:
        """Release all GPU meshes and the shader program."""
        for handle in self._gpu_meshes.values():
            self._backend.delete_mesh(handle)
        self._gpu_meshes.clear()
        self.shader.close()

    def __enter__(self) -> "Renderer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()