"""Shader program and triangle renderer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

VERTICES: tuple[float, ...] = (
    -0.5, -0.5, 0.0,  # left
    0.5, -0.5, 0.0,  # right
    0.0, 0.5, 0.0,  # top
)

VERTEX_SHADER_SOURCE = (
    "#version 410 core\n"
    "layout (location = 0) in vec3 aPos;\n"
    "void main()\n"
    "{\n"
    "    gl_Position = vec4(aPos.x, aPos.y, aPos.z, 1.0);\n"
    "}"
)

FRAGMENT_SHADER_SOURCE = (
    "#version 410 core\n"
    "out vec4 FragColor;\n"
    "void main()\n"
    "{\n"
    "    FragColor = vec4(1.0f, 0.5f, 0.2f, 1.0f);\n"
    "}"
)

_INFO_LOG_SIZE = 1024
_SEPARATOR = "\n -- --------------------------------------------------- -- "


def compile_error_message(kind: str, success: bool, log: str) -> str | None:
    """The report for a failed compile or link step, or None on success."""
    if success:
        return None
    log = log[: _INFO_LOG_SIZE - 1]
    if kind == "PROGRAM":
        header = "ERROR::PROGRAM_LINKING_ERROR of type: "
    else:
        header = "ERROR::SHADER_COMPILATION_ERROR of type: "
    return f"{header}{kind}\n{log}{_SEPARATOR}"


def _flatten(value: Iterable[Any]) -> Iterable[float]:
    for item in value:
        if isinstance(item, (int, float)):
            yield float(item)
        else:
            yield from _flatten(item)


def _uniform_value(value: Any) -> Any:
    """Convert a Python value into what a uniform setter accepts."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    return tuple(_flatten(value))


class Shader:
    """A linked program built from the game's vertex and fragment shaders."""

    def __init__(self) -> None:
        from pyglet.graphics.shader import Shader as ShaderStage
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        stages = []
        try:
            for kind, source, stage in (
                ("VERTEX", VERTEX_SHADER_SOURCE, "vertex"),
                ("FRAGMENT", FRAGMENT_SHADER_SOURCE, "fragment"),
            ):
                try:
                    stages.append(ShaderStage(source, stage))
                except ShaderException as exc:
                    print(compile_error_message(kind, False, str(exc)))
                    raise
            try:
                self.program = ShaderProgram(*stages)
            except ShaderException as exc:
                print(compile_error_message("PROGRAM", False, str(exc)))
                raise
        finally:
            for stage_object in stages:
                stage_object.delete()

    @property
    def id(self) -> int:
        return self.program.id

    def use(self) -> None:
        """Make this program the active one."""
        self.program.use()

    def set_uniform(self, name: str, value: Any) -> None:
        """Set a uniform; unknown names are ignored."""
        from pyglet.graphics.shader import ShaderException

        try:
            self.program[name] = _uniform_value(value)
        except ShaderException:
            pass


class Renderer:
    """Draws a single orange triangle."""

    def __init__(self) -> None:
        from pyglet import gl

        self.shader = Shader()
        self._vertex_list = self.shader.program.vertex_list(
            len(VERTICES) // 3, gl.GL_TRIANGLES, aPos=("f", VERTICES)
        )

    def process_rendering(self) -> None:
        """Clear the frame and draw the triangle."""
        from pyglet import gl

        self.shader.use()
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)
        self._vertex_list.draw(gl.GL_TRIANGLES)