"""Shader programs: their sources, traits and uniform values."""

from __future__ import annotations

import itertools
import numbers
from enum import IntEnum, IntFlag
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import numpy as np


class ShaderType(IntEnum):
    PURE_COLOR = 0
    PURE_TEXTURE = 1
    PHONG = 2
    SKYBOX = 3
    TEXT = 4


class ShaderTrait(IntFlag):
    NONE = 0
    LIGHT_RECEIVER = 1


class ShaderError(RuntimeError):
    """Raised when a shader source cannot be read."""


_VALUE_SHAPES = {(2,), (3,), (4,), (2, 2), (3, 3), (4, 4)}


class ShaderProgram:
    """A program made of vertex, fragment and optional geometry stages.

    Uniform values set on the program are kept and can be read back.
    """

    _ids = itertools.count(1)
    _active: ShaderProgram | None = None

    def __init__(self, traits: ShaderTrait = ShaderTrait.NONE) -> None:
        self.id = next(ShaderProgram._ids)
        self.traits = ShaderTrait(traits)
        self.sources: dict[str, str] = {}
        self._uniforms: dict[str, Any] = {}

    def attach_shaders(
        self,
        vertex_path: str | Path,
        fragment_path: str | Path,
        geometry_path: str | Path | None = None,
    ) -> None:
        """Read the sources of each stage from files."""
        stages = {"vertex": vertex_path, "fragment": fragment_path}
        if geometry_path is not None:
            stages["geometry"] = geometry_path
        loaded = {stage: self._read(path) for stage, path in stages.items()}
        self.sources.update(loaded)

    @staticmethod
    def _read(path: str | Path) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ShaderError(f"shader file not read: {path}") from exc

    def use(self) -> None:
        """Make this the active program."""
        ShaderProgram._active = self

    @property
    def is_active(self) -> bool:
        return ShaderProgram._active is self

    def uniform(self, name: str, *args: Any) -> None:
        """Set a uniform.

        Accepts one bool, int or float; one vector of 2-4 components or a
        square matrix of size 2-4; or 2-4 separate numbers.
        """
        if not 1 <= len(args) <= 4:
            raise TypeError("uniform takes between one and four values")
        if len(args) == 1:
            stored = self._single(args[0])
        else:
            if not all(isinstance(a, numbers.Real) for a in args):
                raise TypeError("separate uniform components must be numbers")
            stored = np.array([float(a) for a in args])
        self._uniforms[name] = stored

    @staticmethod
    def _single(value: Any) -> Any:
        if isinstance(value, (bool, np.bool_)):
            return int(value)
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, numbers.Real):
            return float(value)
        arr = np.array(value, dtype=float)
        if arr.shape not in _VALUE_SHAPES:
            raise ValueError(f"unsupported uniform shape {arr.shape}")
        return arr

    def uniform_value(self, name: str) -> Any:
        """Value last set for a uniform; ``KeyError`` if never set."""
        return self._uniforms[name]

    @property
    def uniforms(self) -> Mapping[str, Any]:
        return MappingProxyType(self._uniforms)

    def __repr__(self) -> str:
        return f"ShaderProgram(id={self.id}, traits={self.traits!r})"