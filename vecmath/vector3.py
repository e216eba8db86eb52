# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Three component vector
"""
from dataclasses import dataclass

import numpy as np

from .utils import to_scalar
from .vector2 import Vector2


@dataclass(frozen=True)
class Vector3:
    x: np.float32
    y: np.float32
    z: np.float32

    def __post_init__(self):
        object.__setattr__(self, "x", to_scalar(self.x))
        object.__setattr__(self, "y", to_scalar(self.y))
        object.__setattr__(self, "z", to_scalar(self.z))

    @classmethod
    def from_vector2(cls, vector2: Vector2) -> "Vector3":
        """Lift a Vector2 into 3D with z = 0."""
        return cls(vector2.x, vector2.y, 0.0)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.x}, {self.y}, {self.z})"

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scalar_multiplication(self, scalar: float) -> "Vector3":
        s = to_scalar(scalar)
        with np.errstate(over="ignore", invalid="ignore"):
            return Vector3(self.x * s, self.y * s, self.z * s)

    def dot_product(self, other: "Vector3") -> float:
        with np.errstate(over="ignore", invalid="ignore"):
            return float(self.x * other.x + self.y * other.y + self.z * other.z)

    def length(self) -> float:
        with np.errstate(over="ignore", invalid="ignore"):
            return float(np.sqrt(self.x * self.x + self.y * self.y + self.z * self.z))
