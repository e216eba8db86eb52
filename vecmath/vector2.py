# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Two component vector
"""
from dataclasses import dataclass

import numpy as np

from .utils import to_scalar


@dataclass(frozen=True)
class Vector2:
    x: np.float32
    y: np.float32

    def __post_init__(self):
        # frozen, so bypass the generated __setattr__
        object.__setattr__(self, "x", to_scalar(self.x))
        object.__setattr__(self, "y", to_scalar(self.y))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.x}, {self.y})"

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return Vector2(self.x - other.x, self.y - other.y)

    def scalar_multiplication(self, scalar: float) -> "Vector2":
        s = to_scalar(scalar)
        with np.errstate(over="ignore", invalid="ignore"):
            return Vector2(self.x * s, self.y * s)

    def dot_product(self, other: "Vector2") -> float:
        with np.errstate(over="ignore", invalid="ignore"):
            return float(self.x * other.x + self.y * other.y)

    def length(self) -> float:
        with np.errstate(over="ignore", invalid="ignore"):
            return float(np.sqrt(self.x * self.x + self.y * self.y))
