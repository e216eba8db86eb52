# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
vecmath
=======

Small fixed-size float32 building blocks for graphics and physics code:
2D and 3D vectors and a column-major 4x4 matrix.

Public API
~~~~~~~~~~
- Matrices
    - `Matrix4x4` (`new`, `identity`, `default`, `orthographic`,
      `from_rows`, `get`, `entry`, `mul`, `translate`)
- Vectors
    - `Vector2`, `Vector3`
- Helpers
    - `approx_eq`, `DTYPE`, `EPS`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import vecmath as vm
>>> proj = vm.Matrix4x4.orthographic(0, 1024, 768, 0, -1, 1)
>>> mvp = proj.translate(vm.Vector2(5, 7))
>>> mvp.get(0, 3) == proj.get(0, 3) + 5 * proj.get(0, 0)
True
"""

from importlib.metadata import version as _pkg_version

from .matrix4x4 import Matrix4x4
from .utils import DTYPE, EPS, approx_eq
from .vector2 import Vector2
from .vector3 import Vector3

__all__ = [
    "Matrix4x4",
    "Vector2",
    "Vector3",
    "approx_eq",
    "DTYPE",
    "EPS",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show vecmath”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
