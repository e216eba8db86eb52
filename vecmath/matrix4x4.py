# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
4x4 matrix value type
=====================

The sixteen entries are kept in a flat float32 buffer in column-major
order, so logical cell ``(row, column)`` lives at ``column * 4 + row``.
Instances are immutable; ``mul`` and ``translate`` return new matrices.

Indexing contract
-----------------
``get(row, column)`` (and ``m[row, column]``) requires both indices in
``0..3``. Anything else is a bug in the calling code and raises
``IndexError``; call sites are not expected to guard against it. Use
``entry(row, column)`` when the position comes from untrusted input, it
returns ``None`` instead.

Degenerate projections
----------------------
``orthographic`` does not reject an empty box (``right == left`` and so
on). The division yields IEEE infinities or NaNs, which then propagate
through ``mul``. A warning is logged when this happens.

Equality is IEEE equality of the sixteen entries, so a matrix holding a
NaN compares unequal to itself (``m == m`` is False). Containers that
check identity first, such as ``m in {m}``, still find it.
"""

import logging
import operator
from typing import Optional, Sequence, Tuple

import numpy as np

from .utils import DTYPE, format_scalar

logger = logging.getLogger(__name__)

SIZE = 4


def _check_index(row, column) -> Tuple[int, int]:
    if isinstance(row, bool) or isinstance(column, bool):
        raise TypeError("Matrix4x4 indices must be integers, not bool")
    row = operator.index(row)
    column = operator.index(column)
    if not 0 <= column < SIZE:
        raise IndexError(
            f"You requested column {column}, but the max allowed index is {SIZE - 1}!"
        )
    if not 0 <= row < SIZE:
        raise IndexError(
            f"You requested row {row}, but the max allowed index is {SIZE - 1}!"
        )
    return row, column


class Matrix4x4:
    __slots__ = ("_array",)

    def __init__(self, values: Optional[Sequence[float]] = None):
        """
        Parameters
        ----------
        values : sequence of 16 floats, optional
            Entries in column-major storage order. ``None`` gives the
            all-zero matrix.
        """
        if values is None:
            array = np.zeros(SIZE * SIZE, dtype=DTYPE)
        else:
            array = np.array(values, dtype=DTYPE)
            if array.shape != (SIZE * SIZE,):
                raise ValueError(
                    f"Matrix4x4 needs a flat sequence of 16 values, got shape {array.shape}"
                )
        array.flags.writeable = False
        self._array = array

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def new(
        cls,
        m00: float, m01: float, m02: float, m03: float,
        m10: float, m11: float, m12: float, m13: float,
        m20: float, m21: float, m22: float, m23: float,
        m30: float, m31: float, m32: float, m33: float,
    ) -> "Matrix4x4":
        """
        Build a matrix from sixteen values named by their logical
        row-major position ``m<row><column>``.
        """
        return cls(
            [
                m00, m10, m20, m30,
                m01, m11, m21, m31,
                m02, m12, m22, m32,
                m03, m13, m23, m33,
            ]
        )

    @classmethod
    def default(cls) -> "Matrix4x4":
        """The all-zero matrix (not the identity)."""
        return cls()

    @classmethod
    def identity(cls) -> "Matrix4x4":
        return cls.new(
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def from_rows(cls, rows) -> "Matrix4x4":
        """
        Build from a (4, 4) array-like in logical layout, ``rows[r][c]``
        becoming cell ``(r, c)``.
        """
        rows = np.asarray(rows, dtype=DTYPE)
        if rows.shape != (SIZE, SIZE):
            raise ValueError(f"rows must have shape (4, 4), got {rows.shape}")
        logger.debug(f"Matrix4x4.from_rows:\n{rows}")
        # transpose then flatten in C order == column-major flatten
        return cls(rows.T.ravel())

    @classmethod
    def orthographic(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> "Matrix4x4":
        """
        Orthographic projection mapping the box
        [left, right] x [bottom, top] x [near, far] onto the canonical
        clip volume.

        An empty box is not rejected, the affected entries become
        infinite or NaN.
        """
        left, right, bottom, top, near, far = (
            DTYPE(v) for v in (left, right, bottom, top, near, far)
        )
        if right == left or top == bottom or far == near:
            logger.warning(
                "orthographic(): degenerate box "
                f"(left={left}, right={right}, bottom={bottom}, top={top}, "
                f"near={near}, far={far}); result contains inf/NaN"
            )

        two = DTYPE(2.0)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            width = right - left
            height = top - bottom
            depth = far - near
            return cls.new(
                two / width, 0.0, 0.0, -((right + left) / width),
                0.0, two / height, 0.0, -((top + bottom) / height),
                0.0, 0.0, two / depth, -((far + near) / depth),
                0.0, 0.0, 0.0, 1.0,
            )

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def get(self, row: int, column: int) -> float:
        """
        Entry at logical ``(row, column)``.

        Raises
        ------
        IndexError : if either index is outside 0..3. This is a caller
            bug, not a recoverable condition.
        """
        row, column = _check_index(row, column)
        return float(self._array[column * SIZE + row])

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, column = index
        return self.get(row, column)

    def entry(self, row: int, column: int) -> Optional[float]:
        """Like ``get`` but returns None for an out-of-range position."""
        try:
            return self.get(row, column)
        except IndexError:
            return None

    def first(self) -> float:
        return float(self._array[0])

    def column_major(self) -> Tuple[float, ...]:
        return tuple(float(v) for v in self._array)

    def to_numpy(self) -> np.ndarray:
        """Writable (4, 4) float32 copy, ``out[r, c] == self.get(r, c)``."""
        return self._array.reshape(SIZE, SIZE).T.copy()

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------
    def mul(self, other: "Matrix4x4") -> "Matrix4x4":
        """
        Matrix product ``self @ other``.

        result[r, c] = sum_k self[r, k] * other[k, c], accumulated in
        float32 from k = 0 to k = 3.
        """
        if not isinstance(other, Matrix4x4):
            raise TypeError(f"Matrix4x4.mul expects a Matrix4x4, got {type(other)}")
        A = self.to_numpy()
        B = other.to_numpy()

        # Outer product of column k of A with row k of B, summed in order
        with np.errstate(invalid="ignore", over="ignore"):
            C = A[:, 0, None] * B[None, 0, :]
            for k in range(1, SIZE):
                C = C + A[:, k, None] * B[None, k, :]
        return Matrix4x4(C.T.ravel())

    def __matmul__(self, other):
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self.mul(other)

    def translate(self, offset) -> "Matrix4x4":
        """
        Compose with a translation by ``(offset.x, offset.y)``.

        The translation sits on the right: ``self.mul(T)``, so it acts in
        the local frame of whatever ``self`` already represents.
        """
        translation = Matrix4x4.new(
            1.0, 0.0, 0.0, offset.x,
            0.0, 1.0, 0.0, offset.y,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
        return self.mul(translation)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return bool(np.array_equal(self._array, other._array))

    def __hash__(self) -> int:
        return hash(self.column_major())

    def __str__(self) -> str:
        return "\n".join(
            ",".join(format_scalar(self.get(r, c)) for c in range(SIZE))
            for r in range(SIZE)
        )

    def __repr__(self) -> str:
        rows = ", ".join(
            "[" + ", ".join(format_scalar(self.get(r, c)) for c in range(SIZE)) + "]"
            for r in range(SIZE)
        )
        return f"{self.__class__.__name__}.from_rows([{rows}])"
