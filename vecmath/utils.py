# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import numpy as np

DTYPE = np.float32
EPS: float = 1e-4


def approx_eq(a: float, b: float, epsilon: float = EPS) -> bool:
    """Return True when |a - b| is within an absolute epsilon."""
    return abs(float(a) - float(b)) <= epsilon


def to_scalar(value) -> np.float32:
    """Round a Python or numpy number to the package float width."""
    return DTYPE(value)


def format_scalar(value) -> str:
    """
    Shortest text that round-trips the value at float32 precision.

    Whole numbers print without a trailing ``.0`` (``1``, ``-0``),
    NaN prints as ``NaN``.
    """
    value = DTYPE(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(value, unique=True, trim="-")
