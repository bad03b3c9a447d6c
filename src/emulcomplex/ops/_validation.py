# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Operand checks shared by the kernel backends.

Shape checks only read ``ndim`` and ``shape``, so they accept NumPy and JAX
arrays alike (JAX shapes are static, so the checks also run under ``jit``).

Every check runs before the kernel allocates or computes anything, so a
failed call never produces a partial result.
"""

import logging
from typing import Any, NoReturn

import numpy as np

from emulcomplex.config import get_config
from emulcomplex.errors import OddLeadingDimensionError, ShapeMismatchError

logger = logging.getLogger(__name__)


def _fail(err: Exception) -> NoReturn:
    logger.debug("%s", err)
    raise err


def check_real(x: Any, name: str) -> None:  # noqa: ANN401
    """Reject complex-valued operands where real storage is expected."""
    if np.iscomplexobj(x):
        _fail(TypeError(f"{name} must be real-valued, got {type(x).__name__} of complex type"))


def as_real_array(x: Any, name: str) -> np.ndarray:  # noqa: ANN401
    """Return ``x`` as a real floating-point ndarray.

    Floating input keeps its precision; anything else is promoted to the
    configured precision. Complex input is rejected since interleaved and
    split operands carry real values only.
    """
    arr = np.asarray(x)
    check_real(arr, name)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(get_config().dtype)
    return arr


def as_real_scalar(x: Any, name: str) -> float | np.floating:  # noqa: ANN401
    """Return a real scalar operand without widening the result precision."""
    check_real(x, name)
    if isinstance(x, np.floating):
        return x
    return float(x)


def check_interleaved(arr: np.ndarray, name: str) -> int:
    """Validate a rank-2 interleaved array and return its logical row count."""
    if arr.ndim != 2:
        _fail(
            ShapeMismatchError(
                f"{name} must be a 2-D interleaved array of shape (2n, m), got shape {arr.shape}"
            )
        )
    if arr.shape[0] % 2 != 0:
        _fail(OddLeadingDimensionError(name, arr.shape))
    return arr.shape[0] // 2


def check_split(arr: np.ndarray, name: str) -> None:
    """Validate a rank-2 split-form array."""
    if arr.ndim != 2:
        _fail(ShapeMismatchError(f"{name} must be a 2-D array of shape (n, m), got shape {arr.shape}"))


def check_split_operand(a: np.ndarray, a_c: np.ndarray, name: str = "a_c") -> None:
    """Validate that split operand ``a_c`` pairs with interleaved ``a``.

    ``a`` must have shape (2 * nx_c, ny) when ``a_c`` has shape (nx_c, ny).
    """
    nx_c = check_interleaved(a, "a")
    check_split(a_c, name)
    if a_c.shape[0] != nx_c or a_c.shape[1] != a.shape[1]:
        _fail(
            ShapeMismatchError(
                f"{name} shape {a_c.shape} does not pair with interleaved shape {a.shape}: "
                f"expected ({nx_c}, {a.shape[1]})"
            )
        )


def check_same_shape(x: np.ndarray, y: np.ndarray, x_name: str, y_name: str) -> None:
    """Validate that two operands share a shape."""
    if x.shape != y.shape:
        _fail(
            ShapeMismatchError(f"{x_name} and {y_name} must be the same size: {x.shape} != {y.shape}")
        )


def check_scalar(x: Any, name: str) -> None:  # noqa: ANN401
    """Validate a 0-d operand, as used with a single interleaved entry."""
    if np.ndim(x) != 0:
        _fail(ShapeMismatchError(f"{name} must be a scalar, got shape {np.shape(x)}"))


def check_single_entry(arr: np.ndarray, name: str) -> None:
    """Validate a single interleaved entry: a vector of shape (2,)."""
    if arr.shape != (2,):
        _fail(
            ShapeMismatchError(
                f"{name} must be a single interleaved entry of shape (2,), got shape {arr.shape}"
            )
        )
