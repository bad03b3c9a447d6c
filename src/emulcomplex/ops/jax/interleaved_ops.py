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

"""Interleaved complex arithmetic on JAX arrays.

Operations on arrays of shape (2n, m) where rows ``2k`` and ``2k + 1`` hold
the [real, imag] components of logical entry ``k``. Shapes are static under
``jax.jit``, so layout validation runs at trace time and raises the same
errors as the NumPy backend.
"""

from typing import Any

import jax.numpy as jnp
from jax import Array

from emulcomplex.types import FloatJAX

from .._validation import (
    check_interleaved,
    check_real,
    check_same_shape,
    check_scalar,
    check_single_entry,
    check_split,
    check_split_operand,
)


def _as_real(x: Any, name: str) -> Array:  # noqa: ANN401
    x = jnp.asarray(x)
    check_real(x, name)
    if not jnp.issubdtype(x.dtype, jnp.floating):
        x = x.astype(FloatJAX)
    return x


def _pack(real: Array, imag: Array) -> Array:
    """Re-interleave (n, m) lanes into (2n, m): (n, 2, m) -> (2n, m)."""
    n, m = real.shape
    return jnp.stack([real, imag], axis=1).reshape(2 * n, m)


def _operand(a: Array, a_c: Any) -> Array:  # noqa: ANN401
    """Validate a split or scalar real operand against interleaved ``a``."""
    a_c = _as_real(a_c, "a_c")
    if a_c.ndim == 0:
        check_interleaved(a, "a")
    else:
        check_split_operand(a, a_c)
    return a_c


def mul_complex(a: Array, a_c: Array) -> Array:
    """Complex multiplication: a * a_c with a_c a native complex array (nx_c, ny).

    Notes
    -----
        Formula: (a+bi) * (c+di) = (ac-bd) + (ad+bc)i
    """
    a = _as_real(a, "a")
    a_c = jnp.asarray(a_c)
    check_split_operand(a, a_c)

    a_r, a_i = a[0::2], a[1::2]
    a_c_r, a_c_i = jnp.real(a_c), jnp.imag(a_c)
    return _pack(a_r * a_c_r - a_i * a_c_i, a_r * a_c_i + a_i * a_c_r)


def mul_imag(a: Array, a_c: Any) -> Array:  # noqa: ANN401
    """Multiplication by a purely imaginary operand i * a_c: (re, im) -> (-im * a_c, re * a_c).

    ``a`` may also be a single entry of shape (2,) with a scalar ``a_c``.
    """
    a = _as_real(a, "a")
    if a.ndim == 1:
        check_single_entry(a, "a")
        a_c = _as_real(a_c, "a_c")
        check_scalar(a_c, "a_c")
        return jnp.stack([-a[1] * a_c, a[0] * a_c])

    a_c = _operand(a, a_c)
    return _pack(-(a[1::2] * a_c), a[0::2] * a_c)


def mul_real(a: Array, a_c: Any) -> Array:  # noqa: ANN401
    """Multiplication by a purely real operand a_c: (re, im) -> (re * a_c, im * a_c)."""
    a = _as_real(a, "a")
    a_c = _operand(a, a_c)
    return _pack(a[0::2] * a_c, a[1::2] * a_c)


def multiply(c1: Array, c2: Array) -> Array:
    """Complex multiplication of two interleaved arrays of identical shape."""
    c1 = _as_real(c1, "c1")
    c2 = _as_real(c2, "c2")
    check_interleaved(c1, "c1")
    check_interleaved(c2, "c2")
    check_same_shape(c1, c2, "c1", "c2")

    c1_r, c1_i = c1[0::2], c1[1::2]
    c2_r, c2_i = c2[0::2], c2[1::2]
    return _pack(c1_r * c2_r - c1_i * c2_i, c1_r * c2_i + c1_i * c2_r)


def conjugate(c: Array) -> Array:
    """Complex conjugate: negate the imaginary lanes."""
    c = _as_real(c, "c")
    check_interleaved(c, "c")
    return c.at[1::2].multiply(-1)


def magnitude(c: Array) -> Array:
    """Per-entry magnitude, shape (n, m)."""
    c = _as_real(c, "c")
    check_interleaved(c, "c")
    return jnp.hypot(c[0::2], c[1::2])


def real_part(c: Array) -> Array:
    """Real lanes of ``c``, shape (n, m)."""
    c = _as_real(c, "c")
    check_interleaved(c, "c")
    return c[0::2]


def imaginary_part(c: Array) -> Array:
    """Imaginary lanes of ``c``, shape (n, m)."""
    c = _as_real(c, "c")
    check_interleaved(c, "c")
    return c[1::2]


def interleave(real: Array, imag: Array) -> Array:
    """Pack split (n, m) parts into one (2n, m) interleaved array."""
    real = _as_real(real, "real")
    imag = _as_real(imag, "imag")
    check_split(real, "real")
    check_same_shape(real, imag, "real", "imag")
    return _pack(real, imag)


__all__ = [
    "conjugate",
    "imaginary_part",
    "interleave",
    "magnitude",
    "mul_complex",
    "mul_imag",
    "mul_real",
    "multiply",
    "real_part",
]
