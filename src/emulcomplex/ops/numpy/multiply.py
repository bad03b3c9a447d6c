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
Multiplication of interleaved complex arrays.

Interleaved layout: ``a`` has shape (2 * nx_c, ny); rows ``2k`` and ``2k + 1``
hold the real and imaginary part of logical entry ``k`` for every column.

- mul_complex: a * a_c with a_c a native complex array (nx_c, ny)
- mul_imag: a * (i * a_c), a_c the imaginary part only (real part never read)
- mul_imag_scalar: single entry (re, im) times i * scalar
- mul_real: a * a_c, a_c the real part only
- multiply: interleaved * interleaved, same shape

Results are allocated with ``np.empty_like`` so they keep the memory order of
``a``; for Fortran-ordered input (rows fastest) each lane expression walks
contiguous storage column by column.
"""

from typing import Any

import numpy as np

from emulcomplex.types import ComplexArrayNP, FloatArrayNP, InterleavedArrayNP

from .._validation import (
    as_real_array,
    as_real_scalar,
    check_interleaved,
    check_same_shape,
    check_scalar,
    check_single_entry,
    check_split_operand,
)


def mul_complex(a: InterleavedArrayNP, a_c: ComplexArrayNP) -> InterleavedArrayNP:
    """
    Multiply an interleaved array by a native complex array.

    Args:
        a: interleaved real array, shape (2 * nx_c, ny)
        a_c: complex array, shape (nx_c, ny)

    Returns
    -------
        b: interleaved product, shape (2 * nx_c, ny)

    Notes
    -----
        (a_r + i a_i) * (c_r + i c_i) = (a_r c_r - a_i c_i) + i (a_r c_i + a_i c_r)
    """
    a = as_real_array(a, "a")
    a_c = np.asarray(a_c)
    check_split_operand(a, a_c)

    a_c_r = a_c.real
    a_c_i = a_c.imag
    b = np.empty_like(a, dtype=np.result_type(a.dtype, a_c_r.dtype))

    a_r = a[0::2]
    a_i = a[1::2]
    b[0::2] = a_r * a_c_r - a_i * a_c_i
    b[1::2] = a_r * a_c_i + a_i * a_c_r

    return b


def mul_imag_scalar(a: FloatArrayNP, a_c: Any) -> FloatArrayNP:  # noqa: ANN401
    """
    Multiply one complex entry (re, im) by the purely imaginary scalar i * a_c.

    Args:
        a: real vector of shape (2,) holding (re, im)
        a_c: real scalar, the imaginary part of the multiplier

    Returns
    -------
        b: real vector (-im * a_c, re * a_c), shape (2,)
    """
    a = as_real_array(a, "a")
    check_single_entry(a, "a")
    check_scalar(a_c, "a_c")
    a_c_i = as_real_scalar(a_c, "a_c")

    b = np.empty_like(a, dtype=np.result_type(a.dtype, a_c_i))
    b[0] = -a[1] * a_c_i
    b[1] = a[0] * a_c_i
    return b


def mul_imag(a: InterleavedArrayNP, a_c: Any) -> InterleavedArrayNP:  # noqa: ANN401
    """
    Multiply an interleaved array by a purely imaginary operand i * a_c.

    The real part of the true operand is assumed to be zero and is never read;
    callers are responsible for that assumption.

    Args:
        a: interleaved real array, shape (2 * nx_c, ny), or a single entry of shape (2,)
        a_c: imaginary parts, shape (nx_c, ny), or a real scalar applied to every entry

    Returns
    -------
        b: interleaved product, same shape as ``a``
    """
    if np.ndim(a) == 1:
        return mul_imag_scalar(a, a_c)

    a = as_real_array(a, "a")
    if np.ndim(a_c) == 0:
        check_interleaved(a, "a")
        a_c_i = as_real_scalar(a_c, "a_c")
    else:
        a_c_i = as_real_array(a_c, "a_c")
        check_split_operand(a, a_c_i)

    b = np.empty_like(a, dtype=np.result_type(a.dtype, a_c_i))

    b[0::2] = -(a[1::2] * a_c_i)
    b[1::2] = a[0::2] * a_c_i

    return b


def mul_real(a: InterleavedArrayNP, a_c: Any) -> InterleavedArrayNP:  # noqa: ANN401
    """
    Multiply an interleaved array by a purely real operand a_c.

    The imaginary part of the true operand is assumed to be zero.

    Args:
        a: interleaved real array, shape (2 * nx_c, ny)
        a_c: real parts, shape (nx_c, ny), or a real scalar applied to every entry

    Returns
    -------
        b: interleaved product, shape (2 * nx_c, ny)
    """
    a = as_real_array(a, "a")
    if np.ndim(a_c) == 0:
        check_interleaved(a, "a")
        a_c_r = as_real_scalar(a_c, "a_c")
    else:
        a_c_r = as_real_array(a_c, "a_c")
        check_split_operand(a, a_c_r)

    b = np.empty_like(a, dtype=np.result_type(a.dtype, a_c_r))
    b[0::2] = a[0::2] * a_c_r
    b[1::2] = a[1::2] * a_c_r
    return b


def multiply(c1: InterleavedArrayNP, c2: InterleavedArrayNP) -> InterleavedArrayNP:
    """
    Multiply two interleaved arrays entry by entry.

    Args:
        c1: interleaved real array, shape (2n, m)
        c2: interleaved real array, shape (2n, m)

    Returns
    -------
        c3: interleaved product, shape (2n, m)
    """
    c1 = as_real_array(c1, "c1")
    c2 = as_real_array(c2, "c2")
    check_interleaved(c1, "c1")
    check_interleaved(c2, "c2")
    check_same_shape(c1, c2, "c1", "c2")

    c3 = np.empty_like(c1, dtype=np.result_type(c1.dtype, c2.dtype))

    c1_r, c1_i = c1[0::2], c1[1::2]
    c2_r, c2_i = c2[0::2], c2[1::2]
    c3[0::2] = c1_r * c2_r - c1_i * c2_i
    c3[1::2] = c1_r * c2_i + c1_i * c2_r

    return c3


__all__ = [
    "mul_complex",
    "mul_imag",
    "mul_imag_scalar",
    "mul_real",
    "multiply",
]
