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
Conversion between interleaved and split form.

- real_part / imaginary_part: copy one lane out of an interleaved array
- interleave: pack split real and imaginary parts into interleaved form
"""

import numpy as np

from emulcomplex.types import FloatArrayNP, InterleavedArrayNP

from .._validation import as_real_array, check_interleaved, check_same_shape, check_split


def real_part(c: InterleavedArrayNP) -> FloatArrayNP:
    """Return the real lane of ``c`` (rows 0, 2, 4, ...) as a new (n, m) array."""
    c = as_real_array(c, "c")
    check_interleaved(c, "c")
    return c[0::2].copy(order="K")


def imaginary_part(c: InterleavedArrayNP) -> FloatArrayNP:
    """Return the imaginary lane of ``c`` (rows 1, 3, 5, ...) as a new (n, m) array."""
    c = as_real_array(c, "c")
    check_interleaved(c, "c")
    return c[1::2].copy(order="K")


def interleave(real: FloatArrayNP, imag: FloatArrayNP) -> InterleavedArrayNP:
    """
    Pack split real and imaginary parts into one interleaved array.

    Args:
        real: real parts, shape (n, m)
        imag: imaginary parts, shape (n, m)

    Returns
    -------
        c: interleaved real array, shape (2n, m), with
        ``real_part(c) == real`` and ``imaginary_part(c) == imag``
    """
    real = as_real_array(real, "real")
    imag = as_real_array(imag, "imag")
    check_split(real, "real")
    check_same_shape(real, imag, "real", "imag")

    n, m = real.shape
    c = np.empty((2 * n, m), dtype=np.result_type(real.dtype, imag.dtype))
    c[0::2] = real
    c[1::2] = imag
    return c


__all__ = ["imaginary_part", "interleave", "real_part"]
