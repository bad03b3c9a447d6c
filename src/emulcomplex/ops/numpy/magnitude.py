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

"""Magnitude of each entry of an interleaved array."""

import numpy as np

from emulcomplex.types import FloatArrayNP, InterleavedArrayNP

from .._validation import as_real_array, check_interleaved


def magnitude(c: InterleavedArrayNP) -> FloatArrayNP:
    """
    Compute |c| = sqrt(re^2 + im^2) per logical entry.

    ``np.hypot`` is used so large components do not overflow in the squares.

    Args:
        c: interleaved real array, shape (2n, m)

    Returns
    -------
        c_mag: split real array, shape (n, m)
    """
    c = as_real_array(c, "c")
    check_interleaved(c, "c")
    return np.hypot(c[0::2], c[1::2])


__all__ = ["magnitude"]
