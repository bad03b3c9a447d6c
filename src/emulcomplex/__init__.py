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

"""Complex arithmetic on real arrays holding interleaved (real, imag) rows.

A real array of shape (2n, m) emulates an (n, m) complex array: rows ``2k``
and ``2k + 1`` hold the real and imaginary part of entry ``k``. The NumPy
kernels are re-exported here; the JAX backend lives in ``emulcomplex.ops.jax``
and is not imported by default.
"""

from .__version__ import __version__ as __version__
from .config import KernelConfig, get_config, load_config_file, set_config
from .errors import InterleavedLayoutError, OddLeadingDimensionError, ShapeMismatchError
from .interleaved import InterleavedComplexArray
from .ops.numpy import (
    conjugate,
    imaginary_part,
    interleave,
    magnitude,
    mul_complex,
    mul_imag,
    mul_imag_scalar,
    mul_real,
    multiply,
    real_part,
)

__all__ = [
    "InterleavedComplexArray",
    "InterleavedLayoutError",
    "KernelConfig",
    "OddLeadingDimensionError",
    "ShapeMismatchError",
    "conjugate",
    "get_config",
    "imaginary_part",
    "interleave",
    "load_config_file",
    "magnitude",
    "mul_complex",
    "mul_imag",
    "mul_imag_scalar",
    "mul_real",
    "multiply",
    "real_part",
    "set_config",
]
