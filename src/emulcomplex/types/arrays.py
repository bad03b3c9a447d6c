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
Centralized array type aliases for the interleaved-complex kernels.

Public API exports only the canonical choices per backend so that every
kernel agrees on precision and casting is never accidental:

- NumPy: FloatNP, Float32NP, ComplexNP (always available)
- JAX: FloatJAX, ComplexJAX (only when JAX is installed)

Interleaved arrays are plain real arrays; the alias ``InterleavedArrayNP``
only documents that the leading dimension holds (real, imag) row pairs.
"""

from typing import TypeAlias

import numpy as np
import numpy.typing as npt

# NumPy scalar types (always available)
FloatNP = np.float64
"""NumPy floating-point scalar type (float64), the default precision."""

Float32NP = np.float32
"""NumPy single-precision scalar type (float32), selectable through the config."""

ComplexNP = np.complex128
"""NumPy complex scalar type (complex128)."""

# NumPy array types for type hinting
FloatArrayNP: TypeAlias = npt.NDArray[np.floating]
"""NumPy floating-point array type (split form, any precision)."""

InterleavedArrayNP: TypeAlias = npt.NDArray[np.floating]
"""NumPy real array of shape (2n, m) holding interleaved (real, imag) rows."""

ComplexArrayNP: TypeAlias = npt.NDArray[np.complexfloating]
"""NumPy native complex array type."""

# JAX types (only available when JAX is installed)
try:
    import jax.numpy as jnp

    FloatJAX = jnp.float32
    """JAX floating-point scalar type (float32, the JAX default without x64)."""

    ComplexJAX = jnp.complex64
    """JAX complex scalar type (complex64)."""
except ImportError:
    # JAX not available - JAX backend disabled
    pass
