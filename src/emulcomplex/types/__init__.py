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
Public entry point for canonical array type aliases.

Exports only the selected dtypes to keep the kernels consistent:
  - NumPy: FloatNP (float64), Float32NP (float32), ComplexNP (complex128)
  - JAX:   FloatJAX, ComplexJAX (only when JAX is installed)
"""

# NumPy types (always available)
from .arrays import (
    ComplexArrayNP,
    ComplexNP,
    Float32NP,
    FloatArrayNP,
    FloatNP,
    InterleavedArrayNP,
)

__all__ = [
    "ComplexArrayNP",
    "ComplexNP",
    "Float32NP",
    "FloatArrayNP",
    "FloatNP",
    "InterleavedArrayNP",
]

# JAX types (only when JAX is installed)
try:
    from .arrays import ComplexJAX, FloatJAX  # noqa: F401

    __all__.extend(["ComplexJAX", "FloatJAX"])
except ImportError:
    # JAX not available - JAX backend disabled
    pass
