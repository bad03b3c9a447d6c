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

"""Layout errors raised by the interleaved-complex kernels.

All errors derive from ``ValueError`` so callers that already guard array
arithmetic with ``except ValueError`` keep working.
"""


class InterleavedLayoutError(ValueError):
    """An array does not satisfy the interleaved (real, imag) row layout."""


class OddLeadingDimensionError(InterleavedLayoutError):
    """An interleaved array has an odd number of rows."""

    def __init__(self, name: str, shape: tuple[int, ...]) -> None:
        self.name = name
        self.shape = shape
        super().__init__(
            f"{name} is an invalid interleaved complex array: leading dimension "
            f"{shape[0]} of shape {shape} is odd"
        )


class ShapeMismatchError(InterleavedLayoutError):
    """Operands that must share a dimension (or a rank) do not."""


__all__ = [
    "InterleavedLayoutError",
    "OddLeadingDimensionError",
    "ShapeMismatchError",
]
