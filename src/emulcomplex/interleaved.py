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
Container type for interleaved complex arrays.

``InterleavedComplexArray`` wraps a real (2n, m) array and validates the
(real, imag) row pairing once, at construction, so a plain real array can no
longer be passed where interleaved storage is expected.

Operator bindings:
- ``z * w`` with ``w`` an InterleavedComplexArray: entrywise complex product
- ``z * w`` with ``w`` a native complex ndarray of shape (n, m): mul_complex
- ``z * s`` with ``s`` a real scalar: mul_real
- ``abs(z)``: magnitude

A real (n, m) ndarray on the right of ``*`` is ambiguous (it may hold real
or imaginary parts), so ``mul_real`` / ``mul_imag`` must be called by name.
"""

from typing import Any

import numpy as np

from emulcomplex.ops._validation import as_real_array, check_interleaved
from emulcomplex.ops.numpy import (
    conjugate,
    imaginary_part,
    interleave,
    magnitude,
    mul_complex,
    mul_imag,
    mul_real,
    multiply,
    real_part,
)
from emulcomplex.types import ComplexArrayNP, FloatArrayNP, InterleavedArrayNP


class InterleavedComplexArray:
    """Real (2n, m) array whose row pairs hold the (real, imag) parts of (n, m) complex entries."""

    __slots__ = ("_data",)

    # ndarray <op> InterleavedComplexArray defers to our reflected operators
    __array_ufunc__ = None

    def __init__(self, data: Any, *, copy: bool = True) -> None:  # noqa: ANN401
        """
        Args:
            data: real array-like of shape (2n, m)
            copy: copy ``data`` whenever the validated array still shares its
                memory, so later changes by the caller do not leak into the container
        """
        arr = as_real_array(data, "data")
        check_interleaved(arr, "data")
        if copy and isinstance(data, np.ndarray) and np.may_share_memory(arr, data):
            arr = np.array(arr, copy=True, order="K")
        self._data: InterleavedArrayNP = arr

    @classmethod
    def _wrap(cls, result: InterleavedArrayNP) -> "InterleavedComplexArray":
        """Wrap a freshly allocated kernel result without copying it."""
        return cls(result, copy=False)

    @classmethod
    def from_parts(cls, real: FloatArrayNP, imag: FloatArrayNP) -> "InterleavedComplexArray":
        """Build from split real and imaginary parts of shape (n, m)."""
        return cls._wrap(interleave(real, imag))

    @property
    def data(self) -> InterleavedArrayNP:
        """Read-only view of the wrapped (2n, m) array."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> tuple[int, int]:
        """Storage shape (2n, m)."""
        return self._data.shape

    @property
    def n_entries(self) -> int:
        """Number of logical complex entries per column (n)."""
        return self._data.shape[0] // 2

    @property
    def n_batch(self) -> int:
        """Number of columns (m)."""
        return self._data.shape[1]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def real(self) -> FloatArrayNP:
        """Real parts, shape (n, m)."""
        return real_part(self._data)

    @property
    def imag(self) -> FloatArrayNP:
        """Imaginary parts, shape (n, m)."""
        return imaginary_part(self._data)

    def conjugate(self) -> "InterleavedComplexArray":
        return self._wrap(conjugate(self._data))

    def magnitude(self) -> FloatArrayNP:
        return magnitude(self._data)

    def mul_complex(self, a_c: ComplexArrayNP) -> "InterleavedComplexArray":
        """Multiply by a native complex array of shape (n, m)."""
        return self._wrap(mul_complex(self._data, a_c))

    def mul_imag(self, a_c: Any) -> "InterleavedComplexArray":  # noqa: ANN401
        """Multiply by i * a_c, where a_c holds imaginary parts (n, m) or is a scalar."""
        return self._wrap(mul_imag(self._data, a_c))

    def mul_real(self, a_c: Any) -> "InterleavedComplexArray":  # noqa: ANN401
        """Multiply by a_c, where a_c holds real parts (n, m) or is a scalar."""
        return self._wrap(mul_real(self._data, a_c))

    def multiply(self, other: "InterleavedComplexArray") -> "InterleavedComplexArray":
        """Entrywise complex product with another interleaved array of the same shape."""
        return self._wrap(multiply(self._data, other._data))

    def __mul__(self, other: Any) -> "InterleavedComplexArray":  # noqa: ANN401
        if isinstance(other, InterleavedComplexArray):
            return self.multiply(other)
        if isinstance(other, np.ndarray):
            if np.iscomplexobj(other):
                return self.mul_complex(other)
            msg = (
                "Multiplying by a real ndarray is ambiguous; call mul_real() for real parts "
                "or mul_imag() for imaginary parts"
            )
            raise TypeError(msg)
        if isinstance(other, (int, float, np.integer, np.floating)) and not isinstance(other, bool):
            return self.mul_real(other)
        return NotImplemented

    # complex multiplication commutes
    __rmul__ = __mul__

    def __abs__(self) -> FloatArrayNP:
        return self.magnitude()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InterleavedComplexArray):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> np.ndarray:  # noqa: ANN401
        if copy:
            return np.array(self._data, dtype=dtype, copy=True)
        if dtype is not None and np.dtype(dtype) != self._data.dtype:
            if copy is False:
                msg = f"Converting {self._data.dtype} to {np.dtype(dtype)} requires a copy"
                raise ValueError(msg)
            return self._data.astype(dtype)
        return self.data

    def __repr__(self) -> str:
        return (
            f"InterleavedComplexArray(n_entries={self.n_entries}, n_batch={self.n_batch}, "
            f"dtype={self.dtype})"
        )


__all__ = ["InterleavedComplexArray"]
