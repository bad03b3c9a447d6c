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

"""Unit tests for `emulcomplex.ops.numpy.magnitude` (NumPy implementation)."""

import numpy as np
import pytest

from emulcomplex.errors import OddLeadingDimensionError
from emulcomplex.ops.numpy import imaginary_part, magnitude, real_part


def test_pythagorean_entries() -> None:
    """|3 + 4i| = 5 and |5 - 12i| = 13."""
    c = np.array([[3.0, 5.0], [4.0, -12.0]])

    np.testing.assert_allclose(magnitude(c), [[5.0, 13.0]], rtol=0, atol=1e-15)


def test_matches_components() -> None:
    """magnitude(c) == sqrt(real_part(c)^2 + imaginary_part(c)^2)."""
    c = np.random.default_rng(0).standard_normal((12, 5))

    expected = np.sqrt(real_part(c) ** 2 + imaginary_part(c) ** 2)

    np.testing.assert_allclose(magnitude(c), expected, rtol=1e-14, atol=0)


def test_matches_native_abs() -> None:
    """Agrees with abs() of the equivalent native complex array."""
    c = np.random.default_rng(1).standard_normal((8, 3))

    np.testing.assert_allclose(magnitude(c), np.abs(c[0::2] + 1j * c[1::2]), rtol=1e-14, atol=0)


def test_split_form_shape() -> None:
    """(2n, m) in, (n, m) out."""
    c = np.ones((6, 4))

    c_mag = magnitude(c)

    assert c_mag.shape == (3, 4)
    np.testing.assert_allclose(c_mag, np.sqrt(2.0), rtol=1e-15, atol=0)


def test_large_components_do_not_overflow() -> None:
    """Squares beyond float64 range still give a finite magnitude."""
    c = np.array([[3e200], [4e200]])

    np.testing.assert_allclose(magnitude(c), [[5e200]], rtol=1e-14)


def test_odd_leading_dimension_raises() -> None:
    """Odd row count is a hard failure."""
    with pytest.raises(OddLeadingDimensionError):
        _ = magnitude(np.zeros((5, 1)))
