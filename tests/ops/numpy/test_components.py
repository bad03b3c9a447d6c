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

"""Unit tests for `emulcomplex.ops.numpy.components` (NumPy implementation)."""

import numpy as np
import pytest

from emulcomplex.errors import OddLeadingDimensionError, ShapeMismatchError
from emulcomplex.ops.numpy import imaginary_part, interleave, real_part


class TestExtraction:
    """Tests for real_part and imaginary_part."""

    def test_even_and_odd_rows(self) -> None:
        """Real part takes rows 0, 2, ...; imaginary part rows 1, 3, ..."""
        c = np.arange(12.0).reshape(6, 2)

        np.testing.assert_array_equal(real_part(c), [[0.0, 1.0], [4.0, 5.0], [8.0, 9.0]])
        np.testing.assert_array_equal(imaginary_part(c), [[2.0, 3.0], [6.0, 7.0], [10.0, 11.0]])

    def test_results_are_copies(self) -> None:
        """Writing to an extracted lane leaves the source unchanged."""
        c = np.arange(4.0).reshape(2, 2)

        re = real_part(c)
        im = imaginary_part(c)
        re[:] = -1.0
        im[:] = -1.0

        np.testing.assert_array_equal(c, np.arange(4.0).reshape(2, 2))

    @pytest.mark.parametrize("func", [real_part, imaginary_part])
    def test_odd_leading_dimension_raises(self, func) -> None:
        """Odd row count surfaces an error instead of truncating."""
        with pytest.raises(OddLeadingDimensionError):
            _ = func(np.zeros((7, 2)))


class TestInterleave:
    """Tests for interleave."""

    def test_packs_rows_alternately(self) -> None:
        """Rows alternate real, imag, real, imag, ..."""
        real = np.array([[1.0, 2.0], [3.0, 4.0]])
        imag = np.array([[5.0, 6.0], [7.0, 8.0]])

        c = interleave(real, imag)

        np.testing.assert_array_equal(c, [[1.0, 2.0], [5.0, 6.0], [3.0, 4.0], [7.0, 8.0]])

    def test_inverts_extraction(self) -> None:
        """interleave(real_part(c), imaginary_part(c)) == c."""
        c = np.random.default_rng(0).standard_normal((10, 3))

        np.testing.assert_array_equal(interleave(real_part(c), imaginary_part(c)), c)

    def test_shape_mismatch_raises(self) -> None:
        """Both parts must have the same shape."""
        with pytest.raises(ShapeMismatchError):
            _ = interleave(np.zeros((2, 2)), np.zeros((3, 2)))

    def test_wrong_rank_raises(self) -> None:
        """Split parts are rank-2."""
        with pytest.raises(ShapeMismatchError):
            _ = interleave(np.zeros(3), np.zeros(3))
