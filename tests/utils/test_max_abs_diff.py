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

"""Tests for max_abs_diff."""

import logging

import numpy as np
import pytest

from emulcomplex.utils import DiffStats, max_abs_diff


def test_identical_arrays() -> None:
    x = np.arange(6.0).reshape(2, 3)

    assert max_abs_diff(x, x.copy()) == DiffStats(0.0, 0.0, 0.0, 0.0)


def test_known_difference() -> None:
    """One entry off by 1 against a reference of 2."""
    stats = max_abs_diff(np.array([2.0, 3.0]), np.array([2.0, 2.0]))

    assert stats.max_abs == pytest.approx(1.0)
    assert stats.mean_abs == pytest.approx(0.5)
    assert stats.max_rel_pct == pytest.approx(50.0)
    assert stats.mean_rel_pct == pytest.approx(25.0)


def test_zero_reference_is_finite() -> None:
    """The relative denominator is floored, so a zero reference gives no inf."""
    stats = max_abs_diff(np.array([1e-3]), np.array([0.0]))

    assert np.isfinite(stats.max_rel_pct)


def test_logs_at_info(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="emulcomplex"):
        max_abs_diff(np.ones(3), np.ones(3))

    assert any("max abs" in record.getMessage() for record in caplog.records)
