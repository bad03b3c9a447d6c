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

"""Difference statistics between a kernel result and a reference."""

import logging
from typing import Any, NamedTuple

import numpy as np

logger = logging.getLogger(__name__)


class DiffStats(NamedTuple):
    """Absolute and relative (percent) differences between two arrays."""

    max_abs: float
    mean_abs: float
    max_rel_pct: float
    mean_rel_pct: float


def max_abs_diff(
    x: Any,  # noqa: ANN401
    y: Any,  # noqa: ANN401
    eps: float = 1e-12,
) -> DiffStats:
    """Compare ``x`` against the reference ``y`` and log the differences.

    Args:
        x: Array under test.
        y: Reference array, broadcast-compatible with ``x``.
        eps: Floor for the relative-difference denominator.

    Returns
    -------
        DiffStats with the maximum/mean absolute and relative differences.
    """
    # Flatten, floor the denominator so zero references do not yield inf
    x = np.asarray(x).ravel()
    y = np.asarray(y).ravel()

    abs_diff = np.abs(x - y)
    denom = np.maximum(np.abs(y), eps)
    rel_diff = abs_diff / denom

    stats = DiffStats(
        max_abs=float(abs_diff.max(initial=0.0)),
        mean_abs=float(abs_diff.mean()) if abs_diff.size else 0.0,
        max_rel_pct=float(rel_diff.max(initial=0.0) * 100.0),
        mean_rel_pct=float(rel_diff.mean() * 100.0) if rel_diff.size else 0.0,
    )

    logger.info("\t max abs: %s", stats.max_abs)
    logger.info("\t mean abs: %s", stats.mean_abs)
    logger.info("\t max rel: %.4f %%", stats.max_rel_pct)
    logger.info("\t mean rel: %.4f %%", stats.mean_rel_pct)

    return stats
