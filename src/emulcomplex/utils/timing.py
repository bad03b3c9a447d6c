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

"""Timing utilities for comparing kernels."""

import logging
import time
from collections.abc import Callable
from typing import Any, NamedTuple

import numpy as np

logger = logging.getLogger(__name__)


class TimingResult(NamedTuple):
    """Mean/min/max wall time in seconds over the repeats."""

    mean: float
    min: float
    max: float


def time_function(
    func: Callable[..., Any], func_inputs: dict[str, Any], num_repeats: int = 10
) -> TimingResult:
    """Time ``func(**func_inputs)`` over several repeats."""
    if num_repeats < 1:
        raise ValueError(f"num_repeats must be >= 1. Got {num_repeats}.")
    times = []
    for _ in range(num_repeats):
        start = time.perf_counter()
        _ = func(**func_inputs)
        end = time.perf_counter()
        times.append(end - start)
    return TimingResult(float(np.mean(times)), float(np.min(times)), float(np.max(times)))


def log_time(
    f1: Callable[..., Any],
    f2: Callable[..., Any],
    f1_inputs: dict[str, Any],
    f2_inputs: dict[str, Any] | None = None,
    repeat: int = 5,
) -> float:
    """
    Time two functions, log the results and return the speed-up of f2 over f1.

    Inputs:
    - f1: first function to time (the baseline)
    - f2: second function to time
    - f1_inputs: keyword inputs for the first function
    - f2_inputs: keyword inputs for the second function. If None, f2_inputs = f1_inputs.
    - repeat: number of times to repeat timing

    Output:
    - ratio t1 / t2 (> 1 means f2 is faster); 0.0 when f2 took no measurable time
    """
    if f2_inputs is None:
        f2_inputs = f1_inputs
    t1 = time_function(f1, f1_inputs, repeat)
    logger.info(
        "f1 (%s) time: %.6f seconds (min: %.6f, max: %.6f)", f1.__name__, t1.mean, t1.min, t1.max
    )

    t2 = time_function(f2, f2_inputs, repeat)
    logger.info(
        "f2 (%s) time: %.6f seconds (min: %.6f, max: %.6f)", f2.__name__, t2.mean, t2.min, t2.max
    )

    logger.info("Difference: %.3f ms", abs(t1.mean - t2.mean) * 1e3)

    if t2.mean == 0:
        return 0.0
    speed_up = t1.mean / t2.mean
    logger.info("Speed up: %.2fx", speed_up)
    return speed_up
