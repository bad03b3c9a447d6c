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

"""Tests for the benchmark command line."""

import logging
from collections.abc import Iterator
from pathlib import Path

import numpy as np
import pytest

from emulcomplex.benchmark import main, make_operands, run_benchmark, setup_logging


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by setup_logging, they hold the captured stdout."""
    logger = logging.getLogger("emulcomplex")
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_make_operands_layout() -> None:
    """The interleaved operand holds the native values in row pairs."""
    a, a_native, a_c = make_operands(3, 2, seed=1)

    assert a.shape == (6, 2)
    assert a.flags.f_contiguous
    assert a_native.shape == a_c.shape == (3, 2)
    np.testing.assert_array_equal(a[0::2], a_native.real)
    np.testing.assert_array_equal(a[1::2], a_native.imag)


def test_run_benchmark_agrees() -> None:
    assert run_benchmark(16, 4, repeat=1, order="C")


def test_main_small_problem() -> None:
    assert main(["--n-entries", "8", "--n-batch", "2", "--repeat", "1"]) == 0


def test_main_float32_config(tmp_path: Path) -> None:
    path = tmp_path / "kernel.yaml"
    path.write_text("kernel:\n  precision: float32\n", encoding="utf-8")

    assert main(["--n-entries", "8", "--n-batch", "2", "--repeat", "1", "--config", str(path)]) == 0


@pytest.mark.parametrize("flag", ["--n-entries", "--n-batch"])
def test_main_rejects_non_positive_sizes(flag: str) -> None:
    assert main([flag, "0"]) == 1


def test_setup_logging_replaces_handlers() -> None:
    """Calling setup_logging twice leaves a single handler."""
    logger = setup_logging()
    setup_logging(verbose=True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
