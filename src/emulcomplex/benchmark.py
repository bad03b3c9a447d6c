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

"""Benchmark the interleaved complex multiply against native complex arithmetic.

Times ``mul_complex`` on interleaved storage against ``*`` on a native complex
array holding the same values, then checks that both agree.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar

import numpy as np

from emulcomplex.config import get_config, load_config_file
from emulcomplex.ops.numpy import interleave, mul_complex
from emulcomplex.utils import log_time, max_abs_diff

# Color constants for terminal output
RED = "\033[0;31m"
BLUE = "\033[0;34m"
YELLOW = "\033[0;33m"
NC = "\033[0m"  # No Color

# Agreement tolerance per precision
DEFAULT_ATOL: dict[str, float] = {"float64": 1e-9, "float32": 1e-4}


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors to log messages."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": BLUE,
        "INFO": BLUE,
        "WARNING": YELLOW,
        "ERROR": RED,
        "CRITICAL": RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color."""
        color = self.COLORS.get(record.levelname, "")
        message = super().format(record)
        if color:
            return f"{color}{message}{NC}"
        return message


def setup_logging(*, verbose: bool = False) -> logging.Logger:
    """Send ``emulcomplex`` log records to stdout."""
    log_level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger("emulcomplex")
    logger.setLevel(log_level)

    # Replace handlers from an earlier call instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        ColoredFormatter("%(asctime)s.%(msecs)03d - %(message)s", datefmt="%H:%M:%S")
    )
    logger.addHandler(console_handler)

    return logger


def native_mul(a_native: np.ndarray, a_c: np.ndarray) -> np.ndarray:
    """Reference: elementwise product of native complex arrays."""
    return a_native * a_c


def make_operands(
    n_entries: int, n_batch: int, *, seed: int, order: str = "F"
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Build random operands in the configured precision.

    Returns
    -------
        a: interleaved operand, shape (2 * n_entries, n_batch), memory order ``order``
        a_native: the same values as a native complex array, shape (n_entries, n_batch)
        a_c: native complex multiplier, shape (n_entries, n_batch)
    """
    dtype = get_config().dtype
    rng = np.random.default_rng(seed)
    a = np.asarray(rng.standard_normal((2 * n_entries, n_batch)), dtype=dtype, order=order)
    a_native = a[0::2] + 1j * a[1::2]
    a_c = rng.standard_normal((n_entries, n_batch)) + 1j * rng.standard_normal(
        (n_entries, n_batch)
    )
    return a, a_native, a_c.astype(a_native.dtype)


def run_benchmark(
    n_entries: int,
    n_batch: int,
    *,
    repeat: int = 5,
    seed: int = 0,
    order: str = "F",
    atol: float | None = None,
) -> bool:
    """Time both multiplies and return True when the results agree within ``atol``."""
    # explicit name so records reach the package handler under `python -m`
    logger = logging.getLogger("emulcomplex.benchmark")
    config = get_config()
    if atol is None:
        atol = DEFAULT_ATOL[config.precision]

    a, a_native, a_c = make_operands(n_entries, n_batch, seed=seed, order=order)
    logger.info(
        "Interleaved operand %s (%s, order=%s), %d repeats", a.shape, a.dtype, order, repeat
    )

    log_time(
        native_mul,
        mul_complex,
        {"a_native": a_native, "a_c": a_c},
        {"a": a, "a_c": a_c},
        repeat=repeat,
    )

    expected = native_mul(a_native, a_c)
    stats = max_abs_diff(mul_complex(a, a_c), interleave(expected.real, expected.imag))
    if stats.max_abs > atol:
        logger.error("Results differ: max abs %.3e > atol %.3e", stats.max_abs, atol)
        return False
    logger.info("Results agree within atol %.1e", atol)
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark from the command line; return the process exit code."""
    parser = argparse.ArgumentParser(
        description="Benchmark interleaved complex multiplication against native complex arrays",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # 4096 x 64 entries, default config
  %(prog)s --n-entries 1024 --n-batch 8      # smaller problem
  %(prog)s --config config/kernel.yaml -v    # explicit precision config, debug logs
        """,
    )

    parser.add_argument(
        "--n-entries",
        type=int,
        default=4096,
        help="Logical complex entries per column (default: 4096)",
    )

    parser.add_argument(
        "--n-batch",
        type=int,
        default=64,
        help="Number of columns (default: 64)",
    )

    parser.add_argument(
        "--repeat",
        type=int,
        default=5,
        help="Timing repeats per function (default: 5)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed for the operands (default: 0)",
    )

    parser.add_argument(
        "--order",
        choices=["C", "F"],
        default="F",
        help="Memory order of the interleaved operand (default: F, rows fastest)",
    )

    parser.add_argument(
        "--atol",
        type=float,
        default=None,
        help="Agreement tolerance (default: 1e-9 for float64, 1e-4 for float32)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Kernel config YAML file (default: $EMULCOMPLEX_CONFIG or built-in defaults)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (show debug messages)",
    )

    args = parser.parse_args(argv)
    logger = setup_logging(verbose=args.verbose)

    if args.n_entries < 1 or args.n_batch < 1:
        logger.error("--n-entries and --n-batch must be positive")
        return 1

    if args.config is not None:
        config = load_config_file(args.config)
        logger.info("Loaded config from %s (precision=%s)", args.config, config.precision)

    ok = run_benchmark(
        args.n_entries,
        args.n_batch,
        repeat=args.repeat,
        seed=args.seed,
        order=args.order,
        atol=args.atol,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
