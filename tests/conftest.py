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

"""Pytest configuration for emulcomplex tests."""

import importlib.util
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from emulcomplex.config import CONFIG_ENV_VAR, set_config

logger = logging.getLogger(__name__)

JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


def pytest_configure(config: pytest.Config) -> None:
    """Configure logging before tests run."""
    # Silence noisy JAX debug logs
    logging.getLogger("jax").setLevel(logging.WARNING)
    logging.getLogger("jax._src").setLevel(logging.WARNING)
    logging.getLogger("jax._src.xla_bridge").setLevel(logging.CRITICAL)


def pytest_ignore_collect(collection_path: Path, config: pytest.Config) -> bool | None:
    """Ignore ops/jax test collection when JAX is not installed.

    This hook runs before test collection, preventing import errors
    when the optional dependency is missing.
    """
    if not JAX_AVAILABLE:
        parts = collection_path.parts
        if "jax" in parts and "ops" in parts:
            logger.info(f"Ignoring {collection_path} (JAX not installed)")
            return True

    return None


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip tests marked with @pytest.mark.jax when JAX is not installed."""
    if JAX_AVAILABLE:
        return

    skip_jax = pytest.mark.skip(reason="Skipping jax tests: JAX not installed")
    for item in items:
        if "jax" in item.keywords:
            item.add_marker(skip_jax)


@pytest.fixture(autouse=True)
def _default_kernel_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test against the built-in configuration."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    set_config(None)
    yield
    set_config(None)
