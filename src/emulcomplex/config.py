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

"""Process-wide kernel configuration.

The surrounding application fixes one floating-point precision for the whole
process. Kernels keep the precision of floating inputs and use the configured
one only when promoting non-floating input (ints, bools, nested lists).

The configuration is read from ``EMULCOMPLEX_CONFIG`` (a YAML file) the first
time it is requested, unless the application installs one with
:func:`set_config` or :func:`load_config_file` beforehand.
"""

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path

import numpy as np

from emulcomplex.types import Float32NP, FloatNP
from emulcomplex.utils import load_config, save_config

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EMULCOMPLEX_CONFIG"

_PRECISIONS: dict[str, type[np.floating]] = {
    "float64": FloatNP,
    "float32": Float32NP,
}


@dataclass(frozen=True)
class KernelConfig:
    """Kernel settings."""

    precision: str = "float64"

    def __post_init__(self) -> None:
        if self.precision not in _PRECISIONS:
            msg = f"Unsupported precision: {self.precision!r}. Supported: {sorted(_PRECISIONS)}"
            raise ValueError(msg)

    @property
    def dtype(self) -> type[np.floating]:
        """NumPy scalar type for the configured precision."""
        return _PRECISIONS[self.precision]

    @classmethod
    def from_yaml(cls, yaml_path: Path | str) -> "KernelConfig":
        """Load configuration from YAML file.

        The file holds a ``kernel`` section; missing keys take their defaults.
        An empty section gives the default config.

        Raises:
            ValueError: If the section is not a mapping or holds unknown keys.
        """
        data = load_config(yaml_path)
        section = data.get("kernel") or {}
        if not isinstance(section, dict):
            msg = f"Expected a mapping under 'kernel' in {yaml_path}, got {type(section).__name__}"
            raise ValueError(msg)
        unknown = sorted(set(section) - {f.name for f in fields(cls)})
        if unknown:
            msg = f"Unknown kernel config keys in {yaml_path}: {unknown}"
            raise ValueError(msg)
        return cls(**section)

    def save_yaml(self, yaml_path: Path | str) -> None:
        """Save configuration to YAML file.

        Args:
            yaml_path: Path to the output YAML file
        """
        save_config({"kernel": asdict(self)}, yaml_path)


_config: KernelConfig | None = None


def get_config() -> KernelConfig:
    """Return the active configuration, loading it from the environment on first use."""
    global _config
    if _config is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            logger.debug("Loading kernel config from %s (via %s)", env_path, CONFIG_ENV_VAR)
            _config = KernelConfig.from_yaml(env_path)
        else:
            _config = KernelConfig()
    return _config


def set_config(config: KernelConfig | None) -> None:
    """Install ``config`` as the active configuration.

    Passing None drops the active configuration so the next
    :func:`get_config` call re-reads the environment.
    """
    global _config
    _config = config
    if config is not None:
        logger.debug("Kernel precision set to %s", config.precision)


def load_config_file(yaml_path: Path | str) -> KernelConfig:
    """Load ``yaml_path`` and install it as the active configuration."""
    config = KernelConfig.from_yaml(yaml_path)
    set_config(config)
    return config


__all__ = [
    "CONFIG_ENV_VAR",
    "KernelConfig",
    "get_config",
    "load_config_file",
    "set_config",
]
