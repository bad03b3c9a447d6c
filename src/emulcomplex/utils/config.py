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

"""YAML file helpers."""

from pathlib import Path
from typing import Any

import yaml


def load_config(cfg_path: Path | str) -> dict[str, Any]:
    """Load a YAML mapping from ``cfg_path``.

    Args:
        cfg_path: Path to the YAML file.

    Returns:
        The parsed mapping. An empty file yields an empty dict.

    Raises:
        ValueError: If the document is not a mapping.
    """
    with open(cfg_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Expected a YAML mapping in {cfg_path}, got {type(data).__name__}"
        raise ValueError(msg)
    return data


def save_config(data: dict[str, Any], cfg_path: Path | str) -> None:
    """Write ``data`` to ``cfg_path`` as block-style YAML, preserving key order."""
    with open(cfg_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
