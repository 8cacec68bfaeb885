"""Configuration helpers for the caliper sweep."""

from __future__ import annotations

import copy
import sys
from dataclasses import dataclass
from typing import Optional

from .kernel import OrientationKernel, get_kernel


@dataclass
class CaliperConfig:
    # distance of the helper points built along caliper and perpendicular lines
    unit_length: float = 100.0
    # rotation angles closer than this count as a simultaneous hit
    angle_epsilon: float = sys.float_info.epsilon
    kernel: str = "robust"
    validate_inputs: bool = False

    def make_kernel(self) -> OrientationKernel:
        return get_kernel(self.kernel)


_CALIPER_CONFIG = CaliperConfig()


def get_caliper_config() -> CaliperConfig:
    return copy.deepcopy(_CALIPER_CONFIG)


def set_caliper_config(config: CaliperConfig) -> None:
    global _CALIPER_CONFIG
    _CALIPER_CONFIG = copy.deepcopy(config)


def resolve_config(config: Optional[CaliperConfig]) -> CaliperConfig:
    return config if config is not None else get_caliper_config()


__all__ = [
    "CaliperConfig",
    "get_caliper_config",
    "set_caliper_config",
    "resolve_config",
]
