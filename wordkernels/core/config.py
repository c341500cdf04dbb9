"""
Environment configuration for the command-line tools.

Malformed or empty values fall back to the defaults; integers are clamped to
their bounds. Command-line flags take precedence over everything read here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


DEMO_SWEEP_BOUND = 1024
MAX_HARNESS_TRACES = 1_000_000


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


@dataclass(frozen=True)
class DemoConfig:
    lo: int = -5
    hi: int = 5
    variant: str = "branch"


@dataclass(frozen=True)
class HarnessConfig:
    traces: int = 200
    seed: int = 7


def demo_config_from_env() -> DemoConfig:
    d = DemoConfig()
    return DemoConfig(
        lo=_env_int("WORDKERNELS_DEMO_LO", d.lo, lo=-DEMO_SWEEP_BOUND, hi=DEMO_SWEEP_BOUND),
        hi=_env_int("WORDKERNELS_DEMO_HI", d.hi, lo=-DEMO_SWEEP_BOUND, hi=DEMO_SWEEP_BOUND),
        variant=_env_str("WORDKERNELS_DEMO_VARIANT", d.variant),
    )


def harness_config_from_env() -> HarnessConfig:
    d = HarnessConfig()
    return HarnessConfig(
        traces=_env_int("WORDKERNELS_HARNESS_TRACES", d.traces, lo=0, hi=MAX_HARNESS_TRACES),
        seed=_env_int("WORDKERNELS_HARNESS_SEED", d.seed, lo=0, hi=2**32 - 1),
    )
