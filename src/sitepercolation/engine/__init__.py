"""Drivers for replaying site lists and running Monte Carlo trials.

This package provides the entry points that feed sites into a grid,
including configuration and result types.
"""

from sitepercolation.engine.config import ReplayResult, SimulationConfig, TrialResult
from sitepercolation.engine.runner import replay_file, replay_sites, run_trial

__all__ = [
    "ReplayResult",
    "SimulationConfig",
    "TrialResult",
    "replay_file",
    "replay_sites",
    "run_trial",
]
