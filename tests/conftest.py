"""Pytest configuration.

Goal: make `import hammersim` work reliably when running tests without installing
package (editable install).

This repo uses a flat layout (hammersim/ at repo root). Some environments run
pytest with a working directory where repo root isn't on sys.path, leading to
`ModuleNotFoundError: hammersim`.

This conftest ensures repo root is on sys.path and that matplotlib never tries
to open a window.
"""

from __future__ import annotations

import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from hammersim.core.types import SimulationInputs  # noqa: E402


@pytest.fixture()
def reference_inputs() -> SimulationInputs:
    # 4 in / 100 GPM / 100 ft / 0.25 in / 100 ms
    return SimulationInputs(
        diameter_in=4.0,
        flow_rate_gpm=100.0,
        pipe_length_ft=100.0,
        wall_thickness_in=0.25,
        closure_time_ms=100.0,
    )
