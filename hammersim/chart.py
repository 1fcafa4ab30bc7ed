"""Chart rendering for a simulated pressure transient.

Lifetime of a rendered chart is owned by the caller: `render_chart()` returns a
`ChartHandle` and the caller disposes the previous handle before drawing the
next one. There is no module-level "current chart".
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple
import logging

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from hammersim.simulator import SimulationResult

logger = logging.getLogger(__name__)

SERIES_LABEL = "Pressure (psi)"
X_AXIS_TITLE = "Time (s)"
Y_AXIS_TITLE = "Pressure (psi)"
CHART_TITLE = "Water Hammer Pressure Transient"


@dataclass(frozen=True)
class ChartData:
    labels: Tuple[str, ...]
    values: Tuple[float, ...]
    series_label: str = SERIES_LABEL
    x_title: str = X_AXIS_TITLE
    y_title: str = Y_AXIS_TITLE
    title: str = CHART_TITLE

    def __post_init__(self) -> None:
        if len(self.labels) != len(self.values):
            raise ValueError(
                f"labels and values must have the same length; got {len(self.labels)} and {len(self.values)}"
            )

    @classmethod
    def from_result(cls, result: SimulationResult) -> "ChartData":
        labels = []
        values = []
        for s in result.series:
            labels.append(f"{s.time_s:.3f}")
            values.append(s.pressure_psi)
        return cls(labels=tuple(labels), values=tuple(values))


class ChartHandle:
    """A live matplotlib figure. `dispose()` releases it; calling it twice is a no-op."""

    def __init__(self, fig: Figure) -> None:
        self._fig: Figure | None = fig

    @property
    def disposed(self) -> bool:
        return self._fig is None

    @property
    def figure(self) -> Figure:
        if self._fig is None:
            raise RuntimeError("chart handle already disposed")
        return self._fig

    def save(self, path: str | Path, *, dpi: int = 160) -> Path:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        self.figure.savefig(out, dpi=dpi)
        logger.info("Chart saved to %s", out)
        return out

    def show(self) -> None:
        plt.figure(self.figure.number)
        plt.show()

    def dispose(self) -> None:
        if self._fig is None:
            return
        plt.close(self._fig)
        self._fig = None

    def __enter__(self) -> "ChartHandle":
        return self

    def __exit__(self, *exc) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return f"ChartHandle(disposed={self.disposed})"


def render_chart(data: ChartData, *, figsize: Tuple[float, float] = (10.0, 5.0)) -> ChartHandle:
    # метки — текст с 3 знаками, по оси X нужны их числовые значения
    x = [float(lbl) for lbl in data.labels]

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(x, data.values, lw=1, label=data.series_label)
    ax.set_title(data.title, fontsize=14)
    ax.set_xlabel(data.x_title)
    ax.set_ylabel(data.y_title)
    ax.grid(True, alpha=0.3)
    ax.legend(fontsize=8)
    fig.tight_layout()
    return ChartHandle(fig)


def replace_chart(previous: ChartHandle | None, data: ChartData) -> ChartHandle:
    """Dispose the caller's previous chart, then draw a new one."""

    if previous is not None:
        previous.dispose()
    return render_chart(data)
