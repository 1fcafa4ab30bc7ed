import pytest

from hammersim.chart import (
    CHART_TITLE,
    ChartData,
    ChartHandle,
    render_chart,
    replace_chart,
)
from hammersim.core.types import SimulationInputs
from hammersim.simulator import simulate


@pytest.fixture()
def data(reference_inputs: SimulationInputs) -> ChartData:
    return ChartData.from_result(simulate(reference_inputs))


class TestChartData:
    def test_labels(self, data: ChartData) -> None:
        assert len(data.labels) == len(data.values) == 1001
        assert data.labels[0] == "0.000"
        assert data.labels[1] == "0.002"
        assert data.labels[-1] == "2.000"

    def test_metadata(self, data: ChartData) -> None:
        assert data.series_label == "Pressure (psi)"
        assert data.x_title == "Time (s)"
        assert data.y_title == "Pressure (psi)"
        assert data.title == CHART_TITLE

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValueError):
            ChartData(labels=("0.000",), values=())


class TestChartHandle:
    def test_render_and_dispose(self, data: ChartData) -> None:
        handle = render_chart(data)
        assert not handle.disposed
        ax = handle.figure.axes[0]
        assert ax.get_xlabel() == "Time (s)"
        assert ax.get_ylabel() == "Pressure (psi)"
        assert len(ax.lines[0].get_ydata()) == 1001
        handle.dispose()
        assert handle.disposed
        handle.dispose()

    def test_disposed_handle_rejects_use(self, data: ChartData, tmp_path) -> None:
        handle = render_chart(data)
        handle.dispose()
        with pytest.raises(RuntimeError):
            handle.save(tmp_path / "chart.png")

    def test_save(self, data: ChartData, tmp_path) -> None:
        with render_chart(data) as handle:
            out = handle.save(tmp_path / "sub" / "chart.png")
        assert out.exists()
        assert handle.disposed

    def test_replace_disposes_previous(self, data: ChartData) -> None:
        first = render_chart(data)
        second = replace_chart(first, data)
        assert first.disposed
        assert isinstance(second, ChartHandle)
        assert not second.disposed
        second.dispose()

    def test_replace_without_previous(self, data: ChartData) -> None:
        handle = replace_chart(None, data)
        assert not handle.disposed
        handle.dispose()
