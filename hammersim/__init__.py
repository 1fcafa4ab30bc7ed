"""hammersim package.

Оценка гидроудара (water hammer) после быстрого закрытия задвижки:
перевод единиц -> скорость волны (Korteweg) -> скачок давления (Joukowsky)
-> затухающее колебание давления во времени.

Важно: пакет не должен иметь побочных эффектов при импорте
(matplotlib подтягивается только модулем `hammersim.chart`).

Импортируй нужное напрямую:
- from hammersim.simulator import simulate
- from hammersim.core.types import SimulationInputs
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__: list[str] = []
