"""hammersim.core.units

Минимальный слой единиц измерения и удобных множителей.

Принцип: везде, где есть числа, должна быть явная единица (например, 4.0 * INCH).
Внутри расчёта всё в SI; американские единицы живут только на входе (форма)
и на выходе (psi на графике).
"""

from __future__ import annotations

# Base units (conceptual SI multipliers)
METER: float = 1.0
KILOGRAM: float = 1.0
SECOND: float = 1.0

# Derived units
NEWTON: float = KILOGRAM * METER / (SECOND**2)
PASCAL: float = NEWTON / (METER**2)
GPA: float = 1e9 * PASCAL

# Customary units -> SI
INCH: float = 0.0254 * METER
FOOT: float = 0.3048 * METER
GPM: float = 0.00006309 * (METER**3) / SECOND  # US gal/min -> m^3/s
MS_PER_SECOND: float = 1000.0  # ms -> s делением

# Pa per psi
PSI: float = 6894.76 * PASCAL


def pa_to_psi(p_pa: float) -> float:
    return float(p_pa) / PSI
