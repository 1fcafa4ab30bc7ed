"""Конфиги оценщика гидроудара."""

from __future__ import annotations

from .models import (  # noqa: F401
    DEFAULT_SYSTEM_CONFIG,
    FluidConfig,
    PipeMaterialConfig,
    SystemConfig,
    TransientConfig,
)

__all__ = [
    "FluidConfig",
    "PipeMaterialConfig",
    "TransientConfig",
    "SystemConfig",
    "DEFAULT_SYSTEM_CONFIG",
]
