from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from simple_beam.domain.labels import CriticalLabel


@dataclass(frozen=True)
class Reaction:
    label: str
    x_m: float
    R_kN: float  # + hacia arriba


@dataclass(frozen=True)
class Sample:
    x_m: float
    value: float


@dataclass(frozen=True)
class SampledDiagram:
    """
    Muestreo de una función continua sobre [0, L] (aproximación lineal por tramos).
    x y values tienen el mismo largo.
    """
    x: np.ndarray
    values: np.ndarray

    def __len__(self) -> int:
        return int(self.x.size)

    def samples(self) -> List[Sample]:
        return [Sample(x_m=float(xi), value=float(vi)) for xi, vi in zip(self.x, self.values)]

    @classmethod
    def from_samples(cls, samples) -> "SampledDiagram":
        pts = list(samples)
        x = np.array([float(s.x_m) for s in pts], dtype=float)
        v = np.array([float(s.value) for s in pts], dtype=float)
        return cls(x=x, values=v)


@dataclass(frozen=True)
class CriticalPoint:
    x_m: float
    value: float
    label: CriticalLabel


@dataclass(frozen=True)
class BeamAnalysis:
    reactions: Tuple[Reaction, Reaction]
    shear: SampledDiagram          # V(x) [kN]
    moment: SampledDiagram         # M(x) [kN·m]
    shear_points: List[CriticalPoint]
    moment_points: List[CriticalPoint]

    residual_Fy: float             # debería ~0
    residual_M_A: float            # debería ~0 (momento respecto al apoyo A)

    notes: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisReport:
    """Resultado para la UI: análisis o mensaje de error (nunca ambos)."""
    analysis: Optional[BeamAnalysis] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def as_sampled(samples) -> SampledDiagram:
    """Acepta SampledDiagram o una secuencia de Sample."""
    if isinstance(samples, SampledDiagram):
        return samples
    return SampledDiagram.from_samples(samples)
