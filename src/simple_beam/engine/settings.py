from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisSettings:
    # muestras = resolution + 1, equiespaciadas en [0, L]
    resolution: int = 1000

    # reacción/puntual en x_p cuenta en x si x_p < x o |x_p - x| < tol
    position_tol_m: float = 1e-4

    # cruces por cero con pendiente menor se descartan
    slope_tol: float = 1e-9

    # Max/Min no se agregan si ya hay un punto a menos de esta distancia
    dedup_tol_m: float = 0.01
