from __future__ import annotations

from typing import List
import numpy as np

from simple_beam.domain.labels import CriticalLabel
from simple_beam.domain.results import CriticalPoint, as_sampled


def _zero_crossings(x: np.ndarray, v: np.ndarray, slope_tol: float) -> List[CriticalPoint]:
    """
    Cruces por cero entre muestras vecinas, interpolando linealmente.

    Los lados son v >= 0 y v < 0: tocar 0 y volver al mismo signo no es cruce.
    """
    out: List[CriticalPoint] = []

    neg = v < 0.0
    idx = np.nonzero(neg[:-1] != neg[1:])[0]

    for i in idx:
        x1, x2 = float(x[i]), float(x[i + 1])
        v1, v2 = float(v[i]), float(v[i + 1])

        dx = x2 - x1
        if dx == 0.0:
            # pendiente infinita: el cruce queda en x1
            out.append(CriticalPoint(x_m=x1, value=0.0, label=CriticalLabel.ZERO))
            continue

        slope = (v2 - v1) / dx
        if abs(slope) > slope_tol:
            out.append(CriticalPoint(x_m=x1 + (-v1 / slope), value=0.0, label=CriticalLabel.ZERO))

    return out


def _add_if_isolated(points: List[CriticalPoint], p: CriticalPoint, tol_m: float) -> None:
    if any(abs(ex.x_m - p.x_m) < tol_m for ex in points):
        return
    points.append(p)


def extract_critical_points(
    samples,
    *,
    slope_tol: float = 1e-9,
    dedup_tol_m: float = 0.01,
) -> List[CriticalPoint]:
    """
    Puntos notables de un diagrama muestreado.

    Orden de salida (no ordenado por x):
      Start, End, cruces por cero (en orden de muestras), Max, Min.
    Max/Min se toman en su primera aparición y se omiten si ya hay otro punto
    a menos de dedup_tol_m.
    """
    diag = as_sampled(samples)
    if len(diag) < 2:
        return []

    x = np.asarray(diag.x, dtype=float)
    v = np.asarray(diag.values, dtype=float)

    points: List[CriticalPoint] = [
        CriticalPoint(x_m=float(x[0]), value=float(v[0]), label=CriticalLabel.START),
        CriticalPoint(x_m=float(x[-1]), value=float(v[-1]), label=CriticalLabel.END),
    ]

    points.extend(_zero_crossings(x, v, slope_tol))

    i_max = int(np.argmax(v))
    i_min = int(np.argmin(v))
    _add_if_isolated(
        points,
        CriticalPoint(x_m=float(x[i_max]), value=float(v[i_max]), label=CriticalLabel.MAX),
        dedup_tol_m,
    )
    _add_if_isolated(
        points,
        CriticalPoint(x_m=float(x[i_min]), value=float(v[i_min]), label=CriticalLabel.MIN),
        dedup_tol_m,
    )

    return points
