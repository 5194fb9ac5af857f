from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence
import numpy as np

from simple_beam.domain.loads import PointLoad, DistributedLoad
from simple_beam.domain.results import Reaction, SampledDiagram, as_sampled
from simple_beam.domain.labels import to_internal_Fy


@dataclass(frozen=True)
class ShearModel:
    """
    Corte V(x) por suma directa de reacciones y cargas a la izquierda de x.

    Convención interna:
    - Fuerzas + arriba (reacciones +, puntuales -)
    - Distribuida interna w_up (kN/m) + arriba, lineal entre a y b

    Cada x se evalúa de forma independiente (no depende del orden de muestreo).
    """
    L_m: float

    r_x: np.ndarray           # posiciones de reacciones
    r_Fy: np.ndarray          # reacciones internas (kN)

    pf_x: np.ndarray          # posiciones de puntuales
    pf_Fy: np.ndarray         # puntuales internas (kN)

    dl_a: np.ndarray          # inicio
    dl_b: np.ndarray          # fin
    dl_w1: np.ndarray         # w_up en a (kN/m)
    dl_w2: np.ndarray         # w_up en b (kN/m)

    tol_m: float = 1e-4

    def eval_V(self, x: float) -> float:
        return float(self._eval_V_array(np.asarray([x], dtype=float))[0])

    def _at_or_before(self, xp: np.ndarray, xcol: np.ndarray) -> np.ndarray:
        # H(x - xp) con tolerancia: cuenta si xp < x o |xp - x| < tol
        return ((xp[None, :] < xcol) | (np.abs(xp[None, :] - xcol) < self.tol_m)).astype(float)

    def _eval_V_array(self, x: np.ndarray) -> np.ndarray:
        V = np.zeros_like(x, dtype=float)
        xcol = x[:, None]

        # reacciones y puntuales: saltos
        if self.r_x.size:
            V += self._at_or_before(self.r_x, xcol) @ self.r_Fy
        if self.pf_x.size:
            V += self._at_or_before(self.pf_x, xcol) @ self.pf_Fy

        # distribuidas: integral de w(t) = w1 + (w2-w1)*t/Lq, t en [0, min(x,b) - a]
        if self.dl_a.size:
            Lq = self.dl_b - self.dl_a
            # largo nulo -> pendiente 0 (y sin aporte, ver 'active')
            slope = np.divide(
                self.dl_w2 - self.dl_w1, Lq,
                out=np.zeros_like(Lq), where=Lq > 0.0,
            )
            xl = np.minimum(xcol, self.dl_b[None, :]) - self.dl_a[None, :]
            active = (xl > 0.0) & (Lq[None, :] > 0.0)
            contrib = self.dl_w1[None, :] * xl + slope[None, :] * (xl * xl) / 2.0
            V += np.sum(np.where(active, contrib, 0.0), axis=1)

        return V

    def positions(self, resolution: int = 1000) -> np.ndarray:
        if int(resolution) < 1:
            raise ValueError(f"resolution must be >= 1 (got {resolution}).")
        n = int(resolution)
        return np.arange(n + 1, dtype=float) / n * float(self.L_m)

    def sample(self, resolution: int = 1000) -> SampledDiagram:
        """resolution + 1 muestras equiespaciadas de 0 a L (inclusive)."""
        x = self.positions(resolution)
        return SampledDiagram(x=x, values=self._eval_V_array(x))


def build_shear_model(
    *,
    reactions: Sequence[Reaction],
    point_loads: Iterable[PointLoad],
    dist_loads: Iterable[DistributedLoad],
    L_m: float,
    tol_m: float = 1e-4,
) -> ShearModel:
    pls = list(point_loads)
    dls = list(dist_loads)

    r_x = np.array([float(r.x_m) for r in reactions], dtype=float)
    r_Fy = np.array([to_internal_Fy(r.label, r.R_kN) for r in reactions], dtype=float)

    pf_x = np.array([float(p.x_m) for p in pls], dtype=float)
    pf_Fy = np.array([to_internal_Fy("P", p.P_kN) for p in pls], dtype=float)

    dl_a = np.array([float(d.x1_m) for d in dls], dtype=float)
    dl_b = np.array([float(d.x2_m) for d in dls], dtype=float)
    dl_w1 = np.array([to_internal_Fy("w", d.w1_kN_m) for d in dls], dtype=float)
    dl_w2 = np.array([to_internal_Fy("w", d.w2_kN_m) for d in dls], dtype=float)

    return ShearModel(
        L_m=float(L_m),
        r_x=r_x,
        r_Fy=r_Fy,
        pf_x=pf_x,
        pf_Fy=pf_Fy,
        dl_a=dl_a,
        dl_b=dl_b,
        dl_w1=dl_w1,
        dl_w2=dl_w2,
        tol_m=float(tol_m),
    )


def sample_shear(
    reactions: Sequence[Reaction],
    point_loads: Iterable[PointLoad],
    dist_loads: Iterable[DistributedLoad],
    L_m: float,
    resolution: int = 1000,
) -> SampledDiagram:
    model = build_shear_model(
        reactions=reactions,
        point_loads=point_loads,
        dist_loads=dist_loads,
        L_m=L_m,
    )
    return model.sample(resolution)


def integrate_moment(shear) -> SampledDiagram:
    """
    M(x) por regla del trapecio sobre las muestras de V:
      M[0] = 0
      M[i] = M[i-1] + (V[i-1] + V[i])/2 * (x[i] - x[i-1])
    Misma cantidad de muestras y mismas posiciones que el corte.
    """
    diag = as_sampled(shear)
    x = np.asarray(diag.x, dtype=float)
    V = np.asarray(diag.values, dtype=float)

    M = np.zeros_like(V)
    if V.size > 1:
        areas = (V[:-1] + V[1:]) / 2.0 * np.diff(x)
        M[1:] = np.cumsum(areas)

    return SampledDiagram(x=x.copy(), values=M)
