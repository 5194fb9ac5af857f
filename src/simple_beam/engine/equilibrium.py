from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Tuple

from simple_beam.domain.loads import PointLoad, DistributedLoad
from simple_beam.domain.results import Reaction
from simple_beam.domain.supports import Support
from simple_beam.domain.labels import REACTION_LABELS, to_internal_Fy
from simple_beam.engine.errors import UnsupportedSupportCount, DegenerateSupports

logger = logging.getLogger(__name__)


def _sum_load_contributions(
    x_A: float,
    point_loads: Iterable[PointLoad],
    dist_loads: Iterable[DistributedLoad],
) -> Tuple[float, float]:
    """
    Devuelve:
      total_kN:  suma de cargas (down+)
      M_A_kNm:   suma de momentos respecto a A (fuerza * distancia desde A)
    """
    total = 0.0
    M_A = 0.0

    # Distribuidas: resultante aplicada en el centroide del trapecio
    for dl in dist_loads:
        F = dl.resultant_kN()
        x_c = float(dl.x1_m) + dl.centroid_offset_m()
        M_A += F * (x_c - x_A)
        total += F

    # Puntuales
    for pl in point_loads:
        F = float(pl.P_kN)
        M_A += F * (float(pl.x_m) - x_A)
        total += F

    return total, M_A


def solve_reactions(
    supports: Sequence[Support],
    point_loads: Iterable[PointLoad] = (),
    dist_loads: Iterable[DistributedLoad] = (),
    L_m: Optional[float] = None,
) -> Tuple[Reaction, Reaction]:
    """
    Reacciones verticales de una viga con dos apoyos simples.

    Ecuaciones:
      ΣM_A = 0  =>  Rb = ΣM_A(cargas) / (x_B - x_A)
      ΣFy  = 0  =>  Ra = ΣP - Rb

    A es el apoyo de menor x. Reacciones + hacia arriba.
    L_m no interviene en el equilibrio; solo se informa en el log.
    """
    sups = list(supports)
    if len(sups) != 2:
        raise UnsupportedSupportCount(len(sups))

    A, B = sorted(sups, key=lambda s: float(s.x_m))
    x_A = float(A.x_m)
    x_B = float(B.x_m)

    total, M_A = _sum_load_contributions(x_A, point_loads, dist_loads)

    span = x_B - x_A
    if span == 0:
        raise DegenerateSupports(x_A)

    Rb = M_A / span
    Ra = total - Rb
    logger.debug(
        "Reacciones (L=%s m): ΣP=%g kN, ΣM_A=%g kN·m -> Ra=%g, Rb=%g",
        "?" if L_m is None else f"{float(L_m):g}", total, M_A, Ra, Rb,
    )

    return (
        Reaction(label=REACTION_LABELS[0], x_m=x_A, R_kN=Ra),
        Reaction(label=REACTION_LABELS[1], x_m=x_B, R_kN=Rb),
    )


def equilibrium_residuals(
    reactions: Sequence[Reaction],
    point_loads: Iterable[PointLoad] = (),
    dist_loads: Iterable[DistributedLoad] = (),
) -> Tuple[float, float]:
    """
    Residuales (Fy interno +up):
      residual_Fy:  ΣFy de reacciones y cargas
      residual_M_A: ΣFy * (x - x_A), con A = primera reacción
    Ambos ~0 para un sistema resuelto.
    """
    x_A = float(reactions[0].x_m)
    Fy = 0.0
    M_A = 0.0

    for r in reactions:
        f = to_internal_Fy(r.label, r.R_kN)
        Fy += f
        M_A += f * (float(r.x_m) - x_A)

    for pl in point_loads:
        f = to_internal_Fy("P", pl.P_kN)
        Fy += f
        M_A += f * (float(pl.x_m) - x_A)

    for dl in dist_loads:
        f = to_internal_Fy("w", dl.resultant_kN())
        Fy += f
        M_A += f * (float(dl.x1_m) + dl.centroid_offset_m() - x_A)

    return Fy, M_A
