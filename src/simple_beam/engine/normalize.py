from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from simple_beam.domain.beam import Beam
from simple_beam.domain.cases import BeamCase
from simple_beam.domain.loads import PointLoad, DistributedLoad
from simple_beam.domain.supports import Support, SupportKind

logger = logging.getLogger(__name__)


def _outside(x: float, L: float) -> bool:
    return x < 0.0 or x > L


def normalize_inputs(
    beam: Beam,
    supports: Iterable[Support],
    point_loads: Iterable[PointLoad],
    dist_loads: Iterable[DistributedLoad],
) -> Tuple[BeamCase, List[str]]:
    """
    Copia las entradas a tuplas inmutables (valores float) y arma notas.

    No valida ni recorta: posiciones fuera de [0, L], magnitudes negativas o
    distribuidas invertidas se aceptan tal cual. Las notas son solo informativas.
    """
    L = float(beam.L_m)
    notes: List[str] = []

    if L <= 0:
        notes.append(f"Beam length is not positive (L={L:g} m).")

    # 1) Apoyos
    n_sups: List[Support] = []
    for s in supports:
        x = float(s.x_m)
        n_sups.append(Support(x_m=x, kind=SupportKind(s.kind)))
        if _outside(x, L):
            notes.append(f"Support at x={x:g} m lies outside the beam [0, {L:g}] m.")

    # 2) Puntuales
    n_points: List[PointLoad] = []
    for p in point_loads:
        x = float(p.x_m)
        n_points.append(PointLoad(x_m=x, P_kN=float(p.P_kN)))
        if _outside(x, L):
            notes.append(f"Point load at x={x:g} m lies outside the beam [0, {L:g}] m.")

    # 3) Distribuidas (sin recorte: el equilibrio usa la carga completa)
    n_dists: List[DistributedLoad] = []
    for d in dist_loads:
        dl = DistributedLoad(
            x1_m=float(d.x1_m),
            x2_m=float(d.x2_m),
            w1_kN_m=float(d.w1_kN_m),
            w2_kN_m=float(d.w2_kN_m),
        )
        n_dists.append(dl)

        if dl.x2_m < dl.x1_m:
            notes.append(f"Distributed load [{dl.x1_m:g},{dl.x2_m:g}] m has end before start.")
        elif dl.x2_m == dl.x1_m:
            notes.append(f"Distributed load at x={dl.x1_m:g} m has zero length (no effect on shear).")
        if _outside(dl.x1_m, L) or _outside(dl.x2_m, L):
            notes.append(f"Distributed load [{dl.x1_m:g},{dl.x2_m:g}] m extends outside the beam [0, {L:g}] m.")

    for n in notes:
        logger.warning(n)

    case = BeamCase(
        beam=Beam(L_m=L),
        supports=tuple(n_sups),
        point_loads=tuple(n_points),
        dist_loads=tuple(n_dists),
    )
    return case, notes
