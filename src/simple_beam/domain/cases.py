from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from simple_beam.domain.beam import Beam
from simple_beam.domain.loads import PointLoad, DistributedLoad
from simple_beam.domain.supports import Support, SupportKind


@dataclass(frozen=True)
class BeamCase:
    """
    Caso completo para el motor:
      - viga
      - apoyos (se esperan exactamente 2, en cualquier orden)
      - cargas puntuales y distribuidas conocidas

    Las colecciones son tuplas: el motor nunca modifica el estado del que llama.
    """
    beam: Beam
    supports: Tuple[Support, ...] = ()
    point_loads: Tuple[PointLoad, ...] = ()
    dist_loads: Tuple[DistributedLoad, ...] = ()


def default_case() -> BeamCase:
    """Configuración inicial: viga de 10 m, pin en 0, roller en 10, P=10 kN en el centro."""
    return BeamCase(
        beam=Beam(L_m=10.0),
        supports=(
            Support(x_m=0.0, kind=SupportKind.PIN),
            Support(x_m=10.0, kind=SupportKind.ROLLER),
        ),
        point_loads=(PointLoad(x_m=5.0, P_kN=10.0),),
        dist_loads=(),
    )
