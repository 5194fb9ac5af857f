from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Beam:
    """Viga simplemente apoyada. Largo en metros."""
    L_m: float
