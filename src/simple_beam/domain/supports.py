from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class SupportKind(str, Enum):
    PIN = "pin"
    ROLLER = "roller"


@dataclass(frozen=True)
class Support:
    """
    Apoyo simple (una reacción vertical).

    kind no interviene en el equilibrio: pin y roller aportan una única reacción
    vertical. Se conserva para el dibujo y para futuras extensiones.
    """
    x_m: float
    kind: SupportKind = SupportKind.PIN
