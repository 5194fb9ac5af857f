from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

# Reacción en el apoyo de menor x -> "Ra", en el de mayor x -> "Rb"
REACTION_LABELS: Tuple[str, str] = ("Ra", "Rb")

LABEL_SIGN_CONVENTION: Dict[str, str] = {
    "Ra": "up_positive",
    "Rb": "up_positive",
    "P":  "down_positive",
    "w":  "down_positive",
}


class CriticalLabel(str, Enum):
    START = "Start"
    END = "End"
    ZERO = "Zero"
    MAX = "Max"
    MIN = "Min"


def to_internal_Fy(label: str, value_user: float) -> float:
    """
    Convierte un valor de usuario a fuerza interna Fy (+up).
    Labels desconocidos se tratan como cargas (down+).
    """
    conv = LABEL_SIGN_CONVENTION.get((label or "").strip(), "down_positive")
    if conv == "up_positive":
        return float(value_user)
    return -float(value_user)
