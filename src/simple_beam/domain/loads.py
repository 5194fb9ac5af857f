from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class PointLoad:
    x_m: float
    P_kN: float  # + hacia abajo


@dataclass(frozen=True)
class DistributedLoad:
    """
    Carga distribuida lineal (uniforme si w1 == w2, trapezoidal si no).

    Intensidades en kN/m, + hacia abajo.
    x1_m == x2_m es una carga degenerada de largo nulo (resultante 0).
    """
    x1_m: float
    x2_m: float
    w1_kN_m: float
    w2_kN_m: float

    @property
    def length_m(self) -> float:
        return float(self.x2_m) - float(self.x1_m)

    def resultant_kN(self) -> float:
        """Área del trapecio: (w1 + w2)/2 * largo."""
        return (float(self.w1_kN_m) + float(self.w2_kN_m)) / 2.0 * self.length_m

    def centroid_offset_m(self) -> float:
        """
        Distancia del centroide medida desde x1.

        Trapecio = rectángulo w1 + triángulo (w2 - w1):
          xc = (largo/3) * (w1 + 2*w2) / (w1 + w2)
        Si w1 + w2 == 0 no hay resultante; se usa el punto medio.
        """
        w1 = float(self.w1_kN_m)
        w2 = float(self.w2_kN_m)
        Lq = self.length_m
        if w1 + w2 == 0:
            return Lq / 2.0
        return (Lq / 3.0) * (w1 + 2.0 * w2) / (w1 + w2)
