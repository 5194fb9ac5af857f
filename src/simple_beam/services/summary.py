from __future__ import annotations

from typing import Iterable, List

from simple_beam.domain.results import BeamAnalysis, CriticalPoint, Reaction


def fmt_plain(v: float, decimals: int = 2) -> str:
    """Formato fijo (sin notación científica) y recorte de ceros."""
    s = f"{float(v):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    return s


def format_reaction(r: Reaction) -> str:
    # "At x=5m : 5.00 kN"
    return f"At x={fmt_plain(r.x_m, 4)}m : {float(r.R_kN):.2f} kN"


def format_critical_point(p: CriticalPoint) -> str:
    # "5.00m, 25.00"; valores casi nulos se muestran como "0"
    v = float(p.value)
    val = "0" if abs(v) < 0.01 else f"{v:.2f}"
    return f"{float(p.x_m):.2f}m, {val}"


def _point_lines(title: str, points: Iterable[CriticalPoint]) -> List[str]:
    lines = [f"{title}:"]
    for p in points:
        lines.append(f"  {p.label.value}: {format_critical_point(p)}")
    return lines


def summary_lines(analysis: BeamAnalysis) -> List[str]:
    lines: List[str] = ["Reactions:"]
    lines += [f"  {r.label}: {format_reaction(r)}" for r in analysis.reactions]

    lines.append(f"Residual ΣFy = {fmt_plain(analysis.residual_Fy, 6)}")
    lines.append(f"Residual ΣM_A = {fmt_plain(analysis.residual_M_A, 6)}")

    lines += _point_lines("Shear V(x) [kN]", analysis.shear_points)
    lines += _point_lines("Moment M(x) [kN·m]", analysis.moment_points)

    if analysis.notes:
        lines.append("Notes:")
        lines += [f"- {n}" for n in analysis.notes]
    return lines
