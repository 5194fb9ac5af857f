from __future__ import annotations

import logging

from simple_beam.domain.cases import BeamCase
from simple_beam.domain.results import AnalysisReport, BeamAnalysis
from simple_beam.engine.critical import extract_critical_points
from simple_beam.engine.diagrams import build_shear_model, integrate_moment
from simple_beam.engine.equilibrium import equilibrium_residuals, solve_reactions
from simple_beam.engine.errors import AnalysisError
from simple_beam.engine.normalize import normalize_inputs
from simple_beam.engine.settings import AnalysisSettings

logger = logging.getLogger(__name__)


def analyze_beam(case: BeamCase, settings: AnalysisSettings = AnalysisSettings()) -> BeamAnalysis:
    """
    Análisis completo:
      apoyos + cargas -> reacciones -> V(x) -> M(x) -> puntos notables de V y M

    Lanza UnsupportedSupportCount / DegenerateSupports.
    """
    data, notes = normalize_inputs(case.beam, case.supports, case.point_loads, case.dist_loads)

    reactions = solve_reactions(data.supports, data.point_loads, data.dist_loads, data.beam.L_m)

    model = build_shear_model(
        reactions=reactions,
        point_loads=data.point_loads,
        dist_loads=data.dist_loads,
        L_m=data.beam.L_m,
        tol_m=settings.position_tol_m,
    )
    shear = model.sample(settings.resolution)
    moment = integrate_moment(shear)

    shear_points = extract_critical_points(
        shear, slope_tol=settings.slope_tol, dedup_tol_m=settings.dedup_tol_m
    )
    moment_points = extract_critical_points(
        moment, slope_tol=settings.slope_tol, dedup_tol_m=settings.dedup_tol_m
    )

    res_Fy, res_M_A = equilibrium_residuals(reactions, data.point_loads, data.dist_loads)
    logger.debug(
        "Análisis L=%g m: %d muestras, residual ΣFy=%g, ΣM_A=%g",
        data.beam.L_m, len(shear), res_Fy, res_M_A,
    )

    return BeamAnalysis(
        reactions=reactions,
        shear=shear,
        moment=moment,
        shear_points=shear_points,
        moment_points=moment_points,
        residual_Fy=res_Fy,
        residual_M_A=res_M_A,
        notes=notes,
    )


def run_analysis(case: BeamCase, settings: AnalysisSettings = AnalysisSettings()) -> AnalysisReport:
    """
    Igual que analyze_beam pero devuelve el error como mensaje para mostrar.
    Solo se capturan errores de análisis; el resto se propaga.
    """
    try:
        return AnalysisReport(analysis=analyze_beam(case, settings))
    except AnalysisError as e:
        logger.warning("Análisis no resuelto: %s", e.message)
        return AnalysisReport(error=e.message)
