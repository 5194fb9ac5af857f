import numpy as np

from simple_beam.domain.labels import CriticalLabel
from simple_beam.domain.results import Sample, SampledDiagram
from simple_beam.engine.critical import extract_critical_points


def _diag(x, v):
    return SampledDiagram(x=np.asarray(x, dtype=float), values=np.asarray(v, dtype=float))


def _labels(points):
    return [p.label for p in points]


def test_fewer_than_two_samples_gives_nothing():
    assert extract_critical_points([]) == []
    assert extract_critical_points([Sample(0.0, 3.0)]) == []


def test_single_crossing_of_increasing_sequence():
    x = np.linspace(0.0, 1.0, 11)
    v = 3.0 * x - 1.45
    pts = extract_critical_points(_diag(x, v))

    zeros = [p for p in pts if p.label is CriticalLabel.ZERO]
    assert len(zeros) == 1
    assert np.isclose(zeros[0].x_m, 1.45 / 3.0, atol=1e-12)
    assert zeros[0].value == 0.0


def test_emission_order_and_endpoints():
    x = [0.0, 1.0, 2.0, 3.0, 4.0]
    v = [1.0, 3.0, -2.0, -5.0, 0.5]
    pts = extract_critical_points(_diag(x, v))

    assert _labels(pts) == [
        CriticalLabel.START, CriticalLabel.END,
        CriticalLabel.ZERO, CriticalLabel.ZERO,
        CriticalLabel.MAX, CriticalLabel.MIN,
    ]
    assert (pts[0].x_m, pts[0].value) == (0.0, 1.0)
    assert (pts[1].x_m, pts[1].value) == (4.0, 0.5)
    assert np.isclose(pts[2].x_m, 1.0 + 3.0 / 5.0)
    assert np.isclose(pts[3].x_m, 3.0 + 5.0 / 5.5)
    assert (pts[4].x_m, pts[4].value) == (1.0, 3.0)
    assert (pts[5].x_m, pts[5].value) == (3.0, -5.0)


def test_touching_zero_is_not_a_crossing():
    # 0 cuenta como no negativo: 2 -> 0 -> 2 no cruza
    pts = extract_critical_points(_diag([0, 1, 2], [2.0, 0.0, 2.0]))
    assert CriticalLabel.ZERO not in _labels(pts)


def test_negative_to_exact_zero_is_a_crossing():
    pts = extract_critical_points(_diag([0, 1, 2], [-2.0, 0.0, -1.0]))
    zeros = [p for p in pts if p.label is CriticalLabel.ZERO]
    # -2 -> 0 cruza en x=1; 0 -> -1 cruza en x=1
    assert [p.x_m for p in zeros] == [1.0, 1.0]


def test_sub_threshold_slope_emits_no_zero():
    # cambia de signo pero |pendiente| = 2e-12 <= 1e-9
    pts = extract_critical_points(_diag([0.0, 1.0], [1e-12, -1e-12]))
    assert _labels(pts) == [CriticalLabel.START, CriticalLabel.END]


def test_extrema_use_first_occurrence():
    pts = extract_critical_points(_diag([0, 1, 2, 3, 4], [0.0, 4.0, 4.0, 1.0, 0.0]))
    mx = [p for p in pts if p.label is CriticalLabel.MAX]
    assert len(mx) == 1
    assert mx[0].x_m == 1.0


def test_extrema_deduplicated_against_existing_points():
    # máximo en el inicio y mínimo en el final: no se repiten
    pts = extract_critical_points(_diag([0, 1, 2], [5.0, 3.0, 1.0]))
    assert _labels(pts) == [CriticalLabel.START, CriticalLabel.END]


def test_min_deduplicated_against_max():
    # sin cruces; el min queda a 0.005 del max ya agregado
    x = [0.0, 0.5, 0.505, 1.0]
    v = [1.0, 9.0, 0.5, 2.0]
    pts = extract_critical_points(_diag(x, v))
    assert _labels(pts) == [CriticalLabel.START, CriticalLabel.END, CriticalLabel.MAX]
    assert pts[2].x_m == 0.5


def test_flat_sequence_has_only_endpoints():
    pts = extract_critical_points(_diag(np.linspace(0, 10, 1001), np.zeros(1001)))
    assert _labels(pts) == [CriticalLabel.START, CriticalLabel.END]


def test_coincident_positions_place_crossing_at_left_sample():
    pts = extract_critical_points(_diag([0.0, 2.0, 2.0, 4.0], [1.0, 1.0, -1.0, -1.0]))
    zeros = [p for p in pts if p.label is CriticalLabel.ZERO]
    assert [p.x_m for p in zeros] == [2.0]


def test_accepts_sample_sequence():
    samples = [Sample(0.0, -1.0), Sample(2.0, 1.0)]
    pts = extract_critical_points(samples)
    zeros = [p for p in pts if p.label is CriticalLabel.ZERO]
    assert len(zeros) == 1
    assert np.isclose(zeros[0].x_m, 1.0)
