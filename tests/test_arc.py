import pytest

from radial_knob.render.arc import arc_geometry, arc_path, resolve_arc_range


def test_quarter_arc_path() -> None:
    d = arc_path(0.0, 0.25, 0.0, 360.0, 10.0, 50.0, 50.0)
    assert d == "M 50 0 A 50 50 0 0 1 100 50 L 90 50 A 40 40 0 0 0 50 10 L 50 0 Z"


def test_offset_rotates_the_start() -> None:
    g = arc_geometry(0.0, 0.25, 90.0, 360.0, 10.0, 50.0, 50.0)
    assert g.outer_start == pytest.approx((100.0, 50.0))
    assert g.outer_end == pytest.approx((50.0, 100.0))


def test_zero_span_collapses() -> None:
    g = arc_geometry(0.4, 0.4, 0.0, 360.0, 10.0, 50.0, 50.0)
    assert g.outer_start == pytest.approx(g.outer_end)
    assert g.inner_start == pytest.approx(g.inner_end)
    assert g.large_arc == 0
    assert g.sweep == 1


def test_full_turn_is_nudged() -> None:
    g = arc_geometry(0.0, 1.0, 0.0, 360.0, 10.0, 50.0, 50.0)
    assert g.large_arc == 1
    assert g.sweep == 1
    # still distinct at the path's precision, so the arc is drawable
    d = arc_path(0.0, 1.0, 0.0, 360.0, 10.0, 50.0, 50.0)
    start = d.split(" A ")[0]
    end = d.split(" A ")[1].split(" L ")[0].split(" ")[-2:]
    assert start != "M " + " ".join(end)


def test_spans_past_a_turn_are_clamped() -> None:
    wound = arc_geometry(0.0, 2.5, 0.0, 360.0, 10.0, 50.0, 50.0)
    full = arc_geometry(0.0, 1.0, 0.0, 360.0, 10.0, 50.0, 50.0)
    assert wound == full


def test_negative_span_flips_sweep() -> None:
    g = arc_geometry(0.5, 0.25, 0.0, 360.0, 10.0, 50.0, 50.0)
    assert g.sweep == 0
    assert g.large_arc == 0
    assert g.outer_start == pytest.approx((50.0, 100.0))
    assert g.outer_end == pytest.approx((100.0, 50.0))
    d = arc_path(0.5, 0.25, 0.0, 360.0, 10.0, 50.0, 50.0)
    assert "A 50 50 0 0 0" in d
    assert "A 40 40 0 0 1" in d


def test_half_turn_sets_large_arc() -> None:
    assert arc_geometry(0.0, 0.5, 0.0, 360.0, 10.0, 50.0, 50.0).large_arc == 1
    assert arc_geometry(0.0, 0.49, 0.0, 360.0, 10.0, 50.0, 50.0).large_arc == 0
    assert arc_geometry(0.5, 0.0, 0.0, 360.0, 10.0, 50.0, 50.0).large_arc == 1


def test_partial_range_scales_span() -> None:
    g = arc_geometry(0.0, 0.5, 0.0, 180.0, 10.0, 50.0, 50.0)
    assert g.outer_end == pytest.approx((100.0, 50.0))
    assert g.large_arc == 0


def test_inner_radius() -> None:
    g = arc_geometry(0.0, 0.25, 0.0, 360.0, 15.0, 40.0, 50.0)
    assert g.inner_radius == 25.0
    assert g.inner_start == pytest.approx((50.0, 25.0))


@pytest.mark.parametrize(
    "args",
    (
        (None, 0.5, 0.0, 360.0, 10.0, 50.0, 50.0),
        (0.0, None, 0.0, 360.0, 10.0, 50.0, 50.0),
        (0.0, 0.5, 0.0, 360.0, 10.0, None, 50.0),
    ),
)
def test_unresolved_arc_is_empty(args) -> None:
    assert arc_path(*args) == ""


@pytest.mark.parametrize(
    ("percentage", "p_from", "p_to", "expected"),
    (
        (0.6, None, None, (0.0, 0.6)),
        (0.6, 0.2, None, (0.2, 0.6)),
        (0.6, None, 0.9, (0.6, 0.9)),
        (0.6, 0.1, 0.3, (0.1, 0.3)),
        (None, None, None, (0.0, None)),
    ),
)
def test_resolve_arc_range(percentage, p_from, p_to, expected) -> None:
    assert resolve_arc_range(percentage, p_from, p_to) == expected
