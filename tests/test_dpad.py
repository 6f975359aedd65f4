import pytest

from mzd2.coord_store import Axis
from mzd2.dpad import (
    DpadRegion,
    default_dpad_icons,
    dpad_icons,
    dpad_region,
    split_doc,
)

TEXT = 10.0
BASE = 20.0


@pytest.mark.parametrize(
    "point, expected",
    [
        ((5.0, 30.0), DpadRegion.LEFT),
        ((35.0, 30.0), DpadRegion.RIGHT),
        ((20.0, 15.0), DpadRegion.UP),
        ((20.0, 45.0), DpadRegion.DOWN),
        ((50.0, 20.0), DpadRegion.PLUS),
        ((50.0, 40.0), DpadRegion.MINUS),
    ],
)
def test_region_hits(point, expected):
    assert dpad_region(point[0], point[1], TEXT, BASE) is expected


@pytest.mark.parametrize("point", [(20.0, 30.0), (30.0, 5.0), (50.0, 30.0)])
def test_region_misses_center_title_and_gap(point):
    assert dpad_region(point[0], point[1], TEXT, BASE) is None


@pytest.mark.parametrize("region", list(DpadRegion))
def test_polygon_centroid_maps_back(region):
    points = region.polygon(TEXT, BASE)
    cx = sum(p[0] for p in points) / len(points)
    cy = sum(p[1] for p in points) / len(points)
    assert dpad_region(cx, cy, TEXT, BASE) is region


@pytest.mark.parametrize(
    "point, axis, positive",
    [
        ((5.0, 30.0), Axis.X, False),
        ((35.0, 30.0), Axis.X, True),
        ((20.0, 15.0), Axis.Y, False),
        ((20.0, 45.0), Axis.Y, True),
        ((50.0, 20.0), Axis.Z, True),
        ((50.0, 40.0), Axis.Z, False),
    ],
)
def test_region_axes_and_directions(point, axis, positive):
    region = dpad_region(point[0], point[1], TEXT, BASE)
    assert (region.axis, region.positive) == (axis, positive)


def test_dpad_icons_order():
    icons = dpad_icons(lambda axis, positive: f"{axis.name}{int(positive)}")
    assert icons == ("X0", "X1", "Y0", "Y1", "Z1", "Z0")


def test_default_icons():
    assert default_dpad_icons(False) == ("←", "→", "↑", "↓", "+", "-")
    assert default_dpad_icons(True) == ("→", "←", "↓", "↑", "-", "+")


def test_split_doc_with_body():
    doc = split_doc("Status line\n  more text  ")
    assert doc.status == "Status line"
    assert doc.tooltip == "more text"
    assert doc.has_details is True


def test_split_doc_status_only():
    doc = split_doc("  Only status ")
    assert doc == ("Only status", "Only status", False)


def test_split_doc_empty_body_after_newline():
    doc = split_doc("Title\n")
    assert doc == ("Title", "Title", False)


def test_split_doc_body_only():
    doc = split_doc("\n details ")
    assert doc.status == ""
    assert doc.tooltip == "details"
    assert doc.has_details is True