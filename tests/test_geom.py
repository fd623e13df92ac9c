"""Tests for SvgBox and CoordinateTransform"""

import numpy as np
import pytest

from glif2svg.geom import CoordinateTransform, SvgBox


class TestSvgBox:
    """Test cases for the bounding box accumulation"""

    def test_initialized_to_zero(self):
        """A new box has all extrema at 0."""
        assert SvgBox().extent == (0.0, 0.0, 0.0, 0.0)

    def test_consider_points(self):
        """Considering points widens the box."""
        box = SvgBox()
        box.consider([(10.0, 10.0), (20.0, -5.0)])
        assert box.extent == (0.0, 20.0, -5.0, 10.0)

    def test_consider_numpy_array(self):
        """Points can be given as array of shape (n, 2)."""
        box = SvgBox()
        box.consider(np.array([[1.5, -2.5], [3.0, 4.0]]))
        assert box.extent == (0.0, 3.0, -2.5, 4.0)

    def test_consider_empty(self):
        """No points, no change."""
        box = SvgBox(-1, 2, -3, 4)
        box.consider([])
        assert box.extent == (-1.0, 2.0, -3.0, 4.0)

    def test_negative_quadrant_keeps_zero(self):
        """The zero initialization clamps the max of a glyph lying in the negative quadrant."""
        box = SvgBox()
        box.consider([(-10.0, -10.0), (-5.0, -20.0)])
        assert box.maxx == 0.0
        assert box.maxy == 0.0
        assert box.minx == -10.0
        assert box.miny == -20.0

    def test_monotonic_and_containing(self):
        """Extrema never shrink and the final box contains every point."""
        rng = np.random.default_rng(42)
        points = rng.uniform(-500.0, 900.0, size=(200, 2))
        box = SvgBox()
        previous = box.extent
        for point in points:
            box.consider([tuple(point)])
            minx, maxx, miny, maxy = box.extent
            assert minx <= previous[0]
            assert maxx >= previous[1]
            assert miny <= previous[2]
            assert maxy >= previous[3]
            previous = box.extent
        for x, y in points:
            assert box.contains(x, y)

    def test_seed_vertical_and_horizontal(self):
        """Seeding overwrites the extrema."""
        box = SvgBox()
        box.consider([(-30.0, 1000.0)])
        box.seed_vertical(800, -200)
        box.seed_horizontal(0, 500)
        assert box.extent == (0.0, 500.0, -200.0, 800.0)

    def test_copy_is_independent(self):
        """A copy does not follow later changes."""
        box = SvgBox(0, 10, 0, 10)
        snapshot = box.copy()
        box.consider([(20.0, 20.0)])
        assert snapshot == SvgBox(0, 10, 0, 10)
        assert box != snapshot


class TestCoordinateTransform:
    """Test cases for the y-flip"""

    def test_x_passes_through(self):
        """x is not changed."""
        trafo = CoordinateTransform.from_box(SvgBox(0, 500, -200, 800))
        assert trafo.transform_x(123.5) == 123.5

    def test_viewbox_mode(self):
        """viewBox mode: y' = -y + maxy + miny"""
        trafo = CoordinateTransform.from_box(SvgBox(0, 500, -200, 800))
        assert trafo.y_offset == 600.0
        assert trafo.transform_y(100.0) == 500.0
        assert trafo.transform_point((10.0, 800.0)) == (10.0, -200.0)
        assert trafo.transform_point((10.0, -200.0)) == (10.0, 800.0)

    def test_width_height_mode(self):
        """width/height mode: y' = -y + miny"""
        trafo = CoordinateTransform.from_box(SvgBox(0, 500, -200, 800), no_viewbox=True)
        assert trafo.y_offset == -200.0
        assert trafo.transform_y(100.0) == -300.0

    def test_snapshot(self):
        """The transformation does not follow later changes of the box."""
        box = SvgBox(0, 10, 0, 10)
        trafo = CoordinateTransform.from_box(box)
        box.consider([(0.0, 50.0)])
        assert trafo.transform_y(0.0) == 10.0

    def test_frozen(self):
        """CoordinateTransform is immutable."""
        trafo = CoordinateTransform(5.0)
        with pytest.raises(Exception):  # FrozenInstanceError
            trafo.y_offset = 1.0
