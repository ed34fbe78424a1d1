"""Unit tests for the Haversine distance function."""

import itertools

import pytest

from src.domain.distance import EARTH_RADIUS_KM, haversine_km

POINTS = [
    (0.0, 0.0),
    (0.0, 1.0),
    (40.7128, -74.0060),   # New York
    (51.5074, -0.1278),    # London
    (-33.8688, 151.2093),  # Sydney
    (89.9, 45.0),
]


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(40.7128, -74.0060, 40.7128, -74.0060) == 0.0

    def test_one_degree_of_longitude_at_equator(self):
        d = haversine_km(0.0, 0.0, 0.0, 1.0)
        assert d == pytest.approx(111.19, abs=0.01)

    def test_known_distance(self):
        # New York → London ~5570 km
        d = haversine_km(40.7128, -74.0060, 51.5074, -0.1278)
        assert 5500 < d < 5650

    def test_symmetric(self):
        for (a, b) in itertools.combinations(POINTS, 2):
            assert haversine_km(*a, *b) == pytest.approx(haversine_km(*b, *a))

    def test_never_negative(self):
        for (a, b) in itertools.product(POINTS, repeat=2):
            assert haversine_km(*a, *b) >= 0.0

    def test_triangle_inequality(self):
        for a, b, c in itertools.permutations(POINTS, 3):
            assert haversine_km(*a, *b) <= (
                haversine_km(*a, *c) + haversine_km(*c, *b) + 1e-6
            )

    def test_antipodal_is_half_circumference(self):
        d = haversine_km(0.0, 0.0, 0.0, 180.0)
        assert d == pytest.approx(EARTH_RADIUS_KM * 3.141592653589793, rel=1e-9)
