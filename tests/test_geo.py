import math
from datetime import timedelta

import pytest

from shipport.core.geo import calculate_distance_km, estimate_arrival_time


def test_same_point_is_zero():
    assert calculate_distance_km(22.74, 69.70, 22.74, 69.70) == 0.0


def test_one_degree_of_latitude():
    # 2 * pi * 6371 / 360
    assert calculate_distance_km(10.0, 20.0, 11.0, 20.0) == pytest.approx(111.195, abs=1e-3)


def test_distance_is_symmetric():
    forward = calculate_distance_km(23.00, 70.18, 22.47, 70.05)
    backward = calculate_distance_km(22.47, 70.05, 23.00, 70.18)
    assert forward == pytest.approx(backward)


def test_antipodal_points_are_half_circumference():
    assert calculate_distance_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * 6371)
    assert calculate_distance_km(90.0, 0.0, -90.0, 0.0) == pytest.approx(math.pi * 6371)


def test_vessel_near_mundra():
    distance = calculate_distance_km(22.75, 69.71, 22.74, 69.70)
    assert distance == pytest.approx(1.513, abs=0.01)


def test_arrival_time_is_distance_over_velocity():
    assert estimate_arrival_time(20.0, 50.0) == timedelta(hours=2.5)


def test_arrival_time_with_negative_velocity_is_negative():
    assert estimate_arrival_time(-10.0, 5.0) == timedelta(hours=-0.5)


def test_arrival_time_zero_velocity_is_a_precondition():
    with pytest.raises(ZeroDivisionError):
        estimate_arrival_time(0.0, 5.0)


def test_arrival_time_tiny_velocity_overflows():
    with pytest.raises(OverflowError):
        estimate_arrival_time(1e-12, 1.5)
