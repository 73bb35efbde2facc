"""Tests for heart rate and pace zone calculations."""

from plan_engine.math.zones import calculate_hr_zones, calculate_pace_zones, find_zone
from plan_engine.models.enums import ZoneType


class TestPaceZones:
    def test_five_zones_recovery_first(self) -> None:
        zones = calculate_pace_zones(330)
        assert [z.zone for z in zones] == list(ZoneType)
        assert zones[0].name == "Recovery"
        assert zones[-1].name == "VO2max"

    def test_default_threshold_bounds(self) -> None:
        zones = calculate_pace_zones(330)
        z1 = find_zone(zones, ZoneType.ZONE_1)
        z2 = find_zone(zones, ZoneType.ZONE_2)
        z5 = find_zone(zones, ZoneType.ZONE_5)
        # 330 x 1.25 = 412.5 rounds half up
        assert (z1.low, z1.high) == (413, 462)
        assert (z2.low, z2.high) == (363, 413)
        assert (z5.low, z5.high) == (271, 304)

    def test_low_is_faster_within_zone(self) -> None:
        for zone in calculate_pace_zones(305):
            assert zone.low <= zone.high

    def test_zone_1_is_slowest(self) -> None:
        zones = calculate_pace_zones(305)
        assert zones[0].high > zones[-1].high

    def test_adjacent_zones_share_boundaries(self) -> None:
        zones = calculate_pace_zones(300)
        for slower, faster in zip(zones, zones[1:]):
            assert faster.high == slower.low

    def test_zero_threshold_is_degenerate_not_an_error(self) -> None:
        zones = calculate_pace_zones(0)
        assert all(z.low == 0 and z.high == 0 for z in zones)


class TestHRZones:
    def test_default_threshold_bounds(self) -> None:
        zones = calculate_hr_zones(165)
        z1 = find_zone(zones, ZoneType.ZONE_1)
        z2 = find_zone(zones, ZoneType.ZONE_2)
        z5 = find_zone(zones, ZoneType.ZONE_5)
        assert (z1.low, z1.high) == (107, 124)
        assert (z2.low, z2.high) == (124, 140)
        assert (z5.low, z5.high) == (165, 178)

    def test_zones_ascend(self) -> None:
        zones = calculate_hr_zones(170)
        for lower, upper in zip(zones, zones[1:]):
            assert lower.high <= upper.high

    def test_zone_4_tops_out_at_threshold(self) -> None:
        z4 = find_zone(calculate_hr_zones(168), ZoneType.ZONE_4)
        assert z4.high == 168


class TestFindZone:
    def test_missing_zone_returns_none(self) -> None:
        assert find_zone([], ZoneType.ZONE_3) is None
