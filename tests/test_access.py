import random
from collections import Counter

import pytest

from wlansim.errors import InvalidConfigurationError
from wlansim.mac import (
    ChannelState,
    CsmaCaBackoff,
    MuMimoBackoff,
    OfdmaRoundRobin,
    OfdmaStation,
    create_access_model,
)
from wlansim.phy_profiles import WIFI4_PHY, WIFI5_PHY, WIFI6_PHY


def _allocation_sequence(seed, station_count, attempts):
    rng = random.Random(seed)
    model = OfdmaRoundRobin(WIFI6_PHY)
    model.register_stations(station_count, rng)
    channel = ChannelState("wifi6")
    sequence = []
    for k in range(attempts):
        index = k % station_count
        model.attempt(index, channel, rng)
        sequence.append(model.stations[index].allocated_sub_channel)
    return sequence


def test_ofdma_index_advances_round_robin():
    sequence = _allocation_sequence(seed=1, station_count=4, attempts=37)
    assert sequence == [k % 10 for k in range(37)]


def test_ofdma_allocation_independent_of_seed():
    assert _allocation_sequence(1, 7, 50) == _allocation_sequence(99, 7, 50)


def test_ofdma_index_carries_over_from_any_start():
    rng = random.Random(0)
    model = OfdmaRoundRobin(WIFI6_PHY)
    model.register_stations(2, rng)
    model.sub_channel_index = 8
    channel = ChannelState("wifi6")
    seen = []
    for k in range(5):
        model.attempt(k % 2, channel, rng)
        seen.append(model.stations[k % 2].allocated_sub_channel)
    assert seen == [8, 9, 0, 1, 2]


def test_ofdma_uniform_sub_channel_coverage():
    rng = random.Random(5)
    model = OfdmaRoundRobin(WIFI6_PHY)
    model.register_stations(3, rng)
    channel = ChannelState("wifi6")
    allocations = {i: Counter() for i in range(3)}

    for _ in range(30):
        for i in range(3):
            model.attempt(i, channel, rng)
            allocations[i][model.stations[i].allocated_sub_channel] += 1

    for counts in allocations.values():
        assert sorted(counts) == list(range(10))
        assert set(counts.values()) == {3}


def test_ofdma_releases_channel_and_credits_share_of_bandwidth(rng):
    model = OfdmaRoundRobin(WIFI6_PHY)
    model.register_stations(3, rng)
    channel = ChannelState("wifi6")

    outcomes = [model.attempt(i, channel, rng) for i in range(3)]

    assert all(o.succeeded for o in outcomes)
    assert channel.is_free()
    expected = (20e6 / 3) * 8.0 * (5.0 / 6.0)
    for o in outcomes:
        assert o.credit_bits == pytest.approx(expected)
        assert 0.0 <= o.latency_ms < 10.0


def test_ofdma_station_needs_matching_sub_channel_and_free_channel():
    station = OfdmaStation(0)
    channel = ChannelState("wifi6")
    assert not station.attempt(channel, 0)

    station.allocate_sub_channel(4)
    assert not station.attempt(channel, 5)
    assert station.attempt(channel, 4)
    assert not channel.is_free()
    # Occupied channel blocks everyone until released.
    other = OfdmaStation(1)
    other.allocate_sub_channel(4)
    assert not other.attempt(channel, 4)
    channel.release()
    assert other.attempt(channel, 4)


def test_csma_congestion_scales_with_clients(rng):
    model = CsmaCaBackoff(WIFI4_PHY)
    model.register_stations(2, rng)
    assert model.congestion == pytest.approx(0.1)
    model.register_stations(10, rng)
    assert model.congestion == pytest.approx(0.5)
    model.register_stations(100, rng)
    assert model.congestion == pytest.approx(0.5)


def test_csma_failed_attempt_still_consumes_time(rng):
    model = CsmaCaBackoff(WIFI4_PHY)
    model.register_stations(10, rng)
    channel = ChannelState("wifi4")
    model.stations[0].waiting = True

    outcome = model.attempt(0, channel, rng)

    assert not outcome.succeeded
    assert outcome.duration_s == pytest.approx(outcome.latency_ms / 1000)
    assert outcome.duration_s > 0


def test_mu_mimo_uses_fixed_congestion_and_stream_limit(rng):
    model = MuMimoBackoff(WIFI5_PHY)
    model.register_stations(100, rng)
    assert model.congestion == pytest.approx(0.1)
    assert model.theoretical_max_mbps() == pytest.approx(4 * WIFI5_PHY.transfer_rate_bps / 1e6)

    model.register_stations(2, rng)
    assert model.theoretical_max_mbps() == pytest.approx(2 * WIFI5_PHY.transfer_rate_bps / 1e6)


def test_mu_mimo_success_reports_own_backoff_as_latency(rng):
    model = MuMimoBackoff(WIFI5_PHY)
    model.register_stations(3, rng)
    channel = ChannelState("wifi5")
    backoff = model.stations[1].backoff_interval_ms

    for _ in range(50):
        outcome = model.attempt(1, channel, rng)
        if outcome.succeeded:
            assert outcome.latency_ms == backoff
            assert outcome.credit_bits == WIFI5_PHY.transfer_rate_bps
            break
        backoff = model.stations[1].backoff_interval_ms
    else:
        pytest.fail("station never got through")


def test_parallel_models_take_longest_attempt_as_round_duration():
    assert MuMimoBackoff(WIFI5_PHY).round_duration([0.1, 0.3, 0.2]) == 0.3
    assert OfdmaRoundRobin(WIFI6_PHY).round_duration([0.1, 0.3]) == 0.3
    assert CsmaCaBackoff(WIFI4_PHY).round_duration([0.1, 0.3]) == pytest.approx(0.4)


def test_create_access_model_per_generation():
    assert isinstance(create_access_model(4), CsmaCaBackoff)
    assert isinstance(create_access_model(5), MuMimoBackoff)
    assert isinstance(create_access_model(6), OfdmaRoundRobin)
    with pytest.raises(InvalidConfigurationError):
        create_access_model(7)


class ScriptedRandom(random.Random):
    """Top draw for every ``randrange`` (never collides), lowest slot for every ``randint``."""

    def randrange(self, start, stop=None, step=1):
        if stop is None:
            return start - 1
        return stop - 1

    def randint(self, a, b):
        return a


def test_csma_success_latency_and_duration():
    rng = ScriptedRandom()
    model = CsmaCaBackoff(WIFI4_PHY)
    model.register_stations(10, rng)
    channel = ChannelState("wifi4")
    backoff = model.stations[2].backoff_interval_ms
    delay_ms = 49 * 0.001

    outcome = model.attempt(2, channel, rng)

    assert outcome.succeeded
    assert backoff == 1.0
    # Backoff is counted once before contending and once more by the station itself.
    assert outcome.latency_ms == pytest.approx(delay_ms + 2 * backoff + WIFI4_PHY.ideal_duration_s * 1000)
    assert outcome.duration_s == pytest.approx(outcome.latency_ms / 1000)
    assert model.stations[2].collision_count == 0
    assert channel.is_free()


@pytest.mark.parametrize("station_count", [1, 3, 10])
def test_ofdma_attempt_lasts_one_packet_per_resource_unit_share(rng, station_count):
    model = create_access_model(6)
    model.register_stations(station_count, rng)

    outcome = model.attempt(0, ChannelState("wifi6"), rng)

    assert outcome.duration_s == pytest.approx(station_count * model.ideal_duration_s)


@pytest.mark.parametrize("generation", [4, 5, 6])
def test_models_start_with_no_stations(generation):
    model = create_access_model(generation)
    assert model.stations == []
    assert model.station_count == 0
    if generation == 6:
        assert (model.sub_channel_index, model.credit_bits, model.slot_duration_s) == (0, 0.0, 0.0)
    else:
        assert model.congestion == 0.0
