import numpy as np
import pandas as pd
import pytest
from demandninja.diurnal import (
    DiurnalProfile,
    load_diurnal_profile,
    apply_diurnal_profile,
    hour_of_day,
)
from demandninja.errors import ConfigurationError


def profile_table(heating=None, cooling=None):
    return pd.DataFrame({
        'hour': range(24),
        'heating': heating if heating is not None else np.ones(24),
        'cooling': cooling if cooling is not None else np.ones(24),
    })


def test_bundled_profile_is_normalised():
    profile = load_diurnal_profile()
    assert len(profile) == 24
    assert np.mean(profile.heating) == pytest.approx(1.0)
    assert np.mean(profile.cooling) == pytest.approx(1.0)
    assert np.all(profile.heating > 0) and np.all(profile.cooling > 0)


def test_load_profile_from_file(tmp_path):
    path = tmp_path / "profile.csv"
    profile_table(heating=np.linspace(0.5, 1.5, 24)).to_csv(path, index=False)
    profile = load_diurnal_profile(str(path))
    assert profile.heating[0] == pytest.approx(0.5)
    assert profile.heating[23] == pytest.approx(1.5)


def test_rows_are_ordered_by_hour():
    table = profile_table(heating=np.arange(24.0)).iloc[::-1]
    profile = DiurnalProfile.from_frame(table)
    np.testing.assert_allclose(profile.heating, np.arange(24.0))


def test_wrong_row_count():
    with pytest.raises(ConfigurationError, match="24 rows"):
        DiurnalProfile.from_frame(profile_table().iloc[:23])


def test_missing_columns():
    with pytest.raises(ConfigurationError, match="cooling"):
        DiurnalProfile.from_frame(profile_table().drop(columns=['cooling']))


def test_duplicate_hours():
    table = profile_table()
    table.loc[5, 'hour'] = 4
    with pytest.raises(ConfigurationError, match="0-23"):
        DiurnalProfile.from_frame(table)


def test_hour_lookup_is_zero_based():
    times = pd.date_range("2024-01-01", periods=24, freq="h")
    profile = DiurnalProfile.from_frame(profile_table(heating=np.arange(24.0), cooling=np.arange(24.0) * 2))

    heating, cooling = apply_diurnal_profile(times, np.ones(24), np.ones(24), profile)

    np.testing.assert_allclose(heating, np.arange(24.0))
    np.testing.assert_allclose(cooling, np.arange(24.0) * 2)


def test_mean_preserving_profile_preserves_daily_sum():
    times = pd.date_range("2024-01-01", periods=48, freq="h")
    profile = load_diurnal_profile()
    heating = np.full(48, 1.7)
    cooling = np.full(48, 0.4)

    shaped_heat, shaped_cool = apply_diurnal_profile(times, heating, cooling, profile)

    assert shaped_heat[:24].sum() == pytest.approx(heating[:24].sum())
    assert shaped_cool[24:].sum() == pytest.approx(cooling[24:].sum())
    assert not np.allclose(shaped_heat, heating)


def test_accepts_raw_table():
    times = pd.date_range("2024-01-01 06:00", periods=3, freq="h")
    table = profile_table(heating=np.full(24, 2.0))
    heating, cooling = apply_diurnal_profile(times, [1.0, 2.0, 3.0], [1.0, 1.0, 1.0], table)
    np.testing.assert_allclose(heating, [2.0, 4.0, 6.0])
    np.testing.assert_allclose(cooling, [1.0, 1.0, 1.0])


def test_bad_raw_table_raises():
    times = pd.date_range("2024-01-01", periods=3, freq="h")
    with pytest.raises(ConfigurationError):
        apply_diurnal_profile(times, np.ones(3), np.ones(3), profile_table().iloc[:12])


def test_short_profile_object_raises():
    times = pd.date_range("2024-01-01", periods=3, freq="h")
    profile = DiurnalProfile(heating=np.ones(12), cooling=np.ones(12))
    with pytest.raises(ConfigurationError):
        apply_diurnal_profile(times, np.ones(3), np.ones(3), profile)


def test_inputs_not_mutated():
    times = pd.date_range("2024-01-01", periods=24, freq="h")
    heating = np.ones(24)
    apply_diurnal_profile(times, heating, np.ones(24), load_diurnal_profile())
    np.testing.assert_array_equal(heating, np.ones(24))


def test_hour_of_day_uses_wall_clock():
    times = pd.date_range("2024-07-01 00:00", periods=3, freq="h", tz="America/New_York")
    assert hour_of_day(times).tolist() == [0, 1, 2]


def test_fractional_hours():
    table = profile_table()
    table['hour'] = table['hour'].astype(float)
    table.loc[0, 'hour'] = 0.5
    with pytest.raises(ConfigurationError, match="whole hours"):
        DiurnalProfile.from_frame(table)


def test_empty_profile_file(tmp_path):
    path = tmp_path / "profile.csv"
    path.write_text("")
    with pytest.raises(ConfigurationError, match="Could not read"):
        load_diurnal_profile(str(path))
