import pytest

from scouttrips.config import (
    SUNDAY,
    THURSDAY,
    PlanningConfig,
    default_config,
    get_season,
)
from scouttrips.models import Coordinates, PlayerLevel


def test_default_config_values(monkeypatch):
    for name in ("SCOUTTRIPS_MAX_DRIVE_MINUTES", "SCOUTTRIPS_HOME_LAT", "SCOUTTRIPS_HOME_LNG"):
        monkeypatch.delenv(name, raising=False)
    config = default_config()
    assert config.max_drive_minutes == 180
    assert config.blackout_weekday == SUNDAY
    assert config.anchor_weekday == THURSDAY
    assert config.anchor_bonus == pytest.approx(1.2)
    assert config.home_base == Coordinates(lat=28.5383, lng=-81.3792)
    assert [config.tier_weight(tier) for tier in (1, 2, 3, 4)] == [5, 3, 1, 0]
    assert config.tier_weight(9) == 0


def test_env_overrides_apply(monkeypatch):
    monkeypatch.setenv("SCOUTTRIPS_MAX_DRIVE_MINUTES", "240")
    monkeypatch.setenv("SCOUTTRIPS_HOME_LAT", "30.33")
    monkeypatch.setenv("SCOUTTRIPS_HOME_LNG", "-81.65")
    config = default_config()
    assert config.max_drive_minutes == 240
    assert config.home_base == Coordinates(lat=30.33, lng=-81.65)


def test_invalid_env_override_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("SCOUTTRIPS_MAX_DRIVE_MINUTES", "three hours")
    monkeypatch.delenv("SCOUTTRIPS_HOME_LAT", raising=False)
    monkeypatch.delenv("SCOUTTRIPS_HOME_LNG", raising=False)
    with caplog.at_level("WARNING"):
        config = default_config()
    assert config.max_drive_minutes == 180
    assert "SCOUTTRIPS_MAX_DRIVE_MINUTES" in caplog.text


def test_config_validation():
    with pytest.raises(ValueError):
        PlanningConfig(max_drive_minutes=0)
    with pytest.raises(ValueError):
        PlanningConfig(blackout_weekday=7)


def test_with_overrides_ignores_none():
    config = PlanningConfig()
    same = config.with_overrides(max_drive_minutes=None)
    assert same.max_drive_minutes == 180
    wider = config.with_overrides(max_drive_minutes=300)
    assert wider.max_drive_minutes == 300
    assert config.max_drive_minutes == 180


def test_season_lookup():
    assert get_season(PlayerLevel.PRO).start == "02-15"
    assert get_season("ncaa").end == "06-01"
    assert get_season("HS").label == "high school season"
    assert all(get_season(level).level == level for level in PlayerLevel)


def test_missing_season_raises_key_error():
    config = PlanningConfig(seasons={})
    with pytest.raises(KeyError):
        config.season_for(PlayerLevel.PRO)
