from pathlib import Path

import pytest

from scouttrips.config_loader import PlanProfile
from scouttrips.models import Coordinates, PlayerLevel, Venue


def test_profile_save_and_load(tmp_path: Path):
    school = Venue(name="IMG Academy", coords=Coordinates(lat=27.4487, lng=-82.5640))
    camp = Venue(name="Minor League Complex", coords=Coordinates(lat=27.5, lng=-82.5))
    profile = PlanProfile(
        priority_players=["Jane Ace"],
        custom_aliases={"Pro": {"Yanks": "Yankees", "Extended ST": camp}, "NCAA": {"Knights": "UCF"}},
        hs_venues={"IMG": school},
        max_drive_minutes=240,
        home_base=Coordinates(lat=30.33, lng=-81.65),
    )
    path = tmp_path / "profile.json"
    profile.save(path)

    loaded = PlanProfile.load(path)
    assert loaded == profile
    assert loaded.hs_venues["IMG"] == school
    assert loaded.custom_aliases["Pro"]["Extended ST"] == camp


def test_profile_defaults_for_missing_keys(tmp_path: Path):
    path = tmp_path / "profile.json"
    path.write_text('{"priority_players": ["A"]}', encoding="utf-8")
    loaded = PlanProfile.load(path)
    assert loaded.priority_players == ["A"]
    assert loaded.custom_aliases == {}
    assert loaded.home_base is None


def test_overrides_by_level():
    profile = PlanProfile(custom_aliases={"pro": {"Yanks": "Yankees"}, "College": {"Knights": "UCF"}})
    overrides = profile.overrides_by_level()
    assert overrides == {PlayerLevel.PRO: {"Yanks": "Yankees"}, PlayerLevel.NCAA: {"Knights": "UCF"}}

    with pytest.raises(ValueError):
        PlanProfile(custom_aliases={"JUCO": {}}).overrides_by_level()
