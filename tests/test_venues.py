from scouttrips.models import Coordinates, Venue
from scouttrips.venues import (
    NCAA_VENUES,
    SPRING_TRAINING_SITES,
    VenueResolver,
    hs_resolver,
    ncaa_resolver,
    org_token,
    spring_training_resolver,
)


def test_org_token_ignores_case_and_punctuation():
    assert org_token("St. Louis Cardinals") == "STLOUISCARDINALS"
    assert org_token("  a's ") == "AS"


def test_mlb_aliases_resolve_to_team_ids():
    resolver = spring_training_resolver()
    assert resolver.canonical_name("NY Yankees") == "147"
    assert resolver.canonical_name("new york yankees") == "147"
    assert resolver.canonical_name("D-backs") == "109"
    assert resolver.canonical_name("Savannah Bananas") is None


def test_ncaa_aliases_resolve_to_canonical_school():
    resolver = ncaa_resolver()
    assert resolver.canonical_name("FSU") == "Florida State"
    assert resolver.canonical_name("university of central florida") == "UCF"
    assert resolver.canonical_name("Florida State") == "Florida State"
    assert resolver.canonical_name("Nowhere Tech") is None


def test_spring_training_sites():
    assert SPRING_TRAINING_SITES[147].venue.name == "George M. Steinbrenner Field"
    assert SPRING_TRAINING_SITES[116].league == "Grapefruit"
    assert SPRING_TRAINING_SITES[119].league == "Cactus"
    assert len(SPRING_TRAINING_SITES) == 30


def test_spring_training_resolver_maps_org_to_camp():
    resolver = spring_training_resolver()
    venue = resolver.resolve("Detroit Tigers")
    assert venue is not None
    assert venue.name == "Publix Field at Joker Marchant Stadium"
    assert resolver.canonical_name("Tigers") == "116"
    assert resolver.resolve("") is None
    assert "Yankees" in resolver
    assert "Unknown Club" not in resolver


def test_ncaa_resolver_uses_school_venue():
    resolver = ncaa_resolver()
    assert resolver.resolve("Knights") is None
    assert resolver.resolve("UCF Knights") == NCAA_VENUES["UCF"]


def test_custom_overrides_are_checked_first():
    resolver = ncaa_resolver()
    custom = Venue(name="Spring Break Tournament", coords=Coordinates(lat=27.8, lng=-82.6))
    assert resolver.resolve("Florida", {"florida": custom}) == custom
    assert resolver.canonical_name("Florida", {"FLORIDA": custom}) == "Spring Break Tournament"
    # A string override points at another canonical entry.
    assert resolver.resolve("Gators JV", {"Gators JV": "Florida"}) == NCAA_VENUES["Florida"]


def test_hs_resolver_only_knows_supplied_schools():
    school = Venue(name="IMG Academy", coords=Coordinates(lat=27.4487, lng=-82.5640))
    resolver = hs_resolver({"IMG Academy": school})
    assert resolver.resolve("img academy") == school
    assert resolver.resolve("Lakeland High") is None


def test_resolver_ignores_aliases_for_unknown_venues():
    venue = Venue(name="Field", coords=Coordinates(lat=30.0, lng=-90.0))
    resolver = VenueResolver({"Known": venue}, {"ALIAS": "Known", "OTHER": "Missing"})
    assert resolver.resolve("alias") == venue
    assert resolver.resolve("other") is None
