"""Static venue coordinates for spring-training camps and college ballparks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal

from scouttrips.models import Coordinates, Venue


@dataclass(frozen=True)
class SpringTrainingSite:
    venue: Venue
    league: Literal["Grapefruit", "Cactus"]


def _site(name: str, lat: float, lng: float, league: Literal["Grapefruit", "Cactus"]) -> SpringTrainingSite:
    return SpringTrainingSite(venue=Venue(name=name, coords=Coordinates(lat=lat, lng=lng)), league=league)


def _venue(name: str, lat: float, lng: float) -> Venue:
    return Venue(name=name, coords=Coordinates(lat=lat, lng=lng))


# MLB parent team id -> spring training facility.
SPRING_TRAINING_SITES: Dict[int, SpringTrainingSite] = {
    # Grapefruit League (Florida)
    147: _site("George M. Steinbrenner Field", 27.9789, -82.5034, "Grapefruit"),
    111: _site("JetBlue Park", 26.5560, -81.8465, "Grapefruit"),
    141: _site("TD Ballpark", 28.0222, -82.7473, "Grapefruit"),
    146: _site("Roger Dean Chevrolet Stadium", 26.8901, -80.1156, "Grapefruit"),
    138: _site("Roger Dean Chevrolet Stadium", 26.8901, -80.1156, "Grapefruit"),
    120: _site("The Ballpark of the Palm Beaches", 26.7525, -80.1227, "Grapefruit"),
    144: _site("CoolToday Park", 27.0229, -82.2360, "Grapefruit"),
    142: _site("Hammond Stadium at CenturyLink Sports Complex", 26.5549, -81.8087, "Grapefruit"),
    139: _site("Charlotte Sports Park", 26.9609, -82.1133, "Grapefruit"),
    116: _site("Publix Field at Joker Marchant Stadium", 28.0672, -81.7539, "Grapefruit"),
    143: _site("BayCare Ballpark", 27.9772, -82.7293, "Grapefruit"),
    134: _site("LECOM Park", 27.4960, -82.5591, "Grapefruit"),
    110: _site("Ed Smith Stadium", 27.3373, -82.5259, "Grapefruit"),
    121: _site("Clover Park", 27.3069, -80.3667, "Grapefruit"),
    117: _site("The Ballpark of the Palm Beaches", 26.7525, -80.1227, "Grapefruit"),
    # Cactus League (Arizona)
    113: _site("Goodyear Ballpark", 33.4394, -112.3988, "Cactus"),
    136: _site("Peoria Sports Complex", 33.5812, -112.2385, "Cactus"),
    114: _site("Goodyear Ballpark", 33.4394, -112.3988, "Cactus"),
    108: _site("Tempe Diablo Stadium", 33.3945, -111.9668, "Cactus"),
    133: _site("Hohokam Stadium", 33.4378, -111.8270, "Cactus"),
    119: _site("Camelback Ranch", 33.5076, -112.3199, "Cactus"),
    115: _site("Salt River Fields at Talking Stick", 33.5453, -111.8852, "Cactus"),
    112: _site("Sloan Park", 33.4353, -111.8291, "Cactus"),
    145: _site("Camelback Ranch", 33.5076, -112.3199, "Cactus"),
    158: _site("American Family Fields of Phoenix", 33.5260, -112.1494, "Cactus"),
    135: _site("Peoria Sports Complex", 33.5812, -112.2385, "Cactus"),
    137: _site("Scottsdale Stadium", 33.4886, -111.9260, "Cactus"),
    109: _site("Salt River Fields at Talking Stick", 33.5453, -111.8852, "Cactus"),
    140: _site("Surprise Stadium", 33.6290, -112.3697, "Cactus"),
    118: _site("Surprise Stadium", 33.6290, -112.3697, "Cactus"),
}


# Canonical school name -> primary baseball venue.
NCAA_VENUES: Dict[str, Venue] = {
    "Texas": _venue("UFCU Disch-Falk Field", 30.2833, -97.7321),
    "Coastal Carolina": _venue("Springs Brooks Stadium", 33.7964, -79.0117),
    "Florida": _venue("Florida Ballpark", 29.6382, -82.3458),
    "Florida State": _venue("Dick Howser Stadium", 30.4393, -84.2972),
    "Georgia Tech": _venue("Russ Chandler Stadium", 33.7723, -84.3921),
    "Virginia": _venue("Disharoon Park", 38.0326, -78.5131),
    "South Carolina": _venue("Founders Park", 33.9881, -81.0329),
    "Alabama": _venue("Sewell-Thomas Stadium", 33.2132, -87.5464),
    "Vanderbilt": _venue("Hawkins Field", 36.1476, -86.8127),
    "Dallas Baptist": _venue("Horner Ballpark", 32.7242, -96.9114),
    "Wake Forest": _venue("David F. Couch Ballpark", 36.1340, -80.2817),
    "SE Louisiana": _venue("Alumni Field", 30.5154, -90.4622),
    "Mercer": _venue("OrthoGeorgia Park", 32.8262, -83.6515),
    "FIU": _venue("FIU Baseball Stadium", 25.7562, -80.3735),
    "UCF": _venue("John Euliano Park", 28.6022, -81.2016),
    "Auburn": _venue("Plainsman Park", 32.6028, -85.4893),
    "Ohio State": _venue("Bill Davis Stadium", 40.0092, -83.0282),
    "Southern Miss": _venue("Pete Taylor Park", 31.3298, -89.3345),
    "Fordham": _venue("Houlihan Park", 40.8612, -73.8855),
    "Michigan": _venue("Ray Fisher Stadium", 42.2710, -83.7465),
    "USF": _venue("USF Baseball Stadium", 28.0647, -82.4159),
    "Duke": _venue("Durham Bulls Athletic Park", 35.9941, -78.9025),
    "North Carolina": _venue("Boshamer Stadium", 35.9683, -79.0589),
    "Rutgers": _venue("Bainton Field", 40.5227, -74.4631),
    "Sacramento State": _venue("John Smith Field", 38.5582, -121.4235),
    "Saint Josephs": _venue("Smithson Field", 40.0045, -75.2446),
}
