"""Organization name aliases for pro parent clubs and college programs."""

from __future__ import annotations

import re
from typing import Dict, List, Mapping


MLB_ALIAS_GROUPS: Dict[int, List[str]] = {
    108: ["Angels", "Los Angeles Angels", "LA Angels", "Anaheim Angels"],
    109: ["Diamondbacks", "Arizona Diamondbacks", "D-backs", "Dbacks"],
    110: ["Orioles", "Baltimore Orioles"],
    111: ["Red Sox", "Boston Red Sox"],
    112: ["Cubs", "Chicago Cubs"],
    113: ["Reds", "Cincinnati Reds"],
    114: ["Guardians", "Cleveland Guardians"],
    115: ["Rockies", "Colorado Rockies"],
    116: ["Tigers", "Detroit Tigers"],
    117: ["Astros", "Houston Astros"],
    118: ["Royals", "Kansas City Royals"],
    119: ["Dodgers", "Los Angeles Dodgers", "LA Dodgers"],
    120: ["Nationals", "Washington Nationals", "Nats"],
    121: ["Mets", "New York Mets", "NY Mets"],
    133: ["Athletics", "Oakland Athletics", "A's", "As"],
    134: ["Pirates", "Pittsburgh Pirates"],
    135: ["Padres", "San Diego Padres"],
    136: ["Mariners", "Seattle Mariners"],
    137: ["Giants", "San Francisco Giants", "SF Giants"],
    138: ["Cardinals", "St. Louis Cardinals", "St Louis Cardinals"],
    139: ["Rays", "Tampa Bay Rays"],
    140: ["Rangers", "Texas Rangers"],
    141: ["Blue Jays", "Toronto Blue Jays"],
    142: ["Twins", "Minnesota Twins"],
    143: ["Phillies", "Philadelphia Phillies"],
    144: ["Braves", "Atlanta Braves"],
    145: ["White Sox", "Chicago White Sox"],
    146: ["Marlins", "Miami Marlins"],
    147: ["Yankees", "New York Yankees", "NY Yankees"],
    158: ["Brewers", "Milwaukee Brewers"],
}

NCAA_ALIAS_GROUPS: Dict[str, List[str]] = {
    "Texas": ["University of Texas", "UT Austin", "Texas Longhorns"],
    "Coastal Carolina": ["CCU", "Coastal", "Chanticleers"],
    "Florida": ["University of Florida", "UF", "Florida Gators"],
    "Florida State": ["FSU", "Florida State Seminoles", "Seminoles"],
    "Georgia Tech": ["GT", "Georgia Tech Yellow Jackets"],
    "Virginia": ["UVA", "University of Virginia", "Cavaliers"],
    "South Carolina": ["USC", "University of South Carolina", "Gamecocks"],
    "Alabama": ["University of Alabama", "Bama", "Crimson Tide"],
    "Vanderbilt": ["Vandy", "Vanderbilt Commodores"],
    "Dallas Baptist": ["DBU", "Dallas Baptist Patriots"],
    "Wake Forest": ["Wake", "Demon Deacons"],
    "SE Louisiana": ["Southeastern Louisiana", "SELA", "SELA Lions"],
    "Mercer": ["Mercer Bears", "Mercer University"],
    "FIU": ["Florida International", "Florida International University", "FIU Panthers"],
    "UCF": ["University of Central Florida", "UCF Knights", "Central Florida"],
    "Auburn": ["Auburn University", "Auburn Tigers"],
    "Ohio State": ["OSU", "The Ohio State University", "Buckeyes"],
    "Southern Miss": ["USM", "University of Southern Mississippi", "Golden Eagles"],
    "Fordham": ["Fordham University", "Fordham Rams"],
    "Michigan": ["University of Michigan", "Michigan Wolverines"],
    "USF": ["University of South Florida", "South Florida", "USF Bulls"],
    "Duke": ["Duke University", "Blue Devils"],
    "North Carolina": ["UNC", "University of North Carolina", "Tar Heels"],
    "Rutgers": ["Rutgers University", "Scarlet Knights"],
    "Sacramento State": ["Sac State", "Sacramento State Hornets"],
    "Saint Josephs": ["Saint Joseph's", "St. Joseph's", "St. Josephs", "Hawks"],
}


def org_token(value: str) -> str:
    return re.sub(r"[^A-Z0-9]", "", value.upper())


def build_alias_lookup(groups: Mapping[object, List[str]]) -> Dict[str, object]:
    """Flatten ``canonical -> [aliases]`` into ``token -> canonical``.

    The canonical key itself is matched too when it is a string. The first
    group to claim a token keeps it.
    """

    lookup: Dict[str, object] = {}
    for canonical, variants in groups.items():
        names = list(variants)
        if isinstance(canonical, str):
            names.insert(0, canonical)
        for variant in names:
            key = org_token(variant)
            if key:
                lookup.setdefault(key, canonical)
    return lookup


MLB_ALIAS_LOOKUP = build_alias_lookup(MLB_ALIAS_GROUPS)
NCAA_ALIAS_LOOKUP = build_alias_lookup(NCAA_ALIAS_GROUPS)
