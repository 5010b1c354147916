"""Organization aliasing and venue lookup tables."""

from .aliases import org_token
from .resolver import VenueResolver, hs_resolver, ncaa_resolver, spring_training_resolver
from .sites import NCAA_VENUES, SPRING_TRAINING_SITES, SpringTrainingSite

__all__ = [
    "NCAA_VENUES",
    "SPRING_TRAINING_SITES",
    "SpringTrainingSite",
    "VenueResolver",
    "hs_resolver",
    "ncaa_resolver",
    "org_token",
    "spring_training_resolver",
]
