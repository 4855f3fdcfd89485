import logging
from typing import List, Sequence

from .models import RouteRecord, Found, NotFound, Lookup, DEFAULT_SETTINGS
from .utils.calculations import normalize_location, collation_key

logger = logging.getLogger(__name__)


def resolve_distance(
    origin: str,
    destination: str,
    routes: Sequence[RouteRecord] = DEFAULT_SETTINGS.routes
) -> Lookup[float]:
    """
    Look up the distance (km) between two known locations, in either direction.

    Names are trimmed and compared case-insensitively. Returns Found(distance_km)
    for the first matching record in table order, or NotFound when either name
    is blank or no record matches.
    """
    o = normalize_location(origin)
    d = normalize_location(destination)
    if not o or not d:
        return NotFound(origin=origin or "", destination=destination or "")

    for r in routes:
        r_origin = normalize_location(r.origin)
        r_dest = normalize_location(r.destination)
        if (r_origin == o and r_dest == d) or (r_origin == d and r_dest == o):
            logger.debug(f"Route found: {r.origin} <-> {r.destination} = {r.distance_km} km")
            return Found(r.distance_km)

    logger.debug(f"No known route between '{origin}' and '{destination}'")
    return NotFound(origin=origin, destination=destination)


def list_known_locations(routes: Sequence[RouteRecord] = DEFAULT_SETTINGS.routes) -> List[str]:
    """
    All distinct origin and destination names in the route table, in
    accent-aware alphabetical order. Names differing only in case are kept apart.
    """
    names = set()
    for r in routes:
        if r.origin:
            names.add(r.origin)
        if r.destination:
            names.add(r.destination)
    return sorted(names, key=collation_key)
