"""Geo-fence check for clock-ins made on the church grounds."""

import math

# Saint Catherine of Siena Catholic Church, 9200 SW 107th Ave, Miami, FL 33176
CHURCH_LATITUDE = 25.68222
CHURCH_LONGITUDE = -80.36861
MAX_DISTANCE_METERS = 100
EARTH_RADIUS_METERS = 6_371_000


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in metres between two points on a spherical Earth."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c


def verify_church_location(latitude, longitude) -> bool:
    try:
        lat = float(latitude)
        lng = float(longitude)
    except (TypeError, ValueError):
        return False
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return False
    return haversine_distance(lat, lng, CHURCH_LATITUDE, CHURCH_LONGITUDE) <= MAX_DISTANCE_METERS
