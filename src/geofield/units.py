"""Distance unit conversion for spherical radius queries."""

# Equatorial radius of the WGS-84 ellipsoid, in meters
EARTH_RADIUS_METERS = 6378137

distance_multiplier = EARTH_RADIUS_METERS


def meter_to_radian(meters: float) -> float:
    """Convert a distance in meters to radians on the earth's surface."""
    return meters / distance_multiplier
