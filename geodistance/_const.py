"""
Constants declarations for geodistance
"""

# Registry name of the ellipsoid used when none is given
DEFAULT_ELLIPSOID = 'WGS84'

# Algorithm used by distance() when none is given
DEFAULT_ALGORITHM = 'vincenty'

# Vincenty inverse: change in lambda (radians) below which the iteration has converged
VINCENTY_TOLERANCE = 1e-12

# Vincenty inverse: iterations allowed before giving up (near-antipodal points)
VINCENTY_MAX_ITERATIONS = 200

# Coordinate bounds, decimal degrees
MIN_LATITUDE, MAX_LATITUDE = -90.0, 90.0
MIN_LONGITUDE, MAX_LONGITUDE = -180.0, 180.0
