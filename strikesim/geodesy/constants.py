# strikesim/geodesy/constants.py

class GeoConstants:
    EARTH_RADIUS_NM: float = 3440.065
    # Equirectangular approximation: one minute of latitude is one nautical mile
    NM_PER_DEGREE_LAT: float = 60.0
