#!/usr/bin/env python3

"""
This module contains the moist air property functions needed by the zone
equipment.
"""

# Specific heat of dry air and of water vapour, in J / (kg.K)
cp_dry_air = 1.00484e3
cp_water_vapour = 1.85895e3

# Smallest humidity ratio used in property calculations, in kg / kg
min_hum_rat = 1.0e-5


def cp_air_fn_w_tdb(hum_rat, temp_db):
    """ Return specific heat of moist air, in J / (kg.K)

    Arguments:
    hum_rat -- humidity ratio, in kg water / kg dry air
    temp_db -- dry-bulb temperature, in deg C (the correlation does not depend on it)
    """
    return cp_dry_air + max(min_hum_rat, hum_rat) * cp_water_vapour
