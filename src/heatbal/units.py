#!/usr/bin/env python3

"""
This module contains unit conversion constants shared by the heat balance
calculation.
"""

# Standard library imports
from math import pi

hours_per_day = 24
seconds_per_hour = 3600

# Angles
pi_over_2 = pi / 2.0
deg_to_radians = pi / 180.0


def degrees_to_radians(angle_deg):
    return angle_deg * deg_to_radians

def radians_to_degrees(angle_rad):
    return angle_rad / deg_to_radians
