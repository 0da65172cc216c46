#!/usr/bin/env python3

"""
This module provides objects to represent thermal zones and the air nodes
that hold the state of the zone air.
"""


class Node:
    """ An object to hold the state of the air at a point in the system """

    def __init__(self, name, temp=20.0, hum_rat=0.008):
        """ Construct a Node object

        Arguments:
        name    -- name of the node
        temp    -- air temperature, in deg C
        hum_rat -- humidity ratio, in kg water / kg dry air
        """
        self.name = name
        self.temp = temp
        self.hum_rat = hum_rat


class Zone:
    """ An object to represent a thermal zone """

    def __init__(self, name, node, area=0.0, volume=0.0, multiplier=1):
        """ Construct a Zone object

        Arguments:
        name       -- unique name of the zone
        node       -- handle of the zone air node
        area       -- useful floor area of the zone, in m2
        volume     -- total volume of the zone, in m3
        multiplier -- number of identical zones represented by this zone
        """
        self.name = name
        self.node = node
        self.area = area
        self.volume = volume
        self.multiplier = multiplier
