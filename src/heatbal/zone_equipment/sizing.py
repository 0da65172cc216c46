#!/usr/bin/env python3

"""
This module provides the zone design data used to size zone equipment, and
the lists of equipment serving each zone.
"""

# Value entered in place of a number to request that it is calculated from
# the zone design load
AUTOSIZE = -99999.0


def is_autosize(value):
    return value == AUTOSIZE


class ZoneSizing:
    """ An object to hold the design heating data of a zone """

    def __init__(self, zone, des_heat_load, heat_sizing_factor=1.0):
        """ Construct a ZoneSizing object

        Arguments:
        zone               -- handle of the zone
        des_heat_load      -- design heating load of the zone, in W
        heat_sizing_factor -- factor applied to the design load when sizing
                              heating equipment
        """
        self.zone = zone
        self.des_heat_load = des_heat_load
        self.heat_sizing_factor = heat_sizing_factor


class ZoneEquipmentList:
    """ An object to represent the list of equipment serving a zone """

    def __init__(self, name, zone, equipment):
        """ Construct a ZoneEquipmentList object

        Arguments:
        name      -- name of the list
        zone      -- handle of the zone served
        equipment -- list of (equipment type, equipment name) tuples
        """
        self.name = name
        self.zone = zone
        self.equipment = list(equipment)

    def contains(self, equip_type, equip_name):
        """ Return True if the named equipment of the given type is on the list """
        for list_type, list_name in self.equipment:
            if list_type.upper() == equip_type.upper() \
            and list_name.upper() == equip_name.upper():
                return True
        return False
