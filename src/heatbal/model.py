#!/usr/bin/env python3

"""
This module provides the Model object, which owns all the tables of the heat
balance (materials, blinds, constructions, zones, surfaces etc.).

Objects in the tables refer to each other by handle, which is the index of
the object in its table. A handle of None means "no object". Objects are
only ever appended to the tables, so handles stay valid for the whole run.
"""

# Standard library imports
import sys

# Local imports
from heatbal.controls.schedule import ScheduleRegistry
from heatbal.diagnostics import Diagnostics
from heatbal.options import HeatBalanceOptions
from heatbal.output.report_variables import OutputVariables, SizingReport


class Model:
    """ An object to hold all the tables of the heat balance """

    def __init__(self, simulation_time, options=None):
        """ Construct a Model object

        Arguments:
        simulation_time -- reference to SimulationTime object
        options         -- HeatBalanceOptions (defaults are used if not given)

        Other variables:
        solar_cos                   -- direction cosines of the sun (east, north, up)
        zone_heating_demand         -- heating load of each zone for the current
                                       timestep, in W, indexed by zone handle
        zone_sizing                 -- dictionary of ZoneSizing objects, keyed by zone handle
        zone_sizing_run_done        -- True if zone design loads are available
        sizing_calc_in_progress     -- True while equipment sizes are being calculated
        begin_environment           -- True on the first timestep of a run period
        zone_equipment_inputs_ready -- True once the zone equipment lists have been read
        """
        self.simulation_time = simulation_time
        if options is None:
            options = HeatBalanceOptions()
        self.options = options

        self.materials = []
        self.blinds = []
        self.constructions = []
        self.nodes = []
        self.zones = []
        self.surfaces = []
        self.surface_screens = []
        self.internal_gains = []
        self.zone_equipment_lists = []

        self.schedules = ScheduleRegistry()
        self.diagnostics = Diagnostics()
        self.output_variables = OutputVariables(simulation_time)
        self.sizing_report = SizingReport()

        self.solar_cos = (0.0, 0.0, 1.0)
        self.zone_heating_demand = []
        self.zone_sizing = {}
        self.zone_sizing_run_done = False
        self.sizing_calc_in_progress = False
        self.begin_environment = True
        self.zone_equipment_inputs_ready = False

        self.__index_by_name = {
            'materials': {},
            'blinds': {},
            'constructions': {},
            'zones': {},
            'surfaces': {},
            }

    def __add(self, table_name, obj):
        """ Append an object to a named table and return its handle """
        index = self.__index_by_name[table_name]
        if obj.name.upper() in index:
            sys.exit('Error: Name already used in ' + table_name + ': ' + obj.name)
        table = getattr(self, table_name)
        table.append(obj)
        handle = len(table) - 1
        index[obj.name.upper()] = handle
        return handle

    def __find(self, table_name, name):
        return self.__index_by_name[table_name].get(name.upper())

    def add_material(self, material):
        return self.__add('materials', material)

    def find_material(self, name):
        """ Return handle of the named material, or None if there is no such material """
        return self.__find('materials', name)

    def add_blind(self, blind):
        return self.__add('blinds', blind)

    def find_blind(self, name):
        return self.__find('blinds', name)

    def add_construction(self, construction):
        return self.__add('constructions', construction)

    def find_construction(self, name):
        return self.__find('constructions', name)

    def add_zone(self, zone, node):
        """ Add a zone and its air node, and return the zone handle """
        self.nodes.append(node)
        zone.node = len(self.nodes) - 1
        self.zone_heating_demand.append(0.0)
        return self.__add('zones', zone)

    def find_zone(self, name):
        return self.__find('zones', name)

    def add_surface(self, surface):
        return self.__add('surfaces', surface)

    def find_surface(self, name):
        return self.__find('surfaces', name)

    def add_surface_screen(self, surface_screen):
        self.surface_screens.append(surface_screen)
        return len(self.surface_screens) - 1

    def add_internal_gain(self, gain):
        self.internal_gains.append(gain)
        return len(self.internal_gains) - 1

    def zone_equipment_list_contains(self, equip_type, equip_name):
        """ Return True if the equipment appears on the equipment list of any zone """
        return any(
            equip_list.contains(equip_type, equip_name)
            for equip_list in self.zone_equipment_lists
            )
