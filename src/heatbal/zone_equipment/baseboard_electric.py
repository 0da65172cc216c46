#!/usr/bin/env python3

"""
This module provides objects to represent electric convective baseboard
heaters. The heat output of a baseboard is all convective: it meets the
zone heating load, up to its nominal capacity, whenever its availability
schedule is on.
"""

# Local imports
from heatbal.diagnostics import Diagnostics
from heatbal.output.report_variables import Aggregation
from heatbal.psychrometrics import cp_air_fn_w_tdb
from heatbal.zone_equipment.sizing import AUTOSIZE, is_autosize

EQUIP_TYPE = 'ZoneHVAC:Baseboard:Convective:Electric'

# Nominal air mass flow rate through the baseboard, in kg / s. This only
# determines the outlet air temperature, which is reported but does not
# affect the heat delivered.
SIMPLE_CONV_AIR_FLOW = 0.5
# Loads smaller than this are not met, in W
SMALL_LOAD = 1.0


class ElectricBaseboard:
    """ An object to represent a single electric convective baseboard heater """

    def __init__(self, name, schedule_name, schedule_idx, nominal_capacity, efficiency):
        """ Construct an ElectricBaseboard object

        Arguments:
        name             -- unique name of the baseboard
        schedule_name    -- name of the availability schedule (blank for always on)
        schedule_idx     -- index of the availability schedule
        nominal_capacity -- maximum heat output, in W, or AUTOSIZE
        efficiency       -- ratio of heat output to electricity use

        Other variables (updated each timestep):
        air_inlet_temp    -- temperature of the zone air entering the baseboard, in deg C
        air_inlet_hum_rat -- humidity ratio of the zone air, in kg / kg
        air_outlet_temp   -- temperature of the air leaving the baseboard, in deg C
        power             -- heat output, in W
        energy            -- heat output over the timestep, in J
        elec_use_rate     -- electricity use, in W
        elec_use_load     -- electricity use over the timestep, in J
        """
        self.name = name
        self.equip_type = EQUIP_TYPE
        self.schedule_name = schedule_name
        self.schedule_idx = schedule_idx
        self.nominal_capacity = nominal_capacity
        self.efficiency = efficiency

        self.air_inlet_temp = 0.0
        self.air_inlet_hum_rat = 0.0
        self.air_outlet_temp = 0.0
        self.power = 0.0
        self.energy = 0.0
        self.elec_use_rate = 0.0
        self.elec_use_load = 0.0

        self.zone = None
        self.size_needed = True
        self.envrn_init_needed = True
        self.check_equip_name = True
        self.report_conns = {}


class ElectricBaseboards:
    """ An object to simulate all the electric baseboards in the model

    The baseboards are read from the input on the first call to simulate().
    Callers keep the index returned by simulate() and pass it back on later
    calls, so that the baseboard does not have to be looked up by name every
    timestep.
    """

    def __init__(self, model, baseboards_input):
        """ Construct an ElectricBaseboards object

        Arguments:
        model            -- reference to the Model holding the zones, nodes,
                            schedules, zone sizing data and reports
        baseboards_input -- list of dictionaries, one per baseboard
        """
        self.__model = model
        self.__input = baseboards_input
        self.__baseboards = None
        self.__zone_equip_list_checked = False

    def baseboards(self):
        """ Return list of the baseboards, reading them from the input if needed """
        if self.__baseboards is None:
            self.__get_input()
        return self.__baseboards

    def find(self, name):
        """ Return index of the named baseboard, or None if there is no such baseboard """
        for idx, baseboard in enumerate(self.baseboards()):
            if baseboard.name.upper() == name.upper():
                return idx
        return None

    def simulate(self, equip_name, zone_id, controlled_zone_id, comp_index):
        """ Simulate the named baseboard for the current timestep

        Arguments:
        equip_name         -- name of the baseboard
        zone_id            -- handle of the zone the baseboard is in
        controlled_zone_id -- handle of the zone whose heating load is to be met
        comp_index         -- index of the baseboard returned by a previous
                              call, or None on the first call

        Returns the heat output of the baseboard, in W, and its index.
        """
        model = self.__model
        baseboards = self.baseboards()

        if comp_index is None:
            bb_idx = self.find(equip_name)
            if bb_idx is None:
                model.diagnostics.fatal('SimElectricBaseboard: Unit not found=' + equip_name)
        else:
            bb_idx = comp_index
            if not 0 <= bb_idx < len(baseboards):
                model.diagnostics.fatal(
                    'SimElectricBaseboard:  Invalid CompIndex passed=' + str(bb_idx)
                    + ', Number of Units=' + str(len(baseboards))
                    + ', Entered Unit name=' + equip_name
                    )
            if baseboards[bb_idx].check_equip_name \
            and baseboards[bb_idx].name.upper() != equip_name.upper():
                model.diagnostics.fatal(
                    'SimElectricBaseboard: Invalid CompIndex passed=' + str(bb_idx)
                    + ', Unit name=' + equip_name
                    + ', stored Unit Name for that index=' + baseboards[bb_idx].name
                    )
        baseboard = baseboards[bb_idx]
        baseboard.check_equip_name = False

        self.__init_baseboard(baseboard, zone_id, controlled_zone_id)
        self.__calc_baseboard(baseboard, controlled_zone_id)
        self.__report_baseboard(baseboard)

        return baseboard.power, bb_idx

    def __get_input(self):
        """ Read the baseboards from the input and register their report variables """
        model = self.__model
        diagnostics = Diagnostics()
        self.__baseboards = []
        names_used = set()

        for item in self.__input:
            name = item.get('name', '').strip()
            if name == '':
                diagnostics.severe(
                    EQUIP_TYPE + ': Name cannot be blank.',
                    object_type=EQUIP_TYPE, object_name=name,
                    )
                continue
            if name.upper() in names_used:
                diagnostics.severe(
                    EQUIP_TYPE + '="' + name + '", Duplicate name.',
                    object_type=EQUIP_TYPE, object_name=name,
                    )
                continue
            names_used.add(name.upper())

            schedule_name = item.get('availability_schedule', '').strip()
            if schedule_name == '':
                schedule_idx = model.schedules.ALWAYS_ON
            else:
                schedule_idx = model.schedules.index(schedule_name)
                if schedule_idx is None:
                    diagnostics.severe(
                        EQUIP_TYPE + '="' + name
                            + '" invalid Availability Schedule Name entered ="'
                            + schedule_name + '" not found.',
                        object_type=EQUIP_TYPE, object_name=name,
                        )

            nominal_capacity = item.get('nominal_capacity', AUTOSIZE)
            if isinstance(nominal_capacity, str):
                if nominal_capacity.lower() == 'autosize':
                    nominal_capacity = AUTOSIZE
                else:
                    diagnostics.severe(
                        EQUIP_TYPE + '="' + name + '" invalid Nominal Capacity="'
                            + nominal_capacity + '".',
                        object_type=EQUIP_TYPE, object_name=name,
                        )
                    nominal_capacity = 0.0
            elif not is_autosize(nominal_capacity) and nominal_capacity < 0.0:
                diagnostics.severe(
                    EQUIP_TYPE + '="' + name + '" Nominal Capacity must not be negative.',
                    object_type=EQUIP_TYPE, object_name=name,
                    )

            efficiency = item.get('efficiency', 1.0)
            if efficiency <= 0.0:
                diagnostics.severe(
                    EQUIP_TYPE + '="' + name + '" Efficiency must be greater than 0.',
                    object_type=EQUIP_TYPE, object_name=name,
                    )

            self.__baseboards.append(
                ElectricBaseboard(name, schedule_name, schedule_idx, nominal_capacity, efficiency)
                )

        model.diagnostics.extend(diagnostics)
        if diagnostics.errors_found():
            model.diagnostics.fatal(
                'GetBaseboardInput: Errors found in getting input.',
                'Preceding condition(s) cause termination.',
                )

        for baseboard in self.__baseboards:
            for variable_name, units_str, aggregation in (
                    ('Baseboard Total Heating Energy', 'J', Aggregation.SUM),
                    ('Baseboard Total Heating Rate', 'W', Aggregation.AVERAGE),
                    ('Baseboard Electric Energy', 'J', Aggregation.SUM),
                    ('Baseboard Electric Power', 'W', Aggregation.AVERAGE),
                    ):
                baseboard.report_conns[variable_name] = model.output_variables.connection(
                    baseboard.name, variable_name, units_str, aggregation,
                    )

    def __init_baseboard(self, baseboard, zone_id, controlled_zone_id):
        """ Initialise the baseboard for the current timestep, sizing it if needed """
        model = self.__model

        if not self.__zone_equip_list_checked and model.zone_equipment_inputs_ready:
            self.__zone_equip_list_checked = True
            for bb in self.__baseboards:
                if not model.zone_equipment_list_contains(bb.equip_type, bb.name):
                    model.diagnostics.severe(
                        'InitBaseboard: Unit=[' + bb.equip_type + ',' + bb.name
                            + '] is not on any ZoneHVAC:EquipmentList.  '
                            + 'It will not be simulated.',
                        object_type=bb.equip_type, object_name=bb.name,
                        )

        if not model.sizing_calc_in_progress and baseboard.size_needed:
            self.__size_baseboard(baseboard, controlled_zone_id)
            baseboard.size_needed = False

        baseboard.zone = zone_id
        node = model.nodes[model.zones[zone_id].node]

        if model.begin_environment and baseboard.envrn_init_needed:
            baseboard.air_outlet_temp = 0.0
            baseboard.envrn_init_needed = False
        if not model.begin_environment:
            baseboard.envrn_init_needed = True

        baseboard.air_inlet_temp = node.temp
        baseboard.air_inlet_hum_rat = node.hum_rat
        baseboard.power = 0.0
        baseboard.energy = 0.0
        baseboard.elec_use_rate = 0.0
        baseboard.elec_use_load = 0.0

    def __size_baseboard(self, baseboard, controlled_zone_id):
        """ Calculate the nominal capacity of an autosized baseboard

        For a baseboard with a capacity entered by the user, the design
        capacity is reported alongside it when zone sizing data is available.
        """
        model = self.__model
        report = model.sizing_report
        autosized = is_autosize(baseboard.nominal_capacity)
        zone_sizing = model.zone_sizing.get(controlled_zone_id)

        if not autosized and not model.zone_sizing_run_done:
            if baseboard.nominal_capacity > 0.0:
                report.report(
                    baseboard.equip_type, baseboard.name,
                    'User-Specified Nominal Capacity [W]', baseboard.nominal_capacity,
                    )
            return

        if zone_sizing is None:
            model.diagnostics.fatal(
                'For autosizing of ' + baseboard.equip_type + ' ' + baseboard.name
                    + ', a zone sizing run must be done.',
                'No zone sizing data was found for zone '
                    + model.zones[controlled_zone_id].name + '.',
                object_type=baseboard.equip_type, object_name=baseboard.name,
                )

        nominal_capacity_des = zone_sizing.des_heat_load * zone_sizing.heat_sizing_factor

        if autosized:
            baseboard.nominal_capacity = nominal_capacity_des
            report.report(
                baseboard.equip_type, baseboard.name,
                'Design Size Nominal Capacity [W]', nominal_capacity_des,
                )
        elif baseboard.nominal_capacity > 0.0 and nominal_capacity_des > 0.0:
            nominal_capacity_user = baseboard.nominal_capacity
            report.report(
                baseboard.equip_type, baseboard.name,
                'Design Size Nominal Capacity [W]', nominal_capacity_des,
                )
            report.report(
                baseboard.equip_type, baseboard.name,
                'User-Specified Nominal Capacity [W]', nominal_capacity_user,
                )
            if model.options.display_extra_warnings \
            and abs(nominal_capacity_des - nominal_capacity_user) / nominal_capacity_user \
                > model.options.auto_vs_hard_sizing_threshold:
                model.diagnostics.warning(
                    'SizeElectricBaseboard: Potential issue with equipment sizing for '
                        + baseboard.equip_type + ' ' + baseboard.name,
                    'User-Specified Nominal Capacity of '
                        + '{:.2f}'.format(nominal_capacity_user) + ' [W]',
                    'differs from Design Size Nominal Capacity of '
                        + '{:.2f}'.format(nominal_capacity_des) + ' [W]',
                    'This may, or may not, indicate mismatched component sizes.',
                    'Verify that the value entered is intended and is consistent '
                        + 'with other components.',
                    object_type=baseboard.equip_type, object_name=baseboard.name,
                    )

    def __calc_baseboard(self, baseboard, controlled_zone_id):
        """ Calculate heat output and electricity use to meet the zone heating load """
        model = self.__model
        load = model.zone_heating_demand[controlled_zone_id]
        cp_air = cp_air_fn_w_tdb(baseboard.air_inlet_hum_rat, baseboard.air_inlet_temp)

        if model.schedules.value(baseboard.schedule_idx) > 0.0 and load >= SMALL_LOAD:
            heat_output = min(load, baseboard.nominal_capacity)
            baseboard.air_outlet_temp = baseboard.air_inlet_temp \
                                      + heat_output / (cp_air * SIMPLE_CONV_AIR_FLOW)
            baseboard.elec_use_rate = heat_output / baseboard.efficiency
        else:
            heat_output = 0.0
            baseboard.air_outlet_temp = baseboard.air_inlet_temp
            baseboard.elec_use_rate = 0.0

        baseboard.power = heat_output

    def __report_baseboard(self, baseboard):
        timestep_seconds = self.__model.simulation_time.timestep_seconds()
        baseboard.energy = baseboard.power * timestep_seconds
        baseboard.elec_use_load = baseboard.elec_use_rate * timestep_seconds

        baseboard.report_conns['Baseboard Total Heating Energy'].record(baseboard.energy)
        baseboard.report_conns['Baseboard Total Heating Rate'].record(baseboard.power)
        baseboard.report_conns['Baseboard Electric Energy'].record(baseboard.elec_use_load)
        baseboard.report_conns['Baseboard Electric Power'].record(baseboard.elec_use_rate)
