#!/usr/bin/env python3

"""
This module provides the high-level control flow for the heat balance data
core: it reads the input, builds the tables of the model in a fixed order,
checks them, and steps through the simulation period updating the components
that change every timestep.
"""

# Local imports
from heatbal.simulation_time import SimulationTime
from heatbal.options import HeatBalanceOptions
from heatbal.model import Model
from heatbal.controls.schedule import expand_schedule, ScheduleValues
from heatbal.construction.material import \
    Material, MaterialGroup, Roughness, GasType, display_roughness
from heatbal.construction.blind import \
    Blind, BlindOrientation, SlatAngleType, ensure_variable_slat_blind
from heatbal.construction.screen import \
    ScreenProperties, ScreenBeamReflectanceModel, SurfaceScreen, \
    compute_screen_for_surface, compute_screen_diffuse_properties
from heatbal.construction.construction import \
    Construction, validate_construction, reverse_construction
from heatbal.space_heat_demand.zone import Zone, Node
from heatbal.space_heat_demand.surface import \
    Surface, SurfaceClass, BoundaryCondition, nominal_u_with_films
from heatbal.space_heat_demand.internal_gains import \
    InternalGain, GainType, validate_internal_gain
from heatbal.zone_equipment.sizing import ZoneSizing, ZoneEquipmentList
from heatbal.zone_equipment.baseboard_electric import ElectricBaseboards, EQUIP_TYPE


class Project:
    """ An object to represent the overall model to be simulated """

    def __init__(self, proj_dict, display_extra_warnings=False):
        """ Construct a Project object and the various components of the model

        Arguments:
        proj_dict              -- dictionary of project data, containing nested
                                  dictionaries and lists of input data
        display_extra_warnings -- flag to report warnings that are not shown
                                  by default (overrides the input option if True)

        The tables of the model are built in this order: options, simulation
        time, schedules, materials (with blinds and screens), constructions,
        zones, surfaces, internal gains, zone sizing, zone equipment lists
        and zone equipment. All constructions are checked before the surfaces
        are built, as surfaces may add reversed constructions and variable-slat
        blinds. If any severe error is found, the program stops once all the
        input has been read.

        Other (self.__) variables:
        simtime             -- SimulationTime object for this Project
        model               -- Model object holding all the tables
        screened_surfaces   -- list of handles of windows with screens
        baseboards          -- ElectricBaseboards object
        baseboard_units     -- list of (zone handle, baseboard name) tuples, from
                               the zone equipment lists
        heating_demand      -- dictionary of heating load lists (one entry per
                               hour) with zone handles as keys
        solar_direction     -- list of solar direction cosines (one entry per hour)
        """
        self.__simtime = SimulationTime(
            proj_dict['SimulationTime']['start'],
            proj_dict['SimulationTime']['end'],
            proj_dict['SimulationTime']['step'],
            )

        options = HeatBalanceOptions.from_dict(proj_dict.get('HeatBalanceOptions', {}))
        if display_extra_warnings:
            options.display_extra_warnings = True

        self.__model = Model(self.__simtime, options)
        model = self.__model
        diagnostics = model.diagnostics

        for name, data in proj_dict.get('Schedule', {}).items():
            model.schedules.add(
                ScheduleValues(
                    name,
                    expand_schedule(float, data['schedule']),
                    self.__simtime,
                    data.get('start_day', 0),
                    data.get('time_series_step', 1),
                    )
                )

        def schedule_idx(object_type, object_name, schedule_name):
            """ Return index of named schedule, or always-on schedule if name is blank """
            if schedule_name is None or schedule_name.strip() == '':
                return model.schedules.ALWAYS_ON
            idx = model.schedules.index(schedule_name)
            if idx is None:
                diagnostics.severe(
                    object_type + '="' + object_name + '", Schedule Name="'
                        + schedule_name + '" not found.',
                    object_type=object_type, object_name=object_name,
                    )
                return model.schedules.ALWAYS_ON
            return idx

        def dict_to_blind(name, data):
            return Blind(
                name,
                data['slat_width'],
                data['slat_separation'],
                data['slat_thickness'],
                data.get('slat_angle', 45.0),
                data.get('min_slat_angle', 0.0),
                data.get('max_slat_angle', 180.0),
                BlindOrientation.from_string(data.get('slat_orientation', 'Horizontal')),
                SlatAngleType.from_string(data.get('slat_angle_type', 'Fixed')),
                data.get('slat_conductivity', 221.0),
                )

        for name, data in proj_dict.get('Blind', {}).items():
            model.add_blind(dict_to_blind(name, data))

        def dict_to_material(name, data):
            group = MaterialGroup.from_string(data['type'])

            roughness = None
            if 'roughness' in data:
                roughness = Roughness.from_string(data['roughness'])

            gases = None
            if 'gases' in data:
                gases = [
                    (GasType.from_string(gas['type']), gas['fraction'])
                    for gas in data['gases']
                    ]
            elif group == MaterialGroup.GAS and 'gas_type' in data:
                gases = [(GasType.from_string(data['gas_type']), 1.0)]

            blind = None
            if group == MaterialGroup.BLIND:
                blind_name = data.get('blind', name)
                blind = model.find_blind(blind_name)
                if blind is None:
                    diagnostics.severe(
                        'Material="' + name + '", Blind="' + blind_name + '" not found.',
                        object_type='Material', object_name=name,
                        )

            screen = None
            if group == MaterialGroup.SCREEN:
                screen = ScreenProperties(
                    data['diameter_to_spacing_ratio'],
                    data['reflect_cylinder'],
                    data.get('reflect_cylinder_vis', data['reflect_cylinder']),
                    ScreenBeamReflectanceModel.from_string(
                        data.get('beam_reflectance_accounting', 'ModelAsDiffuse')
                        ),
                    )

            return Material(
                name,
                group,
                roughness,
                data.get('thickness', 0.0),
                data.get('conductivity', 0.0),
                data.get('density', 0.0),
                data.get('specific_heat', 0.0),
                data.get('resistance', 0.0),
                data.get('absorp_thermal', 0.9),
                data.get('absorp_thermal_front'),
                data.get('absorp_thermal_back'),
                data.get('absorp_solar', 0.7),
                data.get('absorp_visible', 0.7),
                data.get('solar_diffusing', False),
                data.get('glass_spectral_data'),
                gases,
                data.get('u_factor', 0.0),
                blind,
                screen,
                )

        for name, data in proj_dict.get('Material', {}).items():
            model.add_material(dict_to_material(name, data))

        def dict_to_construction(name, data):
            layers = []
            layers_ok = True
            for layer_name in data['layers']:
                layer = model.find_material(layer_name)
                if layer is None:
                    diagnostics.severe(
                        'Construction="' + name + '", Layer="' + layer_name + '" not found.',
                        object_type='Construction', object_name=name,
                        )
                    layers_ok = False
                else:
                    layers.append(layer)
            if len(layers) == 0 and layers_ok:
                diagnostics.severe(
                    'Construction="' + name + '" has no layers.',
                    object_type='Construction', object_name=name,
                    )

            constr_type = data.get('type', 'Construction')
            constr = Construction(
                name,
                layers,
                window_type_bsdf = (constr_type == 'Construction:ComplexFenestrationState'),
                window_type_eql = (constr_type == 'Construction:WindowEquivalentLayer'),
                )
            constr.calc_nominal_resistance(model.materials)
            if not layers_ok:
                constr.valid = False
            return constr

        for name, data in proj_dict.get('Construction', {}).items():
            model.add_construction(dict_to_construction(name, data))

        for constr_id, constr in enumerate(model.constructions):
            if constr.valid:
                diagnostics.extend(validate_construction(model, constr_id))

        for name, data in proj_dict.get('Zone', {}).items():
            model.add_zone(
                Zone(
                    name,
                    None,
                    data.get('area', 0.0),
                    data.get('volume', 0.0),
                    data.get('multiplier', 1),
                    ),
                Node(name + ' Air Node', data.get('temp', 20.0), data.get('hum_rat', 0.008)),
                )

        def zone_idx(object_type, object_name, zone_name):
            idx = model.find_zone(zone_name)
            if idx is None:
                diagnostics.severe(
                    object_type + '="' + object_name + '", Zone="' + str(zone_name)
                        + '" not found.',
                    object_type=object_type, object_name=object_name,
                    )
            return idx

        self.__init_surfaces(proj_dict.get('Surface', {}), zone_idx)

        for name, data in proj_dict.get('InternalGains', {}).items():
            gain_zone = zone_idx('InternalGains', name, data['zone'])
            if 'design_level' in data:
                design_level = data['design_level']
            elif gain_zone is not None:
                # Design level per unit floor area, in W / m2
                design_level = data['design_level_per_area'] * model.zones[gain_zone].area
            else:
                design_level = 0.0
            gain_id = model.add_internal_gain(
                InternalGain(
                    name,
                    GainType.from_string(data['type']),
                    gain_zone,
                    design_level,
                    model.schedules,
                    schedule_idx('InternalGains', name, data.get('schedule')),
                    data.get('fraction_radiant', 0.0),
                    data.get('fraction_latent', 0.0),
                    data.get('fraction_lost', 0.0),
                    )
                )
            diagnostics.extend(validate_internal_gain(model, gain_id))

        if 'ZoneSizing' in proj_dict:
            for zone_name, data in proj_dict['ZoneSizing'].items():
                sizing_zone = zone_idx('ZoneSizing', zone_name, zone_name)
                if sizing_zone is not None:
                    model.zone_sizing[sizing_zone] = ZoneSizing(
                        sizing_zone,
                        data['des_heat_load'],
                        data.get('heat_sizing_factor', 1.0),
                        )
            model.zone_sizing_run_done = True

        self.__baseboard_units = []
        for name, data in proj_dict.get('ZoneEquipmentList', {}).items():
            list_zone = zone_idx('ZoneEquipmentList', name, data['zone'])
            equipment = [(item['type'], item['name']) for item in data['equipment']]
            model.zone_equipment_lists.append(ZoneEquipmentList(name, list_zone, equipment))
            for equip_type, equip_name in equipment:
                if equip_type == EQUIP_TYPE and list_zone is not None:
                    self.__baseboard_units.append((list_zone, equip_name))
        model.zone_equipment_inputs_ready = True

        self.__baseboards = ElectricBaseboards(
            model,
            [dict(data, name=name) for name, data in proj_dict.get(EQUIP_TYPE, {}).items()],
            )
        # Read now so that input errors are reported with the rest of the input
        self.__baseboards.baseboards()
        self.__baseboard_comp_index = {}

        self.__heating_demand = {}
        for zone_name, demand in proj_dict.get('ZoneHeatingDemand', {}).items():
            demand_zone = zone_idx('ZoneHeatingDemand', zone_name, zone_name)
            if demand_zone is not None:
                self.__heating_demand[demand_zone] = demand
        self.__solar_direction = proj_dict.get('SolarDirection')

        self.__zone_gains_conns = {}
        for zone in model.zones:
            self.__zone_gains_conns[zone.name] = (
                model.output_variables.connection(
                    zone.name, 'Zone Total Internal Convective Heating Rate', 'W',
                    ),
                model.output_variables.connection(
                    zone.name, 'Zone Total Internal Radiant Heating Rate', 'W',
                    ),
                )

        self.__screen_conns = {}
        for surface_id in self.__screened_surfaces:
            surface = model.surfaces[surface_id]
            self.__screen_conns[surface_id] = (
                model.output_variables.connection(
                    surface.name, 'Surface Window Screen Beam to Beam Solar Transmittance', '',
                    ),
                model.output_variables.connection(
                    surface.name, 'Surface Window Screen Beam to Diffuse Solar Transmittance', '',
                    ),
                )

        if diagnostics.errors_found():
            diagnostics.fatal(
                'Errors found during input processing.',
                'Preceding condition(s) cause termination.',
                )

    def __init_surfaces(self, surfaces_dict, zone_idx):
        """ Build the surfaces, pairing interzone partitions and adding screens and blinds """
        model = self.__model
        diagnostics = model.diagnostics
        self.__screened_surfaces = []

        def constr_idx(surface_name, constr_name):
            idx = model.find_construction(constr_name)
            if idx is None:
                diagnostics.severe(
                    'Surface="' + surface_name + '", Construction="' + constr_name
                        + '" not found.',
                    object_type='Surface', object_name=surface_name,
                    )
            return idx

        for name, data in surfaces_dict.items():
            model.add_surface(
                Surface(
                    name,
                    SurfaceClass.from_string(data['type']),
                    constr_idx(name, data['construction']),
                    zone_idx('Surface', name, data['zone']),
                    BoundaryCondition.from_string(
                        data.get('outside_boundary_condition', 'Outdoors')
                        ),
                    None,
                    data.get('azimuth', 0.0),
                    data.get('tilt', 90.0),
                    data.get('area', 0.0),
                    )
                )

        for name, data in surfaces_dict.items():
            surface_id = model.find_surface(name)
            surface = model.surfaces[surface_id]
            bc_type = data.get('outside_boundary_condition', 'Outdoors')

            if bc_type == 'Surface':
                other_name = data['outside_boundary_object']
                other_id = model.find_surface(other_name)
                if other_id is None:
                    diagnostics.severe(
                        'Surface="' + name + '", Outside Boundary Condition Object="'
                            + other_name + '" not found.',
                        object_type='Surface', object_name=name,
                        )
                    continue
                surface.other_side = other_id
                self.__check_interzone_constructions(surface_id, other_id)
            elif bc_type == 'Zone':
                adjacent_zone = zone_idx('Surface', name, data['outside_boundary_object'])
                if adjacent_zone is None:
                    continue
                self.__add_mirror_surface(surface_id, adjacent_zone)

        for name, data in surfaces_dict.items():
            surface_id = model.find_surface(name)
            surface = model.surfaces[surface_id]
            if not surface.surface_class.is_fenestration() or surface.construction is None:
                continue

            constr_ids = [surface.construction]
            slat_angle_control = 'FixedSlatAngle'
            if 'shading_control' in data:
                shaded_constr = constr_idx(name, data['shading_control']['shaded_construction'])
                if shaded_constr is not None:
                    constr_ids.append(shaded_constr)
                slat_angle_control \
                    = data['shading_control'].get('slat_angle_control', 'FixedSlatAngle')

            for constr_id in constr_ids:
                layers = model.constructions[constr_id].layers
                if not layers:
                    continue
                first_layer = model.materials[layers[0]]
                if first_layer.group == MaterialGroup.SCREEN and surface.screen is None:
                    surface.screen = model.add_surface_screen(
                        SurfaceScreen(layers[0], surface_id)
                        )
                    compute_screen_diffuse_properties(model, surface.screen)
                    self.__screened_surfaces.append(surface_id)

                if slat_angle_control == 'FixedSlatAngle':
                    continue
                for layer in layers:
                    material = model.materials[layer]
                    if material.group == MaterialGroup.BLIND and material.blind is not None:
                        surface.blind, blind_diagnostics \
                            = ensure_variable_slat_blind(model, material.blind)
                        diagnostics.extend(blind_diagnostics)

    def __check_interzone_constructions(self, surface_id, other_id):
        """ Warn if the constructions either side of a partition are not reversed copies """
        model = self.__model
        surface = model.surfaces[surface_id]
        other = model.surfaces[other_id]
        if surface.construction is None or other.construction is None:
            return
        constr = model.constructions[surface.construction]
        other_constr = model.constructions[other.construction]
        if list(reversed(constr.layers)) != other_constr.layers:
            model.diagnostics.warning(
                'Surface="' + surface.name + '", Construction="' + constr.name
                    + '" does not have the same materials in the reverse order as '
                    + 'Construction="' + other_constr.name + '" of adjacent Surface="'
                    + other.name + '".',
                object_type='Surface', object_name=surface.name, object_id=surface_id,
                )

    def __add_mirror_surface(self, surface_id, adjacent_zone):
        """ Add the other side of a partition for which only the adjacent zone was given """
        model = self.__model
        surface = model.surfaces[surface_id]

        constr_id, constr_diagnostics = reverse_construction(model, surface.construction)
        model.diagnostics.extend(constr_diagnostics)

        if surface.surface_class == SurfaceClass.FLOOR:
            mirror_class = SurfaceClass.ROOF
        elif surface.surface_class == SurfaceClass.ROOF:
            mirror_class = SurfaceClass.FLOOR
        else:
            mirror_class = surface.surface_class

        mirror = Surface(
            'iz-' + surface.name,
            mirror_class,
            constr_id,
            adjacent_zone,
            BoundaryCondition.INTERZONE,
            surface_id,
            (surface.azimuth + 180.0) % 360.0,
            180.0 - surface.tilt,
            surface.area,
            )
        surface.other_side = model.add_surface(mirror)

    def model(self):
        return self.__model

    def construction_summary(self):
        """ Return list of rows describing each construction in use or as entered

        Each row is a tuple of: name, layer names, window flag, outside
        roughness, nominal R (m2.K / W) and nominal U (W / (m2.K)).
        """
        model = self.__model
        rows = []
        for constr in model.constructions:
            rows.append((
                constr.name,
                ' | '.join(model.materials[m].name for m in constr.layers),
                constr.is_window,
                display_roughness(constr.outside_roughness),
                constr.nominal_r,
                constr.nominal_u,
                ))
        return rows

    def surface_summary(self):
        """ Return list of rows giving the nominal U-value with films of each surface """
        model = self.__model
        rows = []
        for surface_id, surface in enumerate(model.surfaces):
            u_value, valid = nominal_u_with_films(model, surface_id)
            rows.append((
                surface.name,
                surface.surface_class.name,
                model.constructions[surface.construction].name,
                u_value,
                valid,
                ))
        return rows

    def run(self):
        """ Run the simulation

        Returns list of timestep start times and the OutputVariables object
        holding the results of each report variable.
        """
        model = self.__model
        timestep_array = []

        for t_idx, t_current, delta_t_h in self.__simtime:
            timestep_array.append(t_current)
            model.begin_environment = (t_idx == 0)
            hour_idx = self.__simtime.time_series_idx(0, 1)

            if self.__solar_direction is not None:
                model.solar_cos = tuple(self.__solar_direction[hour_idx])

            for surface_id in self.__screened_surfaces:
                screen = compute_screen_for_surface(model, surface_id)
                trans_conn, dif_trans_conn = self.__screen_conns[surface_id]
                trans_conn.record(screen.bm_bm_trans)
                dif_trans_conn.record(screen.bm_dif_trans)

            gains_convective = [0.0] * len(model.zones)
            gains_radiant = [0.0] * len(model.zones)
            for gain in model.internal_gains:
                gains_convective[gain.zone] += gain.convective_gain()
                gains_radiant[gain.zone] += gain.radiant_gain()
            for zone_id, zone in enumerate(model.zones):
                convective_conn, radiant_conn = self.__zone_gains_conns[zone.name]
                convective_conn.record(gains_convective[zone_id])
                radiant_conn.record(gains_radiant[zone_id])

            for zone_id in range(len(model.zones)):
                if zone_id in self.__heating_demand:
                    model.zone_heating_demand[zone_id] = self.__heating_demand[zone_id][hour_idx]
                else:
                    model.zone_heating_demand[zone_id] = 0.0

            for zone_id, equip_name in self.__baseboard_units:
                power_met, self.__baseboard_comp_index[equip_name] \
                    = self.__baseboards.simulate(
                        equip_name,
                        zone_id,
                        zone_id,
                        self.__baseboard_comp_index.get(equip_name),
                        )
                # Load left for the next unit serving the same zone
                model.zone_heating_demand[zone_id] -= power_met

        return timestep_array, model.output_variables
