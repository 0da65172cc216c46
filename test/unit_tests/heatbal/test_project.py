#!/usr/bin/env python3

"""
This module contains unit tests for the project module, building a complete
model from input data and running it
"""

# Standard library imports
import unittest
from copy import deepcopy

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from heatbal.project import Project
from heatbal.space_heat_demand.surface import \
    SurfaceClass, BoundaryCondition, R_FILM_ROOF, R_FILM_FLOOR
from heatbal.zone_equipment.baseboard_electric import EQUIP_TYPE

PROJECT_DICT = {
    'SimulationTime': {'start': 0, 'end': 3, 'step': 1},
    'Schedule': {
        'Occupancy': {'schedule': {'main': [0.0, 1.0, 0.5]}},
        },
    'Blind': {
        'Venetian': {'slat_width': 0.025, 'slat_separation': 0.02, 'slat_thickness': 0.001},
        },
    'Material': {
        'Brick': {
            'type': 'Material', 'roughness': 'Rough', 'thickness': 0.1, 'conductivity': 0.5,
            },
        'Insulation': {
            'type': 'Material', 'roughness': 'MediumRough',
            'thickness': 0.1, 'conductivity': 0.04,
            },
        'Plasterboard': {'type': 'Material:NoMass', 'roughness': 'Smooth', 'resistance': 0.06},
        'Clear glass': {
            'type': 'WindowMaterial:Glazing', 'thickness': 0.003, 'conductivity': 0.9,
            'absorp_thermal': 0.84,
            },
        'Air 12': {
            'type': 'WindowMaterial:Gas', 'gas_type': 'Air',
            'thickness': 0.012, 'conductivity': 0.024,
            },
        'Insect screen': {
            'type': 'WindowMaterial:Screen', 'thickness': 0.001, 'conductivity': 221.0,
            'diameter_to_spacing_ratio': 0.2, 'reflect_cylinder': 0.5,
            },
        'Venetian': {'type': 'WindowMaterial:Blind'},
        },
    'Construction': {
        'External wall': {'layers': ['Brick', 'Insulation', 'Plasterboard']},
        'Ceiling construction': {'layers': ['Plasterboard', 'Insulation']},
        'Screened window': {'layers': ['Insect screen', 'Clear glass', 'Air 12', 'Clear glass']},
        'Blind window': {'layers': ['Clear glass', 'Air 12', 'Clear glass', 'Venetian']},
        },
    'Zone': {
        'Living': {'area': 40.0, 'volume': 100.0},
        'Loft': {'area': 40.0, 'volume': 40.0},
        },
    'Surface': {
        'South wall': {
            'type': 'Wall', 'construction': 'External wall', 'zone': 'Living',
            'azimuth': 180.0, 'tilt': 90.0, 'area': 10.0,
            },
        'South window': {
            'type': 'Window', 'construction': 'Screened window', 'zone': 'Living',
            'azimuth': 180.0, 'tilt': 90.0, 'area': 2.0,
            'shading_control': {
                'shaded_construction': 'Blind window',
                'slat_angle_control': 'ScheduledSlatAngle',
                },
            },
        'Ceiling': {
            'type': 'Ceiling', 'construction': 'Ceiling construction', 'zone': 'Living',
            'outside_boundary_condition': 'Zone', 'outside_boundary_object': 'Loft',
            'azimuth': 0.0, 'tilt': 0.0, 'area': 40.0,
            },
        'Living wall': {
            'type': 'Wall', 'construction': 'External wall', 'zone': 'Living',
            'outside_boundary_condition': 'Surface', 'outside_boundary_object': 'Loft wall',
            },
        'Loft wall': {
            'type': 'Wall', 'construction': 'External wall', 'zone': 'Loft',
            'outside_boundary_condition': 'Surface', 'outside_boundary_object': 'Living wall',
            },
        },
    'InternalGains': {
        'Lights': {
            'type': 'Lights', 'zone': 'Living', 'design_level_per_area': 5.0,
            'schedule': 'Occupancy', 'fraction_radiant': 0.5,
            },
        },
    'ZoneSizing': {
        'Living': {'des_heat_load': 2000.0},
        },
    'ZoneEquipmentList': {
        'Living equipment': {
            'zone': 'Living',
            'equipment': [{'type': EQUIP_TYPE, 'name': 'Living baseboard'}],
            },
        },
    EQUIP_TYPE: {
        'Living baseboard': {'nominal_capacity': 'autosize', 'efficiency': 1.0},
        },
    'ZoneHeatingDemand': {
        'Living': [500.0, 2500.0, 0.0],
        },
    'SolarDirection': [
        [0.0, -1.0, 0.0],
        [0.0, -0.7071068, 0.7071068],
        [0.0, 1.0, 0.0],
        ],
    }


class TestProject(unittest.TestCase):
    """ Unit tests for Project class """

    def setUp(self):
        """ Create Project object to be tested """
        self.project = Project(deepcopy(PROJECT_DICT))
        self.model = self.project.model()

    def test_tables(self):
        model = self.model
        self.assertEqual(len(model.constructions), 5)
        self.assertEqual(len(model.surfaces), 6)
        self.assertFalse(model.diagnostics.errors_found())
        # Two slat angle clamps and two mismatched interzone constructions
        self.assertEqual(len(model.diagnostics.warnings()), 4)
        self.assertTrue(model.zone_sizing_run_done)
        self.assertEqual(model.internal_gains[0].design_level, 200.0)

    def test_mirror_surface(self):
        """ Test that the other side of a partition given only a zone is created """
        model = self.model
        ceiling_id = model.find_surface('Ceiling')
        mirror_id = model.find_surface('iz-Ceiling')
        ceiling = model.surfaces[ceiling_id]
        mirror = model.surfaces[mirror_id]

        self.assertEqual(ceiling.other_side, mirror_id)
        self.assertEqual(mirror.other_side, ceiling_id)
        self.assertEqual(mirror.surface_class, SurfaceClass.FLOOR)
        self.assertEqual(mirror.boundary_condition, BoundaryCondition.INTERZONE)
        self.assertEqual(mirror.zone, model.find_zone('Loft'))
        self.assertEqual(mirror.tilt, 180.0)
        self.assertEqual(mirror.azimuth, 180.0)

        mirror_constr = model.constructions[mirror.construction]
        self.assertEqual(mirror_constr.name, 'iz-Ceiling construction')
        self.assertEqual(
            [model.materials[m].name for m in mirror_constr.layers],
            ['Insulation', 'Plasterboard'],
            )
        self.assertEqual(
            mirror_constr.nominal_r, model.constructions[ceiling.construction].nominal_r,
            )

    def test_paired_surfaces(self):
        model = self.model
        living_wall = model.find_surface('Living wall')
        loft_wall = model.find_surface('Loft wall')
        self.assertEqual(model.surfaces[living_wall].other_side, loft_wall)
        self.assertEqual(model.surfaces[loft_wall].other_side, living_wall)
        self.assertEqual(len(model.diagnostics.for_object('Surface', living_wall)), 1)

    def test_window_shading(self):
        model = self.model
        window = model.surfaces[model.find_surface('South window')]
        self.assertIsNotNone(window.screen)
        screen = model.surface_screens[window.screen]
        self.assertGreater(screen.dif_dif_trans, 0.0)
        self.assertEqual(model.blinds[window.blind].name, '~Venetian')

    def test_construction_summary(self):
        rows = {row[0]: row for row in self.project.construction_summary()}
        name, layers, is_window, roughness, nominal_r, nominal_u = rows['External wall']
        self.assertEqual(layers, 'Brick | Insulation | Plasterboard')
        self.assertFalse(is_window)
        self.assertEqual(roughness, 'Rough')
        self.assertAlmostEqual(nominal_r, 2.76)
        self.assertAlmostEqual(nominal_u, 1.0 / 2.76)
        self.assertTrue(rows['Screened window'][2])

    def test_surface_summary(self):
        rows = {row[0]: row for row in self.project.surface_summary()}
        self.assertEqual(rows['Ceiling'][1], 'ROOF')
        self.assertAlmostEqual(rows['Ceiling'][3], 1.0 / (R_FILM_ROOF + 2.56 + R_FILM_FLOOR))
        self.assertTrue(rows['Ceiling'][4])
        self.assertFalse(rows['South window'][4])

    def test_run(self):
        """ Test the results of running the model """
        timestep_array, output_variables = self.project.run()
        self.assertEqual(timestep_array, [0, 1, 2])

        power = output_variables.results('Living baseboard', 'Baseboard Total Heating Rate')
        for t_idx, expected in enumerate([500.0, 2000.0, 0.0]):
            with self.subTest(i=t_idx):
                self.assertAlmostEqual(power[t_idx], expected, msg="incorrect baseboard output")

        convective = output_variables.results(
            'Living', 'Zone Total Internal Convective Heating Rate',
            )
        self.assertEqual(list(convective), [0.0, 100.0, 50.0])

        screen_trans = output_variables.results(
            'South window', 'Surface Window Screen Beam to Beam Solar Transmittance',
            )
        self.assertAlmostEqual(screen_trans[0], 0.64)
        self.assertGreater(screen_trans[1], 0.0)
        self.assertLess(screen_trans[1], 0.64)
        self.assertEqual(screen_trans[2], 0.0)

        self.assertEqual(
            self.model.sizing_report.rows(),
            [(EQUIP_TYPE, 'Living baseboard', 'Design Size Nominal Capacity [W]', 2000.0)],
            )

    def test_extra_warnings_flag(self):
        project = Project(deepcopy(PROJECT_DICT), display_extra_warnings=True)
        self.assertTrue(project.model().options.display_extra_warnings)


class TestProjectErrors(unittest.TestCase):
    """ Unit tests for input errors found when building the model """

    def test_missing_layer(self):
        proj_dict = deepcopy(PROJECT_DICT)
        proj_dict['Construction']['External wall']['layers'].append('Render')
        with self.assertRaises(SystemExit):
            Project(proj_dict)

    def test_invalid_window(self):
        proj_dict = deepcopy(PROJECT_DICT)
        proj_dict['Construction']['Screened window']['layers'] \
            = ['Clear glass', 'Air 12', 'Clear glass', 'Insect screen']
        with self.assertRaises(SystemExit):
            Project(proj_dict)

    def test_missing_zone(self):
        proj_dict = deepcopy(PROJECT_DICT)
        proj_dict['InternalGains']['Lights']['zone'] = 'Kitchen'
        with self.assertRaises(SystemExit):
            Project(proj_dict)


if __name__ == '__main__':
    unittest.main()
