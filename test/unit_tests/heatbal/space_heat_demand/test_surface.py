#!/usr/bin/env python3

"""
This module contains unit tests for the surface module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from heatbal.simulation_time import SimulationTime
from heatbal.model import Model
from heatbal.construction.material import Material, MaterialGroup
from heatbal.construction.construction import Construction
from heatbal.space_heat_demand.surface import \
    Surface, SurfaceClass, BoundaryCondition, nominal_u_with_films, \
    R_FILM_WALL, R_FILM_FLOOR, R_FILM_ROOF, \
    R_FILM_OUTSIDE_EXTERNAL, R_FILM_OUTSIDE_SEMI_EXTERIOR


class TestSurfaceClass(unittest.TestCase):
    """ Unit tests for surface enumerations """

    def test_from_string(self):
        self.assertEqual(SurfaceClass.from_string('Ceiling'), SurfaceClass.ROOF)
        self.assertEqual(SurfaceClass.from_string('GlassDoor'), SurfaceClass.GLASS_DOOR)
        with self.assertRaises(SystemExit):
            SurfaceClass.from_string('Skylight')

    def test_is_fenestration(self):
        self.assertTrue(SurfaceClass.WINDOW.is_fenestration())
        self.assertTrue(SurfaceClass.GLASS_DOOR.is_fenestration())
        self.assertFalse(SurfaceClass.DOOR.is_fenestration())

    def test_boundary_condition(self):
        self.assertEqual(BoundaryCondition.from_string('Surface'), BoundaryCondition.INTERZONE)
        self.assertEqual(BoundaryCondition.from_string('Zone'), BoundaryCondition.INTERZONE)
        with self.assertRaises(SystemExit):
            BoundaryCondition.from_string('Space')


class TestNominalUWithFilms(unittest.TestCase):
    """ Unit tests for nominal_u_with_films """

    def setUp(self):
        self.model = Model(SimulationTime(0, 1, 1))
        insulation = self.model.add_material(
            Material('Insulation', MaterialGroup.REGULAR, thickness=0.1, conductivity=0.04)
            )
        self.constr_id = self.model.add_construction(Construction('Insulated', [insulation]))
        self.model.constructions[self.constr_id].calc_nominal_resistance(self.model.materials)
        self.r_constr = 2.5

    def add_surface(self, name, surface_class, boundary_condition, other_side=None):
        return self.model.add_surface(
            Surface(
                name, surface_class, self.constr_id, None,
                boundary_condition=boundary_condition, other_side=other_side,
                )
            )

    def test_films_by_class_and_boundary(self):
        for surface_class, r_inside in (
                (SurfaceClass.WALL, R_FILM_WALL),
                (SurfaceClass.DOOR, R_FILM_WALL),
                (SurfaceClass.FLOOR, R_FILM_FLOOR),
                (SurfaceClass.ROOF, R_FILM_ROOF),
                ):
            for boundary_condition, r_outside in (
                    (BoundaryCondition.EXTERNAL, R_FILM_OUTSIDE_EXTERNAL),
                    (BoundaryCondition.GROUND, 0.0),
                    (BoundaryCondition.GROUND_FCFACTOR, 0.0),
                    (BoundaryCondition.ADIABATIC, R_FILM_OUTSIDE_SEMI_EXTERIOR),
                    (BoundaryCondition.OTHER_SIDE_COEFFICIENTS, R_FILM_OUTSIDE_SEMI_EXTERIOR),
                    (BoundaryCondition.INTERZONE, r_inside),
                    ):
                with self.subTest(surface_class=surface_class, bc=boundary_condition):
                    surface_id = self.add_surface(
                        surface_class.name + ' ' + boundary_condition.name,
                        surface_class,
                        boundary_condition,
                        )
                    u_value, valid = nominal_u_with_films(self.model, surface_id)
                    self.assertTrue(valid)
                    self.assertAlmostEqual(
                        u_value,
                        1.0 / (r_inside + self.r_constr + r_outside),
                        msg="incorrect U-value with films",
                        )

    def test_external_wall_value(self):
        surface_id = self.add_surface('Wall', SurfaceClass.WALL, BoundaryCondition.EXTERNAL)
        u_value, valid = nominal_u_with_films(self.model, surface_id)
        self.assertTrue(valid)
        self.assertAlmostEqual(u_value, 0.377402, places=6)

    def test_interzone_uses_other_side_class(self):
        floor_id = self.add_surface('Floor above', SurfaceClass.FLOOR, BoundaryCondition.INTERZONE)
        roof_id = self.add_surface(
            'Ceiling below', SurfaceClass.ROOF, BoundaryCondition.INTERZONE, other_side=floor_id,
            )
        u_value, valid = nominal_u_with_films(self.model, roof_id)
        self.assertTrue(valid)
        self.assertAlmostEqual(u_value, 1.0 / (R_FILM_ROOF + self.r_constr + R_FILM_FLOOR))

    def test_interzone_other_side_without_film(self):
        window_id = self.add_surface('Window', SurfaceClass.WINDOW, BoundaryCondition.INTERZONE)
        wall_id = self.add_surface(
            'Wall', SurfaceClass.WALL, BoundaryCondition.INTERZONE, other_side=window_id,
            )
        u_value, _ = nominal_u_with_films(self.model, wall_id)
        self.assertAlmostEqual(
            u_value, 1.0 / (R_FILM_WALL + self.r_constr + R_FILM_OUTSIDE_SEMI_EXTERIOR),
            )

    def test_class_without_film(self):
        for surface_class in (
                SurfaceClass.WINDOW,
                SurfaceClass.GLASS_DOOR,
                SurfaceClass.INTERNAL_MASS,
                ):
            with self.subTest(surface_class=surface_class):
                surface_id = self.add_surface(
                    surface_class.name, surface_class, BoundaryCondition.EXTERNAL,
                    )
                u_value, valid = nominal_u_with_films(self.model, surface_id)
                self.assertFalse(valid)
                self.assertAlmostEqual(u_value, 1.0 / self.r_constr)

    def test_no_nominal_u(self):
        self.model.constructions[self.constr_id].nominal_u = None
        surface_id = self.add_surface('Wall', SurfaceClass.WALL, BoundaryCondition.EXTERNAL)
        self.assertEqual(nominal_u_with_films(self.model, surface_id), (None, False))


if __name__ == '__main__':
    unittest.main()
