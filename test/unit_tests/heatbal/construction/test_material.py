#!/usr/bin/env python3

"""
This module contains unit tests for the material module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from heatbal.construction.material import \
    Material, MaterialGroup, Roughness, GasType, display_roughness, MAX_GASES_IN_MIXTURE


class TestMaterialGroup(unittest.TestCase):
    """ Unit tests for MaterialGroup class """

    def test_from_string(self):
        self.assertEqual(MaterialGroup.from_string('WindowMaterial:Glazing'), MaterialGroup.GLASS)
        self.assertEqual(MaterialGroup.from_string('Material:NoMass'), MaterialGroup.REGULAR)
        self.assertEqual(MaterialGroup.from_string('SIMPLE_GLAZING'), MaterialGroup.SIMPLE_GLAZING)
        with self.assertRaises(SystemExit):
            MaterialGroup.from_string('WindowMaterial:Unknown')

    def test_window_class(self):
        for group in MaterialGroup:
            with self.subTest(group=group):
                expected = group not in (
                    MaterialGroup.REGULAR,
                    MaterialGroup.AIR,
                    MaterialGroup.ECOROOF,
                    MaterialGroup.IRT,
                    )
                self.assertEqual(group.is_window_class(), expected)

    def test_predicates(self):
        self.assertTrue(MaterialGroup.GAS_MIXTURE.is_gas())
        self.assertFalse(MaterialGroup.COMPLEX_GAP.is_gas())
        self.assertTrue(MaterialGroup.SCREEN.is_shading())
        self.assertFalse(MaterialGroup.SCREEN.is_shade_or_blind())
        self.assertTrue(MaterialGroup.BLIND_EQL.is_equivalent_layer())
        self.assertTrue(MaterialGroup.COMPLEX_SHADE.is_complex_fenestration())


class TestRoughness(unittest.TestCase):
    """ Unit tests for roughness names """

    def test_display_roughness(self):
        expected = {
            Roughness.VERY_ROUGH: 'VeryRough',
            Roughness.ROUGH: 'Rough',
            Roughness.MEDIUM_ROUGH: 'MediumRough',
            Roughness.MEDIUM_SMOOTH: 'MediumSmooth',
            Roughness.SMOOTH: 'Smooth',
            Roughness.VERY_SMOOTH: 'VerySmooth',
            }
        for level, name in expected.items():
            with self.subTest(level=level):
                self.assertEqual(display_roughness(level), name)
                self.assertEqual(Roughness.from_string(name), level)

    def test_display_roughness_other(self):
        self.assertEqual(display_roughness(None), ' ')
        self.assertEqual(display_roughness(0), ' ')
        self.assertEqual(display_roughness(7), ' ')

    def test_from_string_case_insensitive(self):
        self.assertEqual(Roughness.from_string('mediumsmooth'), Roughness.MEDIUM_SMOOTH)
        with self.assertRaises(SystemExit):
            Roughness.from_string('Bumpy')


class TestMaterial(unittest.TestCase):
    """ Unit tests for Material class """

    def test_nominal_r_from_conductivity(self):
        material = Material(
            'Insulation', MaterialGroup.REGULAR, thickness=0.1, conductivity=0.04,
            )
        self.assertAlmostEqual(material.nominal_r(), 2.5)

    def test_nominal_r_no_mass(self):
        material = Material('Board', MaterialGroup.REGULAR, resistance=0.3)
        self.assertEqual(material.nominal_r(), 0.3)

    def test_nominal_r_air_gap(self):
        material = Material('Cavity', MaterialGroup.AIR, thickness=0.05, resistance=0.18)
        self.assertEqual(material.nominal_r(), 0.18)

    def test_nominal_r_simple_glazing(self):
        material = Material('Simple', MaterialGroup.SIMPLE_GLAZING, u_factor=2.0)
        self.assertEqual(material.nominal_r(), 0.5)
        material = Material('No U', MaterialGroup.SIMPLE_GLAZING)
        self.assertEqual(material.nominal_r(), 0.0)

    def test_nominal_r_other_groups(self):
        for group in (MaterialGroup.BLIND, MaterialGroup.IRT, MaterialGroup.GLASS_EQL):
            with self.subTest(group=group):
                material = Material('M', group, thickness=0.01, conductivity=1.0)
                self.assertEqual(material.nominal_r(), 0.0)

    def test_absorptance_defaults(self):
        material = Material('Glass', MaterialGroup.GLASS, absorp_thermal=0.84)
        self.assertEqual(material.absorp_thermal_front, 0.84)
        self.assertEqual(material.absorp_thermal_back, 0.84)
        material = Material(
            'LowE', MaterialGroup.GLASS, absorp_thermal=0.84, absorp_thermal_back=0.1,
            )
        self.assertEqual(material.absorp_thermal_front, 0.84)
        self.assertEqual(material.absorp_thermal_back, 0.1)

    def test_gas_composition(self):
        argon = Material('Argon', MaterialGroup.GAS, gases=[(GasType.ARGON, 1.0)])
        argon_2 = Material('Argon 2', MaterialGroup.GAS, gases=[(GasType.ARGON, 1.0)])
        mixture = Material(
            'Mixture', MaterialGroup.GAS_MIXTURE,
            gases=[(GasType.ARGON, 0.9), (GasType.AIR, 0.1)],
            )
        self.assertEqual(len(argon.gas_types), MAX_GASES_IN_MIXTURE)
        self.assertTrue(argon.same_gas_composition(argon_2))
        self.assertFalse(argon.same_gas_composition(mixture))

    def test_too_many_gases(self):
        with self.assertRaises(SystemExit):
            Material('Mixture', MaterialGroup.GAS_MIXTURE, gases=[(GasType.AIR, 1.0 / 6)] * 6)

    def test_gas_type_from_string(self):
        self.assertEqual(GasType.from_string('Krypton'), GasType.KRYPTON)
        with self.assertRaises(SystemExit):
            GasType.from_string('Neon')


if __name__ == '__main__':
    unittest.main()
