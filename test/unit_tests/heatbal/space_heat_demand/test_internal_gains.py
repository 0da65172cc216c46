#!/usr/bin/env python3

"""
This module contains unit tests for the internal gains module
"""

# Standard library imports
import unittest

# Set path to include modules to be tested (must be before local imports)
from unit_tests.common import test_setup
test_setup()

# Local imports
from heatbal.simulation_time import SimulationTime
from heatbal.model import Model
from heatbal.controls.schedule import ScheduleValues
from heatbal.space_heat_demand.internal_gains import \
    InternalGain, GainType, validate_internal_gain


class TestInternalGain(unittest.TestCase):
    """ Unit tests for InternalGain class """

    def setUp(self):
        """ Create InternalGain object to be tested """
        self.simtime = SimulationTime(0, 4, 1)
        self.model = Model(self.simtime)
        sched_idx = self.model.schedules.add(
            ScheduleValues('Occupancy', [0.0, 0.5, 1.0, 0.25], self.simtime, 0, 1)
            )
        self.gain_id = self.model.add_internal_gain(
            InternalGain(
                'Lighting', GainType.LIGHTS, 0, 200.0, self.model.schedules, sched_idx,
                fraction_radiant=0.3, fraction_latent=0.1, fraction_lost=0.2,
                )
            )
        self.gain = self.model.internal_gains[self.gain_id]

    def test_gains(self):
        """ Test that correct gains are returned for each timestep """
        total_expected = [0.0, 100.0, 200.0, 50.0]
        for t_idx, _, _ in self.simtime:
            with self.subTest(i=t_idx):
                self.assertAlmostEqual(self.gain.total_gain(), total_expected[t_idx])
                self.assertAlmostEqual(
                    self.gain.convective_gain(), total_expected[t_idx] * 0.4,
                    msg="incorrect convective gain returned",
                    )
                self.assertAlmostEqual(self.gain.radiant_gain(), total_expected[t_idx] * 0.3)
                self.assertAlmostEqual(self.gain.latent_gain(), total_expected[t_idx] * 0.1)

    def test_valid_gain(self):
        self.assertEqual(len(validate_internal_gain(self.model, self.gain_id)), 0)

    def test_gain_type_from_string(self):
        self.assertEqual(GainType.from_string('GasEquipment'), GainType.GAS_EQUIPMENT)
        with self.assertRaises(SystemExit):
            GainType.from_string('Appliances')


class TestValidateInternalGain(unittest.TestCase):
    """ Unit tests for validate_internal_gain """

    def setUp(self):
        self.model = Model(SimulationTime(0, 1, 1))

    def add_gain(self, name, design_level=100.0, radiant=0.0, latent=0.0, lost=0.0):
        return self.model.add_internal_gain(
            InternalGain(
                name, GainType.ELECTRIC_EQUIPMENT, 0, design_level,
                self.model.schedules, self.model.schedules.ALWAYS_ON,
                fraction_radiant=radiant, fraction_latent=latent, fraction_lost=lost,
                )
            )

    def test_fractions_sum_to_one_within_tolerance(self):
        gain_id = self.add_gain('Equipment', radiant=0.3335, latent=0.3335, lost=0.3335)
        self.assertFalse(validate_internal_gain(self.model, gain_id).errors_found())

    def test_fractions_sum_greater_than_one(self):
        gain_id = self.add_gain('Equipment', radiant=0.6, latent=0.3, lost=0.2)
        diagnostics = validate_internal_gain(self.model, gain_id)
        self.assertEqual(len(diagnostics.errors()), 1)
        self.assertIn('Sum of Fractions > 1.0', diagnostics.errors()[0].message)

    def test_fraction_out_of_range(self):
        gain_id = self.add_gain('Equipment', radiant=-0.1)
        diagnostics = validate_internal_gain(self.model, gain_id)
        self.assertEqual(len(diagnostics.errors()), 1)
        self.assertIn('Fraction Radiant', diagnostics.errors()[0].message)

    def test_negative_design_level(self):
        gain_id = self.add_gain('Equipment', design_level=-5.0)
        diagnostics = validate_internal_gain(self.model, gain_id)
        self.assertTrue(diagnostics.errors_found())
        self.assertEqual(diagnostics.errors()[0].object_id, gain_id)

    def test_always_on_schedule(self):
        gain_id = self.add_gain('Equipment', design_level=150.0)
        self.assertEqual(self.model.internal_gains[gain_id].total_gain(), 150.0)


if __name__ == '__main__':
    unittest.main()
