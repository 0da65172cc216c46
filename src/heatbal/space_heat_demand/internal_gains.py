#!/usr/bin/env python3

"""
This module provides objects to represent the internal gains from people,
lighting and equipment in a zone.
"""

# Standard library imports
import sys
from enum import Enum, auto

# Local imports
from heatbal.diagnostics import Diagnostics


class GainType(Enum):
    PEOPLE = auto()
    LIGHTS = auto()
    ELECTRIC_EQUIPMENT = auto()
    GAS_EQUIPMENT = auto()
    OTHER_EQUIPMENT = auto()

    @classmethod
    def from_string(cls, strval):
        if strval == 'People':
            return cls.PEOPLE
        elif strval == 'Lights':
            return cls.LIGHTS
        elif strval == 'ElectricEquipment':
            return cls.ELECTRIC_EQUIPMENT
        elif strval == 'GasEquipment':
            return cls.GAS_EQUIPMENT
        elif strval == 'OtherEquipment':
            return cls.OTHER_EQUIPMENT
        else:
            sys.exit('Internal gain type (' + str(strval) + ') not valid.')


class InternalGain:
    """ An object to represent a scheduled source of heat within a zone """

    def __init__(
            self,
            name,
            gain_type,
            zone,
            design_level,
            schedules,
            schedule_idx,
            fraction_radiant=0.0,
            fraction_latent=0.0,
            fraction_lost=0.0,
            ):
        """ Construct an InternalGain object

        Arguments:
        name             -- unique name of the gain
        gain_type        -- GainType of the gain
        zone             -- handle of the zone the gain is in
        design_level     -- maximum total gain, in W
        schedules        -- reference to the ScheduleRegistry
        schedule_idx     -- index of the schedule giving the fraction of the
                            design level for each timestep
        fraction_radiant -- fraction of the gain given off as long-wave radiation
        fraction_latent  -- fraction of the gain given off as moisture
        fraction_lost    -- fraction of the gain that does not enter the zone
        """
        self.name = name
        self.gain_type = gain_type
        self.zone = zone
        self.design_level = design_level
        self.__schedules = schedules
        self.__schedule_idx = schedule_idx
        self.fraction_radiant = fraction_radiant
        self.fraction_latent = fraction_latent
        self.fraction_lost = fraction_lost

    def fraction_convected(self):
        return 1.0 - self.fraction_radiant - self.fraction_latent - self.fraction_lost

    def total_gain(self):
        """ Return the total gain for the current timestep, in W """
        return self.design_level * self.__schedules.value(self.__schedule_idx)

    def convective_gain(self):
        return self.total_gain() * self.fraction_convected()

    def radiant_gain(self):
        return self.total_gain() * self.fraction_radiant

    def latent_gain(self):
        return self.total_gain() * self.fraction_latent


def validate_internal_gain(model, gain_id):
    """ Check the split of an internal gain, returning the Diagnostics found """
    diagnostics = Diagnostics()
    gain = model.internal_gains[gain_id]
    object_type = 'InternalGains'

    for fraction_name, fraction in (
            ('Fraction Radiant', gain.fraction_radiant),
            ('Fraction Latent', gain.fraction_latent),
            ('Fraction Lost', gain.fraction_lost),
            ):
        if not 0.0 <= fraction <= 1.0:
            diagnostics.severe(
                object_type + '="' + gain.name + '", ' + fraction_name
                + ' must be between 0 and 1.',
                'Entered value=' + str(fraction),
                object_type=object_type, object_name=gain.name, object_id=gain_id,
                )

    # Small tolerance so that fractions entered to a few decimal places that
    # add up to 1 are accepted
    if gain.fraction_convected() < -0.001:
        diagnostics.severe(
            object_type + '="' + gain.name + '", Sum of Fractions > 1.0',
            'Radiant + Latent + Lost fractions='
                + '{:.3f}'.format(1.0 - gain.fraction_convected()),
            object_type=object_type, object_name=gain.name, object_id=gain_id,
            )

    if gain.design_level < 0.0:
        diagnostics.severe(
            object_type + '="' + gain.name + '", Design Level must not be negative.',
            object_type=object_type, object_name=gain.name, object_id=gain_id,
            )
    return diagnostics
