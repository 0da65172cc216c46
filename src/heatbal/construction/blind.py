#!/usr/bin/env python3

"""
This module provides objects to represent slat-type window blinds, and the
creation of variable (movable) slat versions of fixed-slat blinds.

Blinds are entered as fixed-slat blinds. Shading controls that move the slats
need a variable-slat blind, but the same blind may be used elsewhere with
fixed slats, so a separate variable-slat blind is created from the fixed one
when it is first needed and re-used after that.
"""

# Standard library imports
import sys
from copy import deepcopy
from enum import Enum, auto
from math import asin

# Local imports
import heatbal.units as units
from heatbal.diagnostics import Diagnostics


class SlatAngleType(Enum):
    FIXED = auto()
    VARIABLE = auto()

    @classmethod
    def from_string(cls, strval):
        if strval in ('Fixed', 'FixedSlatAngle'):
            return cls.FIXED
        elif strval in ('Variable', 'VariableSlatAngle'):
            return cls.VARIABLE
        else:
            sys.exit('Slat angle type (' + str(strval) + ') not valid.')


class BlindOrientation(Enum):
    HORIZONTAL = auto()
    VERTICAL = auto()

    @classmethod
    def from_string(cls, strval):
        if strval == 'Horizontal':
            return cls.HORIZONTAL
        elif strval == 'Vertical':
            return cls.VERTICAL
        else:
            sys.exit('Slat orientation (' + str(strval) + ') not valid.')


class Blind:
    """ An object to represent the slat geometry of a window blind """

    def __init__(
            self,
            name,
            slat_width,
            slat_separation,
            slat_thickness,
            slat_angle=45.0,
            min_slat_angle=0.0,
            max_slat_angle=180.0,
            orientation=BlindOrientation.HORIZONTAL,
            slat_angle_type=SlatAngleType.FIXED,
            slat_conductivity=221.0,
            ):
        """ Construct a Blind object

        Arguments (lengths in m, angles in degrees):
        name              -- unique name of the blind
        slat_width        -- width of the slats
        slat_separation   -- distance between the front faces of adjacent slats
        slat_thickness    -- thickness of the slats
        slat_angle        -- angle between the slats and the glazing outward normal
        min_slat_angle    -- minimum slat angle allowed for variable slats
        max_slat_angle    -- maximum slat angle allowed for variable slats
        orientation       -- BlindOrientation of the slats
        slat_angle_type   -- SlatAngleType
        slat_conductivity -- in W / (m.K)

        Other variables:
        variable_twin -- handle of the variable-slat blind created from this
                         blind, if any
        fixed_source  -- handle of the fixed-slat blind this blind was
                         created from, if any
        """
        self.name = name
        self.slat_width = slat_width
        self.slat_separation = slat_separation
        self.slat_thickness = slat_thickness
        self.slat_angle = slat_angle
        self.min_slat_angle = min_slat_angle
        self.max_slat_angle = max_slat_angle
        self.orientation = orientation
        self.slat_angle_type = slat_angle_type
        self.slat_conductivity = slat_conductivity
        self.variable_twin = None
        self.fixed_source = None

    def geometric_slat_angle_limits(self):
        """ Return min and max slat angles allowed by the slat dimensions, in degrees

        Slats wider than their separation touch each other before they can
        close completely.
        """
        if self.slat_width > self.slat_separation:
            min_angle = units.radians_to_degrees(
                asin(self.slat_thickness / (self.slat_thickness + self.slat_separation))
                )
        else:
            min_angle = 0.0
        return min_angle, 180.0 - min_angle


def ensure_variable_slat_blind(model, blind_id):
    """ Return handle of the variable-slat version of a blind, creating it if needed

    Arguments:
    model    -- reference to the Model holding the blinds
    blind_id -- handle of the (fixed-slat) blind

    Returns the handle of the variable-slat blind and the Diagnostics raised
    while creating it (empty if an existing blind was re-used).
    """
    diagnostics = Diagnostics()
    source = model.blinds[blind_id]
    if source.variable_twin is not None:
        return source.variable_twin, diagnostics

    # A blind with the twin's name may already be in the input
    existing_id = model.find_blind('~' + source.name)
    if existing_id is not None:
        model.blinds[existing_id].fixed_source = blind_id
        source.variable_twin = existing_id
        return existing_id, diagnostics

    blind = deepcopy(source)
    blind.name = '~' + source.name
    blind.slat_angle_type = SlatAngleType.VARIABLE
    blind.variable_twin = None
    blind.fixed_source = blind_id
    new_id = model.add_blind(blind)
    source.variable_twin = new_id

    object_type = 'WindowMaterial:Blind'
    min_angle_geom, max_angle_geom = blind.geometric_slat_angle_limits()

    if blind.max_slat_angle < blind.min_slat_angle:
        diagnostics.severe(
            object_type + '="' + source.name + '", Illegal value combination.',
            'Minimum Slat Angle=[' + '{:.1f}'.format(blind.min_slat_angle)
                + '], is greater than Maximum Slat Angle=['
                + '{:.1f}'.format(blind.max_slat_angle) + '] deg.',
            object_type=object_type, object_name=source.name, object_id=blind_id,
            )

    if blind.max_slat_angle > blind.min_slat_angle \
    and (blind.slat_angle < blind.min_slat_angle or blind.slat_angle > blind.max_slat_angle):
        diagnostics.severe(
            object_type + '="' + source.name + '", Illegal value combination.',
            'Slat Angle=[' + '{:.1f}'.format(blind.slat_angle)
                + '] is outside of the input min/max range, min=['
                + '{:.1f}'.format(blind.min_slat_angle) + '], max=['
                + '{:.1f}'.format(blind.max_slat_angle) + '] deg.',
            object_type=object_type, object_name=source.name, object_id=blind_id,
            )

    if blind.min_slat_angle < min_angle_geom:
        diagnostics.warning(
            object_type + '="' + source.name + '", Illegal value combination.',
            'Minimum Slat Angle=[' + '{:.1f}'.format(blind.min_slat_angle)
                + '] is less than the smallest allowed by slat dimensions and spacing, min=['
                + '{:.1f}'.format(min_angle_geom) + '] deg.',
            'Minimum Slat Angle will be set to ' + '{:.1f}'.format(min_angle_geom) + ' deg.',
            object_type=object_type, object_name=source.name, object_id=blind_id,
            )
        blind.min_slat_angle = min_angle_geom

    if blind.max_slat_angle > max_angle_geom:
        diagnostics.warning(
            object_type + '="' + source.name + '", Illegal value combination.',
            'Maximum Slat Angle=[' + '{:.1f}'.format(blind.max_slat_angle)
                + '] is greater than the largest allowed by slat dimensions and spacing, ['
                + '{:.1f}'.format(max_angle_geom) + '] deg.',
            'Maximum Slat Angle will be set to ' + '{:.1f}'.format(max_angle_geom) + ' deg.',
            object_type=object_type, object_name=source.name, object_id=blind_id,
            )
        blind.max_slat_angle = max_angle_geom

    return new_id, diagnostics
