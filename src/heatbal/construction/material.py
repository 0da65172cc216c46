#!/usr/bin/env python3

"""
This module contains the layer materials from which constructions are built,
and the classification used when checking constructions.

Each material belongs to exactly one group (opaque, glass, gas, shade, blind,
screen etc.). Group-specific data (gas composition, reference to blind data,
screen geometry) is held on the material alongside the common thermal and
optical properties.
"""

# Standard library imports
import sys
from enum import Enum, IntEnum, auto

# Maximum number of gases in a window gas mixture
MAX_GASES_IN_MIXTURE = 5


class MaterialGroup(Enum):
    REGULAR = auto()
    AIR = auto()
    SHADE = auto()
    GLASS = auto()
    GAS = auto()
    BLIND = auto()
    GAS_MIXTURE = auto()
    SCREEN = auto()
    ECOROOF = auto()
    IRT = auto()
    SIMPLE_GLAZING = auto()
    COMPLEX_SHADE = auto()
    COMPLEX_GAP = auto()
    GLASS_EQL = auto()
    SHADE_EQL = auto()
    DRAPE_EQL = auto()
    BLIND_EQL = auto()
    SCREEN_EQL = auto()
    GAP_EQL = auto()

    @classmethod
    def from_string(cls, strval):
        groups = {
            'Material': cls.REGULAR,
            'Material:NoMass': cls.REGULAR,
            'Material:AirGap': cls.AIR,
            'WindowMaterial:Shade': cls.SHADE,
            'WindowMaterial:Glazing': cls.GLASS,
            'WindowMaterial:Gas': cls.GAS,
            'WindowMaterial:Blind': cls.BLIND,
            'WindowMaterial:GasMixture': cls.GAS_MIXTURE,
            'WindowMaterial:Screen': cls.SCREEN,
            'Material:RoofVegetation': cls.ECOROOF,
            'Material:InfraredTransparent': cls.IRT,
            'WindowMaterial:SimpleGlazingSystem': cls.SIMPLE_GLAZING,
            'WindowMaterial:ComplexShade': cls.COMPLEX_SHADE,
            'WindowMaterial:Gap': cls.COMPLEX_GAP,
            'WindowMaterial:Glazing:EquivalentLayer': cls.GLASS_EQL,
            'WindowMaterial:Shade:EquivalentLayer': cls.SHADE_EQL,
            'WindowMaterial:Drape:EquivalentLayer': cls.DRAPE_EQL,
            'WindowMaterial:Blind:EquivalentLayer': cls.BLIND_EQL,
            'WindowMaterial:Screen:EquivalentLayer': cls.SCREEN_EQL,
            'WindowMaterial:Gap:EquivalentLayer': cls.GAP_EQL,
            }
        if strval in groups:
            return groups[strval]
        elif strval in cls.__members__:
            return cls[strval]
        else:
            sys.exit('Material type (' + str(strval) + ') not valid.')

    def is_window_class(self):
        """ Return True if materials of this group may be used in a window construction """
        return self not in (
            MaterialGroup.REGULAR,
            MaterialGroup.AIR,
            MaterialGroup.ECOROOF,
            MaterialGroup.IRT,
            )

    def is_equivalent_layer(self):
        return self in (
            MaterialGroup.GLASS_EQL,
            MaterialGroup.SHADE_EQL,
            MaterialGroup.DRAPE_EQL,
            MaterialGroup.BLIND_EQL,
            MaterialGroup.SCREEN_EQL,
            MaterialGroup.GAP_EQL,
            )

    def is_complex_fenestration(self):
        return self in (MaterialGroup.COMPLEX_SHADE, MaterialGroup.COMPLEX_GAP)

    def is_gas(self):
        """ Return True for window gas layers (single gas or mixture) """
        return self in (MaterialGroup.GAS, MaterialGroup.GAS_MIXTURE)

    def is_shading(self):
        """ Return True for shading layers counted when checking window layering """
        return self in (
            MaterialGroup.SHADE,
            MaterialGroup.BLIND,
            MaterialGroup.SCREEN,
            MaterialGroup.COMPLEX_SHADE,
            )

    def is_shade_or_blind(self):
        return self in (MaterialGroup.SHADE, MaterialGroup.BLIND)


class Roughness(IntEnum):
    VERY_ROUGH = 1
    ROUGH = 2
    MEDIUM_ROUGH = 3
    MEDIUM_SMOOTH = 4
    SMOOTH = 5
    VERY_SMOOTH = 6

    @classmethod
    def from_string(cls, strval):
        for level in cls:
            if display_roughness(level).upper() == strval.upper():
                return level
        sys.exit('Roughness (' + str(strval) + ') not valid.')


def display_roughness(roughness):
    """ Return the name used in input and reports for a roughness level """
    if roughness == Roughness.VERY_ROUGH:
        return 'VeryRough'
    elif roughness == Roughness.ROUGH:
        return 'Rough'
    elif roughness == Roughness.MEDIUM_ROUGH:
        return 'MediumRough'
    elif roughness == Roughness.MEDIUM_SMOOTH:
        return 'MediumSmooth'
    elif roughness == Roughness.SMOOTH:
        return 'Smooth'
    elif roughness == Roughness.VERY_SMOOTH:
        return 'VerySmooth'
    else:
        return ' '


class GasType(Enum):
    AIR = auto()
    ARGON = auto()
    KRYPTON = auto()
    XENON = auto()
    CUSTOM = auto()

    @classmethod
    def from_string(cls, strval):
        if strval.upper() in cls.__members__:
            return cls[strval.upper()]
        else:
            sys.exit('Gas type (' + str(strval) + ') not valid.')


class Material:
    """ An object to represent a single homogeneous layer of a construction """

    def __init__(
            self,
            name,
            group,
            roughness=None,
            thickness=0.0,
            conductivity=0.0,
            density=0.0,
            specific_heat=0.0,
            resistance=0.0,
            absorp_thermal=0.9,
            absorp_thermal_front=None,
            absorp_thermal_back=None,
            absorp_solar=0.7,
            absorp_visible=0.7,
            solar_diffusing=False,
            glass_spectral_data=None,
            gases=None,
            u_factor=0.0,
            blind=None,
            screen=None,
            ):
        """ Construct a Material object

        Arguments:
        name                 -- unique name of the material
        group                -- MaterialGroup of the material
        roughness            -- Roughness of the material surface (None if not applicable)
        thickness            -- in m
        conductivity         -- in W / (m.K)
        density              -- in kg / m3
        specific_heat        -- in J / (kg.K)
        resistance           -- thermal resistance of no-mass and air gap layers, in m2.K / W
        absorp_thermal       -- thermal (long-wave) absorptance
        absorp_thermal_front -- front-side thermal absorptance of glazing (defaults to absorp_thermal)
        absorp_thermal_back  -- back-side thermal absorptance of glazing (defaults to absorp_thermal)
        absorp_solar         -- solar absorptance
        absorp_visible       -- visible absorptance
        solar_diffusing      -- True if glass diffuses transmitted beam solar
        glass_spectral_data  -- name of spectral data set of the glass (None for spectral average)
        gases                -- list of (GasType, fraction) pairs for gas layers
        u_factor             -- U-factor of a simple glazing system, in W / (m2.K)
        blind                -- handle of the Blind data of a blind material
        screen               -- ScreenProperties of a screen material
        """
        self.name = name
        self.group = group
        self.roughness = roughness
        self.thickness = thickness
        self.conductivity = conductivity
        self.density = density
        self.specific_heat = specific_heat
        self.resistance = resistance
        self.absorp_thermal = absorp_thermal
        if absorp_thermal_front is None:
            absorp_thermal_front = absorp_thermal
        if absorp_thermal_back is None:
            absorp_thermal_back = absorp_thermal
        self.absorp_thermal_front = absorp_thermal_front
        self.absorp_thermal_back = absorp_thermal_back
        self.absorp_solar = absorp_solar
        self.absorp_visible = absorp_visible
        self.solar_diffusing = solar_diffusing
        self.glass_spectral_data = glass_spectral_data
        self.u_factor = u_factor
        self.blind = blind
        self.screen = screen

        if gases is None:
            gases = []
        if len(gases) > MAX_GASES_IN_MIXTURE:
            sys.exit('Material ' + name + ': too many gases in mixture (max '
                     + str(MAX_GASES_IN_MIXTURE) + ').')
        # Pad to the full number of gases so that compositions can be compared slot by slot
        self.gas_types = [gas for gas, _ in gases] \
            + [None] * (MAX_GASES_IN_MIXTURE - len(gases))
        self.gas_fractions = [frac for _, frac in gases] \
            + [0.0] * (MAX_GASES_IN_MIXTURE - len(gases))

    def nominal_r(self):
        """ Return nominal thermal resistance of the layer, in m2.K / W """
        if self.group == MaterialGroup.AIR:
            return self.resistance
        elif self.group == MaterialGroup.SIMPLE_GLAZING:
            if self.u_factor > 0.0:
                return 1.0 / self.u_factor
            return 0.0
        elif self.group in (
                MaterialGroup.REGULAR,
                MaterialGroup.GLASS,
                MaterialGroup.GAS,
                MaterialGroup.GAS_MIXTURE,
                MaterialGroup.SHADE,
                MaterialGroup.SCREEN,
                MaterialGroup.ECOROOF,
                ):
            if self.thickness > 0.0 and self.conductivity > 0.0:
                return self.thickness / self.conductivity
            return self.resistance
        else:
            return 0.0

    def same_gas_composition(self, other):
        """ Return True if both layers hold the same gases in the same fractions """
        return self.gas_types == other.gas_types and self.gas_fractions == other.gas_fractions
