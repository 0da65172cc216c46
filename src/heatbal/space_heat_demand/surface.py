#!/usr/bin/env python3

"""
This module provides objects to represent the heat transfer surfaces of a
zone, and the nominal U-value of a surface including air film resistances.
"""

# Standard library imports
import sys
from enum import Enum, auto


class SurfaceClass(Enum):
    WALL = auto()
    FLOOR = auto()
    ROOF = auto()
    DOOR = auto()
    WINDOW = auto()
    GLASS_DOOR = auto()
    INTERNAL_MASS = auto()

    @classmethod
    def from_string(cls, strval):
        classes = {
            'Wall': cls.WALL,
            'Floor': cls.FLOOR,
            'Roof': cls.ROOF,
            'Ceiling': cls.ROOF,
            'Door': cls.DOOR,
            'Window': cls.WINDOW,
            'GlassDoor': cls.GLASS_DOOR,
            'InternalMass': cls.INTERNAL_MASS,
            }
        if strval in classes:
            return classes[strval]
        else:
            sys.exit('Surface type (' + str(strval) + ') not valid.')

    def is_fenestration(self):
        return self in (SurfaceClass.WINDOW, SurfaceClass.GLASS_DOOR)


class BoundaryCondition(Enum):
    EXTERNAL = auto()
    GROUND = auto()
    GROUND_FCFACTOR = auto()
    ADIABATIC = auto()
    OTHER_SIDE_COEFFICIENTS = auto()
    INTERZONE = auto()

    @classmethod
    def from_string(cls, strval):
        conditions = {
            'Outdoors': cls.EXTERNAL,
            'Ground': cls.GROUND,
            'GroundFCfactorMethod': cls.GROUND_FCFACTOR,
            'Adiabatic': cls.ADIABATIC,
            'OtherSideCoefficients': cls.OTHER_SIDE_COEFFICIENTS,
            'Surface': cls.INTERZONE,
            'Zone': cls.INTERZONE,
            }
        if strval in conditions:
            return conditions[strval]
        else:
            sys.exit('Outside boundary condition (' + str(strval) + ') not valid.')


# Air film resistances from ASHRAE 90.1-2004 Appendix A, in m2.K / W
R_FILM_WALL = 0.1197548
R_FILM_FLOOR = 0.1620212
R_FILM_ROOF = 0.1074271
R_FILM_OUTSIDE_EXTERNAL = 0.0299387
R_FILM_OUTSIDE_SEMI_EXTERIOR = 0.0810106


class Surface:
    """ An object to represent a heat transfer surface of a zone """

    def __init__(
            self,
            name,
            surface_class,
            construction,
            zone,
            boundary_condition=BoundaryCondition.EXTERNAL,
            other_side=None,
            azimuth=0.0,
            tilt=90.0,
            area=0.0,
            ):
        """ Construct a Surface object

        Arguments:
        name               -- unique name of the surface
        surface_class      -- SurfaceClass of the surface
        construction       -- handle of the construction
        zone               -- handle of the zone the surface belongs to
        boundary_condition -- BoundaryCondition on the outside of the surface
        other_side         -- handle of the surface on the other side of an
                              interzone partition, if any
        azimuth            -- orientation of the outward normal, in degrees
                              clockwise from north
        tilt               -- angle from horizontal of the outward normal, in
                              degrees (0 for a roof, 90 for a wall)
        area               -- net area, in m2

        Other variables:
        screen -- handle of the SurfaceScreen on a screened window
        blind  -- handle of the variable-slat blind used by the window's
                  shading control
        """
        self.name = name
        self.surface_class = surface_class
        self.construction = construction
        self.zone = zone
        self.boundary_condition = boundary_condition
        self.other_side = other_side
        self.azimuth = azimuth
        self.tilt = tilt
        self.area = area
        self.screen = None
        self.blind = None


def _film_resistance(surface_class):
    if surface_class in (SurfaceClass.WALL, SurfaceClass.DOOR):
        return R_FILM_WALL
    elif surface_class == SurfaceClass.FLOOR:
        return R_FILM_FLOOR
    elif surface_class == SurfaceClass.ROOF:
        return R_FILM_ROOF
    else:
        return None

def nominal_u_with_films(model, surface_id):
    """ Return nominal U-value of a surface including air films, and whether it is valid

    Arguments:
    model      -- reference to the Model holding the surfaces and constructions
    surface_id -- handle of the surface

    Returns a tuple (U-value in W / (m2.K), valid). If the construction has
    no positive nominal U-value, that value is returned unchanged and marked
    as not valid. Film resistances are only defined for walls, doors, floors
    and roofs; other surfaces get no films and are marked as not valid.
    """
    surface = model.surfaces[surface_id]
    u_value = model.constructions[surface.construction].nominal_u

    if u_value is None or u_value <= 0.0:
        return u_value, False

    r_inside = _film_resistance(surface.surface_class)
    if r_inside is None:
        return u_value, False

    if surface.boundary_condition == BoundaryCondition.EXTERNAL:
        r_outside = R_FILM_OUTSIDE_EXTERNAL
    elif surface.boundary_condition in (
            BoundaryCondition.GROUND,
            BoundaryCondition.GROUND_FCFACTOR,
            ):
        r_outside = 0.0
    elif surface.boundary_condition == BoundaryCondition.INTERZONE:
        # Outside film is the inside film of the surface on the other side
        if surface.other_side is not None:
            other_class = model.surfaces[surface.other_side].surface_class
        else:
            other_class = surface.surface_class
        r_outside = _film_resistance(other_class)
        if r_outside is None:
            r_outside = R_FILM_OUTSIDE_SEMI_EXTERIOR
    else:
        r_outside = R_FILM_OUTSIDE_SEMI_EXTERIOR

    return 1.0 / (r_inside + 1.0 / u_value + r_outside), True
