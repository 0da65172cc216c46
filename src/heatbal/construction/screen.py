#!/usr/bin/env python3

"""
This module provides objects to represent insect/solar window screens, and
functions to calculate the beam transmittance, reflectance and absorptance of
a screen for a given sun position.

The screen is modelled as an orthogonal mesh of cylinders. Beam solar
radiation either passes through the open area between the cylinders (direct
transmittance), or strikes the cylinders, where part of it is absorbed and
part is reflected. Some of the reflected radiation is scattered forwards
through the screen (scattered transmittance); this is an empirical function of
the screen geometry, the cylinder reflectance and the sun angles.

The calculation is repeated for every screened window at every timestep, so
it has been kept free of references to other modules where possible.
"""

# Standard library imports
import sys
from enum import Enum, auto
from math import pi, sin, cos, tan, atan, atan2, acos, sqrt, exp

# Third-party imports
import numpy as np
from scipy.integrate import simpson

# Local imports
import heatbal.units as units

# Small number used to approximate zero (avoids division by zero at grazing angles)
SMALL = 1.0e-9

# Number of points in each direction used for integration over the hemisphere
N_HEMISPHERE_POINTS = 91


class ScreenBeamReflectanceModel(Enum):
    DO_NOT_MODEL = auto()
    MODEL_AS_DIRECT_BEAM = auto()
    MODEL_AS_DIFFUSE = auto()

    @classmethod
    def from_string(cls, strval):
        if strval == 'DoNotModel':
            return cls.DO_NOT_MODEL
        elif strval == 'ModelAsDirectBeam':
            return cls.MODEL_AS_DIRECT_BEAM
        elif strval == 'ModelAsDiffuse':
            return cls.MODEL_AS_DIFFUSE
        else:
            sys.exit('Screen beam reflectance accounting (' + str(strval) + ') not valid.')


class ScreenProperties:
    """ An object to hold the geometry and reflectance of a screen material """

    def __init__(
            self,
            diameter_to_spacing_ratio,
            reflect_cylinder,
            reflect_cylinder_vis,
            beam_reflectance_accounting=ScreenBeamReflectanceModel.MODEL_AS_DIFFUSE,
            ):
        """ Construct a ScreenProperties object

        Arguments:
        diameter_to_spacing_ratio   -- ratio of screen cylinder diameter to
                                       cylinder centre-to-centre spacing (gamma)
        reflect_cylinder            -- solar reflectance of the cylinder material
        reflect_cylinder_vis        -- visible reflectance of the cylinder material
        beam_reflectance_accounting -- ScreenBeamReflectanceModel for beam
                                       radiation reflected through the screen
        """
        if not 0.0 <= diameter_to_spacing_ratio < 1.0:
            sys.exit('Screen diameter to spacing ratio ('
                     + str(diameter_to_spacing_ratio) + ') must be >= 0 and < 1.')
        self.diameter_to_spacing_ratio = diameter_to_spacing_ratio
        self.reflect_cylinder = reflect_cylinder
        self.reflect_cylinder_vis = reflect_cylinder_vis
        self.beam_reflectance_accounting = beam_reflectance_accounting


class SurfaceScreen:
    """ An object to hold the calculated properties of a screen on one window

    The beam properties are overwritten on each call to the screen
    calculation; the diffuse properties are set once by
    compute_screen_diffuse_properties.
    """

    def __init__(self, material, surface=None):
        """ Construct a SurfaceScreen object

        Arguments:
        material -- handle of the screen material
        surface  -- handle of the window the screen is attached to (None if
                    the record is used for angle-only calculations)
        """
        self.material = material
        self.surface = surface

        self.bm_bm_trans = 0.0
        self.bm_bm_trans_back = 0.0
        self.bm_bm_trans_vis = 0.0
        self.bm_dif_trans = 0.0
        self.bm_dif_trans_back = 0.0
        self.bm_dif_trans_vis = 0.0
        self.reflect_sol_beam_front = 0.0
        self.reflect_sol_beam_back = 0.0
        self.reflect_vis_beam_front = 0.0
        self.reflect_vis_beam_back = 0.0
        self.absorp_solar_beam_front = 0.0
        self.absorp_solar_beam_back = 0.0

        self.dif_dif_trans = 0.0
        self.dif_dif_trans_vis = 0.0
        self.dif_reflect = 0.0
        self.dif_reflect_vis = 0.0
        self.dif_absorp = 0.0


def _acos(x):
    """ acos with the argument limited to [-1, 1] to absorb rounding errors """
    return acos(max(-1.0, min(1.0, x)))

def fold_angle(angle):
    """ Reflect an angle (in radians) into the range 0 to pi/2 """
    angle = abs(angle) % (2.0 * pi)
    if angle > pi:
        angle = 2.0 * pi - angle
    if angle > units.pi_over_2:
        angle = pi - angle
    return angle

def direct_transmittance(gamma, sun_azimuth_to_normal, sun_altitude_to_normal):
    """ Return beam transmittance through the open area of a totally absorbing screen

    Arguments:
    gamma                  -- ratio of cylinder diameter to spacing
    sun_azimuth_to_normal  -- sun azimuth relative to screen normal, 0 to pi/2, in radians
    sun_altitude_to_normal -- sun altitude relative to screen normal, 0 to pi/2, in radians

    The transmittance is the product of the transmittances in the vertical
    (y) and horizontal (x) directions.
    """
    azimuth = sun_azimuth_to_normal
    altitude = sun_altitude_to_normal

    # Complement of relative solar azimuth
    beta = units.pi_over_2 - azimuth

    if beta > SMALL and abs(altitude - units.pi_over_2) > SMALL:
        alpha_dbl_prime = atan(tan(altitude) / cos(azimuth))
        trans_y_dir = 1.0 - gamma * (
            cos(alpha_dbl_prime)
            + sin(alpha_dbl_prime) * tan(altitude) * sqrt(1.0 + (1.0 / tan(beta)) ** 2)
            )
        trans_y_dir = max(0.0, trans_y_dir)
    else:
        trans_y_dir = 0.0

    cos_mu = sqrt(cos(altitude) ** 2 * cos(azimuth) ** 2 + sin(altitude) ** 2)
    if cos_mu > SMALL:
        epsilon = _acos(cos(altitude) * cos(azimuth) / cos_mu)
        eta = units.pi_over_2 - epsilon
        if cos(epsilon) != 0.0 and eta != 0.0:
            mu = _acos(cos_mu)
            mu_prime = atan(tan(mu) / cos(epsilon))
            trans_x_dir = 1.0 - gamma * (
                cos(mu_prime)
                + sin(mu_prime) * tan(mu) * sqrt(1.0 + (1.0 / tan(eta)) ** 2)
                )
            trans_x_dir = max(0.0, trans_x_dir)
        else:
            trans_x_dir = 0.0
    else:
        trans_x_dir = 1.0 - gamma

    return max(0.0, trans_x_dir * trans_y_dir)

def scattered_transmittance(gamma, reflect_cyl, sun_azimuth_to_normal, sun_altitude_to_normal):
    """ Return transmittance of beam radiation scattered forwards by a reflecting screen

    Arguments:
    gamma                  -- ratio of cylinder diameter to spacing
    reflect_cyl            -- reflectance of the cylinder material (solar or visible)
    sun_azimuth_to_normal  -- sun azimuth relative to screen normal, 0 to pi/2, in radians
    sun_altitude_to_normal -- sun altitude relative to screen normal, 0 to pi/2, in radians
    """
    if abs(sun_azimuth_to_normal - units.pi_over_2) < SMALL \
    or abs(sun_altitude_to_normal - units.pi_over_2) < SMALL:
        return 0.0

    # Plateau of scattered transmittance; there is no scattering from a
    # non-reflecting (or fully closed) screen
    plateau = 0.2 * (1.0 - gamma) * reflect_cyl
    if plateau <= 0.0:
        return 0.0

    # Angle of peak scattering and angle of incidence, in degrees
    delta_max = 89.7 - (10.0 * gamma / 0.16)
    delta = sqrt(
        units.radians_to_degrees(sun_azimuth_to_normal) ** 2
        + units.radians_to_degrees(sun_altitude_to_normal) ** 2
        )

    # Empirical model of the maximum (peak) scattering
    t_scatter_max = 0.0229 * gamma + 0.2971 * reflect_cyl - 0.03624 * gamma ** 2 \
                  + 0.04763 * reflect_cyl ** 2 - 0.44416 * gamma * reflect_cyl

    # Ratio of scattering at normal incidence to peak scattering
    peak_to_plateau_ratio = 1.0 / plateau

    if delta > delta_max:
        exponent = -(abs(delta - delta_max) ** 2.5) / 600.0
        t_scattered = plateau * t_scatter_max \
                    * (1.0 + (peak_to_plateau_ratio - 1.0) * exp(exponent))
        # Trim off plateau beyond the peak scattering angle
        t_scattered -= plateau * t_scatter_max \
                     * max(0.0, (delta - delta_max) / (90.0 - delta_max))
    else:
        exponent = -(abs(delta - delta_max) ** 2.0) / 600.0
        t_scattered = plateau * t_scatter_max \
                    * (1.0 + (peak_to_plateau_ratio - 1.0) * exp(exponent))

    return max(0.0, t_scattered)

def screen_beam_properties(props, sun_azimuth_to_normal, sun_altitude_to_normal, incident_angle):
    """ Return dictionary of beam properties of a screen for the given sun angles

    Arguments:
    props                  -- ScreenProperties of the screen material
    sun_azimuth_to_normal  -- sun azimuth relative to screen normal, 0 to pi/2, in radians
    sun_altitude_to_normal -- sun altitude relative to screen normal, 0 to pi/2, in radians
    incident_angle         -- angle between sun and screen outward normal, in
                              radians; if more than pi/2 the sun is behind the screen
    """
    gamma = props.diameter_to_spacing_ratio
    reflect_cyl = props.reflect_cylinder
    reflect_cyl_vis = props.reflect_cylinder_vis

    t_direct = direct_transmittance(gamma, sun_azimuth_to_normal, sun_altitude_to_normal)
    t_scattered = scattered_transmittance(
        gamma, reflect_cyl, sun_azimuth_to_normal, sun_altitude_to_normal,
        )
    t_scattered_vis = scattered_transmittance(
        gamma, reflect_cyl_vis, sun_azimuth_to_normal, sun_altitude_to_normal,
        )

    accounting = props.beam_reflectance_accounting
    if accounting == ScreenBeamReflectanceModel.DO_NOT_MODEL:
        t_beam = t_direct
        t_beam_vis = t_direct
        t_scattered = 0.0
        t_scattered_vis = 0.0
    elif accounting == ScreenBeamReflectanceModel.MODEL_AS_DIRECT_BEAM:
        t_beam = t_direct + t_scattered
        t_beam_vis = t_direct + t_scattered_vis
        t_scattered = 0.0
        t_scattered_vis = 0.0
    else:
        t_beam = t_direct
        t_beam_vis = t_direct

    reflect = max(0.0, reflect_cyl * (1.0 - t_direct) - t_scattered)
    reflect_vis = max(0.0, reflect_cyl_vis * (1.0 - t_direct) - t_scattered_vis)
    absorp = max(0.0, (1.0 - t_direct) * (1.0 - reflect_cyl))

    # Properties apply to whichever side of the screen the sun is on
    sun_in_front = abs(incident_angle) <= units.pi_over_2
    front = 1.0 if sun_in_front else 0.0
    back = 0.0 if sun_in_front else 1.0
    return {
        'bm_bm_trans': front * t_beam,
        'bm_bm_trans_vis': front * t_beam_vis,
        'bm_bm_trans_back': back * t_beam,
        'bm_dif_trans': front * t_scattered,
        'bm_dif_trans_vis': front * t_scattered_vis,
        'bm_dif_trans_back': back * t_scattered,
        'reflect_sol_beam_front': front * reflect,
        'reflect_vis_beam_front': front * reflect_vis,
        'absorp_solar_beam_front': front * absorp,
        'reflect_sol_beam_back': back * reflect,
        'reflect_vis_beam_back': back * reflect_vis,
        'absorp_solar_beam_back': back * absorp,
        't_direct': t_direct,
        }

def _write_beam_properties(screen, results):
    for key, value in results.items():
        if key != 't_direct':
            setattr(screen, key, value)

def compute_screen_at_angle(model, screen_id, phi, theta):
    """ Calculate beam properties of a screen for sun angles relative to the screen

    Arguments:
    model     -- reference to the Model holding the screens
    screen_id -- handle of the SurfaceScreen
    phi       -- sun altitude relative to the screen outward normal, in radians
    theta     -- sun azimuth relative to the screen outward normal, in radians

    Results are written to the SurfaceScreen object, which is also returned.
    """
    screen = model.surface_screens[screen_id]
    props = model.materials[screen.material].screen

    sun_azimuth_to_normal = fold_angle(theta)
    sun_altitude_to_normal = fold_angle(phi)
    incident_angle = _acos(cos(sun_altitude_to_normal) * cos(sun_azimuth_to_normal))

    _write_beam_properties(
        screen,
        screen_beam_properties(
            props, sun_azimuth_to_normal, sun_altitude_to_normal, incident_angle,
            ),
        )
    return screen

def compute_screen_for_surface(model, surface_id):
    """ Calculate beam properties of the screen on a window for the current sun position

    Arguments:
    model      -- reference to the Model holding the surfaces, screens and the
                  current solar direction cosines
    surface_id -- handle of the screened window

    Results are written to the window's SurfaceScreen object, which is also returned.
    """
    surface = model.surfaces[surface_id]
    screen = model.surface_screens[surface.screen]
    props = model.materials[screen.material].screen
    sol_cos_east, sol_cos_north, sol_cos_up = model.solar_cos

    sun_azimuth = atan2(sol_cos_east, sol_cos_north)
    if sun_azimuth < 0.0:
        sun_azimuth += 2.0 * pi
    surface_azimuth = units.degrees_to_radians(surface.azimuth)
    normal_azimuth = sun_azimuth - surface_azimuth

    sun_altitude = units.pi_over_2 - _acos(sol_cos_up)
    surface_tilt = units.degrees_to_radians(surface.tilt)
    normal_altitude = sun_altitude + (surface_tilt - units.pi_over_2)

    sun_azimuth_to_normal = fold_angle(normal_azimuth)
    sun_altitude_to_normal = fold_angle(normal_altitude)
    incident_angle = _acos(cos(normal_altitude) * cos(normal_azimuth))

    _write_beam_properties(
        screen,
        screen_beam_properties(
            props, sun_azimuth_to_normal, sun_altitude_to_normal, incident_angle,
            ),
        )
    return screen

def compute_screen_diffuse_properties(model, screen_id, n_points=N_HEMISPHERE_POINTS):
    """ Calculate hemispherically averaged (diffuse) properties of a screen

    The beam properties are integrated over the quarter hemisphere in front of
    the screen (the properties are symmetrical in the other three quarters),
    weighted by the cosine of the angle of incidence.

    Arguments:
    model     -- reference to the Model holding the screens
    screen_id -- handle of the SurfaceScreen
    n_points  -- number of integration points for each of the two sun angles
    """
    screen = model.surface_screens[screen_id]
    props = model.materials[screen.material].screen

    angles = np.linspace(0.0, units.pi_over_2, n_points)
    trans = np.zeros((n_points, n_points))
    trans_vis = np.zeros((n_points, n_points))
    reflect = np.zeros((n_points, n_points))
    reflect_vis = np.zeros((n_points, n_points))
    absorp = np.zeros((n_points, n_points))
    for i, altitude in enumerate(angles):
        for j, azimuth in enumerate(angles):
            incident_angle = _acos(cos(altitude) * cos(azimuth))
            results = screen_beam_properties(props, azimuth, altitude, incident_angle)
            trans[i, j] = results['bm_bm_trans'] + results['bm_dif_trans']
            trans_vis[i, j] = results['bm_bm_trans_vis'] + results['bm_dif_trans_vis']
            reflect[i, j] = results['reflect_sol_beam_front']
            reflect_vis[i, j] = results['reflect_vis_beam_front']
            absorp[i, j] = results['absorp_solar_beam_front']

    # Weight is cosine of incidence angle times solid angle element:
    # cos(altitude) * cos(azimuth) * cos(altitude) d(altitude) d(azimuth)
    alt_grid, azi_grid = np.meshgrid(angles, angles, indexing='ij')
    weight = np.cos(alt_grid) ** 2 * np.cos(azi_grid)

    def integrate(values):
        return simpson(simpson(values * weight, x=angles, axis=1), x=angles)

    total_weight = integrate(np.ones((n_points, n_points)))
    screen.dif_dif_trans = integrate(trans) / total_weight
    screen.dif_dif_trans_vis = integrate(trans_vis) / total_weight
    screen.dif_reflect = integrate(reflect) / total_weight
    screen.dif_reflect_vis = integrate(reflect_vis) / total_weight
    screen.dif_absorp = integrate(absorp) / total_weight
    return screen
