#!/usr/bin/env python3

"""
This module provides an object to represent a construction (an ordered stack
of material layers, listed from outside to inside) and functions to check a
construction, derive its summary properties, and synthesise the reversed
construction used on the other side of an interzone partition.
"""

# Standard library imports
import sys
from copy import deepcopy
from math import fsum

# Local imports
from heatbal.construction.material import MaterialGroup
from heatbal.diagnostics import Diagnostics

# Maximum number of layers in any construction
MAX_LAYERS_IN_CONSTRUCT = 11
# Maximum number of layers in a window (4 glass + 3 gap + 1 shading device),
# except for complex fenestration and equivalent layer windows
MAX_WINDOW_LAYERS = 8
# Tolerance on the difference in width of the gas layers either side of a
# between-glass shade or blind, in m
GAP_THICKNESS_TOLERANCE = 0.0005

OBJECT_TYPE = 'Construction'


class Construction:
    """ An object to represent an ordered stack of material layers """

    def __init__(self, name, layers, window_type_bsdf=False, window_type_eql=False):
        """ Construct a Construction object

        Arguments:
        name             -- unique name of the construction
        layers           -- list of material handles, from outside to inside
        window_type_bsdf -- True for complex fenestration (BSDF) windows
        window_type_eql  -- True for equivalent layer windows

        Derived properties are set by validate_construction and
        calc_nominal_resistance.
        """
        if len(layers) > MAX_LAYERS_IN_CONSTRUCT:
            sys.exit('Construction ' + name + ' has ' + str(len(layers))
                     + ' layers (max ' + str(MAX_LAYERS_IN_CONSTRUCT) + ').')
        self.name = name
        self.layers = list(layers)
        self.window_type_bsdf = window_type_bsdf
        self.window_type_eql = window_type_eql

        self.is_window = False
        self.is_eco_roof = False
        self.is_irt = False
        self.tot_glass_layers = 0
        self.tot_solid_layers = 0
        self.inside_absorp_thermal = 0.0
        self.outside_absorp_thermal = 0.0
        self.inside_absorp_solar = 0.0
        self.outside_absorp_solar = 0.0
        self.inside_absorp_vis = 0.0
        self.outside_absorp_vis = 0.0
        self.reflect_vis_dif_back = 0.0
        self.outside_roughness = None
        self.nominal_r = 0.0
        self.nominal_u = None
        self.num_ctf_terms = 0
        self.num_histories = 0
        self.is_used = False
        self.valid = True

    @property
    def tot_layers(self):
        return len(self.layers)

    def calc_nominal_resistance(self, materials):
        """ Set nominal R (sum of layer R) and nominal U (1 / R, if R > 0)

        Arguments:
        materials -- list of Material objects indexed by material handle
        """
        # fsum gives the same result whatever the order of the layers
        self.nominal_r = fsum(materials[m].nominal_r() for m in self.layers)
        if self.nominal_r > 0.0:
            self.nominal_u = 1.0 / self.nominal_r
        else:
            self.nominal_u = None


WINDOW_LAYER_GROUPS_MSG = (
    'has materials other than glass, gas, shade, screen, blind, complex shading, '
    'complex gap, or simple glazing system.'
    )


def validate_construction(model, constr_id):
    """ Check a construction and set its derived properties

    Arguments:
    model     -- reference to the Model holding the materials and constructions
    constr_id -- handle of the construction to check

    Returns the Diagnostics found. All checks are made even after an error is
    found, so that all errors are reported together. If any error is found,
    the construction is marked as not valid.
    """
    diagnostics = Diagnostics()
    constr = model.constructions[constr_id]
    if not constr.layers:
        # Missing layers are reported when the construction is read
        return diagnostics

    def error(message, *continuation):
        constr.valid = False
        diagnostics.severe(
            OBJECT_TYPE + '="' + constr.name + '" ' + message, *continuation,
            object_type=OBJECT_TYPE, object_name=constr.name, object_id=constr_id,
            )

    layers = [model.materials[m] for m in constr.layers]
    groups = [m.group for m in layers]
    outside = layers[0]
    inside = layers[-1]
    n_layers = len(layers)

    constr.inside_absorp_vis = inside.absorp_visible
    constr.outside_absorp_vis = outside.absorp_visible
    constr.inside_absorp_solar = inside.absorp_solar
    constr.outside_absorp_solar = outside.absorp_solar
    constr.outside_roughness = outside.roughness

    constr.is_window = any(group.is_window_class() for group in groups)

    if not constr.is_window:
        constr.reflect_vis_dif_back = 1.0 - inside.absorp_visible
        constr.inside_absorp_thermal = inside.absorp_thermal
        constr.outside_absorp_thermal = outside.absorp_thermal
        constr.tot_glass_layers = 0
        constr.tot_solid_layers = n_layers
        _check_special_layers(constr, groups, error)
        return diagnostics

    constr.num_ctf_terms = 0
    constr.num_histories = 0
    if any(group.is_complex_fenestration() for group in groups):
        constr.window_type_bsdf = True
    if any(group.is_equivalent_layer() for group in groups):
        constr.window_type_eql = True

    wrong_mix = not all(group.is_window_class() for group in groups)
    if wrong_mix:
        error(WINDOW_LAYER_GROUPS_MSG)

    if constr.window_type_bsdf or constr.window_type_eql:
        # Inner structure of these windows is checked by the complex
        # fenestration and equivalent layer models
        constr.tot_glass_layers = groups.count(MaterialGroup.GLASS) \
                                + groups.count(MaterialGroup.GLASS_EQL)
        constr.tot_solid_layers = sum(
            1 for group in groups
            if group not in (MaterialGroup.COMPLEX_GAP, MaterialGroup.GAP_EQL)
            )
        constr.inside_absorp_thermal = inside.absorp_thermal_back
        constr.outside_absorp_thermal = outside.absorp_thermal_front
        return diagnostics

    if not wrong_mix:
        if n_layers > MAX_WINDOW_LAYERS:
            error(
                'has too many layers (max of ' + str(MAX_WINDOW_LAYERS)
                + ' allowed -- 4 glass + 3 gap + 1 shading device).'
                )
        elif n_layers == 1 \
        and groups[0] not in (MaterialGroup.GLASS, MaterialGroup.SIMPLE_GLAZING):
            error('has a single layer which is not glass or a simple glazing system.')

    tot_glass = sum(
        1 for group in groups
        if group in (MaterialGroup.GLASS, MaterialGroup.SIMPLE_GLAZING)
        )
    tot_shades = sum(1 for group in groups if group.is_shading())

    broken_rules = []

    for i in range(1, n_layers):
        if groups[i] == groups[i - 1]:
            broken_rules.append(
                'Two adjacent layers cannot be of the same type (e.g. two glass layers).'
                )
            break

    if groups[0].is_gas() or groups[-1].is_gas():
        broken_rules.append('A gas layer cannot be the outermost or innermost layer.')

    if tot_shades > 1:
        broken_rules.append('There can be at most one shade, screen or blind layer.')

    for i, material in enumerate(layers):
        if material.group != MaterialGroup.GLASS or not material.solar_diffusing:
            continue
        if tot_shades > 0:
            error(
                'has diffusing glass=' + material.name
                + ' and a shade, screen or blind layer.'
                )
            break
        if tot_glass > 1 and MaterialGroup.GLASS in groups[i + 1:]:
            error(
                'has diffusing glass=' + material.name
                + ' that is not the innermost glass layer.'
                )

    if tot_shades == 1 and groups[-1] == MaterialGroup.SCREEN and n_layers != 1:
        broken_rules.append('A screen cannot be the innermost layer.')

    between_glass = tot_shades == 1 \
        and groups[0] not in (MaterialGroup.SHADE, MaterialGroup.BLIND, MaterialGroup.SCREEN) \
        and groups[-1] not in (MaterialGroup.SHADE, MaterialGroup.BLIND, MaterialGroup.COMPLEX_SHADE)
    if between_glass and not broken_rules:
        _check_between_glass_shading(model, layers, tot_glass, broken_rules, error)

    if outside.group == MaterialGroup.SIMPLE_GLAZING and n_layers > 1:
        for material in layers[1:]:
            if material.group == MaterialGroup.GLASS:
                error(
                    'has simple glazing system=' + outside.name
                    + ' with another glass layer=' + material.name
                    + '. A simple glazing system cannot be used with other glass layers.'
                    )
            elif material.group.is_gas():
                error(
                    'has simple glazing system=' + outside.name
                    + ' with a gas layer=' + material.name
                    + '. A simple glazing system cannot be used with gas layers.'
                    )

    if broken_rules:
        error('has an incorrect layer sequence.', *broken_rules)

    constr.tot_glass_layers = tot_glass
    constr.tot_solid_layers = tot_glass + tot_shades

    if inside.group.is_shade_or_blind() and n_layers > 1:
        # Properties of the shading device are handled by the window model;
        # the glass behind it is the inside surface for heat transfer
        inside = layers[-2]
        constr.inside_absorp_vis = inside.absorp_visible
        constr.inside_absorp_solar = inside.absorp_solar
    constr.inside_absorp_thermal = inside.absorp_thermal_back
    if outside.group in (MaterialGroup.GLASS, MaterialGroup.SIMPLE_GLAZING):
        constr.outside_absorp_thermal = outside.absorp_thermal_front
    else:
        constr.outside_absorp_thermal = outside.absorp_thermal

    _check_special_layers(constr, groups, error)
    return diagnostics

def _check_between_glass_shading(model, layers, tot_glass, broken_rules, error):
    """ Check a shade or blind placed between two panes of glass """
    groups = [m.group for m in layers]
    n_layers = len(layers)

    if tot_glass == 2:
        pattern_ok = n_layers == 5 \
            and groups[0] == MaterialGroup.GLASS \
            and groups[1].is_gas() \
            and groups[2].is_shade_or_blind() \
            and groups[3].is_gas() \
            and groups[4] == MaterialGroup.GLASS
    elif tot_glass == 3:
        pattern_ok = n_layers == 7 \
            and groups[0] == MaterialGroup.GLASS \
            and groups[1].is_gas() \
            and groups[2] == MaterialGroup.GLASS \
            and groups[3].is_gas() \
            and groups[4].is_shade_or_blind() \
            and groups[5].is_gas() \
            and groups[6] == MaterialGroup.GLASS
    else:
        broken_rules.append(
            'A between-glass shade or blind is only allowed in double or triple glazing.'
            )
        return

    if not pattern_ok:
        if MaterialGroup.SCREEN in groups:
            broken_rules.append('A screen cannot be placed between glass layers.')
        else:
            broken_rules.append(
                'A between-glass shade or blind must be between the two innermost '
                'glass layers, with a gas layer on each side.'
                )
        return

    sh = 2 * tot_glass - 2
    gap_outside = layers[sh - 1]
    gap_inside = layers[sh + 1]
    if not gap_outside.same_gas_composition(gap_inside):
        broken_rules.append(
            'The gas layers either side of a between-glass shade or blind '
            'must have the same gas types and fractions.'
            )
    if abs(gap_outside.thickness - gap_inside.thickness) > GAP_THICKNESS_TOLERANCE:
        broken_rules.append(
            'The gas layers either side of a between-glass shade or blind '
            'must match in thickness.'
            )

    shading = layers[sh]
    if shading.group == MaterialGroup.BLIND and shading.blind is not None:
        blind = model.blinds[shading.blind]
        if gap_outside.thickness + gap_inside.thickness < blind.slat_width:
            error(
                'has a between-glass blind=' + shading.name + '.',
                'The slat width of the between-glass blind is greater than the '
                'sum of the widths of the gas layers adjacent to the blind.',
                )

def _check_special_layers(constr, groups, error):
    """ Check placement of air gaps, vegetated roofs and infrared transparent layers """
    if groups[0] == MaterialGroup.AIR:
        error('has an air gap (Material:AirGap) as the outermost layer.')
    if len(groups) > 1 and groups[-1] == MaterialGroup.AIR:
        error('has an air gap (Material:AirGap) as the innermost layer.')

    constr.is_eco_roof = groups[0] == MaterialGroup.ECOROOF
    if MaterialGroup.ECOROOF in groups[1:]:
        error('has a vegetated roof (Material:RoofVegetation) that is not the outermost layer.')

    constr.is_irt = groups[0] == MaterialGroup.IRT
    if MaterialGroup.IRT in groups and len(groups) > 1:
        error(
            'has an infrared transparent layer (Material:InfraredTransparent) '
            'and more than one layer.'
            )

def reverse_construction(model, constr_id):
    """ Return handle of the construction with the layers of another in reverse order

    An existing construction with exactly the reversed layers is used if
    there is one; otherwise a new construction named "iz-" + source name is
    created and checked (with a number appended if that name is taken).

    Arguments:
    model     -- reference to the Model holding the materials and constructions
    constr_id -- handle of the source construction (None if it was not found,
                 in which case None is returned; the error has been reported
                 already)

    Returns the handle and the Diagnostics raised while checking a new
    construction.
    """
    diagnostics = Diagnostics()
    if constr_id is None:
        return None, diagnostics

    source = model.constructions[constr_id]
    source.is_used = True
    reversed_layers = list(reversed(source.layers))

    for idx, constr in enumerate(model.constructions):
        if constr.layers == reversed_layers:
            constr.is_used = True
            return idx, diagnostics

    # Input may already use the "iz-" name for a different layer order
    name = 'iz-' + source.name
    suffix = 1
    while model.find_construction(name) is not None:
        suffix += 1
        name = 'iz-' + source.name + ' ' + str(suffix)

    constr = deepcopy(source)
    constr.name = name
    constr.layers = reversed_layers
    constr.valid = True
    constr.is_used = True
    constr.calc_nominal_resistance(model.materials)
    new_id = model.add_construction(constr)
    diagnostics.extend(validate_construction(model, new_id))
    return new_id, diagnostics
