#!/usr/bin/env python3

"""
This module contains the enumerated options that configure the heat balance
calculation, and an object to hold the options selected for a run.
"""

# Standard library imports
import sys
from enum import Enum, auto


class SolarDistribution(Enum):
    MINIMAL_SHADOWING = auto()
    FULL_EXTERIOR = auto()
    FULL_INTERIOR_EXTERIOR = auto()
    FULL_EXTERIOR_WITH_REFL = auto()
    FULL_INTERIOR_EXTERIOR_WITH_REFL = auto()

    @classmethod
    def from_string(cls, strval):
        if strval == 'MinimalShadowing':
            return cls.MINIMAL_SHADOWING
        elif strval == 'FullExterior':
            return cls.FULL_EXTERIOR
        elif strval == 'FullInteriorAndExterior':
            return cls.FULL_INTERIOR_EXTERIOR
        elif strval == 'FullExteriorWithReflections':
            return cls.FULL_EXTERIOR_WITH_REFL
        elif strval == 'FullInteriorAndExteriorWithReflections':
            return cls.FULL_INTERIOR_EXTERIOR_WITH_REFL
        else:
            sys.exit('Solar distribution (' + str(strval) + ') not valid.')


class ConvectionAlgorithm(Enum):
    ASHRAE_SIMPLE = auto()
    ASHRAE_TARP = auto()
    CEILING_DIFFUSER = auto()
    TROMBE_WALL = auto()
    TARP_HC_OUTSIDE = auto()
    MOWITT_HC_OUTSIDE = auto()
    DOE2_HC_OUTSIDE = auto()
    BLAST_HC_OUTSIDE = auto()
    ADAPTIVE = auto()

    @classmethod
    def from_string(cls, strval):
        if strval in ('Simple', 'SimpleCombined', 'ASHRAESimple'):
            return cls.ASHRAE_SIMPLE
        elif strval in ('TARP', 'ASHRAETARP'):
            return cls.ASHRAE_TARP
        elif strval == 'CeilingDiffuser':
            return cls.CEILING_DIFFUSER
        elif strval == 'TrombeWall':
            return cls.TROMBE_WALL
        elif strval == 'TarpHcOutside':
            return cls.TARP_HC_OUTSIDE
        elif strval in ('MoWiTT', 'MoWiTTHcOutside'):
            return cls.MOWITT_HC_OUTSIDE
        elif strval in ('DOE-2', 'DOE2HcOutside'):
            return cls.DOE2_HC_OUTSIDE
        elif strval == 'BLASTHcOutside':
            return cls.BLAST_HC_OUTSIDE
        elif strval == 'AdaptiveConvectionAlgorithm':
            return cls.ADAPTIVE
        else:
            sys.exit('Convection algorithm (' + str(strval) + ') not valid.')

    def valid_inside(self):
        """ Return True if the correlation can be used at inside faces """
        return self in (
            ConvectionAlgorithm.ASHRAE_SIMPLE,
            ConvectionAlgorithm.ASHRAE_TARP,
            ConvectionAlgorithm.CEILING_DIFFUSER,
            ConvectionAlgorithm.TROMBE_WALL,
            ConvectionAlgorithm.ADAPTIVE,
            )

    def valid_outside(self):
        """ Return True if the correlation can be used at outside faces """
        return self in (
            ConvectionAlgorithm.ASHRAE_SIMPLE,
            ConvectionAlgorithm.ASHRAE_TARP,
            ConvectionAlgorithm.TARP_HC_OUTSIDE,
            ConvectionAlgorithm.MOWITT_HC_OUTSIDE,
            ConvectionAlgorithm.DOE2_HC_OUTSIDE,
            ConvectionAlgorithm.BLAST_HC_OUTSIDE,
            ConvectionAlgorithm.ADAPTIVE,
            )


class HeatTransferAlgorithm(Enum):
    CTF = auto()
    EMPD = auto()
    CONDFD = auto()
    HAMT = auto()

    @classmethod
    def from_string(cls, strval):
        if strval in ('CTF', 'ConductionTransferFunction'):
            return cls.CTF
        elif strval in ('EMPD', 'MoisturePenetrationDepthConductionTransferFunction'):
            return cls.EMPD
        elif strval in ('CondFD', 'ConductionFiniteDifference'):
            return cls.CONDFD
        elif strval in ('HAMT', 'CombinedHeatAndMoistureFiniteElement'):
            return cls.HAMT
        else:
            sys.exit('Heat transfer algorithm (' + str(strval) + ') not valid.')


class ZoneAirSolutionAlgorithm(Enum):
    THIRD_ORDER = auto()
    ANALYTICAL = auto()
    EULER = auto()

    @classmethod
    def from_string(cls, strval):
        if strval == 'ThirdOrderBackwardDifference':
            return cls.THIRD_ORDER
        elif strval == 'AnalyticalSolution':
            return cls.ANALYTICAL
        elif strval == 'EulerMethod':
            return cls.EULER
        else:
            sys.exit('Zone air solution algorithm (' + str(strval) + ') not valid.')


class HeatBalanceOptions:
    """ An object to hold the options selected for the heat balance calculation """

    DEFAULT_MIN_WARMUP_DAYS = 6
    DEFAULT_MAX_WARMUP_DAYS = 25
    LOW_H_CONV_LIMIT = 0.1 # W/m2.K
    HIGH_H_CONV_LIMIT = 1000.0 # W/m2.K
    CONDFD_CONVERGENCE = 0.002 # K
    AUTO_VS_HARD_SIZING_THRESHOLD = 0.1

    def __init__(
            self,
            solar_distribution=SolarDistribution.FULL_EXTERIOR,
            inside_convection_algo=ConvectionAlgorithm.ASHRAE_TARP,
            outside_convection_algo=ConvectionAlgorithm.DOE2_HC_OUTSIDE,
            heat_transfer_algo=HeatTransferAlgorithm.CTF,
            zone_air_solution_algo=ZoneAirSolutionAlgorithm.THIRD_ORDER,
            min_warmup_days=DEFAULT_MIN_WARMUP_DAYS,
            max_warmup_days=DEFAULT_MAX_WARMUP_DAYS,
            low_h_conv_limit=LOW_H_CONV_LIMIT,
            high_h_conv_limit=HIGH_H_CONV_LIMIT,
            condfd_convergence=CONDFD_CONVERGENCE,
            display_extra_warnings=False,
            auto_vs_hard_sizing_threshold=AUTO_VS_HARD_SIZING_THRESHOLD,
            ):
        """ Construct a HeatBalanceOptions object

        Arguments:
        solar_distribution      -- SolarDistribution option
        inside_convection_algo  -- ConvectionAlgorithm used at inside faces
        outside_convection_algo -- ConvectionAlgorithm used at outside faces
        heat_transfer_algo      -- HeatTransferAlgorithm for surface conduction
        zone_air_solution_algo  -- ZoneAirSolutionAlgorithm for the zone air heat balance
        min_warmup_days         -- minimum number of warmup days
        max_warmup_days         -- maximum number of warmup days
        low_h_conv_limit        -- lowest allowed surface convection coefficient, in W / (m2.K)
        high_h_conv_limit       -- highest allowed surface convection coefficient, in W / (m2.K)
        condfd_convergence      -- convergence tolerance for finite difference conduction, in K
        display_extra_warnings  -- flag to report optional (extra) warnings
        auto_vs_hard_sizing_threshold -- fractional difference between design and
                                         hard-sized values above which a warning is given
        """
        if not inside_convection_algo.valid_inside():
            sys.exit('Convection algorithm (' + inside_convection_algo.name
                     + ') not valid for inside faces.')
        if not outside_convection_algo.valid_outside():
            sys.exit('Convection algorithm (' + outside_convection_algo.name
                     + ') not valid for outside faces.')
        if min_warmup_days > max_warmup_days:
            sys.exit('Minimum number of warmup days (' + str(min_warmup_days)
                     + ') is greater than maximum (' + str(max_warmup_days) + ').')
        if low_h_conv_limit >= high_h_conv_limit:
            sys.exit('Lower surface convection coefficient limit must be less than upper limit.')

        self.solar_distribution = solar_distribution
        self.inside_convection_algo = inside_convection_algo
        self.outside_convection_algo = outside_convection_algo
        self.heat_transfer_algo = heat_transfer_algo
        self.zone_air_solution_algo = zone_air_solution_algo
        self.min_warmup_days = min_warmup_days
        self.max_warmup_days = max_warmup_days
        self.low_h_conv_limit = low_h_conv_limit
        self.high_h_conv_limit = high_h_conv_limit
        self.condfd_convergence = condfd_convergence
        self.display_extra_warnings = display_extra_warnings
        self.auto_vs_hard_sizing_threshold = auto_vs_hard_sizing_threshold

    @classmethod
    def from_dict(cls, data):
        """ Create options from the (optional) input section, using defaults for omitted fields """
        kwargs = {}
        if 'solar_distribution' in data:
            kwargs['solar_distribution'] = SolarDistribution.from_string(data['solar_distribution'])
        if 'inside_convection_algorithm' in data:
            kwargs['inside_convection_algo'] \
                = ConvectionAlgorithm.from_string(data['inside_convection_algorithm'])
        if 'outside_convection_algorithm' in data:
            kwargs['outside_convection_algo'] \
                = ConvectionAlgorithm.from_string(data['outside_convection_algorithm'])
        if 'heat_transfer_algorithm' in data:
            kwargs['heat_transfer_algo'] \
                = HeatTransferAlgorithm.from_string(data['heat_transfer_algorithm'])
        if 'zone_air_solution_algorithm' in data:
            kwargs['zone_air_solution_algo'] \
                = ZoneAirSolutionAlgorithm.from_string(data['zone_air_solution_algorithm'])
        for key in (
                'min_warmup_days',
                'max_warmup_days',
                'low_h_conv_limit',
                'high_h_conv_limit',
                'condfd_convergence',
                'display_extra_warnings',
                'auto_vs_hard_sizing_threshold',
                ):
            if key in data:
                kwargs[key] = data[key]
        return cls(**kwargs)
