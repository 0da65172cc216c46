#!/usr/bin/env python3

"""
This module contains objects that collect the values reported by components
at each timestep, and the values reported once by sizing calculations.
"""

# Standard library imports
import sys
from enum import Enum, auto

# Third-party imports
import numpy as np


class Aggregation(Enum):
    SUM = auto()
    AVERAGE = auto()

    @classmethod
    def from_string(cls, strval):
        if strval == 'Sum':
            return cls.SUM
        elif strval == 'Average':
            return cls.AVERAGE
        else:
            sys.exit('Report variable aggregation (' + str(strval) + ') not valid.')


class OutputVariableConnection:
    """ An object to represent the connection of a component to one of its report variables

    The component keeps this object and calls record() each timestep, so it
    does not have to give the key and variable name on every call.
    """

    def __init__(self, output_variables, key, variable_name):
        """ Construct an OutputVariableConnection object

        Arguments:
        output_variables -- reference to the OutputVariables object
        key              -- name of the component reporting the variable
        variable_name    -- name of the report variable
        """
        self.__output_variables = output_variables
        self.__key = key
        self.__variable_name = variable_name

    def record(self, value):
        """ Forwards the value for the current timestep to the OutputVariables object """
        self.__output_variables._OutputVariables__record(self.__key, self.__variable_name, value)


class OutputVariables:
    """ An object to hold the time series of all registered report variables """

    def __init__(self, simulation_time):
        """ Construct an OutputVariables object

        Arguments:
        simulation_time -- reference to SimulationTime object

        Other variables:
        values -- dictionary of numpy arrays (one entry per timestep), keyed
                  by (key, variable name) tuples
        units  -- units of each variable, keyed as for values
        """
        self.__simulation_time = simulation_time
        self.__values = {}
        self.__units = {}
        self.__aggregation = {}

    def connection(self, key, variable_name, units, aggregation=Aggregation.AVERAGE):
        """ Register a report variable and return an OutputVariableConnection for it """
        if (key, variable_name) in self.__values:
            sys.exit('Error: Report variable already registered: '
                     + variable_name + ' for ' + key)

        self.__values[(key, variable_name)] = np.zeros(self.__simulation_time.total_steps())
        self.__units[(key, variable_name)] = units
        self.__aggregation[(key, variable_name)] = aggregation
        return OutputVariableConnection(self, key, variable_name)

    def __record(self, key, variable_name, value):
        """ Record value of a report variable for the current timestep

        Note: Call via an OutputVariableConnection object, not directly.
        """
        if (key, variable_name) not in self.__values:
            sys.exit('Error: Report variable (' + variable_name + ' for ' + key
                     + ') not already registered by calling connection function.')

        t_idx = self.__simulation_time.index()
        self.__values[(key, variable_name)][t_idx] = value

    def variables(self):
        """ Return list of registered (key, variable name) tuples, in order of registration """
        return list(self.__values.keys())

    def units(self, key, variable_name):
        return self.__units[(key, variable_name)]

    def results(self, key, variable_name):
        """ Return array of the values of a report variable for each timestep """
        return self.__values[(key, variable_name)]

    def summary(self, key, variable_name):
        """ Return the variable aggregated over the whole run (total or mean) """
        values = self.__values[(key, variable_name)]
        if self.__aggregation[(key, variable_name)] == Aggregation.SUM:
            return float(np.sum(values))
        return float(np.mean(values))


class SizingReport:
    """ An object to hold the sizes calculated or entered for components """

    def __init__(self):
        self.__rows = []

    def report(self, component_type, component_name, description, value):
        """ Record a size

        Arguments:
        component_type -- type of the component, e.g. ZoneHVAC:Baseboard:Convective:Electric
        component_name -- name of the component
        description    -- description of the size, including units
        value          -- size
        """
        self.__rows.append((component_type, component_name, description, value))

    def rows(self):
        return list(self.__rows)
