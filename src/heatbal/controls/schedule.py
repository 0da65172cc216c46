#!/usr/bin/env python3

"""
This module provides functions to expand compact schedule input into time
series, and objects to look up the current value of a schedule.
"""

# Standard library imports
import sys


def expand_schedule(sched_type, schedule, subschedule_name='main'):
    """ Expand a compact schedule into a list with one entry per time series step

    Arguments:
    sched_type       -- type of the schedule values (e.g. float or bool)
    schedule         -- dictionary of named subschedules. Each subschedule is a
                        list whose entries are either a value, a dictionary
                        with "value" and "repeat" keys, or the name of another
                        subschedule to be inserted at that point
    subschedule_name -- name of the subschedule to expand
    """
    if subschedule_name not in schedule:
        sys.exit('Subschedule (' + str(subschedule_name) + ') not found.')

    expanded = []
    for entry in schedule[subschedule_name]:
        if isinstance(entry, str):
            if entry == subschedule_name:
                sys.exit('Subschedule (' + entry + ') refers to itself.')
            expanded.extend(expand_schedule(sched_type, schedule, entry))
        elif isinstance(entry, dict):
            expanded.extend([sched_type(entry['value'])] * entry['repeat'])
        else:
            expanded.append(sched_type(entry))
    return expanded


class AlwaysOnSchedule:
    """ An object to represent the reserved schedule that is always on """

    def value(self):
        return 1.0

    def is_on(self):
        return True


class ScheduleValues:
    """ An object to model a schedule with a value which varies per timestep """

    def __init__(self, name, schedule, simulation_time, start_day, time_series_step):
        """ Construct a ScheduleValues object

        Arguments:
        name             -- name of the schedule
        schedule         -- list of float values (one entry per time series step)
        simulation_time  -- reference to SimulationTime object
        start_day        -- first day of the time series, day of the year, 0 to 365 (single value)
        time_series_step -- timestep of the time series data, in hours
        """
        self.name = name
        self.__schedule        = schedule
        self.__simulation_time = simulation_time
        self.__start_day = start_day
        self.__time_series_step = time_series_step

    def value(self):
        """ Return schedule value for the current timestep """
        return self.__schedule[
            self.__simulation_time.time_series_idx(self.__start_day, self.__time_series_step)
            ]

    def is_on(self):
        """ Return true if schedule allows system to run """
        return self.value() > 0.0


class ScheduleRegistry:
    """ An object to resolve schedule names to stable indices and evaluate them

    Index 0 is reserved for the schedule that is always on.
    """

    ALWAYS_ON = 0

    def __init__(self):
        self.__schedules = [AlwaysOnSchedule()]
        self.__index_by_name = {}

    def add(self, schedule):
        """ Register a schedule object and return its index """
        if schedule.name.upper() in self.__index_by_name:
            sys.exit('Error: Schedule name already used: ' + schedule.name)
        self.__schedules.append(schedule)
        idx = len(self.__schedules) - 1
        self.__index_by_name[schedule.name.upper()] = idx
        return idx

    def index(self, name):
        """ Return index of the named schedule, or None if there is no such schedule """
        return self.__index_by_name.get(name.upper())

    def value(self, idx):
        """ Return current value of the schedule with the given index """
        return self.__schedules[idx].value()

    def is_on(self, idx):
        return self.__schedules[idx].is_on()

    def __len__(self):
        return len(self.__schedules)
