#!/usr/bin/env python3

"""
This module provides objects to collect warnings and errors found while
building and checking the model.

Warnings and severe errors are accumulated so that all problems with the
input are reported in a single pass. A fatal error stops the program
immediately, in the same way as the input checks elsewhere in the code base.
"""

# Standard library imports
import sys
from enum import Enum, auto


class Severity(Enum):
    WARNING = auto()
    SEVERE = auto()
    FATAL = auto()

    def label(self):
        if self == Severity.WARNING:
            return '** Warning **'
        elif self == Severity.SEVERE:
            return '**  Severe  **'
        else:
            return '**  Fatal  **'


class Diagnostic:
    """ An object to represent a single reported condition """

    def __init__(self, severity, message, object_type=None, object_name=None, object_id=None):
        """ Construct a Diagnostic object

        Arguments:
        severity    -- Severity of the condition
        message     -- main message text
        object_type -- type of the input object the condition applies to, if any
        object_name -- name of the object the condition applies to, if any
        object_id   -- handle of the object in its registry, if any
        """
        self.severity = severity
        self.message = message
        self.object_type = object_type
        self.object_name = object_name
        self.object_id = object_id
        self.continuation = []

    def lines(self):
        """ Return the message formatted as lines of text """
        out = [self.severity.label() + ' ' + self.message]
        for line in self.continuation:
            out.append('**   ~~~   ** ' + line)
        return out


class Diagnostics:
    """ An ordered collection of Diagnostic objects

    This is returned by the checking operations in place of an "errors found"
    flag. Callers fold the diagnostics returned by each operation into a
    top-level collection with extend().
    """

    def __init__(self):
        self.__items = []

    def __iter__(self):
        return iter(self.__items)

    def __len__(self):
        return len(self.__items)

    def __add(self, severity, message, object_type, object_name, object_id, continuation):
        diag = Diagnostic(severity, message, object_type, object_name, object_id)
        diag.continuation.extend(continuation)
        self.__items.append(diag)
        return diag

    def warning(self, message, *continuation, object_type=None, object_name=None, object_id=None):
        """ Record a condition that is reported but does not stop the run """
        return self.__add(
            Severity.WARNING, message, object_type, object_name, object_id, continuation,
            )

    def severe(self, message, *continuation, object_type=None, object_name=None, object_id=None):
        """ Record an error; the run continues so that all errors are found """
        return self.__add(
            Severity.SEVERE, message, object_type, object_name, object_id, continuation,
            )

    def fatal(self, message, *continuation, object_type=None, object_name=None, object_id=None):
        """ Record an error that stops the program, then stop

        Conditions recorded earlier are printed first, so that the causes of
        the fatal error are not lost.
        """
        self.report()
        diag = self.__add(
            Severity.FATAL, message, object_type, object_name, object_id, continuation,
            )
        sys.exit('\n'.join(diag.lines()))

    def extend(self, other):
        """ Append all diagnostics from another collection """
        self.__items.extend(other)

    def errors_found(self):
        """ Return True if any severe (or fatal) error has been recorded """
        return any(d.severity != Severity.WARNING for d in self.__items)

    def warnings(self):
        return [d for d in self.__items if d.severity == Severity.WARNING]

    def errors(self):
        return [d for d in self.__items if d.severity != Severity.WARNING]

    def for_object(self, object_type, object_id):
        """ Return diagnostics attached to a particular object """
        return [
            d for d in self.__items
            if d.object_type == object_type and d.object_id == object_id
            ]

    def report(self):
        """ Print all recorded diagnostics """
        for diag in self.__items:
            for line in diag.lines():
                print(line)
