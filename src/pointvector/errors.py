#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 pointvector developers
""" Exceptions raised by the point and vector types

.. Created on Mon Oct 19 09:12:40 2026

.. codeauthor: pointvector developers
"""


class PointVectorError(Exception):
    """ Base class for errors raised by points and vectors """


class SizeMismatchError(PointVectorError, ValueError):
    """ Exception raised when the number of values doesn't match the dimension

    Attributes:
        expected: the dimension of the type being constructed
        actual: the number of values supplied
    """
    def __init__(self, expected, actual, msg=None):
        self.expected = expected
        self.actual = actual
        if msg is None:
            msg = (f"Size of the array ({actual}) is not equal to the "
                   f"dimension of the object ({expected})")
        super().__init__(msg)


class DimensionalityError(PointVectorError, ValueError):
    """ Exception raised when an operation requires a specific dimension """
    def __init__(self, dim, required=3):
        self.dim = dim
        self.required = required
        super().__init__(f"Operation requires dimension {required}, "
                         f"got dimension {dim}")


class ParseError(PointVectorError, ValueError):
    """ Exception raised when textual input can't fill every component

    Attributes:
        token: the offending token, or None if the input ran out
        index: the component index being read when the failure occurred
    """
    def __init__(self, msg, token=None, index=None):
        self.token = token
        self.index = index
        super().__init__(msg)
