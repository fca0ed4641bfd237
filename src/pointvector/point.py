#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 pointvector developers
""" n-dimensional points

    A :class:`Point` is a location in n-dimensional space. Points support
    element-wise addition and subtraction with other points of the same
    dimension, and addition, subtraction, multiplication and division of
    every coordinate by a scalar.

    Concrete point types are obtained with :func:`point_type` or by
    subscripting Point, e.g. ``Point[np.float32, 3]``. :data:`Point2` and
    :data:`Point3` are provided for float64 coordinates.

.. Created on Mon Oct 19 13:02:55 2026

.. codeauthor: pointvector developers
"""

from pointvector.fixedarray import (FixedArray, fixed_type, lookup_type,
                                    is_scalar, DEFAULT_DTYPE)


class Point(FixedArray):
    """ Represents n-dimensional points. """

    def __iadd__(self, other):
        if self._is_compatible(other):
            self._data += self._components_of(other)
        elif is_scalar(other):
            self._data += self._as_scalar(other)
        else:
            return NotImplemented
        return self

    def __isub__(self, other):
        if self._is_compatible(other):
            self._data -= self._components_of(other)
        elif is_scalar(other):
            self._data -= self._as_scalar(other)
        else:
            return NotImplemented
        return self

    def __imul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        self._data *= self._as_scalar(other)
        return self

    def __itruediv__(self, other):
        if not is_scalar(other):
            return NotImplemented
        self._divide_by(other)
        return self

    def __mul__(self, other):
        return self.copy().__imul__(other)


def point_type(dim, dtype=DEFAULT_DTYPE):
    """ return the Point type with dim coordinates of dtype """
    return fixed_type(Point, dim, dtype)


def __getattr__(name):
    return lookup_type(Point, name)


Point2 = point_type(2)
Point3 = point_type(3)
