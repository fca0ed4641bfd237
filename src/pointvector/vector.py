#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 pointvector developers
""" n-dimensional vectors

    A :class:`Vector` is a displacement in n-dimensional space. Vectors add
    and subtract element-wise and scale by multiplying or dividing with a
    scalar. Adding a scalar to a vector is not supported.

    Multiplying two vectors gives their dot product. The cross product is
    available for 3 dimensional vectors.

    Concrete vector types are obtained with :func:`vector_type` or by
    subscripting Vector, e.g. ``Vector[np.float32, 3]``. :data:`Vector2` and
    :data:`Vector3` are provided for float64 components.

.. Created on Mon Oct 19 13:40:18 2026

.. codeauthor: pointvector developers
"""

import numpy as np

from pointvector.errors import DimensionalityError
from pointvector.fixedarray import (FixedArray, fixed_type, lookup_type,
                                    is_scalar, DEFAULT_DTYPE)


class Vector(FixedArray):
    """ Represents n-dimensional vectors. """

    def __iadd__(self, other):
        if not self._is_compatible(other):
            return NotImplemented
        self._data += self._components_of(other)
        return self

    def __isub__(self, other):
        if not self._is_compatible(other):
            return NotImplemented
        self._data -= self._components_of(other)
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
        if self._is_compatible(other):
            return self.dot(other)
        return self.copy().__imul__(other)

    def __neg__(self):
        result = type(self)()
        result._data[:] = -self._data
        return result

    def dot(self, other):
        """ return the dot product of self and other as a scalar """
        if not self._is_compatible(other):
            raise TypeError(f"can't take the dot product of "
                            f"{type(self).__name__} and "
                            f"{type(other).__name__}")
        return self.dtype.type(np.dot(self._data,
                                      self._components_of(other)))

    def cross(self, other):
        """ return the cross product of self and other

        Args:
            other: 3 dimensional vector on the right hand side

        Returns:
            a new vector normal to self and other

        Raises:
            :exc:`~pointvector.errors.DimensionalityError` if either vector
            isn't 3 dimensional
        """
        if not isinstance(other, Vector):
            raise TypeError(f"can't take the cross product of "
                            f"{type(self).__name__} and "
                            f"{type(other).__name__}")
        for v in (self, other):
            if v.dim != 3:
                raise DimensionalityError(v.dim, required=3)
        a = self._data
        b = self._components_of(other)
        result = type(self)()
        result._data[0] = a[1]*b[2] - a[2]*b[1]
        result._data[1] = a[2]*b[0] - a[0]*b[2]
        result._data[2] = a[0]*b[1] - a[1]*b[0]
        return result


def dot(v1, v2):
    """ return the dot product of vectors v1 and v2 """
    return v1.dot(v2)


def cross(v1, v2):
    """ return the cross product of 3 dimensional vectors v1 and v2 """
    return v1.cross(v2)


def vector_type(dim, dtype=DEFAULT_DTYPE):
    """ return the Vector type with dim components of dtype """
    return fixed_type(Vector, dim, dtype)


def __getattr__(name):
    return lookup_type(Vector, name)


Vector2 = vector_type(2)
Vector3 = vector_type(3)
