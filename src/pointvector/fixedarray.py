#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 pointvector developers
""" Fixed size, n-dimensional numeric container shared by points and vectors

    :class:`FixedArray` holds exactly `dim` components of a numpy `dtype` in
    a numpy array allocated at construction. The array is never resized or
    rebound; every operation writes into it in place.

    Concrete types are created by :func:`fixed_type` from a family class,
    e.g. :class:`~.point.Point`, a dimension and a dtype. The family class
    also accepts subscription, so that::

        Point[np.float32, 3] is fixed_type(Point, 3, np.float32)

    Generated types are named ``<family><dim>`` for float64 components and
    ``<family><dim>_<dtype>`` otherwise, e.g. ``Point3`` or
    ``Vector2_int32``. The family modules resolve these names on demand, so
    instances can be pickled and restored with json_tricks.

.. Created on Mon Oct 19 10:48:21 2026

.. codeauthor: pointvector developers
"""

import functools
import logging
import numbers
import operator
import re
from collections.abc import Iterable, Sequence

import numpy as np

from pointvector.errors import SizeMismatchError, ParseError
from pointvector.tolerance import EVAL_TOL, within_tolerance
from pointvector.textio import tokenize, read_components, format_components

logger = logging.getLogger(__name__)

DEFAULT_DTYPE = np.dtype(np.float64)

type_name_re = re.compile(r'(?P<family>[A-Za-z]+)(?P<dim>\d+)'
                          r'(?:_(?P<dtype>[a-z]+\d*))?$')


def is_scalar(value) -> bool:
    """ True if value is a real number or a 0-d numeric array """
    if isinstance(value, numbers.Real):
        return True
    return (isinstance(value, np.ndarray) and value.ndim == 0 and
            value.dtype.kind in 'biuf')


def type_name(family, dim, dtype) -> str:
    """ return the class name used for family at dim and dtype """
    if dtype == DEFAULT_DTYPE:
        return f"{family.__name__}{dim}"
    return f"{family.__name__}{dim}_{dtype.name}"


def fixed_type(family, dim, dtype=DEFAULT_DTYPE):
    """ return the concrete subclass of family for dim and dtype

    Args:
        family: a FixedArray family class, e.g. Point or Vector
        dim: positive integer number of components
        dtype: numpy integer or floating point dtype

    Repeated calls with the same arguments return the same class.
    """
    dim = operator.index(dim)
    if dim < 1:
        raise ValueError(f"dimension must be a positive integer, got {dim}")
    dtype = np.dtype(dtype)
    if dtype.kind not in 'iuf':
        raise TypeError(f"{dtype} is not an integer or floating point dtype")
    return _fixed_type(family, dim, dtype)


@functools.lru_cache(maxsize=None)
def _fixed_type(family, dim, dtype):
    name = type_name(family, dim, dtype)
    attrs = {
        'dim': dim,
        'dtype': dtype,
        '__module__': family.__module__,
        '__qualname__': name,
        '__doc__': f"{family.__name__} of {dim} {dtype.name} components",
        }
    cls = type(name, (family,), attrs)
    logger.debug("created type %s.%s", family.__module__, name)
    return cls


def lookup_type(family, name):
    """ return the type of family whose name is `name`

    Supports module level __getattr__ in the family modules.

    Raises:
        AttributeError: if name isn't a type name of family
    """
    m = type_name_re.match(name)
    if m is not None and m['family'] == family.__name__:
        dtype = DEFAULT_DTYPE if m['dtype'] is None else m['dtype']
        try:
            cls = fixed_type(family, int(m['dim']), dtype)
        except (TypeError, ValueError):
            pass
        else:
            if cls.__name__ == name:
                return cls
    raise AttributeError(f"module {family.__module__!r} has no attribute "
                         f"{name!r}")


class FixedArray:
    """ Base class of the point and vector families.

    Subclasses directly deriving from FixedArray define a family. The
    concrete types of a family are obtained with :func:`fixed_type` or by
    subscripting the family class. Only concrete types can be instantiated.

    Construction::

        cls()              all components zero
        cls(other)         copy of another instance of the same family
        cls(seq)           sequence of exactly dim values
        cls(v0, v1, ...)   dim values given as arguments
        cls(value)         value broadcast to every component

    Attributes:
        dim: number of components, fixed for the type
        dtype: numpy dtype of the components
        tolerance: absolute tolerance used by ==
    """

    dim = None
    dtype = DEFAULT_DTYPE
    tolerance = EVAL_TOL

    _family = None

    # mutable, and equality is approximate
    __hash__ = None

    # make numpy defer to our reflected operators
    __array_ufunc__ = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if FixedArray in cls.__bases__:
            cls._family = cls

    def __class_getitem__(cls, params):
        if cls._family is None or cls.dim is not None:
            raise TypeError(f"{cls.__name__} can't be subscripted")
        if not isinstance(params, tuple):
            params = (params,)
        if len(params) == 1:
            dtype, dim = DEFAULT_DTYPE, params[0]
        elif len(params) == 2:
            dtype, dim = params
        else:
            raise TypeError(f"{cls.__name__}[dtype, dim] expected")
        return fixed_type(cls._family, dim, dtype)

    def __init__(self, *args):
        if self.dim is None:
            raise TypeError(f"{type(self).__name__} has no dimension; use "
                            f"{type(self).__name__}[dtype, dim]")
        self._data = np.zeros(self.dim, dtype=self.dtype)
        if len(args) == 0:
            return
        if len(args) > 1:
            self._set_values(args)
            return

        value = args[0]
        if isinstance(value, FixedArray):
            if not self._is_compatible(value):
                raise TypeError(f"can't construct {type(self).__name__} "
                                f"from {type(value).__name__}")
            self._data[:] = value._data
        elif is_scalar(value):
            self._data[:] = self._as_scalar(value)
        else:
            self._set_values(value)

    @classmethod
    def zeros(cls):
        """ return an instance with every component zero """
        return cls()

    @classmethod
    def full(cls, value):
        """ return an instance with every component set to value """
        if not is_scalar(value):
            raise TypeError(f"expected a number, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def from_buffer(cls, buffer, offset=0):
        """ return an instance built from dim values of a flat buffer

        Args:
            buffer: any flat array-like, e.g. list, ndarray or array.array
            offset: index of the first value to use

        Values past offset + dim are ignored.

        Raises:
            :exc:`~pointvector.errors.SizeMismatchError` if fewer than dim
            values are available starting at offset
        """
        values = np.ravel(buffer)
        available = len(values) - offset if offset >= 0 else 0
        if available < cls.dim:
            logger.debug("buffer too short for %s: %d values at offset %d",
                         cls.__name__, len(values), offset)
            raise SizeMismatchError(
                cls.dim, max(available, 0),
                msg=f"buffer holds {max(available, 0)} values at offset "
                    f"{offset}, {cls.dim} are required")
        return cls(values[offset:offset + cls.dim])

    @classmethod
    def read(cls, source):
        """ return an instance read from dim whitespace separated tokens

        Args:
            source: str, text stream, iterable of lines, or
                    :class:`~pointvector.textio.TokenStream`

        When source is a text stream or a TokenStream, tokens beyond the
        first dim are left for the next read.

        Raises:
            :exc:`~pointvector.errors.ParseError`
        """
        obj = cls()
        obj.read_from(source)
        return obj

    @classmethod
    def from_string(cls, text: str):
        """ return an instance from a string of exactly dim numbers

        Raises:
            :exc:`~pointvector.errors.ParseError` if there are too few or too
            many tokens, or a token isn't a number
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        tokens = tokenize(text)
        obj = cls.read(tokens)
        extra = next(tokens, None)
        if extra is not None:
            raise ParseError(f"unexpected token {extra!r} after {cls.dim} "
                             "values", token=extra, index=cls.dim)
        return obj

    def read_from(self, source):
        """ fill the components from dim tokens read from source

        The components are only changed if all dim tokens are read
        successfully.

        Raises:
            :exc:`~pointvector.errors.ParseError`
        """
        values = read_components(tokenize(source), self.dim, self.dtype)
        self._data[:] = values
        return self

    def _set_values(self, values):
        if (isinstance(values, Iterable) and
                not isinstance(values, (np.ndarray, Sequence))):
            values = list(values)
        elif not isinstance(values, (np.ndarray, Sequence)):
            raise TypeError(f"expected a number or a sequence of numbers, "
                            f"got {type(values).__name__}")
        values = np.asarray(values)
        if values.ndim != 1:
            raise TypeError("expected a flat sequence of numbers")
        if len(values) != self.dim:
            logger.debug("%s given %d values", type(self).__name__,
                         len(values))
            raise SizeMismatchError(self.dim, len(values))
        if values.dtype.kind not in 'biuf':
            raise TypeError(f"expected numbers, got {values.dtype} values")
        self._data[:] = values

    def _as_scalar(self, value):
        """ convert a number to the component dtype """
        return self.dtype.type(value)

    def _is_compatible(self, other) -> bool:
        """ True if other belongs to the same family and has the same dim """
        return (isinstance(other, FixedArray) and
                other._family is self._family and other.dim == self.dim)

    def _components_of(self, other):
        return other._data.astype(self.dtype, copy=False)

    def _divide_by(self, value):
        s = self._as_scalar(value)
        if self.dtype.kind in 'iu':
            if s == 0:
                raise ZeroDivisionError("integer division by zero")
            # truncate toward zero
            q = np.abs(self._data) // np.abs(s)
            self._data[:] = np.sign(self._data) * np.sign(s) * q
        else:
            with np.errstate(divide='ignore', invalid='ignore'):
                self._data /= s

    def copy(self):
        """ return an independent copy """
        return type(self)(self)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def assign(self, other):
        """ overwrite every component with those of other and return self """
        if not self._is_compatible(other):
            raise TypeError(f"can't assign {type(other).__name__} to "
                            f"{type(self).__name__}")
        self._data[:] = self._components_of(other)
        return self

    def move_from(self, other):
        """ take the components of other, then zero other; return self """
        if other is self:
            return self
        self.assign(other)
        other._data[:] = 0
        return self

    @property
    def data(self):
        """ writable view of the component storage """
        return self._data.view()

    def tolist(self):
        """ return the components as a list of python numbers """
        return self._data.tolist()

    def __array__(self, dtype=None, copy=None):
        if copy:
            return np.array(self._data, dtype=dtype)
        return np.asarray(self._data, dtype=dtype)

    def _check_index(self, idx):
        i = operator.index(idx)
        if not -self.dim <= i < self.dim:
            raise IndexError(f"index {i} is out of range for dimension "
                             f"{self.dim}")
        return i

    def __getitem__(self, idx):
        return self._data[self._check_index(idx)]

    def __setitem__(self, idx, value):
        i = self._check_index(idx)
        if not is_scalar(value):
            raise TypeError(f"expected a number, got {type(value).__name__}")
        self._data[i] = self._as_scalar(value)

    def __len__(self):
        return self.dim

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other):
        if not self._is_compatible(other):
            return NotImplemented
        tol = max(self.tolerance, other.tolerance)
        return within_tolerance(self._data, other._data, tol)

    # non-mutating arithmetic is applied in place to a copy of self
    def __add__(self, other):
        return self.copy().__iadd__(other)

    def __sub__(self, other):
        return self.copy().__isub__(other)

    def __truediv__(self, other):
        return self.copy().__itruediv__(other)

    def __rmul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self.copy().__imul__(other)

    def __str__(self):
        return format_components(self._data)

    def __format__(self, format_spec):
        return format_components(self._data, format_spec)

    def __repr__(self):
        return f"{type(self).__name__}({self.tolist()!r})"

    def listobj_str(self):
        o_str = f"{type(self).__name__}: dim={self.dim}, "
        o_str += f"dtype={self.dtype.name}\n"
        o_str += f"{self}\n"
        return o_str

    def __json_encode__(self):
        return {'components': self.tolist()}

    def __json_decode__(self, **attrs):
        self._data = np.zeros(self.dim, dtype=self.dtype)
        self._set_values(attrs['components'])
