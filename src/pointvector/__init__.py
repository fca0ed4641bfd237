# -*- coding: utf-8 -*-
""" The **pointvector** package of fixed size, n-dimensional points and
    vectors

    The value types are provided by the following modules:

        - :mod:`~.point`: :class:`~.point.Point` and its concrete types,
          e.g. :data:`~.point.Point3`
        - :mod:`~.vector`: :class:`~.vector.Vector` and its concrete types,
          e.g. :data:`~.vector.Vector3`, plus dot and cross products

    They are supported by:

        - :mod:`~.fixedarray`: the fixed size container both families share
        - :mod:`~.tolerance`: the tolerance used by equality comparisons
        - :mod:`~.textio`: reading and writing components as text
        - :mod:`~.errors`: exception classes

    Points and vectors are saved to and restored from JSON files by
    :mod:`~.fileio`.

    The :mod:`~.demo` module is a demonstration program exercising the
    public api.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'

from pointvector.errors import (PointVectorError, SizeMismatchError,
                                DimensionalityError, ParseError)
from pointvector.tolerance import EVAL_TOL
from pointvector.point import Point, Point2, Point3, point_type
from pointvector.vector import (Vector, Vector2, Vector3, vector_type,
                                dot, cross)
from pointvector.fileio import save_items, open_items


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    Classes may implement the `listobj_str` method that returns a string
    containing a formatted description of the object, e.g.
    :meth:`.FixedArray.listobj_str`.
    """
    try:
        print(obj.listobj_str())
    except AttributeError:
        print(repr(obj))
