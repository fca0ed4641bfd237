#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 pointvector developers
""" Tolerance used when comparing points and vectors

    Components are compared by absolute difference. Two fixed size arrays
    are equal when no pair of corresponding components differs by more than
    the tolerance. For integer dtypes any nonzero difference is at least 1,
    so the same rule reduces to exact equality.

.. Created on Mon Oct 19 09:30:02 2026

.. codeauthor: pointvector developers
"""
import numpy as np

EVAL_TOL = 1.0e-4
""" default absolute tolerance for component comparisons """


def component_diff(a, b):
    """ return the absolute differences between components of a and b

    The difference is taken in float64 so unsigned dtypes don't wrap around.
    """
    return np.abs(np.subtract(a, b, dtype=np.float64))


def within_tolerance(a, b, tol=EVAL_TOL) -> bool:
    """ True if every component of a is within tol of the one in b.

    Args:
        a: array-like of numbers
        b: array-like of numbers, same length as a
        tol: absolute tolerance, defaults to :data:`EVAL_TOL`
    """
    a = np.asarray(a)
    b = np.asarray(b)
    if a.shape != b.shape:
        return False
    return bool(np.all(component_diff(a, b) <= tol))
