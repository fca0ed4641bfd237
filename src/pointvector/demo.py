#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 pointvector developers
""" Demonstration of the point and vector types

    Run as ``pointvector-demo [point|vector|all]`` or
    ``python -m pointvector.demo``.

.. Created on Mon Oct 19 15:21:09 2026

.. codeauthor: pointvector developers
"""

import argparse
import logging
import sys

import numpy as np

from pointvector.point import Point3
from pointvector.vector import Vector3

logger = logging.getLogger(__name__)


def point_demo(out=None):
    """ exercise construction, indexing, iteration and addition of points """
    out = sys.stdout if out is None else out
    data = np.array([1., 2., 3., 4.])
    # only the first 3 values are used
    pt1 = Point3.from_buffer(data)
    for i in range(len(pt1)):
        print(pt1[i], file=out)

    pt2 = Point3([5, 6, 7])
    pt3 = Point3(pt2)
    for p in pt3:
        print(p, file=out)

    pt4 = pt1 + pt2
    print(pt4, file=out)


def vector_demo(out=None):
    """ exercise the vector api, including dot and cross products """
    out = sys.stdout if out is None else out

    def example(n):
        print(f"Testing Example {n}...", file=out)

    example(1)
    data = [1., 2., 3., 4.]
    vec1 = Vector3.from_buffer(data)
    for i in range(len(vec1)):
        print(vec1[i], file=out)

    example(2)
    vec2 = Vector3([5, 6, 7])
    print(vec2, file=out)

    example(3)
    vec3 = Vector3(vec2)
    for v in vec3:
        print(v, file=out)

    example(4)
    vec4 = vec1 + vec2
    print(vec4, file=out)

    example(5)
    vec5 = vec2 - vec1
    vec5_data = vec5.data
    for i in range(len(vec5_data)):
        print(vec5_data[i], file=out)

    example(6)
    vec1dot = vec1 * vec1
    print(vec1dot, file=out)

    example(7)
    print(vec1.cross(vec2), file=out)


demos = {
    'point': point_demo,
    'vector': vector_demo,
    }


def main(argv=None):
    ap = argparse.ArgumentParser(
        prog='pointvector-demo',
        description='Demonstrate n-dimensional points and vectors')
    ap.add_argument('which', nargs='?', choices=['point', 'vector', 'all'],
                    default='all', help='which demo to run (default: all)')
    ap.add_argument('--log-level', type=str, default='WARNING',
                    choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    names = list(demos) if args.which == 'all' else [args.which]
    for name in names:
        logger.info("running %s demo", name)
        demos[name]()
    return 0


if __name__ == '__main__':
    sys.exit(main())
