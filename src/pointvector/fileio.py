#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 pointvector developers
""" Save and restore points and vectors in JSON files

    The file holds a dict with the pointvector version and the saved items,
    written with json_tricks. Each point or vector is encoded through its
    ``__json_encode__`` hook and restored to the same concrete type.

.. Created on Wed Oct 21 14:12:09 2026

.. codeauthor: pointvector developers
"""

import logging
from pathlib import Path

import json_tricks

import pointvector
from pointvector.fixedarray import FixedArray

logger = logging.getLogger(__name__)


def save_items(items, file_name):
    """Save a point, a vector, or a list of them to a JSON file.

    Args:
        items: a FixedArray instance or an iterable of instances
        file_name: str or Path

    Returns:
        the Path written
    """
    single = isinstance(items, FixedArray)
    items = [items] if single else list(items)
    for item in items:
        if not isinstance(item, FixedArray):
            raise TypeError(f"can't save {type(item).__name__} instances")

    file_pth = Path(file_name)
    if not file_pth.parent.exists():
        file_pth.parent.mkdir(parents=True)

    fs_dict = {}
    fs_dict['pv_version'] = pointvector.__version__
    fs_dict['single'] = single
    fs_dict['items'] = items

    with open(file_pth, 'w') as f:
        json_tricks.dump(fs_dict, f, indent=1,
                         separators=(',', ':'), allow_nan=True)
    logger.debug("saved %d items to %s", len(items), file_pth)
    return file_pth


def open_items(file_name):
    """Read a file written by :func:`save_items`.

    Returns:
        the saved instance, or a list of instances if a list was saved

    Raises:
        ValueError: if the file wasn't written by :func:`save_items`
    """
    with open(file_name, 'r') as f:
        obj_dict = json_tricks.load(f)
    if not isinstance(obj_dict, dict) or 'items' not in obj_dict:
        raise ValueError(f"{file_name} is not a pointvector file")
    logger.debug("%s written by pointvector %s", file_name,
                 obj_dict.get('pv_version'))
    items = obj_dict['items']
    if obj_dict.get('single', False):
        return items[0]
    return items
