#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Oct 21 14:40:18 2026

@author: pointvector developers
"""


import json
import tempfile
import unittest
from pathlib import Path

import numpy as np

from pointvector import fileio
from pointvector.point import Point, Point3
from pointvector.vector import Vector3


class FileIOTestCase(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.dir_pth = Path(self.tmp_dir.name)

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_save_and_open_single(self):
        pt = Point[np.int32, 2]([4, -9])
        file_pth = fileio.save_items(pt, self.dir_pth / 'pt.json')
        restored = fileio.open_items(file_pth)
        self.assertIs(type(restored), type(pt))
        self.assertEqual(restored, pt)

    def test_save_and_open_list(self):
        items = [Point3([1., 2., 3.]), Vector3([-7.0, 3.2, 1.47])]
        file_pth = fileio.save_items(items, self.dir_pth / 'sub' / 'pv.json')
        self.assertTrue(file_pth.exists())
        restored = fileio.open_items(file_pth)
        self.assertEqual(restored, items)
        self.assertIs(type(restored[1]), Vector3)

    def test_file_contents(self):
        file_pth = fileio.save_items([Point3(1., 2., 3.)],
                                     self.dir_pth / 'pv.json')
        with open(file_pth) as f:
            contents = json.load(f)
        self.assertIn('pv_version', contents)
        self.assertFalse(contents['single'])
        self.assertEqual(len(contents['items']), 1)

    def test_save_rejects_other_objects(self):
        with self.assertRaises(TypeError):
            fileio.save_items([Point3(), (1., 2., 3.)],
                              self.dir_pth / 'bad.json')

    def test_open_rejects_other_files(self):
        file_pth = self.dir_pth / 'other.json'
        with open(file_pth, 'w') as f:
            json.dump([1, 2, 3], f)
        with self.assertRaises(ValueError):
            fileio.open_items(file_pth)


if __name__ == '__main__':
    unittest.main(verbosity=2)
