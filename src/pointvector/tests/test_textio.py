#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Oct 20 10:31:46 2026

@author: pointvector developers
"""


import io
import unittest
import numpy as np

from pointvector import textio
from pointvector.errors import ParseError
from pointvector.point import Point3
from pointvector.vector import Vector


class TestTokenize(unittest.TestCase):
    def test_string(self):
        tokens = textio.tokenize(" 1  2.5\n-3\t4 ")
        self.assertEqual(list(tokens), ['1', '2.5', '-3', '4'])

    def test_lines(self):
        tokens = textio.tokenize(['1 2', '', '3'])
        self.assertEqual(list(tokens), ['1', '2', '3'])

    def test_stream(self):
        stream = io.StringIO("1 2\n3 4 5 6\n")
        tokens = textio.tokenize(stream)
        self.assertEqual(next(tokens), '1')
        self.assertEqual(list(tokens), ['2', '3', '4', '5', '6'])

    def test_stream_stops_after_last_token(self):
        stream = io.StringIO("12 34\n56")
        tokens = textio.tokenize(stream)
        self.assertEqual(next(tokens), '12')
        self.assertEqual(stream.read(), "34\n56")

    def test_token_stream_passthrough(self):
        tokens = textio.tokenize("1 2 3")
        self.assertIsInstance(tokens, textio.TokenStream)
        self.assertIs(textio.tokenize(tokens), tokens)

    def test_generator_of_lines(self):
        lines = (ln for ln in ["1 2", "", "3 4"])
        self.assertEqual(list(textio.tokenize(lines)), ['1', '2', '3', '4'])
        self.assertEqual(list(textio.tokenize(map(str.strip, [" 5 6 "]))),
                         ['5', '6'])

    def test_empty(self):
        self.assertEqual(list(textio.tokenize("")), [])


class TestReadComponents(unittest.TestCase):
    def test_read_floats(self):
        tokens = textio.tokenize("1.5 -2 3e2 7")
        values = textio.read_components(tokens, 3)
        self.assertEqual(values, [1.5, -2., 300.])
        self.assertEqual(next(tokens), '7')

    def test_read_integers(self):
        values = textio.read_components(textio.tokenize("1 -2 3"), 3,
                                        np.int32)
        self.assertEqual(values, [1, -2, 3])
        self.assertTrue(all(isinstance(v, np.int32) for v in values))

    def test_integer_rejects_float_token(self):
        with self.assertRaises(ParseError) as cm:
            textio.read_components(textio.tokenize("1 2.5 3"), 3, np.int64)
        self.assertEqual(cm.exception.token, '2.5')
        self.assertEqual(cm.exception.index, 1)

    def test_integer_overflow(self):
        with self.assertRaises(ParseError):
            textio.read_components(textio.tokenize("1 300"), 2, np.int8)

    def test_malformed(self):
        with self.assertRaises(ParseError) as cm:
            textio.read_components(textio.tokenize("1 a 3"), 3)
        self.assertEqual(cm.exception.token, 'a')
        self.assertEqual(cm.exception.index, 1)

    def test_insufficient(self):
        with self.assertRaises(ParseError) as cm:
            textio.read_components(textio.tokenize("1 2"), 3)
        self.assertIsNone(cm.exception.token)
        self.assertEqual(cm.exception.index, 2)


class TestReadInstances(unittest.TestCase):
    def test_sequential_reads(self):
        tokens = textio.tokenize(io.StringIO("1 2\n3 4 5 6\n"))
        pt1 = Point3.read(tokens)
        pt2 = Point3.read(tokens)
        self.assertEqual(str(pt1), "(1, 2, 3)")
        self.assertEqual(str(pt2), "(4, 5, 6)")
        with self.assertRaises(ParseError):
            Point3.read(tokens)

    def test_sequential_reads_from_stream(self):
        stream = io.StringIO("1 2 3 4 5 6\n7 8\n9")
        pt1 = Point3.read(stream)
        pt2 = Point3.read(stream)
        pt3 = Point3.read(stream)
        self.assertEqual(str(pt1), "(1, 2, 3)")
        self.assertEqual(str(pt2), "(4, 5, 6)")
        self.assertEqual(str(pt3), "(7, 8, 9)")
        with self.assertRaises(ParseError):
            Point3.read(stream)

    def test_read_from_stream_in_place(self):
        stream = io.StringIO("1 2 3 4 5 6\n")
        pt = Point3()
        pt.read_from(stream)
        self.assertEqual(stream.read(), "4 5 6\n")
        self.assertEqual(str(pt), "(1, 2, 3)")

    def test_read_generator_of_lines(self):
        pt = Point3.read(ln for ln in ["1 2", "3"])
        self.assertEqual(str(pt), "(1, 2, 3)")

    def test_from_string_is_strict(self):
        with self.assertRaises(ParseError) as cm:
            Point3.from_string("1 2 3 4")
        self.assertEqual(cm.exception.token, '4')
        self.assertEqual(cm.exception.index, 3)
        with self.assertRaises(TypeError):
            Point3.from_string(["1 2 3"])

    def test_integer_vector(self):
        vec = Vector[np.int16, 2].from_string("-4 9")
        self.assertEqual(str(vec), "(-4, 9)")
        with self.assertRaises(ParseError):
            Vector[np.int16, 2].from_string("-4 9.5")


class TestFormat(unittest.TestCase):
    def test_format_component(self):
        self.assertEqual(textio.format_component(10.0), '10')
        self.assertEqual(textio.format_component(2.4843), '2.4843')
        self.assertEqual(textio.format_component(np.float32(1.1)), '1.1')
        self.assertEqual(textio.format_component(np.int32(-5)), '-5')
        self.assertEqual(textio.format_component(1e-5), '1e-05')
        self.assertEqual(textio.format_component(1.0, '.2f'), '1.00')

    def test_format_components(self):
        self.assertEqual(textio.format_components([10., 20., 30.]),
                         '(10, 20, 30)')
        self.assertEqual(textio.format_components([1.5]), '(1.5)')
        self.assertEqual(textio.format_components([1, 2], '03d'),
                         '(001, 002)')


if __name__ == '__main__':
    unittest.main(verbosity=2)
