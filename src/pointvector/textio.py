#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 pointvector developers
""" Support for reading and writing points and vectors as text

    Two independent formats are supported:

        - output, ``(c0, c1, ..., cN-1)``, produced by
          :func:`format_components`
        - input, N whitespace separated numeric tokens, consumed by
          :func:`read_components`

    The output format is not intended to be read back.

.. Created on Mon Oct 19 10:05:47 2026

.. codeauthor: pointvector developers
"""

import logging
import numbers

import numpy as np

from pointvector.errors import ParseError

logger = logging.getLogger(__name__)


class TokenStream:
    """ iterator over whitespace delimited str tokens

    Instances are returned by :func:`tokenize` and passed back through it
    unchanged, so consecutive reads share the position in the input.
    """

    def __init__(self, tokens):
        self._tokens = tokens

    def __iter__(self):
        return self

    def __next__(self):
        return next(self._tokens)


def tokens_from_lines(lines):
    """ generate whitespace delimited tokens from an iterable of lines """
    for ln in lines:
        yield from ln.split()


def tokens_from_stream(stream):
    """ generate whitespace delimited tokens from a text stream

    The stream is read a character at a time. Reading stops at the
    whitespace character ending the last token requested, so the rest of
    the stream is left for the next reader.
    """
    chars = []
    while True:
        c = stream.read(1)
        if c and not c.isspace():
            chars.append(c)
            continue
        if chars:
            yield ''.join(chars)
            chars = []
        if not c:
            return


def tokenize(source):
    """ return a :class:`TokenStream` over the tokens in source

    Args:
        source: a str, a text stream, an iterable of lines, or a
                :class:`TokenStream` previously returned by tokenize()

    A TokenStream is returned as is, so reusing it continues where the
    previous read stopped. Text streams are consumed only up to the last
    token read.
    """
    if isinstance(source, TokenStream):
        return source
    if isinstance(source, str):
        return TokenStream(iter(source.split()))
    if hasattr(source, 'read'):
        return TokenStream(tokens_from_stream(source))
    return TokenStream(tokens_from_lines(source))


def token_converter(dtype):
    """ return a function converting a token to a scalar of dtype """
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)

        def convert(tkn):
            value = int(tkn)
            if not info.min <= value <= info.max:
                raise OverflowError(f"{value} is out of range for {dtype}")
            return dtype.type(value)
        return convert
    return lambda tkn: dtype.type(float(tkn))


def read_components(tokens, count, dtype=np.float64):
    """ read count numeric tokens and return them as a list

    Args:
        tokens: iterator over str tokens, see :func:`tokenize`
        count: number of tokens to consume
        dtype: numpy dtype the tokens are converted to

    Returns:
        list of count scalars of type dtype

    Raises:
        :exc:`~pointvector.errors.ParseError` if the tokens run out or a
        token isn't a number of the requested kind
    """
    convert = token_converter(dtype)
    values = []
    for i in range(count):
        try:
            tkn = next(tokens)
        except StopIteration:
            logger.debug("input ended after %d of %d values", i, count)
            raise ParseError(f"expected {count} values, input ended after "
                             f"{i}", index=i) from None
        try:
            values.append(convert(tkn))
        except (ValueError, OverflowError):
            logger.debug("bad token %r for component %d", tkn, i)
            raise ParseError(f"can't read {tkn!r} as component {i}",
                             token=tkn, index=i) from None
    return values


def format_component(value, format_spec='') -> str:
    """ format a single component

    With an empty format_spec, integers are written as integers and floating
    point values in the shortest general format, e.g. 10.0 -> '10'.
    """
    if format_spec:
        return format(value, format_spec)
    if isinstance(value, numbers.Integral):
        return str(int(value))
    return f"{float(value):g}"


def format_components(values, format_spec='') -> str:
    """ return the values as a parenthesized, comma separated string """
    return '(' + ', '.join(format_component(v, format_spec)
                           for v in values) + ')'
