# coding: utf-8
from typing import Callable
import math
import re
import struct
from stdread.errors import ParseMismatchException

# Number parsing with one fixed convention, whatever the host locale says:
# ASCII digits, '.' as the decimal point, no grouping separators. Python's own
# int() and float() are too lenient here (underscores, surrounding
# whitespace, 'inf'), so tokens are vetted against these patterns first.

integer_pattern = re.compile(r'[+-]?[0-9]+')
decimal_pattern = re.compile(r"""
    [+-]?
    (?:
      (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+) # digits, optionally with a point
      (?:[eE][+-]?[0-9]+)? # exponent
      |
      NaN
      |
      Infinity
    )
    """, re.VERBOSE)

BYTE_BITS  = 8
SHORT_BITS = 16
INT_BITS   = 32
LONG_BITS  = 64

def int_parser(bits: int, expected: str) -> Callable[[str], int]:
    lo = -(1 << (bits - 1))
    hi = (1 << (bits - 1)) - 1
    max_digits = len(str(hi))
    def out_of_range(token: str) -> ParseMismatchException:
        return ParseMismatchException(token, expected,
                '{} is out of range for {} ({} to {})'.format(
                    token if len(token) <= 40 else token[:37] + '...',
                    expected, lo, hi))
    def inner(token: str) -> int:
        if not integer_pattern.fullmatch(token):
            raise ParseMismatchException(token, expected)
        # int() refuses very long digit strings, so length-check first
        digits = token.lstrip('+-').lstrip('0')
        if len(digits) > max_digits:
            raise out_of_range(token)
        res = int(digits or '0')
        if token[0] == '-': res = -res
        if not lo <= res <= hi:
            raise out_of_range(token)
        return res
    return inner

parse_byte  = int_parser(BYTE_BITS,  'byte')
parse_short = int_parser(SHORT_BITS, 'short')
parse_int   = int_parser(INT_BITS,   'int')
parse_long  = int_parser(LONG_BITS,  'long')

def parse_double(token: str) -> float:
    if not decimal_pattern.fullmatch(token):
        raise ParseMismatchException(token, 'double')
    return float(token)

def to_single(x: float) -> float:
    # Round to the nearest IEEE single; anything past the largest finite
    # single becomes an infinity instead of an error.
    try:
        return struct.unpack('f', struct.pack('f', x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)

def parse_float(token: str) -> float:
    if not decimal_pattern.fullmatch(token):
        raise ParseMismatchException(token, 'float')
    return to_single(float(token))

def parse_boolean(token: str) -> bool:
    t = token.lower()
    if t == 'true' or t == '1': return True
    if t == 'false' or t == '0': return False
    raise ParseMismatchException(token, 'boolean')

def format_int(n: int) -> str:
    return str(n)

def format_float(x: float) -> str:
    if math.isnan(x): return 'NaN'
    if math.isinf(x): return 'Infinity' if x > 0 else '-Infinity'
    return repr(x)

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
