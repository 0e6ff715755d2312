# coding: utf-8
from typing import List, Optional
import re

# Whitespace is whatever Python's Unicode-aware \s says it is, which covers
# \r\n, \u2028, \u2029 and \u0085 along with the usual ASCII suspects.
# Note that it also splits on no-break spaces (\u00a0, \u2007, \u202f),
# which Java's \p{javaWhitespace} would keep inside a token.
whitespace_pattern = re.compile(r'\s+')
leading_whitespace_pattern = re.compile(r'\s*')
word_pattern = re.compile(r'\S+')

# Order matters: \r\n has to win over a lone \r.
line_separator_pattern = re.compile('\r\n|[\n\r\u2028\u2029\u0085]')

def skip_whitespace(text: str, index: int = 0) -> int:
    match_obj = leading_whitespace_pattern.match(text, index)
    assert match_obj is not None # \s* always matches
    return match_obj.end()

def word_end(text: str, index: int = 0) -> int:
    match_obj = word_pattern.match(text, index)
    if match_obj: return match_obj.end()
    return index

def find_line_separator(text: str, index: int = 0) -> Optional['re.Match[str]']:
    return line_separator_pattern.search(text, index)

def split_words(text: str) -> List[str]:
    """Split text on runs of whitespace.

    Trailing empty strings are dropped, and so is the single leading empty
    string produced when the text starts with whitespace.
    """
    tokens = whitespace_pattern.split(text)
    while tokens and not tokens[-1]: tokens.pop()
    if not tokens or tokens[0]: return tokens
    # don't include first token if it is leading whitespace
    return tokens[1:]

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
