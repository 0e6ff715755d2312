# coding: utf-8
from typing import Callable, IO, Iterator, List, Optional, Tuple, TypeVar
import contextlib
import enum
import io
import logging
import sys
import threading
from stdread.errors import EndOfInputException
from stdread.lex import find_line_separator, skip_whitespace, split_words, word_end
import stdread.num as num

logger = logging.getLogger(__name__)

T = TypeVar('T')

# No BOM handling: a leading U+FEFF is handed to the caller like any other
# character.
CHARSET_NAME = 'utf-8'

class Delimiter(enum.Enum):
    WHITESPACE = 'whitespace' # tokens are runs of non-whitespace
    NONE = 'none'             # every character is a token
    EVERYTHING = 'everything' # the rest of the input is one token

def open_stdin() -> IO[str]:
    """Open a fresh UTF-8 text view of standard input.

    Line endings are left alone (newline=''), since line splitting is done
    here rather than by the io layer. If sys.stdin has been swapped for
    something without a file descriptor, it is used as is.
    """
    try:
        fd = sys.stdin.fileno()
    except (AttributeError, io.UnsupportedOperation):
        return sys.stdin
    return open(fd, 'r', encoding=CHARSET_NAME, newline='', closefd=False)

class InputSession: # {{{
    """Tokenizing view over a text stream.

    Input is pulled from the stream one line at a time into a lookahead
    buffer, so interactive reads only block for as much as they need. The
    delimiter is WHITESPACE between calls; read_char and friends switch it
    under the lock and always switch it back.
    """

    def __init__(self, file: IO[str]) -> None:
        self.file = file
        self.delimiter = Delimiter.WHITESPACE
        self._buffer = ''
        self._index = 0
        self._eof = False
        self._lock = threading.RLock()
        logger.debug('input session opened on %r', file)

    @classmethod
    def from_stdin(cls) -> 'InputSession':
        return cls(open_stdin())

    # buffering {{{
    def _fill(self) -> bool:
        if self._eof: return False
        chunk = self.file.readline()
        if not chunk:
            self._eof = True
            logger.debug('end of input reached on %r', self.file)
            return False
        self._buffer += chunk
        return True

    def _ensure(self, n: int) -> bool:
        while len(self._buffer) - self._index < n:
            if not self._fill(): return False
        return True

    def _consume(self, end: int) -> str:
        res = self._buffer[self._index:end]
        self._buffer = self._buffer[end:]
        self._index = 0
        return res
    # }}}
    # tokenizing {{{
    def _peek_span(self) -> Optional[Tuple[int, int]]:
        # Locate the next token under the current delimiter without
        # consuming anything.
        if self.delimiter is Delimiter.NONE:
            if not self._ensure(1): return None
            return (self._index, self._index + 1)

        if self.delimiter is Delimiter.EVERYTHING:
            while self._fill(): pass
            if self._index == len(self._buffer): return None
            return (self._index, len(self._buffer))

        start = skip_whitespace(self._buffer, self._index)
        while start == len(self._buffer):
            if not self._fill(): return None
            start = skip_whitespace(self._buffer, start)
        end = word_end(self._buffer, start)
        while end == len(self._buffer) and self._fill():
            end = word_end(self._buffer, end)
        return (start, end)

    def _has_next(self) -> bool:
        return self._peek_span() is not None

    def _next(self) -> str:
        span = self._peek_span()
        if span is None: raise EndOfInputException()
        start, end = span
        token = self._buffer[start:end]
        self._consume(end)
        return token

    def _next_parsed(self, parse: Callable[[str], T]) -> T:
        # The token stays in the buffer if parse raises.
        span = self._peek_span()
        if span is None: raise EndOfInputException()
        start, end = span
        res = parse(self._buffer[start:end])
        self._consume(end)
        return res

    @contextlib.contextmanager
    def delimited(self, delimiter: Delimiter) -> Iterator['InputSession']:
        with self._lock:
            saved = self.delimiter
            self.delimiter = delimiter
            try:
                yield self
            finally:
                self.delimiter = saved
    # }}}
    # predicates {{{
    def is_empty(self) -> bool:
        with self._lock:
            return not self._has_next()

    def has_next_line(self) -> bool:
        with self._lock:
            return self._ensure(1)

    def has_next_char(self) -> bool:
        with self.delimited(Delimiter.NONE):
            return self._has_next()
    # }}}
    # reads {{{
    def read_line(self) -> Optional[str]:
        """Read the rest of the current line, without its terminator.

        Returns None, rather than raising, once the input is exhausted.
        """
        with self._lock:
            if not self._ensure(1): return None
            while True:
                m = find_line_separator(self._buffer, self._index)
                if m is None:
                    if self._fill(): continue
                    return self._consume(len(self._buffer))
                # a trailing \r might be the first half of \r\n
                if (m.group() == '\r' and m.end() == len(self._buffer)
                        and self._fill()):
                    continue
                line = self._buffer[self._index:m.start()]
                self._consume(m.end())
                return line

    def read_char(self) -> str:
        with self.delimited(Delimiter.NONE):
            c = self._next()
            assert len(c) == 1
            return c

    def read_all(self) -> str:
        with self.delimited(Delimiter.EVERYTHING):
            if not self._has_next(): return ''
            return self._next()

    def read_string(self) -> str:
        with self._lock:
            return self._next()

    def read_int(self) -> int:
        with self._lock:
            return self._next_parsed(num.parse_int)

    def read_long(self) -> int:
        with self._lock:
            return self._next_parsed(num.parse_long)

    def read_short(self) -> int:
        with self._lock:
            return self._next_parsed(num.parse_short)

    def read_byte(self) -> int:
        with self._lock:
            return self._next_parsed(num.parse_byte)

    def read_double(self) -> float:
        with self._lock:
            return self._next_parsed(num.parse_double)

    def read_float(self) -> float:
        with self._lock:
            return self._next_parsed(num.parse_float)

    def read_boolean(self) -> bool:
        # Unlike the numeric reads, the token is used up even when it turns
        # out not to be a boolean.
        with self._lock:
            return num.parse_boolean(self._next())
    # }}}
    # bulk reads {{{
    def read_all_strings(self) -> List[str]:
        return split_words(self.read_all())

    def read_all_lines(self) -> List[str]:
        ret: List[str] = []
        with self._lock:
            line = self.read_line()
            while line is not None:
                ret.append(line)
                line = self.read_line()
        return ret

    def read_all_ints(self) -> List[int]:
        return [num.parse_int(w) for w in self.read_all_strings()]

    def read_all_doubles(self) -> List[float]:
        return [num.parse_double(w) for w in self.read_all_strings()]
    # }}}
# }}}

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
