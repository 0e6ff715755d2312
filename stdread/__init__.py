# coding: utf-8
# Tokenized reading from standard input, in the spirit of the StdIn class
# from introductory programming courses: strings, numbers, booleans, lines and
# bulk reads, parsed the same way on every platform.
#
# Everything here goes through one process-wide InputSession over stdin. Code
# that wants its own input source (tests, mostly) can either build an
# InputSession directly or point the shared one somewhere else with
# use_stream.
from typing import IO, List, Optional
import argparse
import logging
import sys
import threading
from stdread.errors import StdReadException, EndOfInputException, ParseMismatchException
from stdread.session import CHARSET_NAME, Delimiter, InputSession
import stdread.num as num

logger = logging.getLogger(__name__)

_session: Optional[InputSession] = None
_session_lock = threading.Lock()

# session management {{{
def session() -> InputSession:
    global _session
    with _session_lock:
        if _session is None:
            _session = InputSession.from_stdin()
        return _session

def resync() -> None:
    """Rebind the shared session to a fresh view of stdin.

    Anything buffered by the old session is dropped. Don't call this while
    another thread is in the middle of a read.
    """
    global _session
    with _session_lock:
        _session = InputSession.from_stdin()
    logger.debug('resynced input session on stdin')

def use_stream(file: IO[str]) -> InputSession:
    global _session
    s = InputSession(file)
    with _session_lock:
        _session = s
    logger.debug('input session now reading from %r', file)
    return s
# }}}
# predicates {{{
def is_empty() -> bool:
    return session().is_empty()

def has_next_line() -> bool:
    return session().has_next_line()

def has_next_char() -> bool:
    return session().has_next_char()
# }}}
# reads {{{
def read_line() -> Optional[str]:
    return session().read_line()

def read_char() -> str:
    return session().read_char()

def read_all() -> str:
    return session().read_all()

def read_string() -> str:
    return session().read_string()

def read_int() -> int:
    return session().read_int()

def read_long() -> int:
    return session().read_long()

def read_short() -> int:
    return session().read_short()

def read_byte() -> int:
    return session().read_byte()

def read_double() -> float:
    return session().read_double()

def read_float() -> float:
    return session().read_float()

def read_boolean() -> bool:
    return session().read_boolean()
# }}}
# bulk reads {{{
def read_all_strings() -> List[str]:
    return session().read_all_strings()

def read_all_lines() -> List[str]:
    return session().read_all_lines()

def read_all_ints() -> List[int]:
    return session().read_all_ints()

def read_all_doubles() -> List[float]:
    return session().read_all_doubles()
# }}}

def demo() -> None:
    print("Type a string: ")
    s = read_string()
    print("Your string was: " + s)
    print()

    print("Type an int: ")
    a = read_int()
    print("Your int was: " + str(a))
    print()

    print("Type a boolean: ")
    b = read_boolean()
    print("Your boolean was: " + str(b).lower())
    print()

    print("Type a double: ")
    d = read_double()
    print("Your double was: " + num.format_float(d))
    print()

def main() -> None:
    parser = argparse.ArgumentParser(
            description='Interactive smoke test for reading from stdin')
    parser.add_argument('--version', action='store_true')
    parser.add_argument('-v', '--verbose', action='store_true',
            help='Log debug output to stderr')
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')

    if args.version:
        from stdread.__version__ import version
        print("stdread version " + version)
        return

    try:
        demo()
    except StdReadException as e:
        print(e, file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__": main()

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
