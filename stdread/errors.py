# coding: utf-8
from typing import Optional

# exceptions {{{
class StdReadException(Exception): pass

# Subclassing EOFError so that loops written against input() keep working.
class EndOfInputException(StdReadException, EOFError):
    def __init__(self, msg: str = 'No more input') -> None:
        super().__init__(msg)

class ParseMismatchException(StdReadException, ValueError):
    def __init__(self, token: str, expected: str,
            msg: Optional[str] = None) -> None:
        super().__init__(msg or 'Could not parse {} as {}'.format(
            repr(token), expected))
        self.token = token
        self.expected = expected
# }}}

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
