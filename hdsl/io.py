# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Printing helpers for the command line tool.
Suffix letters describe the separator and terminator: S: space; L: newline.
'''

from sys import stderr, stdout
from typing import Any, TextIO


def writeL(file:TextIO, *items:Any, sep='', flush=False) -> None:
  "Write `items` to file; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=file, flush=flush)

def writeSL(file:TextIO, *items:Any, flush=False) -> None:
  "Write `items` to file; sep=' ', end='\\n'."
  print(*items, sep=' ', end='\n', file=file, flush=flush)


def outL(*items:Any, sep='', flush=False) -> None:
  "Write `items` to std out; sep='', end='\\n'."
  writeL(stdout, *items, sep=sep, flush=flush)


def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  writeL(stderr, *items, sep=sep, flush=flush)

def errSL(*items:Any, flush=False) -> None:
  "Write items to std err; sep=' ', end='\\n'."
  writeSL(stderr, *items, flush=flush)
