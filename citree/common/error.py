# The MIT License (MIT)
# 
# Copyright (c) 2026 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Error handling APIs."""

import sys
import os.path
from typing import NoReturn

from citree.common.location import Location

_print_stack = False
_me = os.path.basename(sys.argv[0])

class IntervalError(ValueError):
  """Raised for malformed interval bounds."""

def check_bounds(start, end):
  """Raises IntervalError unless 0 <= start <= end are integers."""
  for x in (start, end):
    if isinstance(x, bool) or not isinstance(x, int):
      raise IntervalError(f"interval bound must be an integer: {x!r}")
  if start < 0 or end < 0:
    raise IntervalError(f"interval cannot be negative: [{start}, {end}]")
  if start > end:
    raise IntervalError(f"interval start should not exceed end: [{start}, {end}]")

def _report(kind, args):
  if len(args) == 2 and args[0] is None:
    args = args[1:]
  if isinstance(args[0], Location):
    loc, msg = args
    sys.stderr.write(f"{_me}: {kind}: {loc}: {msg}\n")
  else:
    msg, = args
    sys.stderr.write(f"{_me}: {kind}: {msg}\n")

def error(*args) -> NoReturn:
  """Prints pretty error message and terminates."""
  _report('error', args)
  if _print_stack:
    raise RuntimeError(args[-1])
  sys.exit(1)

def error_if(cond, *args):
  """Report error if condition is true."""
  if cond:
    error(*args)

def warn(*args):
  """Prints pretty warning message."""
  _report('warning', args)

def set_basename(name):
  """Set program name for error reports."""
  global _me
  _me = name

def set_options(**kwargs):
  """Set other error-reporting options."""
  for k, v in kwargs.items():
    if k == 'print_stack':
      global _print_stack
      _print_stack = v
    else:
      error(f"unknown option: {k}")
