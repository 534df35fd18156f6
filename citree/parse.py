# The MIT License (MIT)
# 
# Copyright (c) 2026 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.
#
# This module provides APIs for reading interval files.
# Each line holds one interval:
#   START END [DATA...]
# Text after '#' is ignored.

import re
import logging

from citree.common.error import error, IntervalError
from citree.common.location import Location
from citree.interval import Interval

logger = logging.getLogger(__name__)

def read_int(s, loc):
  """Parse non-negative integer e.g. "10"."""
  m = re.search(r'^\s*([0-9]+)(.*)', s)
  if m is None:
    error(loc, f"failed to parse integer: {s}")
  return int(m.group(1)), m.group(2)

def read_interval(s, loc):
  """Parse interval e.g. "1 5 some data"."""
  start, rest = read_int(s, loc)
  end, rest = read_int(rest, loc)
  if rest and not rest[0].isspace():
    error(loc, f"unexpected characters after interval bounds: {rest}")
  data = rest.strip() or None
  try:
    return Interval(start, end, data)
  except IntervalError as e:
    error(loc, str(e))

def read_intervals(filename, f):
  """Read all intervals from file."""
  ivs = []
  loc = Location(filename, 0)
  for line in f:
    loc = loc.next()
    line = re.sub(r'#.*$', '', line).strip()
    if not line:
      continue
    ivs.append(read_interval(line, loc))
  logger.debug(f"read_intervals: read {len(ivs)} intervals from {filename}")
  return ivs
