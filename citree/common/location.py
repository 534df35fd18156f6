# The MIT License (MIT)
# 
# Copyright (c) 2026 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Positions in interval files."""

class Location:
  """Line of an input file."""

  def __init__(self, filename=None, lineno=None):
    self.filename = filename
    self.lineno = lineno

  def next(self):
    """Location of the following line."""
    if not self:
      return self
    return Location(self.filename, (self.lineno or 0) + 1)

  def __str__(self):
    if not self:
      return '?:?'
    if self.lineno is None:
      return self.filename
    return f'{self.filename}:{self.lineno}'

  def __repr__(self):
    return f'Location({self.filename!r}, {self.lineno!r})'

  def __bool__(self):
    return self.filename is not None
