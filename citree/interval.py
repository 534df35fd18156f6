# The MIT License (MIT)
# 
# Copyright (c) 2026 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.
# 
# This file contains APIs for describing closed integer ranges
# with attached data.

from citree.common.error import check_bounds

class Interval:
  """Represents closed interval [start, end] with associated data.

  Intervals are ordered by start and then by end, data is ignored.
  Equality, in contrast, also requires identical (not just equal) data."""

  __slots__ = ('_start', '_end', '_data')

  def __init__(self, start, end, data=None):
    check_bounds(start, end)
    self._start = start
    self._end = end
    self._data = data

  @property
  def start(self):
    return self._start

  @property
  def end(self):
    return self._end

  @property
  def data(self):
    return self._data

  @property
  def bounds(self):
    return self._start, self._end

  @property
  def length(self):
    return self._end - self._start

  def contains(self, x):
    """Checks whether point or interval lies inside this interval."""
    if isinstance(x, Interval):
      return self._start <= x._start and x._end <= self._end
    return self._start <= x <= self._end

  def intersects(self, i):
    """Checks whether intervals overlap or touch."""
    return self.intersects_range(i._start, i._end)

  def intersects_range(self, lo, hi):
    return self._start <= hi and self._end >= lo

  def distance(self, i):
    """Gap between intervals (0 if they intersect)."""
    if self.intersects(i):
      return 0
    if self._start < i._start:
      return i._start - self._end
    return self._start - i._end

  def compare(self, i):
    """Three-way comparison by start, then by end."""
    a, b = self.bounds, i.bounds
    return (a > b) - (a < b)

  def __contains__(self, x):
    return self.contains(x)

  def __lt__(self, i):
    if not isinstance(i, Interval):
      return NotImplemented
    return self.bounds < i.bounds

  def __le__(self, i):
    if not isinstance(i, Interval):
      return NotImplemented
    return self.bounds <= i.bounds

  def __gt__(self, i):
    if not isinstance(i, Interval):
      return NotImplemented
    return self.bounds > i.bounds

  def __ge__(self, i):
    if not isinstance(i, Interval):
      return NotImplemented
    return self.bounds >= i.bounds

  def __eq__(self, i):
    if not isinstance(i, Interval):
      return NotImplemented
    return self.bounds == i.bounds and self._data is i._data

  def __hash__(self):
    return hash((self._start, self._end, id(self._data)))

  def __repr__(self):
    if self._data is None:
      return '[%d, %d]' % (self._start, self._end)
    return '[%d, %d] %r' % (self._start, self._end, self._data)
