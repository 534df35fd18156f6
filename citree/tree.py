# The MIT License (MIT)
# 
# Copyright (c) 2026 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Interval tree i.e. a map from intervals to data.

Tree is rebuilt lazily: additions only mark it stale
and next query rebuilds it from scratch."""

import logging

from citree.interval import Interval
from citree.node import Node

logger = logging.getLogger(__name__)

class IntervalTree:
  """Collection of intervals which supports point and range queries."""

  def __init__(self, intervals=None):
    self.intervals = list(intervals or [])
    self._root = Node(self.intervals)
    self._stale = False

  @property
  def stale(self):
    return self._stale

  @property
  def root(self):
    self.build()
    return self._root

  def size(self):
    return len(self.intervals)

  def is_empty(self):
    return not self.intervals

  def __len__(self):
    return len(self.intervals)

  def __iter__(self):
    return iter(self.intervals)

  def __contains__(self, x):
    """Checks whether interval was added or, for points,
       whether some interval contains it."""
    if isinstance(x, Interval):
      return x in self.intervals
    return bool(self.get_intervals(x))

  def add(self, iv):
    """Add interval (tree becomes out of sync)."""
    self.intervals.append(iv)
    self._stale = True

  def add_all(self, ivs):
    for iv in ivs:
      self.add(iv)

  def insert(self, start, end, data=None):
    """Create interval and add it."""
    iv = Interval(start, end, data)
    self.add(iv)
    return iv

  def build(self):
    """Rebuild tree if it is out of sync."""
    if self._stale:
      logger.debug(f"build: rebuilding tree from {len(self.intervals)} intervals")
      self._root = Node(self.intervals)
      self._stale = False

  def get_intervals(self, start, end=None):
    """Returns intervals which contain point start or,
       if end is given, intersect range [start, end]."""
    if end is None:
      self.build()
      return self._root.query_point(start)
    target = Interval(start, end)
    self.build()
    return self._root.query_interval(target)

  def get(self, start, end=None):
    """Same as get_intervals but returns associated data."""
    return [iv.data for iv in self.get_intervals(start, end)]

  def dump(self, p):
    p.writeln(f"IntervalTree ({len(self.intervals)} intervals)")
    with p:
      self.root.dump(p)
