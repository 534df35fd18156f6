# The MIT License (MIT)
# 
# Copyright (c) 2026 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Nodes of centered interval tree."""

def median(points):
  """Returns lower median of sorted sequence (not interpolated)."""
  if not points:
    return None
  return points[len(points) // 2]

class Node:
  """A node of centered interval tree.

  Node holds intervals which contain its center point ("bucket").
  Intervals which lie strictly to the left or to the right of the center
  are stored in left and right subtrees. Bucket is sorted by interval
  order and intervals with same bounds share one entry ("posting list").

  Nodes are immutable after construction."""

  def __init__(self, intervals=()):
    intervals = list(intervals)

    endpoints = set()
    for iv in intervals:
      endpoints.add(iv.start)
      endpoints.add(iv.end)
    center = median(sorted(endpoints))
    self.center = 0 if center is None else center

    left = []
    right = []
    postings = {}
    for iv in intervals:
      if iv.end < self.center:
        left.append(iv)
      elif iv.start > self.center:
        right.append(iv)
      else:
        postings.setdefault(iv.bounds, []).append(iv)

    # Bucket entries are (key interval, posting list),
    # key is the first interval inserted with given bounds.
    self.bucket = [(ivs[0], ivs) for _, ivs in sorted(postings.items())]

    self.left = Node(left) if left else None
    self.right = Node(right) if right else None

  def size(self):
    """Number of distinct intervals in node's bucket."""
    return len(self.bucket)

  def is_empty(self):
    return not self.bucket

  def __iter__(self):
    return iter(self.bucket)

  def query_point(self, p):
    """Returns all intervals in subtree which contain point p."""
    result = []
    self._query_point(p, result)
    return result

  def _query_point(self, p, result):
    for key, ivs in self.bucket:
      if key.start > p:
        break
      if key.contains(p):
        result.extend(ivs)

    # At most one side can contain p and none if p is the center
    if p < self.center and self.left is not None:
      self.left._query_point(p, result)
    elif p > self.center and self.right is not None:
      self.right._query_point(p, result)

  def query_interval(self, target):
    """Returns all intervals in subtree which intersect target interval."""
    result = []
    self._query_interval(target.start, target.end, result)
    return result

  def _query_interval(self, lo, hi, result):
    for key, ivs in self.bucket:
      if key.start > hi:
        break
      if key.intersects_range(lo, hi):
        result.extend(ivs)

    if lo < self.center and self.left is not None:
      self.left._query_interval(lo, hi, result)
    if hi > self.center and self.right is not None:
      self.right._query_interval(lo, hi, result)

  def depth(self):
    """Height of subtree."""
    children = [n.depth() for n in (self.left, self.right) if n is not None]
    return 1 + max(children, default=0)

  def check(self, lo=None, hi=None):
    """Verify invariants (lo/hi bound intervals of subtree from outside)."""
    prev = None
    for key, ivs in self.bucket:
      assert ivs, "empty posting list"
      assert key is ivs[0]
      assert key.start <= self.center <= key.end, \
        f"{key} does not contain center {self.center}"
      assert lo is None or key.start > lo
      assert hi is None or key.end < hi
      assert all(iv.bounds == key.bounds for iv in ivs)
      assert prev is None or prev < key, "bucket is not sorted"
      prev = key
    for child in (self.left, self.right):
      # Empty children are never materialized
      assert child is None or child.bucket
    if self.left is not None:
      self.left.check(lo, self.center)
    if self.right is not None:
      self.right.check(self.center, hi)

  def dump(self, p):
    p.writeln(f"Node (center {self.center})")
    with p:
      for key, ivs in self.bucket:
        data = ', '.join(repr(iv.data) for iv in ivs)
        p.writeln(f"[{key.start}, {key.end}]: {data}")
      for name, child in (('left', self.left), ('right', self.right)):
        if child is not None:
          p.writeln(f"{name}:")
          with p:
            child.dump(p)
