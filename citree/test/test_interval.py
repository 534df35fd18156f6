# The MIT License (MIT)
# 
# Copyright (c) 2026 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

import pytest

from citree import interval as I
from citree.common.error import IntervalError

def test_create():
  with pytest.raises(IntervalError):
    I.Interval(2, 1)
  with pytest.raises(IntervalError):
    I.Interval(-1, 1)
  with pytest.raises(IntervalError):
    I.Interval(0, -1)
  with pytest.raises(ValueError):
    I.Interval(1.5, 2)
  with pytest.raises(ValueError):
    I.Interval(False, True)

def test_length():
  assert I.Interval(3, 3).length == 0
  assert I.Interval(3, 10).length == 7
  assert I.Interval(0, 5, 'x').bounds == (0, 5)

def test_contains_point():
  iv = I.Interval(2, 4)
  for p in range(7):
    assert iv.contains(p) == (2 <= p <= 4)
    assert (p in iv) == (2 <= p <= 4)

def test_contains_interval():
  assert I.Interval(1, 10).contains(I.Interval(1, 10))
  assert I.Interval(1, 10).contains(I.Interval(3, 4))
  assert not I.Interval(1, 10).contains(I.Interval(0, 4))
  assert not I.Interval(3, 4).contains(I.Interval(1, 10))

def test_intersects():
  assert I.Interval(1, 3).intersects(I.Interval(2, 4))
  assert I.Interval(1, 3).intersects(I.Interval(3, 4))
  assert I.Interval(1, 10).intersects(I.Interval(4, 5))
  assert not I.Interval(1, 2).intersects(I.Interval(3, 4))
  assert I.Interval(1, 2).intersects_range(2, 2)
  assert not I.Interval(1, 2).intersects_range(3, 9)

def test_intersects_symmetric():
  ivs = [I.Interval(s, e) for s in range(5) for e in range(s, 5)]
  for a in ivs:
    for b in ivs:
      assert a.intersects(b) == b.intersects(a)

def test_distance():
  assert I.Interval(1, 3).distance(I.Interval(2, 4)) == 0
  assert I.Interval(1, 3).distance(I.Interval(3, 4)) == 0
  assert I.Interval(1, 3).distance(I.Interval(7, 9)) == 4
  assert I.Interval(7, 9).distance(I.Interval(1, 3)) == 4

def test_order():
  a = I.Interval(1, 5)
  b = I.Interval(1, 7)
  c = I.Interval(2, 3)
  assert a < b < c
  assert c > b >= a
  assert a.compare(b) == -1 and b.compare(a) == 1
  assert a.compare(I.Interval(1, 5, 'x')) == 0
  assert sorted([c, b, a]) == [a, b, c]

def test_equality():
  data = ['payload']
  assert I.Interval(1, 2, data) == I.Interval(1, 2, data)
  # Data is compared by identity
  assert I.Interval(1, 2, ['x']) != I.Interval(1, 2, ['x'])
  assert I.Interval(1, 2) != I.Interval(1, 3)
  assert len({I.Interval(1, 2, data), I.Interval(1, 2, data)}) == 1

def test_immutable():
  iv = I.Interval(1, 2)
  with pytest.raises(AttributeError):
    iv.start = 5

def test_compare_other_types():
  iv = I.Interval(1, 2)
  with pytest.raises(TypeError):
    iv < 5
  with pytest.raises(TypeError):
    5 >= iv
  assert iv != (1, 2)
