# The MIT License (MIT)
# 
# Copyright (c) 2026 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Pretty-printing APIs."""

import sys

class SourcePrinter:
  """Printer which indents nested output.

  Use as context manager to increase indentation:
    p.writeln("Node")
    with p:
      p.writeln("child")
  """

  def __init__(self, out=None, tab='  '):
    self.out = sys.stdout if out is None else out
    self.tab = tab
    self.depth = 0

  def __enter__(self):
    self.depth += 1
    return self

  def __exit__(self, type, value, traceback):
    assert self.depth > 0
    self.depth -= 1

  def writeln(self, s=''):
    prefix = self.tab * self.depth
    for line in str(s).split('\n'):
      self.out.write((prefix + line).rstrip() + '\n')
