#!/usr/bin/env python3

# The MIT License (MIT)
# 
# Copyright (c) 2026 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Main driver for citree.

Run with --help for details.
"""

import sys
import argparse
import logging

from citree.common.error import error, error_if, warn, set_basename, set_options, IntervalError
import citree.common.printers as PR
import citree.parse as PA
from citree.tree import IntervalTree

def main(argv=None):
  set_basename('citree')

  class Formatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawDescriptionHelpFormatter):
    pass
  parser = argparse.ArgumentParser(
    formatter_class=Formatter,
    description="Query a set of intervals via centered interval tree.",
    epilog="""\

ACTION should be one of
  point     Print data of intervals which contain point ARG.
  range     Print data of intervals which intersect range ARG ARG.
  dump      Print tree structure (useful for debugging).
  stats     Print tree statistics.

Intervals are read one per line in "START END [DATA]" format.

Examples:
  Find all events active at time 100:
  $ {exe} point 100 -f events.txt

  Find all events overlapping [100, 200]:
  $ {exe} range 100 200 -f events.txt\
""".format(exe='python -mcitree'))
  parser.add_argument(
    'action',
    metavar='ACT',
    help="Action performed on intervals.",
    choices=['point', 'range', 'dump', 'stats'])
  parser.add_argument(
    'args',
    metavar='ARG',
    help="Query arguments.",
    nargs='*')
  parser.add_argument(
    '--file', '-f',
    help="Path to interval file (stdin if omitted).")
  parser.add_argument(
    '--intervals',
    help="Print matching intervals instead of their data.",
    action='store_true')
  parser.add_argument(
    '--verbose', '-v',
    help="Print diagnostic info.",
    action='count',
    default=0)
  parser.add_argument(
    '--print-stack',
    help="Print call stack on error (INTERNAL).",
    action='store_true')

  args = parser.parse_args(argv)

  v = min(2, args.verbose)
  loglevel = logging.WARNING - 10 * v
  logging.basicConfig(level=loglevel)

  set_options(print_stack=args.print_stack)

  nargs = {'point': 1, 'range': 2}.get(args.action, 0)
  error_if(len(args.args) != nargs,
           f"action '{args.action}' expects {nargs} argument(s)")
  try:
    query = [int(a) for a in args.args]
  except ValueError:
    error(f"query arguments must be integers: {' '.join(args.args)}")

  if args.file is None:
    filename = '<stdin>'
    ivs = PA.read_intervals(filename, sys.stdin)
  else:
    filename = args.file
    with open(filename, 'r') as f:
      ivs = PA.read_intervals(filename, f)
  if not ivs:
    warn(f"no intervals in {filename}")

  tree = IntervalTree(ivs)
  p = PR.SourcePrinter()

  if args.action == 'dump':
    tree.dump(p)
  elif args.action == 'stats':
    p.writeln(f"intervals: {tree.size()}")
    p.writeln(f"depth: {tree.root.depth()}")
  else:
    try:
      res = tree.get_intervals(*query)
    except IntervalError as e:
      error(str(e))
    for iv in sorted(res):
      if args.intervals:
        p.writeln(repr(iv))
      else:
        p.writeln('' if iv.data is None else iv.data)

if __name__ == '__main__':
  main()
