# The MIT License (MIT)
# 
# Copyright (c) 2026 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

import io
import contextlib

import pytest

from citree.__main__ import main

@pytest.fixture
def events(tmp_path):
  path = tmp_path / 'events.txt'
  path.write_text("1 5 A\n3 8 B\n10 12 C\n")
  return str(path)

def test_point(events, capsys):
  main(['point', '4', '-f', events])
  assert capsys.readouterr().out == "A\nB\n"

def test_range(events, capsys):
  main(['range', '6', '11', '-f', events])
  assert capsys.readouterr().out == "B\nC\n"

def test_intervals(events, capsys):
  main(['point', '11', '--intervals', '-f', events])
  assert capsys.readouterr().out == "[10, 12] 'C'\n"

def test_stats(events, capsys):
  main(['stats', '-f', events])
  out = capsys.readouterr().out
  assert 'intervals: 3' in out and 'depth:' in out

def test_dump(events, capsys):
  main(['dump', '-f', events])
  out = capsys.readouterr().out
  assert out.startswith('IntervalTree (3 intervals)')

def test_bad_args(events, capsys):
  with pytest.raises(SystemExit):
    main(['point', '-f', events])
  with pytest.raises(SystemExit):
    main(['range', '9', '2', '-f', events])
  assert 'should not exceed end' in capsys.readouterr().err

def test_redirected_stdout(events):
  out = io.StringIO()
  with contextlib.redirect_stdout(out):
    main(['point', '11', '-f', events])
  assert out.getvalue() == "C\n"

def test_help_examples(events, capsys):
  with pytest.raises(SystemExit):
    main(['--help'])
  assert 'point 100 -f events.txt' in capsys.readouterr().out
  # Documented usage works
  main(['point', '100', '-f', events])
  assert capsys.readouterr().out == ''

def test_empty_file(tmp_path, capsys):
  path = tmp_path / 'empty.txt'
  path.write_text("# nothing here\n")
  main(['point', '1', '-f', str(path)])
  captured = capsys.readouterr()
  assert captured.out == ''
  assert 'warning: no intervals in' in captured.err
