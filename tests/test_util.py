# -*- coding: utf-8 -*-

import datetime

import pytest

import slugline.error as error
import slugline.util as util

# test util stuff

def testSplitToWords():
    us = util.splitToWords

    assert us("") == []
    assert us("yo") == ["yo"]
    assert us("yo foo") == ["yo", "foo"]
    assert us("äksy yö") == ["äksy", "yö"]
    assert us("  out-of-nowhere,\na monkey ") == ["out-of-nowhere,", "a",
                                                  "monkey"]

def testClamp():
    assert util.clamp(5, 0, 3) == 3
    assert util.clamp(-1, 0, 3) == 0
    assert util.clamp(2, 0, 3) == 2
    assert util.clamp(2) == 2
    assert util.clamp(7, maxVal = 4) == 4

def testStr2Int():
    assert util.str2int("42", 0) == 42
    assert util.str2int("x", 7) == 7
    assert util.str2int("1000", 0, 0, 100) == 100

def testStr2Float():
    assert util.str2float("1.5", 0.0) == 1.5
    assert util.str2float("nan?", 2.0) == 2.0
    assert util.str2float("-3", 0.0, 0.0) == 0.0

def testFixNL():
    assert util.fixNL("a\r\nb\rc\td") == "a\nb\nc\td"

def testPct():
    assert util.pct(1, 2) == 50
    assert util.pct(1, 0) == 0

def testIsoDates():
    dt = util.fromIsoDate("2026-01-05T10:00:00.000Z")

    assert dt == datetime.datetime(2026, 1, 5, 10, 0,
                                   tzinfo = datetime.timezone.utc)
    assert util.fromIsoDate(util.toIsoDate(dt)) == dt

    # no time zone means UTC
    assert util.fromIsoDate("2026-01-05T10:00:00") == dt

    now = util.now()
    assert now.tzinfo is not None
    assert util.fromIsoDate(util.toIsoDate(now)) == now

    with pytest.raises(ValueError):
        util.fromIsoDate("last tuesday")

def testGenId():
    ids = set([util.genId() for i in range(100)])

    assert len(ids) == 100

def testGetExtension():
    assert util.getExtension("foo/bar.FDX") == "fdx"
    assert util.getExtension("foo.tar.gz") == "gz"
    assert util.getExtension("noext") == ""

def testTextWidth():
    assert abs(util.getTextWidth("abcd", "Courier", 12) - 28.8) < 0.001
    assert util.getTextHeight(12) == 12.0
    assert util.inch2points(1.5) == 108.0

def testSortDict():
    assert util.sortDict({ "b" : 1, "a" : 1, "c" : 3 }) == [
        ("c", 3), ("a", 1), ("b", 1)]

def testFiles(tmp_path):
    filename = str(tmp_path / "f.txt")

    util.writeToFile(filename, "räksy")
    assert util.loadFile(filename) == "räksy"
    assert util.loadFile(filename, 2) == "rä"

    util.writeToFile(filename, b"abc")
    assert util.loadFile(filename) == "abc"

    with pytest.raises(error.MiscError):
        util.loadFile(str(tmp_path / "missing.txt"))

    with pytest.raises(error.MiscError):
        util.writeToFile(str(tmp_path / "no" / "such" / "dir.txt"), "x")
