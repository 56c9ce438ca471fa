# -*- coding: utf-8 -*-

import datetime
import os
import uuid

import structlog
from reportlab.pdfbase import pdfmetrics

import slugline.error as error

log = structlog.get_logger(__name__)

# alignment values
ALIGN_LEFT    = 0
ALIGN_CENTER  = 1
ALIGN_RIGHT   = 2
VALIGN_TOP    = 1
VALIGN_CENTER = 2
VALIGN_BOTTOM = 3

# upper-case string 's'
def upper(s):
    return s.upper()

# returns s with all possible different types of newlines converted to
# unix newlines, i.e. a single "\n"
def fixNL(s):
    return s.replace("\r\n", "\n").replace("\r", "\n")

# clamps the given value to a specific range. both limits are optional.
def clamp(val, minVal = None, maxVal = None):
    ret = val

    if minVal != None:
        ret = max(ret, minVal)

    if maxVal != None:
        ret = min(ret, maxVal)

    return ret

# like clamp, but gets/sets value directly from given object
def clampObj(obj, name, minVal = None, maxVal = None):
    setattr(obj, name, clamp(getattr(obj, name), minVal, maxVal))

# convert given string to float, clamping it to the given range
# (optional). never throws any exceptions, return defVal (possibly clamped
# as well) on any errors.
def str2float(s, defVal, minVal = None, maxVal = None):
    val = defVal

    try:
        val = float(s)
    except (ValueError, OverflowError):
        pass

    return clamp(val, minVal, maxVal)

# like str2float, but for ints.
def str2int(s, defVal, minVal = None, maxVal = None, radix = 10):
    val = defVal

    try:
        val = int(s, radix)
    except ValueError:
        pass

    return clamp(val, minVal, maxVal)

# return percentage of 'val1' of 'val2' (both ints) as an int (50% -> 50
# etc.), or 0 if val2 is 0.
def pct(val1, val2):
    if val2 != 0:
        return (100 * val1) // val2
    else:
        return 0

# return string 's' split into words, using whitespace as the only
# separator.
def splitToWords(s):
    return s.split()

# generate an identifier that is unique for the lifetime of a document
# (and in practise, globally).
def genId():
    return uuid.uuid4().hex

# current time as a timezone-aware UTC datetime
def now():
    return datetime.datetime.now(datetime.timezone.utc)

# format a datetime as an ISO-8601 string.
def toIsoDate(dt):
    return dt.isoformat()

# parse an ISO-8601 string into a timezone-aware datetime. accepts the
# trailing "Z" that JavaScript's Date.toISOString() produces. raises
# ValueError on garbage.
def fromIsoDate(s):
    s = str(s).strip()

    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    dt = datetime.datetime.fromisoformat(s)

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo = datetime.timezone.utc)

    return dt

# convert inches to points (1/72 inch).
def inch2points(inch):
    return inch * 72.0

# return how many points tall a line of text in the given font size is.
def getTextHeight(size):
    return float(size)

# return how many points wide given text is in the given (standard PDF)
# font at the given size.
def getTextWidth(text, fontName, size):
    return pdfmetrics.stringWidth(text, fontName, size)

# load at most maxSize (all if -1) characters from 'filename', returning
# the data as a string. raises MiscError on errors.
def loadFile(filename, maxSize = -1):
    try:
        with open(filename, "r", encoding = "UTF-8") as f:
            ret = f.read(maxSize)

    except (OSError, UnicodeDecodeError) as e:
        raise error.MiscError("Error loading file '%s': %s" % (
            filename, getattr(e, "strerror", None) or e))

    log.debug("file loaded", filename = filename, size = len(ret))

    return ret

# write 'data' (str or bytes) to 'filename'. raises MiscError on errors.
def writeToFile(filename, data):
    try:
        with open(filename, "wb") as f:
            if isinstance(data, str):
                f.write(data.encode("UTF-8"))
            else:
                f.write(data)

    except OSError as e:
        raise error.MiscError("Error writing file '%s': %s" % (
            filename, e.strerror or e))

    log.debug("file written", filename = filename, size = len(data))

# return lower-cased extension of 'filename' without the dot, e.g. "fdx".
def getExtension(filename):
    return os.path.splitext(filename)[1][1:].lower()

# put everything from dictionary d into a list as (key, value) tuples,
# sorted by "desc(value) asc(key)".
def sortDict(d):
    return sorted(d.items(), key = lambda it: (-it[1], it[0]))
