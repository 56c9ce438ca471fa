# -*- coding: utf-8 -*-

# parsing of scene headings, e.g. "INT. MOTEL ROOM - NIGHT", into their
# interior/exterior flag, location and time of day. parsing never fails;
# anything unrecognized just falls through to the defaults.

import re

# prefixes offered to autocompletion, in the order they're suggested
SCENE_PREFIXES = ["INT.", "EXT.", "INT./EXT.", "I./E."]

# times of day offered to autocompletion
TIME_OPTIONS = ["DAY", "NIGHT", "CONTINUOUS", "MORNING", "EVENING", "DAWN",
                "DUSK", "LATER", "SAME"]

# time of day used when a heading doesn't specify one
DEFAULT_TIME = "DAY"

# interior/exterior prefix. order matters, longer patterns first.
_prefixRe = re.compile(r"^(INT\./EXT\.|INT/EXT\.|I\./E\.|I/E\.|INT\.|EXT\.)\s*",
                       re.IGNORECASE)

# looser version used only to detect whether something already has a
# prefix typed in
_hasPrefixRe = re.compile(r"^(INT\.|EXT\.|INT\.?/EXT\.|I\.?/E\.)",
                          re.IGNORECASE)

# time-of-day suffix, introduced by a hyphen, en dash or em dash
_timeRe = re.compile(
    r"\s*[-–—]\s*"
    r"(DAY|NIGHT|MORNING|EVENING|DAWN|DUSK|LATER|CONTINUOUS|SAME|MOMENTS LATER)"
    r".*$", re.IGNORECASE | re.DOTALL)

# result of parsing a single scene heading
class HeadingInfo:
    def __init__(self, isInterior, location, timeOfDay):
        # True for INT. (and INT./EXT.), False for EXT.
        self.isInterior = isInterior

        # e.g. "MOTEL ROOM"
        self.location = location

        # e.g. "NIGHT"
        self.timeOfDay = timeOfDay

    def __eq__(self, other):
        return isinstance(other, HeadingInfo) and \
            (self.isInterior == other.isInterior) and \
            (self.location == other.location) and \
            (self.timeOfDay == other.timeOfDay)

    def __repr__(self):
        return "HeadingInfo(%r, %r, %r)" % (self.isInterior, self.location,
                                            self.timeOfDay)

# parse scene heading 'heading' and return a HeadingInfo. headings that
# start with "INT/EXT" count as interior.
def parseSceneHeading(heading):
    s = heading.strip().upper()

    isInterior = s.startswith("INT")

    remaining = _prefixRe.sub("", s, count = 1)

    location = remaining
    timeOfDay = DEFAULT_TIME

    m = _timeRe.search(remaining)
    if m:
        location = remaining[:m.start()].strip()
        timeOfDay = m.group(1).upper()

    return HeadingInfo(isInterior, location, timeOfDay)

# returns True if 's' already begins with an INT./EXT. style prefix.
def hasScenePrefix(s):
    return bool(_hasPrefixRe.match(s.strip()))
