import slugline.heading as heading

from slugline.heading import HeadingInfo

# tests scene heading parsing

def testExtWithTime():
    assert heading.parseSceneHeading("EXT. PARK - NIGHT") == \
        HeadingInfo(False, "PARK", "NIGHT")

def testDefaultTime():
    assert heading.parseSceneHeading("INT. KITCHEN") == \
        HeadingInfo(True, "KITCHEN", "DAY")

def testLowerCase():
    assert heading.parseSceneHeading("  int. motel room - night ") == \
        HeadingInfo(True, "MOTEL ROOM", "NIGHT")

def testInteriorFlag():
    p = heading.parseSceneHeading

    assert p("INT. HOUSE").isInterior
    assert not p("EXT. HOUSE").isInterior
    assert p("INT./EXT. CAR - DAY").isInterior
    assert p("INT/EXT. CAR - DAY").isInterior
    assert not p("I/E. CAR - DAY").isInterior
    assert not p("I./E. CAR - DAY").isInterior

def testCombinedPrefixes():
    p = heading.parseSceneHeading

    for s in ("INT./EXT. CAR - DAY", "INT/EXT. CAR - DAY", "I/E. CAR - DAY",
              "I./E. CAR - DAY"):
        hi = p(s)
        assert hi.location == "CAR"
        assert hi.timeOfDay == "DAY"

def testDashes():
    p = heading.parseSceneHeading

    assert p("EXT. BEACH – DAWN").timeOfDay == "DAWN"
    assert p("EXT. BEACH — DUSK").timeOfDay == "DUSK"
    assert p("EXT. BEACH-MORNING") == HeadingInfo(False, "BEACH", "MORNING")

def testMultiWordTime():
    hi = heading.parseSceneHeading("INT. OFFICE - MOMENTS LATER")

    assert hi.location == "OFFICE"
    assert hi.timeOfDay == "MOMENTS LATER"

def testUnknownTime():
    hi = heading.parseSceneHeading("INT. OFFICE - TWILIGHT")

    assert hi.location == "OFFICE - TWILIGHT"
    assert hi.timeOfDay == "DAY"

def testNoPrefix():
    hi = heading.parseSceneHeading("THE MOON - NIGHT")

    assert hi.isInterior is False
    assert hi.location == "THE MOON"
    assert hi.timeOfDay == "NIGHT"

def testEmpty():
    assert heading.parseSceneHeading("") == HeadingInfo(False, "", "DAY")
    assert heading.parseSceneHeading("INT.") == HeadingInfo(True, "", "DAY")

def testHasScenePrefix():
    assert heading.hasScenePrefix("int. house")
    assert heading.hasScenePrefix("I/E. CAR")
    assert not heading.hasScenePrefix("INTERIOR")
    assert not heading.hasScenePrefix("")

def testVocabularies():
    p = heading.parseSceneHeading

    for prefix in heading.SCENE_PREFIXES:
        assert heading.hasScenePrefix(prefix + " HOUSE")
        assert p(prefix + " HOUSE").location == "HOUSE"

    for tod in heading.TIME_OPTIONS:
        assert p("INT. HOUSE - " + tod).timeOfDay == tod
