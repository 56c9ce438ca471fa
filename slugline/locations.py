import slugline.heading as heading
import slugline.screenplay as screenplay

# a "location" is a single place that can be referred to using multiple
# scene headings, e.g.
#  INT. MOTEL ROOM - DAY
#  INT. MOTEL ROOM - NIGHT
#  EXT. MOTEL ROOM - LATER
class LocationInfo:
    def __init__(self, name, occurrenceCount = 1, isInterior = True):
        # upper-cased location name, e.g. "MOTEL ROOM"
        self.name = name

        # how many scene headings refer to this location
        self.occurrenceCount = occurrenceCount

        # interior flag of the first heading that used this location
        self.isInterior = isInterior

    def __eq__(self, other):
        return isinstance(other, LocationInfo) and \
            ((self.name, self.occurrenceCount, self.isInterior) ==
             (other.name, other.occurrenceCount, other.isInterior))

    def __repr__(self):
        return "LocationInfo(%r, %d, %r)" % (self.name, self.occurrenceCount,
                                             self.isInterior)

    def toDict(self):
        return {
            "name" : self.name,
            "occurrenceCount" : self.occurrenceCount,
            "isInterior" : self.isInterior,
            }

    @staticmethod
    def fromDict(d):
        return LocationInfo(str(d["name"]), int(d.get("occurrenceCount", 1)),
                            bool(d.get("isInterior", True)))

# build the location list for 'elements'. headings whose location part is
# empty (e.g. just "INT.") are not counted.
def calcLocations(elements):
    # key = name, value = LocationInfo
    locs = {}

    for el in elements:
        if (el.lt != screenplay.SCENE) or not el.text.strip():
            continue

        hi = heading.parseSceneHeading(el.text)

        if not hi.location:
            continue

        li = locs.get(hi.location)

        if li:
            li.occurrenceCount += 1
        else:
            locs[hi.location] = LocationInfo(hi.location, 1, hi.isInterior)

    return list(locs.values())

# return a copy of 'locs' sorted by occurrence count, most used first.
def sortByOccurrence(locs):
    return sorted(locs, key = lambda li: -li.occurrenceCount)
