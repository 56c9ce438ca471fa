# plain text reports about a screenplay, built from its derived indexes.
# page numbers come from the coarse estimator, the same ones the editor
# shows.

import slugline.characters as characters
import slugline.pagination as pagination
import slugline.screenplay as screenplay
import slugline.util as util

class SceneReport:
    def __init__(self, sp, cfg = None):
        self.sp = sp

        # list of SceneInfos
        self.scenes = []

        ls = sp.elements
        starts = [sp.getElementIndex(sc.elementId) for sc in sp.scenes]

        for i, sc in enumerate(sp.scenes):
            if (i + 1) < len(starts):
                end = starts[i + 1]
            else:
                end = len(ls)

            si = SceneInfo(sc)
            si.read(ls, starts[i], end, cfg)
            self.scenes.append(si)

    def generate(self):
        out = []

        for si in self.scenes:
            out.append("%-4d %s" % (si.number, util.upper(si.name)))

            out.append("     Elements: %d (%d%% action), Page: %d" % (
                si.elements, util.pct(si.actionElements, si.elements),
                si.page))

            for it in util.sortDict(si.chars):
                out.append("     %3d  %s" % (it[1], it[0]))

            out.append("")

        return "\n".join(out)

# information about one scene
class SceneInfo:
    def __init__(self, sc):
        self.number = sc.sceneNumber

        # scene heading, e.g. "INT. MOTEL ROOM - NIGHT"
        self.name = sc.heading

        # elements in scene, excluding the heading
        self.elements = 0

        self.actionElements = 0

        # page the scene starts on
        self.page = 1

        # key = character name, value = number of speeches
        self.chars = {}

    # read information for elements [start, end) of 'ls'.
    def read(self, ls, start, end, cfg):
        self.page = pagination.getPageOfElement(ls, start, cfg)

        for el in ls[start + 1:end]:
            self.elements += 1

            if el.lt == screenplay.ACTION:
                self.actionElements += 1

            elif (el.lt == screenplay.CHARACTER) and el.text.strip():
                name = characters.normalizeName(el.text)
                self.chars[name] = self.chars.get(name, 0) + 1

class CharacterReport:
    def __init__(self, sp, cfg = None):
        self.sp = sp

        # list of (CharacterInfo, page of first appearance), most lines
        # first
        self.cinfo = [(ci, pagination.getPageOfElement(sp.elements,
                                                       ci.firstAppearance,
                                                       cfg))
                      for ci in sp.getCharactersSortedByLineCount()]

        self.totalLineCnt = sum([ci.lineCount for ci, _ in self.cinfo])

    def generate(self):
        out = []

        for ci, page in self.cinfo:
            out.append("%-30s Lines: %d (%d%%), first seen on page %d" % (
                ci.name, ci.lineCount, util.pct(ci.lineCount,
                self.totalLineCnt), page))

        return "\n".join(out)

class LocationReport:
    def __init__(self, sp):
        self.sp = sp

        # list of LocationInfos, most used first
        self.locations = sp.getLocationsSortedByOccurrence()

    def generate(self):
        out = []

        for li in self.locations:
            if li.isInterior:
                s = "INT."
            else:
                s = "EXT."

            out.append("%3d  %-5s %s" % (li.occurrenceCount, s, li.name))

        return "\n".join(out)

# return all reports for 'sp' as one string.
def generateAll(sp, cfg = None):
    parts = [
        ("Scenes", SceneReport(sp, cfg)),
        ("Characters", CharacterReport(sp, cfg)),
        ("Locations", LocationReport(sp)),
        ]

    out = []
    for title, report in parts:
        out.append(title)
        out.append("=" * len(title))
        out.append(report.generate())
        out.append("")

    return "\n".join(out)
