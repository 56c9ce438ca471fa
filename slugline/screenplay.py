# -*- coding: utf-8 -*-

# element types
SCENE = "scene-heading"
ACTION = "action"
CHARACTER = "character"
DIALOGUE = "dialogue"
PAREN = "parenthetical"
TRANSITION = "transition"

# all element types, in the order they're usually presented
ELEMENT_TYPES = (SCENE, ACTION, CHARACTER, DIALOGUE, PAREN, TRANSITION)

# order for tab cycling. PAREN is not part of the cycle; it's reached only
# by reverse-cycling from DIALOGUE, and always cycles back to DIALOGUE.
TYPE_CYCLE = (SCENE, ACTION, CHARACTER, DIALOGUE, TRANSITION)

# inline format styles
BOLD = "bold"
ITALIC = "italic"
UNDERLINE = "underline"

FORMAT_STYLES = (BOLD, ITALIC, UNDERLINE)

# title font size tiers
TITLE_SMALL = "small"
TITLE_MEDIUM = "medium"
TITLE_LARGE = "large"

TITLE_FONT_SIZES = (TITLE_SMALL, TITLE_MEDIUM, TITLE_LARGE)

import slugline.characters as characters
import slugline.locations as locations
import slugline.scenes as scenes
import slugline.util as util

import structlog

log = structlog.get_logger(__name__)

# screenplay
class Screenplay:
    def __init__(self, title = "Untitled", author = ""):
        self.id = util.genId()
        self.title = title
        self.author = author

        # TitlePage, or None
        self.titlePage = None

        # the document itself. never empty.
        self.elements = [ Element(SCENE) ]

        # derived indexes, rebuilt from self.elements by the recalc*
        # methods and never modified otherwise.
        self.characters = []
        self.locations = []
        self.scenes = []

        self.createdAt = util.now()
        self.updatedAt = self.createdAt

        # index of the element that has focus
        self.current = 0

        # True if script has had changes done to it after
        # load/save/creation.
        self.hasChanged = False

    def isModified(self):
        if not self.hasChanged:
            return False

        # nothing of value is ever lost by not saving a completely empty
        # script, and it's annoying getting warnings about unsaved changes
        # on those, so don't do that

        return (len(self.elements) > 1) or bool(self.elements[0].text)

    def markChanged(self, state = True):
        self.hasChanged = state

    # install a new element list and mark the script modified.
    def _setElements(self, elements):
        self.elements = elements
        self.updatedAt = util.now()
        self.markChanged()

    def isValidIndex(self, index):
        return 0 <= index < len(self.elements)

    # rebuild the derived indexes that can be affected by a change
    # involving elements of the types in 'lts'. 'structural' is True for
    # changes that add, remove or retype elements; those shift the element
    # indexes characters are recorded at, so characters are always rebuilt
    # for them.
    def _recalcFor(self, lts, structural):
        if SCENE in lts:
            self.recalcScenes()
            self.recalcLocations()

        if structural or (CHARACTER in lts):
            self.recalcCharacters()

    # replace content of element at 'index' with 'text'. does nothing if
    # index is out of bounds.
    def updateContent(self, index, text):
        if not self.isValidIndex(index):
            return

        ls = list(self.elements)
        ls[index] = ls[index].copy(text = text)

        self._setElements(ls)
        self._recalcFor((ls[index].lt,), False)

    # change type of element at 'index' to 'lt', keeping its content.
    def updateType(self, index, lt):
        if not self.isValidIndex(index):
            return

        ls = list(self.elements)
        oldLt = ls[index].lt
        ls[index] = ls[index].copy(lt = lt)

        self._setElements(ls)
        self._recalcFor((oldLt, lt), True)

    # insert a new empty element of type 'lt' after 'index' and move focus
    # to it.
    def insertAfter(self, index, lt):
        if not self.isValidIndex(index):
            return

        ls = list(self.elements)
        ls.insert(index + 1, Element(lt))

        self._setElements(ls)
        self.current = index + 1

        self._recalcFor((lt,), True)

    # delete element at 'index'. the last remaining element can't be
    # deleted.
    def delete(self, index):
        if len(self.elements) <= 1:
            return

        if not self.isValidIndex(index):
            return

        ls = list(self.elements)
        lt = ls.pop(index).lt

        self._setElements(ls)

        if index <= self.current:
            self.current -= 1

        self.current = util.clamp(self.current, 0, len(ls) - 1)

        self._recalcFor((lt,), True)

    # change type of element at 'index' to the next (or previous, if
    # 'reverse' is True) type in TYPE_CYCLE.
    def cycleType(self, index, reverse = False):
        if not self.isValidIndex(index):
            return

        lt = self.elements[index].lt

        if lt not in TYPE_CYCLE:
            # PAREN
            self.updateType(index, DIALOGUE)

            return

        if reverse and (lt == DIALOGUE):
            self.updateType(index, PAREN)

            return

        i = TYPE_CYCLE.index(lt)

        if reverse:
            i -= 1
        else:
            i += 1

        self.updateType(index, TYPE_CYCLE[i % len(TYPE_CYCLE)])

    # move focus to element at 'index', if it exists.
    def setCurrent(self, index):
        if self.isValidIndex(index):
            self.current = index

    def getCurrentElement(self):
        return self.elements[self.current]

    # set title page to 'tp' (a TitlePage or None). non-empty title and
    # author are also copied to the script itself.
    def updateTitlePage(self, tp):
        self.titlePage = tp

        if tp:
            if tp.title:
                self.title = tp.title

            if tp.author:
                self.author = tp.author

        self.updatedAt = util.now()
        self.markChanged()

    def recalcScenes(self):
        self.scenes = scenes.calcScenes(self.elements)

    def recalcCharacters(self):
        self.characters = characters.calcCharacters(self.elements)

    def recalcLocations(self):
        self.locations = locations.calcLocations(self.elements)

    def recalcAll(self):
        self.recalcScenes()
        self.recalcCharacters()
        self.recalcLocations()

        log.debug("indexes rebuilt", scenes = len(self.scenes),
                  characters = len(self.characters),
                  locations = len(self.locations))

    def getCharactersSortedByLineCount(self):
        return characters.sortByLineCount(self.characters)

    def getLocationsSortedByOccurrence(self):
        return locations.sortByOccurrence(self.locations)

    # return index of element with the given id, or -1.
    def getElementIndex(self, elementId):
        return scenes.findElementIndex(self.elements, elementId)

    # return the Scene that element at 'index' belongs to, or None if it
    # comes before the first scene.
    def getSceneAt(self, index):
        ret = None

        for sc in self.scenes:
            i = self.getElementIndex(sc.elementId)

            if (i == -1) or (i > index):
                break

            ret = sc

        return ret

    # return total number of words in script
    def getWordCount(self):
        return sum([len(util.splitToWords(el.text)) for el in self.elements])

    def toDict(self):
        d = {
            "id" : self.id,
            "title" : self.title,
            "author" : self.author,
            "elements" : [el.toDict() for el in self.elements],
            "characters" : [ci.toDict() for ci in self.characters],
            "locations" : [li.toDict() for li in self.locations],
            "createdAt" : util.toIsoDate(self.createdAt),
            "updatedAt" : util.toIsoDate(self.updatedAt),
            }

        if self.titlePage:
            d["titlePage"] = self.titlePage.toDict()

        return d

    # opposite of toDict. raises KeyError, TypeError or ValueError on
    # malformed input. derived indexes are taken as stored; scenes, which
    # are not stored, are rebuilt.
    @staticmethod
    def fromDict(d):
        sp = Screenplay(d.get("title", ""), d.get("author", ""))

        sp.id = str(d["id"])

        tp = d.get("titlePage")
        if tp:
            sp.titlePage = TitlePage.fromDict(tp)

        ls = [Element.fromDict(el) for el in d["elements"]]
        if ls:
            sp.elements = ls

        sp.characters = [characters.CharacterInfo.fromDict(ci)
                         for ci in d.get("characters", [])]
        sp.locations = [locations.LocationInfo.fromDict(li)
                        for li in d.get("locations", [])]

        sp.createdAt = util.fromIsoDate(d["createdAt"])
        sp.updatedAt = util.fromIsoDate(d["updatedAt"])

        sp.recalcScenes()

        return sp

    # sanity check the document. only used in tests.
    def _validate(self):
        assert len(self.elements) > 0
        assert self.isValidIndex(self.current)

        ids = {}
        for el in self.elements:
            assert el.lt in ELEMENT_TYPES
            assert el.id not in ids
            ids[el.id] = None

        names = [ci.name for ci in self.characters]
        assert len(names) == len(set(names))

        names = [li.name for li in self.locations]
        assert len(names) == len(set(names))

# one element (paragraph) in a screenplay
class Element:
    def __init__(self, lt = ACTION, text = "", id = None, formatting = None):

        # identifier, assigned once and never reused
        self.id = id or util.genId()

        # element type
        self.lt = lt

        # text
        self.text = text

        # list of FormatRange objects
        self.formatting = formatting or []

    # return a copy of this element with the same identity, with the
    # given fields changed.
    def copy(self, lt = None, text = None):
        return Element(
            self.lt if lt is None else lt,
            self.text if text is None else text,
            self.id,
            [FormatRange(f.start, f.end, f.fmt) for f in self.formatting])

    def __eq__(self, other):
        return isinstance(other, Element) and (self.id == other.id) and \
            (self.lt == other.lt) and (self.text == other.text) and \
            (self.formatting == other.formatting)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __repr__(self):
        return "Element(%r, %r)" % (self.lt, self.text)

    def toDict(self):
        d = {
            "id" : self.id,
            "type" : self.lt,
            "content" : self.text,
            }

        if self.formatting:
            d["formatting"] = [f.toDict() for f in self.formatting]

        return d

    @staticmethod
    def fromDict(d):
        lt = d["type"]

        if lt not in ELEMENT_TYPES:
            raise ValueError("unknown element type %r" % lt)

        return Element(lt, str(d.get("content", "")), str(d["id"]),
            [FormatRange.fromDict(f) for f in d.get("formatting", [])])

# a bold/italic/underline run inside an element's text. [start, end) are
# character offsets; ranges may overlap and nothing checks that they stay
# inside the text.
class FormatRange:
    def __init__(self, start, end, fmt):
        self.start = start
        self.end = end
        self.fmt = fmt

    def __eq__(self, other):
        return isinstance(other, FormatRange) and \
            ((self.start, self.end, self.fmt) ==
             (other.start, other.end, other.fmt))

    def __repr__(self):
        return "FormatRange(%d, %d, %r)" % (self.start, self.end, self.fmt)

    def toDict(self):
        return { "start" : self.start, "end" : self.end, "format" : self.fmt }

    @staticmethod
    def fromDict(d):
        fmt = d["format"]

        if fmt not in FORMAT_STYLES:
            raise ValueError("unknown format %r" % fmt)

        return FormatRange(int(d["start"]), int(d["end"]), fmt)

# the industry standard title page
class TitlePage:
    # optional fields, saved only when set
    _optional = ("basedOn", "contactInfo", "draftDate", "copyright")

    def __init__(self, title = "", author = "", writtenBy = "Written by",
                 titleFontSize = None, basedOn = None, contactInfo = None,
                 draftDate = None, copyright = None):
        self.title = title

        # one of TITLE_FONT_SIZES, or None for the default (medium)
        self.titleFontSize = titleFontSize

        # the credit line, e.g. "Written by"
        self.writtenBy = writtenBy

        self.author = author

        # e.g. "Based on the novel by ..."
        self.basedOn = basedOn

        # contact information, may contain newlines
        self.contactInfo = contactInfo

        # e.g. "First Draft - January 2026"
        self.draftDate = draftDate

        self.copyright = copyright

    def __eq__(self, other):
        return isinstance(other, TitlePage) and \
            (self.toDict() == other.toDict())

    def getTitleFontSize(self):
        return self.titleFontSize or TITLE_MEDIUM

    def toDict(self):
        d = {
            "title" : self.title,
            "writtenBy" : self.writtenBy,
            "author" : self.author,
            }

        if self.titleFontSize:
            d["titleFontSize"] = self.titleFontSize

        for name in self._optional:
            val = getattr(self, name)

            if val is not None:
                d[name] = val

        return d

    @staticmethod
    def fromDict(d):
        tp = TitlePage(d.get("title", ""), d.get("author", ""),
                       d.get("writtenBy", ""))

        size = d.get("titleFontSize")
        if size in TITLE_FONT_SIZES:
            tp.titleFontSize = size

        for name in TitlePage._optional:
            if name in d:
                setattr(tp, name, d[name])

        return tp
