# layout configuration. the defaults here are the industry-standard
# screenplay format and are what the core uses; a config file can override
# them for the command line front end.

import slugline.error as error
import slugline.mypickle as mypickle
import slugline.screenplay as screenplay
import slugline.util as util

import structlog

log = structlog.get_logger(__name__)

# non-changing information about an element type
class TypeInfo:
    def __init__(self, lt, name):

        # element type, e.g. screenplay.ACTION
        self.lt = lt

        # textual name, e.g. "Action"
        self.name = name

# contains a TypeInfo for each element type
_ti = [
    TypeInfo(screenplay.SCENE, "Scene Heading"),
    TypeInfo(screenplay.ACTION, "Action"),
    TypeInfo(screenplay.CHARACTER, "Character"),
    TypeInfo(screenplay.DIALOGUE, "Dialogue"),
    TypeInfo(screenplay.PAREN, "Parenthetical"),
    TypeInfo(screenplay.TRANSITION, "Transition"),
    ]

# mapping from element type to TypeInfo
_lt2ti = dict((ti.lt, ti) for ti in _ti)

# mapping from element name to TypeInfo
_name2ti = dict((ti.name, ti) for ti in _ti)

def lt2ti(lt):
    t = _lt2ti.get(lt)

    if t:
        return t

    raise error.ConfigError("unknown element type %r" % lt)

def name2ti(name):
    return _name2ti.get(name)

# script-specific layout information about an element type
class Type:
    cvars = None

    def __init__(self, lt):

        # element type
        self.lt = lt

        # pointer to TypeInfo
        self.ti = lt2ti(lt)

        if not self.__class__.cvars:
            v = self.__class__.cvars = mypickle.Vars()

            # distance of the element's text from the left margin, and the
            # width of the column it's wrapped to, in inches.
            v.addFloat("indent", 0.0, "Indent", 0.0, 10.0)
            v.addFloat("width", 6.0, "Width", 0.5, 10.0)

            # blank lines before the element in exported output. not used
            # at the top of a page.
            v.addInt("exportSpacing", 0, "ExportSpacing", 0, 5)

            # extra lines the coarse page estimator adds for the element
            v.addInt("screenSpacing", 0, "ScreenSpacing", 0, 5)

            # whether the element is upper-cased in exported output
            v.addBool("isCaps", False, "AllCaps")

            # whether the element is right-aligned in exported output
            v.addBool("isRightAligned", False, "RightAligned")

        self.__class__.cvars.setDefaults(self)

    def save(self, prefix):
        prefix += "%s/" % self.ti.name

        return self.cvars.save(prefix, self)

    def load(self, vals, prefix):
        prefix += "%s/" % self.ti.name

        self.cvars.load(vals, prefix, self)

class Config:
    cvars = None

    def __init__(self):

        if not self.__class__.cvars:
            self.setupVars()

        self.__class__.cvars.setDefaults(self)

        # type configs, key = element type, value = Type
        self.types = { }

        t = Type(screenplay.SCENE)
        t.indent = 0.0
        t.width = 6.0
        t.exportSpacing = 2
        t.screenSpacing = 1
        t.isCaps = True
        self.types[t.lt] = t

        t = Type(screenplay.ACTION)
        t.indent = 0.0
        t.width = 6.0
        t.exportSpacing = 1
        t.screenSpacing = 1
        self.types[t.lt] = t

        t = Type(screenplay.CHARACTER)
        t.indent = 2.2
        t.width = 3.8
        t.exportSpacing = 1
        t.screenSpacing = 1
        t.isCaps = True
        self.types[t.lt] = t

        t = Type(screenplay.DIALOGUE)
        t.indent = 1.0
        t.width = 3.5
        self.types[t.lt] = t

        t = Type(screenplay.PAREN)
        t.indent = 1.6
        t.width = 2.0
        self.types[t.lt] = t

        t = Type(screenplay.TRANSITION)
        t.indent = 0.0
        t.width = 6.0
        t.exportSpacing = 1
        t.isCaps = True
        t.isRightAligned = True
        self.types[t.lt] = t

        self.recalc()

    def setupVars(self):
        v = self.__class__.cvars = mypickle.Vars()

        # font size used for PDF generation, in points
        v.addInt("fontSize", 12, "FontSize", 4, 72)

        # margins, in inches
        v.addFloat("marginBottom", 1.0, "Margin/Bottom", 0.0, 5.0)
        v.addFloat("marginLeft", 1.5, "Margin/Left", 0.0, 5.0)
        v.addFloat("marginRight", 1.0, "Margin/Right", 0.0, 5.0)
        v.addFloat("marginTop", 1.0, "Margin/Top", 0.0, 5.0)

        # paper size, in inches. US Letter.
        v.addFloat("paperHeight", 11.0, "Paper/Height", 4.0, 40.0)
        v.addFloat("paperWidth", 8.5, "Paper/Width", 3.0, 40.0)

        # coarse page estimation: page break threshold and the divisor
        # used to turn a character count into a line count
        v.addInt("linesOnPage", 55, "LinesOnPage", 10, 200)
        v.addInt("charsPerLine", 60, "CharsPerLine", 10, 200)

        # whether to include PDF TOC
        v.addBool("pdfIncludeTOC", True, "IncludeTOC")

        # whether to show PDF TOC by default
        v.addBool("pdfShowTOC", True, "ShowTOC")

        # whether to print page numbers on pages after the first one
        v.addBool("pdfShowPageNumbers", True, "ShowPageNumbers")

        # whether to print the title page, if the script has one
        v.addBool("pdfIncludeTitlePage", True, "IncludeTitlePage")

    # load config from string 's'. does not throw any exceptions, silently
    # ignores any errors, and always leaves config in an ok state.
    def load(self, s):
        vals = self.cvars.parse(s)

        self.cvars.load(vals, "", self)

        for t in self.types.values():
            t.load(vals, "Element/")

        if vals:
            log.warning("unknown config values ignored",
                        names = sorted(vals.keys()))

        self.recalc()

    # save config into a string and return that.
    def save(self):
        s = self.cvars.save("", self)

        for t in self.types.values():
            s += t.save("Element/")

        return s

    # fix up all invalid config values and recalculate all variables
    # dependent on other variables.
    def recalc(self):
        self.cvars.clamp(self)

        for t in self.types.values():
            t.cvars.clamp(t)

        # margins can't eat the whole page
        self.marginLeft = util.clamp(self.marginLeft,
            maxVal = self.paperWidth - self.marginRight - 1.0)
        self.marginTop = util.clamp(self.marginTop,
            maxVal = self.paperHeight - self.marginBottom - 1.0)

    def getType(self, lt):
        return self.types[lt]

    # width of the text area, in inches
    def getTextWidth(self):
        return self.paperWidth - self.marginLeft - self.marginRight

    # height of the text area, in inches
    def getTextHeight(self):
        return self.paperHeight - self.marginTop - self.marginBottom

# load a Config from the file 'filename'. raises MiscError if the file
# can't be read.
def loadFromFile(filename):
    cfg = Config()
    cfg.load(util.loadFile(filename, 1000000))

    log.info("config loaded", filename = filename)

    return cfg
