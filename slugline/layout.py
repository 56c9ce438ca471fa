# export layout: wraps every element to its column using real Courier
# metrics, paginates the result the way a printed script is paginated, and
# turns it into a PML document for the PDF renderer.
#
# this is a different policy from the coarse estimator in pagination.py
# (scene headings get two blank lines before them here, one there, and
# wrapping is done against the real column widths); page breaks from the
# two are not expected to match.

import textwrap

import slugline.config as config
import slugline.pdf as pdf
import slugline.pml as pml
import slugline.screenplay as screenplay
import slugline.util as util

import structlog

log = structlog.get_logger(__name__)

# title font sizes, in points
_titleSizes = {
    screenplay.TITLE_SMALL: 14,
    screenplay.TITLE_MEDIUM: 18,
    screenplay.TITLE_LARGE: 24,
}

# font size used for contact info and copyright on the title page
TITLE_SMALL_PRINT_SIZE = 10

# one printed line
class Line:
    def __init__(self, text, lt, element, y):

        # text, already upper-cased / parenthesized as needed
        self.text = text

        # element type
        self.lt = lt

        # index of the element this line belongs to
        self.element = element

        # line number on the page, counted from the top margin, 0-based
        self.y = y

    def __repr__(self):
        return "Line(%r, %r, %d, %d)" % (self.text, self.lt, self.element,
                                         self.y)

# one printed page
class Page:
    def __init__(self):

        # list of Line objects
        self.lines = []

    def add(self, line):
        self.lines.append(line)

    def isEmpty(self):
        return not self.lines

    # return index of first element on this page, or -1 if page is empty.
    def getFirstElement(self):
        if self.lines:
            return self.lines[0].element

        return -1

# width of one Courier character at the configured font size, in points
def getCharWidth(cfg):
    return util.getTextWidth(" ", pml.getFontName(pml.NORMAL), cfg.fontSize)

# height of one line, in points
def getLineHeight(cfg):
    return util.getTextHeight(cfg.fontSize)

# number of characters that fit on a line of type 'lt'. the column width
# never exceeds the text area.
def getCharsPerLine(lt, cfg):
    width = min(cfg.getType(lt).width, cfg.getTextWidth())

    # tiny epsilon so that a column that's an exact multiple of the
    # character width doesn't lose a character to rounding
    return max(1, int(util.inch2points(width) / getCharWidth(cfg) + 1e-6))

# number of lines that fit on a page
def getLinesOnPage(cfg):
    return max(1, int(util.inch2points(cfg.getTextHeight()) /
                      getLineHeight(cfg) + 1e-6))

# return element's text the way it's printed.
def getPrintText(el, cfg):
    s = el.text

    if cfg.getType(el.lt).isCaps:
        s = util.upper(s)

    if (el.lt == screenplay.PAREN) and not s.startswith("("):
        s = "(%s)" % s

    return s

# wrap element 'el' to its column and return a list of lines (strings).
# explicit newlines in the text always start a new line. never returns an
# empty list.
def wrapElement(el, cfg):
    width = getCharsPerLine(el.lt, cfg)
    ret = []

    for para in util.fixNL(getPrintText(el, cfg)).split("\n"):
        ls = textwrap.wrap(para, width, break_on_hyphens = False)

        if ls:
            ret.extend(ls)
        else:
            ret.append("")

    return ret

# return True if element 'el' is left out of the printed script.
def isSkipped(el):
    return (el.lt != screenplay.SCENE) and not el.text.strip()

# paginate 'elements' and return a list of Page objects. there is always
# at least one page.
def paginate(elements, cfg = None):
    cfg = cfg or config.Config()

    capacity = getLinesOnPage(cfg)

    pages = [Page()]
    pg = pages[0]

    # next free line on the current page
    y = 0

    for i, el in enumerate(elements):
        if isSkipped(el):
            continue

        ls = wrapElement(el, cfg)

        if pg.isEmpty():
            spacing = 0
        else:
            spacing = cfg.getType(el.lt).exportSpacing

            # doesn't fit, start it on a new page
            if (y + spacing + len(ls)) > capacity:
                pg = Page()
                pages.append(pg)
                y = 0
                spacing = 0

        y += spacing

        for s in ls:
            # element is longer than a whole page, split it
            if y >= capacity:
                pg = Page()
                pages.append(pg)
                y = 0

            pg.add(Line(s, el.lt, i, y))
            y += 1

    log.debug("layout paginated", elements = len(elements),
              pages = len(pages))

    return pages

# return list of element indexes that start a new printed page, i.e. the
# first element on each page except the first one. an element split over
# several pages appears once for each page it continues on.
def getPageBreaks(elements, cfg = None):
    return [pg.getFirstElement() for pg in paginate(elements, cfg)[1:]]

# return number of printed pages, not counting the title page.
def getPageCount(elements, cfg = None):
    return len(paginate(elements, cfg))

# add title page for 'tp' to PML document 'doc'.
def generateTitlePage(doc, tp, cfg):
    pg = pml.Page(doc)

    fs = cfg.fontSize
    centerX = doc.w / 2.0

    y = doc.h / 2.0 - 72.0

    titleSize = _titleSizes[tp.getTitleFontSize()]

    pg.add(pml.TextOp(util.upper(tp.title), centerX, y, titleSize,
                      align = util.ALIGN_CENTER, valign = util.VALIGN_BOTTOM))

    y += titleSize + 24
    pg.add(pml.TextOp(tp.writtenBy, centerX, y, fs,
                      align = util.ALIGN_CENTER, valign = util.VALIGN_BOTTOM))

    y += 18
    pg.add(pml.TextOp(tp.author, centerX, y, fs,
                      align = util.ALIGN_CENTER, valign = util.VALIGN_BOTTOM))

    if tp.basedOn:
        y += 24
        pg.add(pml.TextOp(tp.basedOn, centerX, y, fs, pml.ITALIC,
            align = util.ALIGN_CENTER, valign = util.VALIGN_BOTTOM))

    if tp.draftDate:
        y += 36
        pg.add(pml.TextOp(tp.draftDate, centerX, y, fs,
            align = util.ALIGN_CENTER, valign = util.VALIGN_BOTTOM))

    # contact info and copyright go to the bottom left corner, copyright
    # on the last line
    x = util.inch2points(cfg.marginLeft)
    bottomY = doc.h - util.inch2points(cfg.marginBottom)
    size = TITLE_SMALL_PRINT_SIZE

    if tp.contactInfo:
        ls = util.fixNL(tp.contactInfo).split("\n")

        y = bottomY
        if tp.copyright:
            y -= 20

        for i, s in enumerate(ls):
            pg.add(pml.TextOp(s, x, y - (len(ls) - i - 1) * 14, size,
                              valign = util.VALIGN_BOTTOM))

    if tp.copyright:
        pg.add(pml.TextOp(tp.copyright, x, bottomY, size,
                          valign = util.VALIGN_BOTTOM))

    doc.add(pg)

# generate PML document for screenplay 'sp' and return it.
def generatePML(sp, cfg = None):
    cfg = cfg or config.Config()

    doc = pml.Document(util.inch2points(cfg.paperWidth),
                       util.inch2points(cfg.paperHeight))
    doc.showTOC = cfg.pdfShowTOC

    if sp.titlePage and cfg.pdfIncludeTitlePage:
        generateTitlePage(doc, sp.titlePage, cfg)

    fs = cfg.fontSize
    chY = getLineHeight(cfg)
    left = util.inch2points(cfg.marginLeft)
    top = util.inch2points(cfg.marginTop)
    right = doc.w - util.inch2points(cfg.marginRight)

    # index of the last element a TOC item was made for
    lastToc = -1

    for pageNr, lpg in enumerate(paginate(sp.elements, cfg), 1):
        pg = pml.Page(doc)

        if (pageNr > 1) and cfg.pdfShowPageNumbers:
            pg.add(pml.TextOp("%d." % pageNr, right, top - 2 * chY, fs,
                              align = util.ALIGN_RIGHT))

        for line in lpg.lines:
            tcfg = cfg.getType(line.lt)
            y = top + line.y * chY

            if tcfg.isRightAligned:
                to = pml.TextOp(line.text, right, y, fs,
                                align = util.ALIGN_RIGHT, element = line.element)
            else:
                to = pml.TextOp(line.text,
                                left + util.inch2points(tcfg.indent), y, fs,
                                element = line.element)

            if cfg.pdfIncludeTOC and (line.lt == screenplay.SCENE) and \
                   (line.element != lastToc) and line.text.strip():
                to.toc = pml.TOCItem(line.text, to)
                doc.addTOC(to.toc)
                lastToc = line.element

            pg.add(to)

        doc.add(pg)

    return doc

# generate PDF for screenplay 'sp' and return it as bytes.
def generatePDF(sp, cfg = None):
    return pdf.generate(generatePML(sp, cfg))
