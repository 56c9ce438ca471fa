# coarse page estimation, used for page indicators and page breaks while
# editing. it's a plain character count heuristic: every line holds
# cfg.charsPerLine characters, and each element gets the extra lines its
# type's screenSpacing says. the export renderer in layout.py paginates
# differently and more accurately; the two are not meant to agree.

import slugline.config as config

import structlog

log = structlog.get_logger(__name__)

# return estimated number of lines element 'el' takes, including its
# spacing.
def getElementLines(el, cfg):
    contentLines = max(1, -(-len(el.text) // cfg.charsPerLine))

    return contentLines + cfg.getType(el.lt).screenSpacing

# return list of element indexes that start a new page. the element that
# pushes the running line count to cfg.linesOnPage or over is where the
# break goes, and its own lines start the count of the next page.
def getPageBreaks(elements, cfg = None):
    cfg = cfg or config.Config()

    breaks = []
    lineCount = 0

    for i, el in enumerate(elements):
        elLines = getElementLines(el, cfg)
        lineCount += elLines

        if lineCount >= cfg.linesOnPage:
            breaks.append(i)
            lineCount = elLines

    log.debug("paginated", elements = len(elements), breaks = len(breaks))

    return breaks

# return estimated number of pages in 'elements'.
def getPageCount(elements, cfg = None):
    return len(splitIntoPages(elements, cfg))

# return 1-based page number element at 'index' is estimated to be on.
def getPageOfElement(elements, index, cfg = None):
    page = 0

    for start, _ in splitIntoPages(elements, cfg):
        if start > index:
            break

        page += 1

    return max(1, page)

# split 'elements' into pages, returning a list of (startIndex, elements)
# tuples, one per page.
def splitIntoPages(elements, cfg = None):
    ret = []
    start = 0

    for br in getPageBreaks(elements, cfg):
        # a break on the very first element would give an empty page
        if br > start:
            ret.append((start, elements[start:br]))
            start = br

    ret.append((start, elements[start:]))

    return ret
