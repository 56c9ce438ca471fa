# PML is short for Page Modeling Language, our own neat little PDF-wannabe
# format for expressing a script's complete contents in a neutral way
# that's easy to render to almost anything. the PDF renderer lives in
# pdf.py.

# A PML document is a collection of pages plus possibly some metadata.
# Each page is a collection of simple drawing commands, executed
# sequentially in the order given.

# All measurements in PML are in (floating point) points, i.e. 1/72 inch,
# with the origin at the upper left corner of the page.

from typing import Dict, List, Optional

import slugline
import slugline.util as util

# text flags. don't change these unless you know what you're doing.
NORMAL = 0
BOLD   = 1
ITALIC = 2
COURIER = 0
UNDERLINED = 16

# standard PDF font names for the Courier family, key = style flags
# without UNDERLINED
_fontNames: Dict[int, str] = {
    COURIER: "Courier",
    COURIER | BOLD: "Courier-Bold",
    COURIER | ITALIC: "Courier-Oblique",
    COURIER | BOLD | ITALIC: "Courier-BoldOblique",
}

# get font name to use for given flags.
def getFontName(flags: int) -> str:
    # the "& 15" gets rid of the underline flag
    return _fontNames[flags & 15]

# A single document.
class Document:

    # (w, h) is the size of each page.
    def __init__(self, w: float, h: float):
        self.w: float = w
        self.h: float = h

        self.pages: List[Page] = []

        self.tocs: List[TOCItem] = []

        # whether to show TOC by default on document open
        self.showTOC: bool = False

        self.version: str = slugline.version

    def add(self, page: 'Page') -> None:
        self.pages.append(page)

    def addTOC(self, toc: 'TOCItem') -> None:
        self.tocs.append(toc)

class Page:
    def __init__(self, doc: Document):

        # link to containing document
        self.doc: Document = doc

        # a collection of DrawOp objects
        self.ops: List['DrawOp'] = []

    def add(self, op: 'DrawOp') -> None:
        self.ops.append(op)

    # return all TextOps on this page, in drawing order.
    def getTextOps(self) -> List['TextOp']:
        return [op for op in self.ops if isinstance(op, TextOp)]

# Table of content item (Outline item, in PDF lingo)
class TOCItem:
    def __init__(self, text: str, op: 'TextOp'):
        # text to show in TOC
        self.text: str = text

        # pointer to the TextOp that this item links to (used to get the
        # correct positioning information)
        self.op: TextOp = op

# An abstract base class for all drawing operations.
class DrawOp:
    pass

# Draw text string 'text', at position (x, y) points from the upper left
# corner of the page. Font used is 'size' points Courier, possibly being
# bold / italic / underlined as indicated by the flags.
class TextOp(DrawOp):
    def __init__(self, text: str, x: float, y: float, size: int,
                 flags: int = NORMAL | COURIER,
                 align: int = util.ALIGN_LEFT, valign: int = util.VALIGN_TOP,
                 element: int = -1):
        """
        :param element: index of the element in `Screenplay.elements` this
            text comes from, or -1 if some other text (page numbers, title
            page).
        """
        self.text: str = text
        self.x: float = x
        self.y: float = y
        self.size: int = size
        self.flags: int = flags

        # TOCItem, by default we have none
        self.toc: Optional[TOCItem] = None

        self.element: int = element

        if align != util.ALIGN_LEFT:
            w = util.getTextWidth(text, getFontName(flags), size)

            if align == util.ALIGN_CENTER:
                self.x -= w / 2.0
            elif align == util.ALIGN_RIGHT:
                self.x -= w

        if valign != util.VALIGN_TOP:
            h = util.getTextHeight(size)

            if valign == util.VALIGN_CENTER:
                self.y -= h / 2.0
            elif valign == util.VALIGN_BOTTOM:
                self.y -= h
