import uuid
from typing import Dict, Type

from reportlab.pdfgen.canvas import Canvas

import slugline.pml as pml

import structlog

log = structlog.get_logger(__name__)

# users should only use this.
def generate(doc: 'pml.Document') -> bytes:
    tmp = PDFExporter(doc)
    return tmp.generate()

# An abstract base class for all PDF drawing operations.
class PDFDrawOp:

    # draw the PDF equivalent of the PML object pmlOp onto canvas. pe =
    # PDFExporter.
    def draw(self, pmlOp: 'pml.DrawOp', pageNr: int, pe: 'PDFExporter',
             canvas: Canvas) -> None:
        raise NotImplementedError("draw not implemented")

class PDFTextOp(PDFDrawOp):
    def draw(self, pmlOp: 'pml.DrawOp', pageNr: int, pe: 'PDFExporter',
             canvas: Canvas) -> None:
        if not isinstance(pmlOp, pml.TextOp):
            raise TypeError("PDFTextOp is only compatible with pml.TextOp, got "
                            + type(pmlOp).__name__)

        # we need to adjust y position since PDF uses baseline of text as
        # the y pos, but pml uses top of the text as y pos. The Adobe
        # standard Courier family font metrics give 157 units in 1/1000
        # point units as the Descender value, thus giving (1000 - 157) =
        # 843 units from baseline to top of text.

        x = pmlOp.x
        y = pe.y(pmlOp.y) - 0.843 * pmlOp.size

        fontName = pml.getFontName(pmlOp.flags)
        canvas.setFont(fontName, pmlOp.size)
        canvas.drawString(x, y, pmlOp.text)

        if pmlOp.flags & pml.UNDERLINED:

            undLen = canvas.stringWidth(pmlOp.text, fontName, pmlOp.size)

            # all standard PDF fonts have the underline line 100 units
            # below baseline with a thickness of 50
            undY = y - 0.1 * pmlOp.size
            canvas.setLineWidth(0.05 * pmlOp.size)

            canvas.line(x, undY, x + undLen, undY)

        # create bookmark for table of contents if applicable
        if pmlOp.toc:
            bookmarkKey = uuid.uuid4().hex
            canvas.bookmarkHorizontal(bookmarkKey, x, pe.y(pmlOp.y))
            canvas.addOutlineEntry(pmlOp.toc.text, bookmarkKey)

class PDFExporter:
    # PDF drawing operation for each PML operation type
    drawOps: Dict[Type['pml.DrawOp'], PDFDrawOp] = {
        pml.TextOp: PDFTextOp(),
    }

    def __init__(self, doc: 'pml.Document'):
        self.doc: pml.Document = doc

    # generate PDF document and return it as bytes
    def generate(self) -> bytes:
        doc = self.doc
        canvas = Canvas(
            '',
            pdfVersion=(1, 5),
            pagesize=(doc.w, doc.h),
            initialFontName=pml.getFontName(pml.NORMAL),
        )

        # set PDF info
        version = self.doc.version
        canvas.setCreator('Slugline ' + version)
        canvas.setProducer('Slugline ' + version)

        numberOfPages: int = len(doc.pages)

        # draw pages
        for i in range(numberOfPages):
            pg = self.doc.pages[i]
            for op in pg.ops:
                self.drawOps[type(op)].draw(op, i, self, canvas)

            if i < numberOfPages - 1:
                canvas.showPage()

        if doc.showTOC and doc.tocs:
            canvas.showOutline()

        data = canvas.getpdfdata()

        log.info("pdf generated", pages = numberOfPages, size = len(data))

        return data

    # convert y coordinate from PML's top-down to PDF's bottom-up
    def y(self, y: float) -> float:
        return self.doc.h - y
