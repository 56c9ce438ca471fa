# Final Draft (.fdx) import and export. only paragraph types and plain
# text are carried over; formatting, script notes, dual dialogue and most
# of the title page are not.

import re

from lxml import etree

import slugline.config as config
import slugline.error as error
import slugline.screenplay as screenplay
import slugline.util as util

import structlog

log = structlog.get_logger(__name__)

# FDX paragraph types use the same names as our element types. these are
# types other programs use that we have no exact equivalent for.
_fdxAliases = {
    "General" : screenplay.ACTION,
    "Shot" : screenplay.SCENE,
}

# titles this long or longer are not believed to be titles
MAX_TITLE_LEN = 100

DEFAULT_TITLE = "Imported Screenplay"

# a credit line such as "Written by" or "by"
_byRe = re.compile(r"\bby\b", re.IGNORECASE)

# characters that can't appear in XML 1.0 at all
_invalidXmlRe = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f]")

def _addPara(parent, text, lt = None, alignment = None):
    para = etree.SubElement(parent, "Paragraph")

    if alignment:
        para.set("Alignment", alignment)

    if lt:
        para.set("Type", config.lt2ti(lt).name)

    paratxt = etree.SubElement(para, "Text")
    paratxt.text = _invalidXmlRe.sub("", text)

    return para

def _generateTitlePage(sp, fd):
    tp = sp.titlePage
    content = etree.SubElement(etree.SubElement(fd, "TitlePage"), "Content")

    def center(s):
        _addPara(content, s, alignment = "Center")

    title = (tp and tp.title) or sp.title
    if title:
        center(util.upper(title))
        center("")

    center((tp and tp.writtenBy) or "Written by")

    author = (tp and tp.author) or sp.author
    if author:
        center(author)

    if tp:
        for s in (tp.basedOn, tp.draftDate):
            if s:
                center("")
                center(s)

        for s in (tp.contactInfo, tp.copyright):
            if s:
                _addPara(content, s, alignment = "Left")

# encode screenplay 'sp' as FDX and return it as a string.
def encode(sp):
    fd = etree.Element("FinalDraft")
    fd.set("DocumentType", "Script")
    fd.set("Template", "No")
    fd.set("Version", "1")

    if sp.titlePage or sp.title:
        _generateTitlePage(sp, fd)

    content = etree.SubElement(fd, "Content")

    for el in sp.elements:
        _addPara(content, el.text, el.lt)

    return etree.tostring(
        fd, xml_declaration=True, encoding='UTF-8',
        pretty_print=True).decode("UTF-8")

# return the text of FDX paragraph 'para'. text runs are concatenated; a
# paragraph with no runs gives all of its text.
def _getText(para):
    runs = para.xpath("Text")

    if runs:
        return "".join([t.text or "" for t in runs])

    return "".join(para.itertext())

# return (title, author) found in FDX document 'root'. either can be an
# empty string.
def _getTitleAndAuthor(root):
    title = ""
    author = ""

    # True when the previous non-empty paragraph was a credit line
    afterBy = False

    for para in root.xpath("TitlePage/Content//Paragraph"):
        s = _getText(para).strip()

        if not s:
            continue

        if _byRe.search(s):
            afterBy = True

            continue

        if afterBy and not author:
            author = s
        elif not title and (len(s) < MAX_TITLE_LEN):
            title = s

        afterBy = False

    if not title:
        for header in root.xpath("HeaderAndFooter/Header"):
            s = _getText(header).strip()

            if s and (len(s) < MAX_TITLE_LEN):
                title = s

                break

    return (title, author)

# convert one FDX paragraph into an Element, or None if it's dropped.
def _paraToElement(para):
    s = util.fixNL(_getText(para))
    name = para.get("Type", "")

    ti = config.name2ti(name)
    if ti:
        lt = ti.lt
    else:
        lt = _fdxAliases.get(name)

    if lt is None:
        # unknown type, keep the text if there is any
        if not s.strip():
            return None

        lt = screenplay.ACTION

    elif (lt != screenplay.SCENE) and not s.strip():
        return None

    return screenplay.Element(lt, s)

# decode FDX document in 'data' (str or bytes) and return a new
# Screenplay. raises DecodeError if data is not well-formed XML.
def decode(data):
    if isinstance(data, str):
        data = data.encode("UTF-8")

    try:
        root = etree.XML(data)
    except etree.XMLSyntaxError as e:
        raise error.DecodeError("Error parsing FDX: %s" % e)

    title, author = _getTitleAndAuthor(root)

    paras = root.xpath("Content/Paragraph")
    if not paras and (root.find("Content") is None):
        paras = root.xpath("//Paragraph")

    elements = []
    for para in paras:
        el = _paraToElement(para)

        if el:
            elements.append(el)

    dropped = len(paras) - len(elements)
    if dropped:
        log.warning("fdx paragraphs dropped", count = dropped)

    sp = screenplay.Screenplay(title or DEFAULT_TITLE, author)

    if elements:
        sp.elements = elements

    sp.recalcAll()

    log.info("fdx decoded", title = sp.title, elements = len(sp.elements))

    return sp
