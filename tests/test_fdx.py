import pytest

from lxml import etree

import slugline.error as error
import slugline.fdx as fdx
import slugline.screenplay as scr
import u

# tests Final Draft import and export

def _summary(sp):
    return [(el.lt, el.text) for el in sp.elements]

def testDecodeFixture():
    sp = fdx.decode(u.loadFixture("test.fdx"))

    assert sp.title == "THE COLD STONES"
    assert sp.author == "Jane Doe"

    assert _summary(sp) == [
        (scr.SCENE, "EXT. STONEHENGE - NIGHT"),
        (scr.ACTION, "A blizzard rages. Snow is everywhere and a fierce"
         " wind howls."),
        (scr.CHARACTER, "BOB"),
        (scr.DIALOGUE, "Well, this is cold."),
        (scr.CHARACTER, "ALICE (V.O.)"),
        (scr.PAREN, "(shivering)"),
        (scr.DIALOGUE, "It's Salisbury Plain in January. What did you"
         " expect?"),
        (scr.TRANSITION, "CUT TO:"),
        (scr.SCENE, "INT. PUB - CONTINUOUS"),
        (scr.ACTION, "A roaring fire."),
        (scr.ACTION, "Bob and Alice, thawing."),
        (scr.SCENE, ""),
        ]

    assert [(ci.name, ci.lineCount, ci.firstAppearance)
            for ci in sp.characters] == [("BOB", 1, 2), ("ALICE", 1, 4)]
    assert [li.name for li in sp.locations] == ["STONEHENGE", "PUB"]
    assert len(sp.scenes) == 2
    assert not sp.isModified()
    sp._validate()

def testDecodeFreshIds():
    s = u.loadFixture("test.fdx")
    sp1 = fdx.decode(s)
    sp2 = fdx.decode(s)

    assert sp1.id != sp2.id
    assert not (set([el.id for el in sp1.elements]) &
                set([el.id for el in sp2.elements]))

def testDecodeMalformed():
    with pytest.raises(error.DecodeError):
        fdx.decode("<FinalDraft><Content></FinalDraft>")

    with pytest.raises(error.DecodeError):
        fdx.decode("")

def testDecodeEmpty():
    sp = fdx.decode("<FinalDraft><Content/></FinalDraft>")

    assert sp.title == fdx.DEFAULT_TITLE
    assert sp.author == ""
    assert len(sp.elements) == 1
    assert sp.elements[0].lt == scr.SCENE

def testDecodeHeaderTitle():
    sp = fdx.decode("""<FinalDraft>
  <HeaderAndFooter>
    <Header><Paragraph><Text>Header Title</Text></Paragraph></Header>
  </HeaderAndFooter>
  <Content>
    <Paragraph Type="Action"><Text>foo</Text></Paragraph>
  </Content>
</FinalDraft>""")

    assert sp.title == "Header Title"
    assert _summary(sp) == [(scr.ACTION, "foo")]

def testDecodeLongTitleSkipped():
    sp = fdx.decode("""<FinalDraft>
  <TitlePage><Content>
    <Paragraph><Text>%s</Text></Paragraph>
    <Paragraph><Text>Short Title</Text></Paragraph>
  </Content></TitlePage>
  <Content/>
</FinalDraft>""" % ("x" * 100))

    assert sp.title == "Short Title"

def testDecodeNoContent():
    sp = fdx.decode("""<FinalDraft>
  <Body>
    <Paragraph Type="Character"><Text>BOB</Text></Paragraph>
    <Paragraph Type="Dialogue"><Text>Hi.</Text></Paragraph>
  </Body>
</FinalDraft>""")

    assert _summary(sp) == [(scr.CHARACTER, "BOB"), (scr.DIALOGUE, "Hi.")]

def testDecodeBytes():
    sp = fdx.decode(u.loadFixture("test.fdx").encode("UTF-8"))

    assert sp.title == "THE COLD STONES"

def testEncode():
    sp = u.build((scr.SCENE, "INT. A - DAY"), (scr.ACTION, "Tom & Jerry <3"))
    sp.title = "My Script"
    sp.author = "Jane"

    s = fdx.encode(sp)
    root = etree.XML(s.encode("UTF-8"))

    assert root.tag == "FinalDraft"
    assert root.get("DocumentType") == "Script"
    assert root.get("Template") == "No"
    assert root.get("Version") == "1"

    assert [p.get("Type") for p in root.xpath("Content/Paragraph")] == \
        ["Scene Heading", "Action"]
    assert root.xpath("Content/Paragraph/Text")[1].text == "Tom & Jerry <3"
    assert "Tom &amp; Jerry &lt;3" in s

    assert [p.xpath("string(Text)") for p in
            root.xpath("TitlePage/Content/Paragraph")] == \
        ["MY SCRIPT", "", "Written by", "Jane"]

def testEncodeTitlePage():
    sp = u.load()
    root = etree.XML(fdx.encode(sp).encode("UTF-8"))

    paras = root.xpath("TitlePage/Content/Paragraph")

    assert [p.get("Alignment") for p in paras] == ["Center"] * 8 + \
        ["Left"] * 2
    assert [p.xpath("string(Text)") for p in paras] == [
        "THE FISHERMEN", "", "Written by", "John Smith", "",
        "Based on a true story", "", "First Draft",
        "John Smith\n1 Harbour Road\nPortsmouth", "(c) 2026 John Smith"]

def testEncodeNoTitle():
    sp = u.build((scr.ACTION, "foo"))
    sp.title = ""

    root = etree.XML(fdx.encode(sp).encode("UTF-8"))

    assert root.find("TitlePage") is None

def testRoundTrip():
    sp = u.load()
    sp2 = fdx.decode(fdx.encode(sp))

    assert _summary(sp2) == _summary(sp)
    assert sp2.title == "THE FISHERMEN"
    assert sp2.author == "John Smith"

def testRoundTripWhitespace():
    sp = u.build((scr.SCENE, "INT. A"), (scr.ACTION, "col1\tcol2"),
                 (scr.ACTION, "  indented\nsecond line"))

    assert _summary(fdx.decode(fdx.encode(sp))) == _summary(sp)

def testParagraphTypes():
    sp = fdx.decode("<FinalDraft><Content>"
        "<Paragraph Type=\"Shot\"><Text>ANGLE ON BOB</Text></Paragraph>"
        "<Paragraph Type=\"General\"><Text>a\tb</Text></Paragraph>"
        "<Paragraph Type=\"Parenthetical\"><Text>(x)</Text></Paragraph>"
        "</Content></FinalDraft>")

    assert _summary(sp) == [(scr.SCENE, "ANGLE ON BOB"), (scr.ACTION, "a\tb"),
                            (scr.PAREN, "(x)")]

def testRoundTripQuotes():
    sp = u.build((scr.DIALOGUE, "He said \"don't\" & left."))

    assert _summary(fdx.decode(fdx.encode(sp))) == _summary(sp)
