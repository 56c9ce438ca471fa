import slugline.screenplay as scr
import u

# tests document model mutations

def testNew():
    sp = u.new()

    assert len(sp.elements) == 1
    assert sp.elements[0].lt == scr.SCENE
    assert sp.elements[0].text == ""
    assert sp.current == 0
    assert not sp.isModified()
    sp._validate()

def testUpdateContent():
    sp = u.new()
    oldId = sp.elements[0].id
    oldUpdated = sp.updatedAt

    sp.updateContent(0, "INT. HOUSE - DAY")

    assert sp.elements[0].text == "INT. HOUSE - DAY"
    assert sp.elements[0].id == oldId
    assert sp.updatedAt >= oldUpdated
    assert sp.isModified()
    assert len(sp.scenes) == 1
    assert sp.locations[0].name == "HOUSE"

def testUpdateContentOutOfBounds():
    sp = u.new()

    sp.updateContent(1, "foo")
    sp.updateContent(-1, "foo")

    assert sp.elements[0].text == ""
    assert not sp.hasChanged

def testUpdateType():
    sp = u.build((scr.ACTION, "int. house - day"))

    sp.updateType(0, scr.SCENE)

    assert sp.elements[0].lt == scr.SCENE
    assert sp.elements[0].text == "int. house - day"
    assert len(sp.scenes) == 1

    sp.updateType(0, scr.ACTION)

    assert sp.scenes == []
    assert sp.locations == []

def testUpdateTypeOutOfBounds():
    sp = u.new()
    sp.updateType(5, scr.ACTION)

    assert sp.elements[0].lt == scr.SCENE

def testInsertAfter():
    sp = u.new()

    sp.insertAfter(0, scr.ACTION)

    assert len(sp.elements) == 2
    assert sp.elements[1].lt == scr.ACTION
    assert sp.elements[1].text == ""
    assert sp.current == 1

    sp.insertAfter(0, scr.CHARACTER)

    assert [el.lt for el in sp.elements] == [scr.SCENE, scr.CHARACTER,
                                             scr.ACTION]
    assert sp.current == 1
    sp._validate()

def testInsertAfterOutOfBounds():
    sp = u.new()
    sp.insertAfter(3, scr.ACTION)

    assert len(sp.elements) == 1
    assert sp.current == 0

def testIdsNotReused():
    sp = u.new()
    ids = set()

    for i in range(10):
        sp.insertAfter(i, scr.ACTION)
        ids.add(sp.elements[i + 1].id)

    for i in range(10, 0, -1):
        sp.delete(i)

    sp.insertAfter(0, scr.ACTION)

    assert sp.elements[1].id not in ids

def testSetCurrent():
    sp = u.build((scr.SCENE, "INT. A"), (scr.ACTION, "foo"))

    sp.setCurrent(1)
    assert sp.getCurrentElement().text == "foo"

    sp.setCurrent(2)
    assert sp.current == 1

def testUpdateTitlePage():
    sp = u.new()
    tp = scr.TitlePage("My Script", "Jane Doe")

    sp.updateTitlePage(tp)

    assert sp.titlePage is tp
    assert sp.title == "My Script"
    assert sp.author == "Jane Doe"
    assert sp.hasChanged

    sp.updateTitlePage(None)

    assert sp.titlePage is None
    assert sp.title == "My Script"

def testTitlePageDefaults():
    tp = scr.TitlePage()

    assert tp.writtenBy == "Written by"
    assert tp.getTitleFontSize() == scr.TITLE_MEDIUM
    assert tp.toDict() == { "title" : "", "writtenBy" : "Written by",
                            "author" : "" }

def testGetSceneAt():
    sp = u.build((scr.ACTION, "prologue"), (scr.SCENE, "INT. A"),
                 (scr.ACTION, "foo"), (scr.SCENE, "EXT. B"),
                 (scr.ACTION, "bar"))

    assert sp.getSceneAt(0) is None
    assert sp.getSceneAt(1).sceneNumber == 1
    assert sp.getSceneAt(2).sceneNumber == 1
    assert sp.getSceneAt(4).sceneNumber == 2

def testGetElementIndex():
    sp = u.build((scr.SCENE, "INT. A"), (scr.ACTION, "foo"))

    assert sp.getElementIndex(sp.elements[1].id) == 1
    assert sp.getElementIndex("nope") == -1

def testWordCount():
    sp = u.build((scr.SCENE, "INT. A - DAY"), (scr.ACTION, "foo  bar\nbaz"))

    assert sp.getWordCount() == 7

def testElementCopyKeepsIdentity():
    el = scr.Element(scr.ACTION, "foo", formatting = [
        scr.FormatRange(0, 2, scr.BOLD)])
    el2 = el.copy(text = "bar")

    assert el2.id == el.id
    assert el2.lt == scr.ACTION
    assert el2.formatting == el.formatting
    assert el2.formatting is not el.formatting
