import slugline.heading as heading
import slugline.screenplay as screenplay
import slugline.util as util

# one scene, as listed in a table of contents. scenes are a projection of
# the script's scene headings and are rebuilt from scratch every time, so
# they refer to their heading element by id, not by index.
class Scene:
    def __init__(self, elementId, sceneNumber, heading, location, timeOfDay,
                 isInterior):
        self.id = util.genId()

        # id of the scene-heading element this scene comes from
        self.elementId = elementId

        # 1-based, in document order
        self.sceneNumber = sceneNumber

        # the heading's text as written, e.g. "int. motel room - night"
        self.heading = heading

        # parsed from heading, e.g. "MOTEL ROOM", "NIGHT"
        self.location = location
        self.timeOfDay = timeOfDay

        self.isInterior = isInterior

    def __repr__(self):
        return "Scene(%d, %r)" % (self.sceneNumber, self.heading)

# build the scene list for 'elements'. blank scene headings don't count.
def calcScenes(elements):
    ret = []
    sceneNumber = 1

    for el in elements:
        if (el.lt != screenplay.SCENE) or not el.text.strip():
            continue

        hi = heading.parseSceneHeading(el.text)

        ret.append(Scene(el.id, sceneNumber, el.text, hi.location,
                         hi.timeOfDay, hi.isInterior))

        sceneNumber += 1

    return ret

# return index of element with id 'elementId' in 'elements', or -1 if
# there's no such element.
def findElementIndex(elements, elementId):
    for i, el in enumerate(elements):
        if el.id == elementId:
            return i

    return -1
