import slugline.screenplay as screenplay
import slugline.util as util

import re

# trailing voice annotation, e.g. "(V.O.)" or "(CONT'D)"
_annotationRe = re.compile(r"\s*\(.*?\)\s*$")

# information about one speaking character
class CharacterInfo:
    def __init__(self, name, lineCount = 0, firstAppearance = 0):
        # normalized name, see normalizeName
        self.name = name

        # number of dialogue elements attributed to this character
        self.lineCount = lineCount

        # index of the first character element with this name
        self.firstAppearance = firstAppearance

    def __eq__(self, other):
        return isinstance(other, CharacterInfo) and \
            ((self.name, self.lineCount, self.firstAppearance) ==
             (other.name, other.lineCount, other.firstAppearance))

    def __repr__(self):
        return "CharacterInfo(%r, %d, %d)" % (self.name, self.lineCount,
                                              self.firstAppearance)

    def toDict(self):
        return {
            "name" : self.name,
            "lineCount" : self.lineCount,
            "firstAppearance" : self.firstAppearance,
            }

    @staticmethod
    def fromDict(d):
        return CharacterInfo(str(d["name"]), int(d.get("lineCount", 0)),
                             int(d.get("firstAppearance", 0)))

# return character name 's' upper-cased and with any trailing
# parenthetical annotation removed, so "Bob (V.O.)" and "BOB" are the same
# character.
def normalizeName(s):
    return _annotationRe.sub("", util.upper(s.strip())).strip()

# build the character list for 'elements'. each dialogue element counts as
# one line for the character element directly above its block; the search
# stops at the first character, dialogue or scene heading, so dialogue
# separated from a character by another speech or a new scene isn't
# counted for anyone.
def calcCharacters(elements):
    # key = name, value = CharacterInfo. dicts keep insertion order, which
    # is the order of first appearance.
    chars = {}

    for i, el in enumerate(elements):
        if (el.lt == screenplay.CHARACTER) and el.text.strip():
            name = normalizeName(el.text)

            if name not in chars:
                chars[name] = CharacterInfo(name, 0, i)

        elif el.lt == screenplay.DIALOGUE:
            for j in range(i - 1, -1, -1):
                prev = elements[j]

                if prev.lt == screenplay.CHARACTER:
                    ci = chars.get(normalizeName(prev.text))

                    if ci:
                        ci.lineCount += 1

                    break

                if prev.lt in (screenplay.DIALOGUE, screenplay.SCENE):
                    break

    return list(chars.values())

# return a copy of 'chars' sorted by line count, most lines first.
def sortByLineCount(chars):
    return sorted(chars, key = lambda ci: -ci.lineCount)
