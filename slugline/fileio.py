# reading and writing screenplays to files. the native format (.slg) is a
# JSON envelope around Screenplay.toDict(); .fdx goes through fdx.py and
# .pdf through layout.py.

import json

import slugline.error as error
import slugline.fdx as fdx
import slugline.layout as layout
import slugline.screenplay as screenplay
import slugline.util as util

import structlog

log = structlog.get_logger(__name__)

# version of the native file format we write
FILE_VERSION = 1

# extensions of native files
NATIVE_EXTENSIONS = ("slg", "json")

# the 5 MB limit is arbitrary, we just want to avoid getting a
# MemoryError exception for /dev/zero etc.
MAX_FILE_SIZE = 5000000

# serialize screenplay 'sp' into the native format and return it as a
# string.
def serialize(sp):
    d = {
        "version" : FILE_VERSION,
        "screenplay" : sp.toDict(),
        "exportedAt" : util.toIsoDate(util.now()),
        }

    return json.dumps(d, indent = 2, ensure_ascii = False)

# opposite of serialize. raises DecodeError on invalid input. files of a
# different format version are loaded anyway.
def deserialize(s):
    try:
        d = json.loads(s)
    except ValueError as e:
        raise error.DecodeError("Invalid JSON: %s" % e)

    if not isinstance(d, dict) or not isinstance(d.get("screenplay"), dict):
        raise error.DecodeError("Not a screenplay file")

    version = d.get("version")
    if version != FILE_VERSION:
        log.warning("file version differs", version = version,
                    current = FILE_VERSION)

    try:
        sp = screenplay.Screenplay.fromDict(d["screenplay"])
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise error.DecodeError("Invalid screenplay data: %s" % e)

    return sp

# save screenplay 'sp' to 'filename' in the native format and clear its
# changed flag. raises MiscError on errors.
def saveFile(sp, filename):
    util.writeToFile(filename, serialize(sp))
    sp.markChanged(False)

    log.info("screenplay saved", filename = filename)

# load a native format file and return the Screenplay. raises MiscError
# or DecodeError on errors.
def loadFile(filename):
    sp = deserialize(util.loadFile(filename, MAX_FILE_SIZE))

    log.info("screenplay loaded", filename = filename,
             elements = len(sp.elements))

    return sp

# load any supported file, picking the format by the file's extension.
# raises MiscError or DecodeError on errors.
def importFile(filename):
    ext = util.getExtension(filename)

    if ext in NATIVE_EXTENSIONS:
        return loadFile(filename)

    if ext == "fdx":
        data = util.loadFile(filename, MAX_FILE_SIZE)

        if not data:
            raise error.DecodeError("File '%s' is empty." % filename)

        return fdx.decode(data)

    raise error.MiscError("Unsupported input file type '%s'" % filename)

# save screenplay 'sp' to 'filename', picking the format by the file's
# extension. raises MiscError on errors.
def exportFile(sp, filename, cfg = None):
    ext = util.getExtension(filename)

    if ext in NATIVE_EXTENSIONS:
        saveFile(sp, filename)

        return

    if ext == "fdx":
        data = fdx.encode(sp)
    elif ext == "pdf":
        data = layout.generatePDF(sp, cfg)
    else:
        raise error.MiscError("Unsupported output file type '%s'" % filename)

    util.writeToFile(filename, data)

    log.info("screenplay exported", filename = filename, format = ext)
