# setup.py
from setuptools import setup

import os.path
import re

# read version without importing the package, whose dependencies may not
# be installed yet
def getVersion():
    path = os.path.join(os.path.dirname(__file__), "slugline", "__init__.py")

    with open(path, "r", encoding = "UTF-8") as f:
        return re.search(r'^version = "(.*)"', f.read(), re.M).group(1)

setup(
    name = "slugline",
    version = getVersion(),
    description = "Screenplay document model, pagination and FDX/PDF export",

    long_description = """\
Slugline is the core of a screenplay editor: a document model for
screenplays made of typed elements (scene headings, action, characters,
dialogue, parentheticals and transitions), kept in sync with derived scene,
character and location indexes as the text is edited.

Features:

 * Scene heading parsing: INT./EXT. prefixes, locations and time of day.
 * Pagination: a quick page estimate for editing and a print-accurate
   layout for export.
 * Export: PDF with title page, page numbers and a scene outline.
 * Import / export: Final Draft XML (.fdx) and the native .slg format.
 * Reports: scene, character and location reports.
""",
    license = "GPL",
    packages = ["slugline"],
    python_requires = ">=3.8",
    install_requires = [
        "lxml",
        "reportlab",
        "structlog",
    ],
    extras_require = {
        "test": ["pytest"],
    },
    entry_points = {
        "console_scripts": [
            "slugline = slugline.main:main",
        ],
    },
)
