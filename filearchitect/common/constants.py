"""Constants used throughout the application."""

# Leading marker of hidden directory entries
HIDDEN_PREFIX = "."

# Home directory shorthand accepted by path expansion
HOME_SHORTHAND = "~"

# Default product folder under the documents directory
DEFAULT_PRODUCT_NAME = "FileArchitect"

# Store layout
TEMPLATES_SUBDIR = "Templates"
TEMPLATE_EXTENSION = ".txt"
DEFAULTS_SENTINEL_FILE = ".defaults_initialized"

# Front matter delimiters for template files
FRONT_MATTER_OPEN = "---\n"
FRONT_MATTER_CLOSE = "\n---\n"

WEB_PROJECT_TEMPLATE = """---
order: 1
---
project-name
\tsrc
\t\tcomponents
\t\t\tButton.jsx
\t\t\tHeader.jsx
\t\t\tFooter.jsx
\t\tpages
\t\t\tHome.jsx
\t\t\tAbout.jsx
\t\t\tContact.jsx
\t\tstyles
\t\t\tglobal.css
\t\tApp.jsx
\t\tindex.js
\tpublic
\t\tindex.html
\tpackage.json
\tREADME.md"""

SCHOOL_CLASS_TEMPLATE = """---
order: 2
---
School class
\tLectures
\t\tLecture_1
\t\tLecture_2
\t\tLecture_3
\tLabs
\t\tLab_1
\t\tLab_2
\tAssignments
\t\tAssignment_1
\t\tAssignment_2
\tExams
\t\tMidterm exam
\t\tFinal exam
\tReadings
\tResources"""

VIDEO_PROJECT_TEMPLATE = """---
order: 3
---
video-project
\tvideo-footage
\t\traw-footage
\t\tedited-footage
\taudio
\t\tmusic
\t\tsound-effects
\tgraphics
\t\tlogos
\t\tlower-thirds
\tscripts
\t\tscene-descriptions
\t\tdialogue
\tproject-files
\t\tfinal-video
\t\tproject-backups
\treferences
\t\tcolor-palettes
\t\tmood-boards
\tteam
\t\ttasks
\t\tnotes"""

GRAPHIC_DESIGN_TEMPLATE = """---
order: 4
---
graphic-design-project
\t01_project-documents
\t\tbrief
\t\tmood-board
\t\tnotes
\t02_work-files
\t\tmockups
\t\tvectors
\t\t\tlogos
\t\t\tillustrations
\t03_deliverables
\t\tstyle-guide
\t\tpresentation
\t\t\tslides
\t\t\tpresentation_01.pdf"""

# Built-in templates seeded on first start, in display order
DEFAULT_TEMPLATES = (
    ("Web Project", WEB_PROJECT_TEMPLATE),
    ("School Class", SCHOOL_CLASS_TEMPLATE),
    ("Video Project", VIDEO_PROJECT_TEMPLATE),
    ("Graphic Design Project", GRAPHIC_DESIGN_TEMPLATE),
)
