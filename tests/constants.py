"""Constants for tests.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re

LIB_MARKER = re.compile(r"\blib[ @]")

RAW_STACK = (
    "Error: bad\n"
    "    at lib (internal/lib.js:10:5)\n"
    "    at lib (internal/lib.js:20:3)\n"
    "    at main (/app.js:5:1)"
)
STRIPPED_STACK = "Error: bad\n    at main (/app.js:5:1)"
CAUSE_STACK = "Error: cause\n    at helper (/app.js:1:1)"
JOINED_STACK = (
    "Error: bad\n"
    "    at main (/app.js:5:1)\n"
    "\n"
    "Error: cause\n"
    "    at helper (/app.js:1:1)"
)
