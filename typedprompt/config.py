"""
Tuneable settings, read once from the environment at import time.

    TYPEDPROMPT_PROMPT       prompt shown by the demo menu
    TYPEDPROMPT_LOG_LEVEL    console log level (DEBUG shows every attempt)
    TYPEDPROMPT_SHOW_ERRORS  "0" keeps the demo silent on bad input
"""

import os

DEFAULT_PROMPT: str = os.getenv("TYPEDPROMPT_PROMPT", "Enter a value: ")

LOG_LEVEL: str = os.getenv("TYPEDPROMPT_LOG_LEVEL", "WARNING").upper()

SHOW_ERRORS: bool = os.getenv("TYPEDPROMPT_SHOW_ERRORS", "1").strip().lower() not in ("0", "false", "no", "off")
