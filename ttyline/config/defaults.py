"""
Default settings for ttyline.

These are the default values used when no user configuration exists.
"""

JLINE_SH = "jline.sh"
DEFAULT_SH = "sh"

JLINE_STTY = "jline.stty"
DEFAULT_STTY = "stty"

DEFAULT_SETTINGS = {
    # Commands used to query the terminal, looked up as "jline.sh" / "jline.stty"
    "jline": {
        "sh": DEFAULT_SH,
        "stty": DEFAULT_STTY,
    },

    # Logging
    "log_level": "WARNING",
}
