APP_ORG = "mdwrap"
APP_NAME = "mdwrap"

# name -> delimiter (right defaults to left); order drives toolbar/menu order
DEFAULT_FORMATS = {
    "bold": "**",
    "italic": "*",
    "strikethrough": "~~",
    "code": "`",
}

DEFAULT_FORMAT_LABELS = {
    "bold": "B",
    "italic": "i",
    "strikethrough": "S",
    "code": "`code`",
}

DEFAULT_SHORTCUTS = {
    "bold": "Ctrl+B",
    "italic": "Ctrl+I",
    "strikethrough": "Ctrl+Shift+X",
    "code": "Ctrl+E",
}

ADD_NEXT_OCCURRENCE_SHORTCUT = "Ctrl+D"
CLEAR_CURSORS_SHORTCUT = "Esc"

DEFAULT_LOG_LEVEL = "INFO"
