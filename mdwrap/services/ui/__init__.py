"""Qt host: editor window, buffer adapter and commands."""
