"""PySide6 window and widgets for displaying filter results."""
