"""PySide6 editor for SnapGrid layouts."""
