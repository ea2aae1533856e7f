"""PyQt6 front-end: board scene, view and main window.

Importing this package requires PyQt6; the core and console front-end do not.
"""
