"""
Top-level package for the CSV browser.

Most code should import from submodules such as:
    csv_browser.core
    csv_browser.importing
    csv_browser.services
    csv_browser.ui
"""

__all__: list[str] = []
