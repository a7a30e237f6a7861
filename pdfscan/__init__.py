"""
PDF Term Scan Package.

Walks a folder tree of PDF files, extracts page text and reports how often
each user-supplied term occurs in every file.
"""

__version__ = "1.0.0"
