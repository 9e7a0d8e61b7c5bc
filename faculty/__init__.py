"""Core (UI-agnostic) faculty directory logic.

This package contains:
- CSV tokenizing (published sheet -> rows of strings)
- record loading (httpx fetch -> FacultyRecord)
- filter normalization and the search/position filter
- HTML fragments shared by the web pages
"""
