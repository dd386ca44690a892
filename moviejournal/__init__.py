"""
Movie Journal

Personal movie-review journal: accounts, reviews, search, sort,
favorites and dashboard statistics over a relational store.

Package Structure:
==================
    moviejournal/
    ├── config/     ← Settings
    └── shared/     ← Models, repositories, services, schemas, core

Running the Connectivity Check:
===============================
    python -m moviejournal
"""

__version__ = "1.0.0"
