"""
Database Module

This module provides database connectivity and session management for
Movie Journal.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        DATABASE LAYER                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   UserService / ReviewService                                               │
│       │                                                                     │
│       │  database.session_scope()                                           │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              Session (from session.py)                      │          │
│   │                                                             │          │
│   │  - One session per service call                             │          │
│   │  - Commit on success, rollback on exception                 │          │
│   │  - Closed before the call returns                           │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       │  Passed to Repository                                               │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              Repository (from repositories/)                │          │
│   │                                                             │          │
│   │  - UserRepository                                           │          │
│   │  - MovieReviewRepository                                    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       │  SQL Queries                                                        │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │      MySQL / PostgreSQL / SQLite                            │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘
"""

from moviejournal.shared.db.session import (
    Database,
    get_database,
)

__all__ = [
    "Database",  # Engine + per-call session scope + schema bootstrap
    "get_database",  # Process-wide Database built from settings
]
