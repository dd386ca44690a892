"""
Shared Module

Everything below the desktop UI:
- Models: SQLAlchemy ORM records
- Entities: Plain domain objects handed to the UI
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic read models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Engine, per-call sessions, schema bootstrap
    ├── models/         ← SQLAlchemy models and enums
    ├── entities/       ← User, MovieReview
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic, scope, sorting, notifications
    ├── schemas/        ← Pydantic schemas
    └── utils/          ← Password hashing
"""
