"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    └── utils/          ← Credentials, tokens, argument validation

Usage:
======
    from photopin.shared.models import User, Map, Pin
    from photopin.shared.services import MapService
    from photopin.shared.schemas import MapCreate, MapResponse
    from photopin.shared.core import logger, PhotopinException
"""
