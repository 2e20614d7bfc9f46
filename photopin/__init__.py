"""
PhotoPin Backend

Maps of photography spots: users own maps, maps hold named collections,
collections reference pins.

Package Structure:
==================
    photopin/
    ├── api/        ← FastAPI application
    ├── shared/     ← Models, repositories, services, schemas
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn photopin.api.main:app --reload
"""
