"""
credential_service package

Core backend of the authentication microservice. It includes:

- FastAPI application factory (`main.py`)
- SQLAlchemy model and database integration (`models.py`, `db.py`)
- Password hashing and JWT logic (`auth.py`)
- Registration / login workflow (`service.py`)
- Pydantic schemas (`schemas.py`) and settings (`config.py`)
"""
