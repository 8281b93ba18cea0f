"""
blog_service package

Core backend for the blog platform:

- FastAPI application (`main.py`)
- SQLAlchemy models and database integration (`models.py`, `db.py`)
- Password hashing, JWT and auth cookie helpers (`auth.py`, `dependencies.py`)
- Pydantic schemas (`schemas.py`) and settings (`config.py`)
"""
