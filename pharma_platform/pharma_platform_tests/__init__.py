"""
auth_service package

This package contains the backend logic for the pharmacy marketplace
account service.
It includes:

- FastAPI application factory (`main.py`) and routes (`routes/`)
- Account directories, in-memory and SQLAlchemy backed (`directory/`)
- Signup, login and status use cases (`service.py`)
- Password hashing (`auth.py`)
- Settings loaded from the environment (`config.py`)
"""
