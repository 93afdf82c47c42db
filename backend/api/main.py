"""
FastAPI application entry points.

Run with: uvicorn api.main:app (books, port 9099)
     and: uvicorn api.main:people_app (people, port 1234)
or start both with: python run.py
"""
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.responses import incorrect_body_handler
from api.routes import books, people
from db import Database, get_database
from repositories import PeopleRepository
from repositories.people import default_people
from settings import settings


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the book service around a connection manager."""
    app = FastAPI(
        title="Bookstore API",
        description="CRUD over books keyed by ISBN",
        version="0.1.0",
    )
    app.state.database = database or get_database()
    app.add_exception_handler(RequestValidationError, incorrect_body_handler)
    app.include_router(books.router, prefix="/books", tags=["books"])

    @app.on_event("startup")
    def startup_event():
        """Guarantee the unique ISBN index before serving traffic."""
        app.state.database.ensure_index()

    @app.on_event("shutdown")
    def shutdown_event():
        app.state.database.dispose()

    return app


def create_people_app(repository: Optional[PeopleRepository] = None) -> FastAPI:
    """Build the in-memory people service."""
    app = FastAPI(
        title="People API",
        description="In-memory people directory, lost on restart",
        version="0.1.0",
    )
    if repository is None:
        repository = PeopleRepository(default_people() if settings.SEED_PEOPLE else None)
    app.state.people_repo = repository
    app.add_exception_handler(RequestValidationError, incorrect_body_handler)
    app.include_router(people.router, prefix="/people", tags=["people"])
    return app


app = create_app()
people_app = create_people_app()
