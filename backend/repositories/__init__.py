from .books import BooksRepository
from .people import PeopleRepository
from . import models

__all__ = ["BooksRepository", "PeopleRepository", "models"]
