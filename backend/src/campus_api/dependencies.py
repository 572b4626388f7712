"""Shared FastAPI dependencies.

Type aliases that routers import. Kept out of main.py so routers can be
registered there without circular imports.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from campus_api.db.session import get_db

DB = Annotated[AsyncSession, Depends(get_db)]
