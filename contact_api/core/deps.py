# contact_api/core/deps.py
from typing import Annotated, Generator
from fastapi import Query
from sqlalchemy.orm import Session
from contact_api.db.session import SessionLocal

def get_db() -> Generator[Session, None, None]:
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# pagination params; defaults go on the handler signature
Limit = Annotated[int, Query(ge=1, le=100)]
Offset = Annotated[int, Query(ge=0)]
