# contact_api/schemas/auth.py
from pydantic import BaseModel


class Identity(BaseModel):
    id: int
    email: str

    class Config:
        from_attributes = True
