"""
Create (or reuse) a development user and print an access token for it.

    uvicorn contact_api.main:app --reload
    python -m scripts.seed_user dev@example.com
    curl -H "Authorization: Bearer <token>" -d '{...}' localhost:8000/contact
"""
import sys

from contact_api.core.security import create_token
from contact_api.db.models.user import User
from contact_api.db.session import SessionLocal


def upsert_user(db, email: str) -> User:
    email = (email or "").strip().lower()
    if not email:
        raise ValueError("email is required")

    existing = db.query(User).filter(User.email == email).first()
    if existing:
        return existing

    row = User(email=email, is_active=True)
    db.add(row)
    db.flush()
    return row

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    email = argv[0] if argv else "dev@example.com"

    db = SessionLocal()
    try:
        user = upsert_user(db, email)
        db.commit()
        print(f"✅ User {user.id} <{user.email}>")
        print(create_token(user.id))
    except Exception as e:
        db.rollback()
        print("❌ Seed failed:", e)
        raise
    finally:
        db.close()

if __name__ == "__main__":
    main()
