from contact_api.db.mixins import Base

# Import all models so Alembic can detect them
from contact_api.db.models.user import User
from contact_api.db.models.inquiry import Inquiry
