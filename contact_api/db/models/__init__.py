# contact_api/db/models/__init__.py
from .user import User
from .inquiry import Inquiry, InquiryType
