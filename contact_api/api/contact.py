# contact_api/api/contact.py
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from contact_api.core.deps import Limit, Offset, get_db
from contact_api.core.errors import InquiryValidationError, PersistenceError
from contact_api.services.identity import IdentityProvider
from contact_api.services.inquiry_service import InquiryService
from contact_api.services.inquiry_store import InquiryStore
from contact_api.services.inquiry_validator import validate_inquiry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["contact"])


def get_inquiry_store(db: Session = Depends(get_db)) -> InquiryStore:
    return InquiryStore(db)


def get_inquiry_service(store: InquiryStore = Depends(get_inquiry_store)) -> InquiryService:
    return InquiryService(store)


def get_identity_provider(request: Request, db: Session = Depends(get_db)) -> IdentityProvider:
    return IdentityProvider(request, db)


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_inquiry(
    request: Request,
    service: InquiryService = Depends(get_inquiry_service),
    identities: IdentityProvider = Depends(get_identity_provider),
):
    """
    Accept a contact message.
    - body is validated before anything touches the DB
    - logged-in callers get their user id attached, everyone else is anonymous
    - the response never echoes `message`
    """
    try:
        payload = await request.json()
        inquiry = validate_inquiry(payload)
        identity = await run_in_threadpool(identities.current_identity)
        saved = await run_in_threadpool(service.submit, inquiry, identity)
    except InquiryValidationError as e:
        logger.info("Rejected inquiry: %s", [d["field"] for d in e.details])
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request data", "details": e.details},
        )
    except PersistenceError:
        # already logged with context by the service
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to submit inquiry"},
        )
    except Exception:
        logger.exception("Contact API error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"message": "Inquiry submitted successfully", "data": saved.model_dump(mode="json")},
    )


@router.get("")
def my_inquiries(
    limit: Limit = 20,
    offset: Offset = 0,
    service: InquiryService = Depends(get_inquiry_service),
    identities: IdentityProvider = Depends(get_identity_provider),
):
    """Inquiries the current caller submitted while logged in, newest first."""
    identity = identities.current_identity()
    if identity is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": "Authentication required"},
        )
    rows = service.list_for_identity(identity, limit=limit, offset=offset)
    return {"data": [r.model_dump(mode="json") for r in rows]}
