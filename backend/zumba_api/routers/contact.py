"""
Contact router for inquiry form submissions.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from zumba_api.dependencies import get_db, get_mailer, request_payload
from zumba_api.models import ContactInquiry
from zumba_api.schemas import InquiryCreate, InquiryOut
from zumba_api.services import inquiries
from zumba_api.services.mailer import ContactMailer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("/inquiries", response_model=InquiryOut, status_code=201)
async def submit_inquiry(
    payload: dict = Depends(request_payload),
    db: AsyncIOMotorDatabase = Depends(get_db),
    mailer: ContactMailer = Depends(get_mailer),
):
    """Store an inquiry and notify the site owner by email when configured."""
    try:
        inquiry_data = InquiryCreate.model_validate(payload)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Missing required fields")

    try:
        inquiry = await inquiries.create_inquiry(
            db,
            name=inquiry_data.name,
            email=inquiry_data.email,
            phone=inquiry_data.phone,
            message=inquiry_data.message,
        )
    except PyMongoError as e:
        logger.error(f"Failed to save inquiry: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save inquiry")

    # The inquiry is stored either way; the flag only reports the email outcome
    email_sent = await mailer.notify_inquiry(inquiry)

    return InquiryOut(**inquiry.model_dump(), email_sent=email_sent)


@router.get("/inquiries", response_model=list[ContactInquiry])
async def list_inquiries(db: AsyncIOMotorDatabase = Depends(get_db)):
    """Get all inquiries, newest first."""
    try:
        return await inquiries.list_inquiries(db)
    except PyMongoError as e:
        logger.error(f"Failed to load inquiries: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load inquiries")
