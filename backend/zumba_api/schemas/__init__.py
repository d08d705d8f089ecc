from zumba_api.schemas.gallery import UploadResponse, SaveCardsRequest, CardsResponse, SuccessResponse
from zumba_api.schemas.offer import OfferUpdate, OfferOut
from zumba_api.schemas.contact import InquiryCreate, InquiryOut
from zumba_api.schemas.video import VideoCreate

__all__ = [
    "UploadResponse", "SaveCardsRequest", "CardsResponse", "SuccessResponse",
    "OfferUpdate", "OfferOut",
    "InquiryCreate", "InquiryOut",
    "VideoCreate",
]
