from fastapi import APIRouter, Depends

from invitation.wedding.repository.read_models import SqlWeddingInfoReadModel, WeddingInfoReadModel
from invitation.wedding.schemas import WeddingInfoResponse
from invitation.wedding.urls import WEDDING_INFO_URL

router = APIRouter()


def get_wedding_info_read_model() -> WeddingInfoReadModel:
    """Dependency to get wedding profile read model instance."""
    return SqlWeddingInfoReadModel()


@router.get(WEDDING_INFO_URL, response_model=WeddingInfoResponse | None)
async def get_wedding_info(
    read_model: WeddingInfoReadModel = Depends(get_wedding_info_read_model),
) -> WeddingInfoResponse | None:
    """Ceremony, reception and gift details shown on the invitation; null until seeded."""
    wedding_info = await read_model.get_wedding_info()

    if not wedding_info:
        return None

    return WeddingInfoResponse.model_validate(wedding_info)
