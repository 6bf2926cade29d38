from fastapi import APIRouter, Depends
from app.dependencies import get_selection_saver
from app.schemas.frames import SaveSelectionRequest
from app.services import frame_services
from ytframes.frame_pipeline.selection_saver import SelectionSaver

router = APIRouter(tags=["selection"])


@router.post("/save-selection", summary="Upload a chosen frame pair and log it")
async def save_selection(body: SaveSelectionRequest, saver: SelectionSaver = Depends(get_selection_saver)):
    return await frame_services.save_selection(body, saver)
