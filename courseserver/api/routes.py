"""Read-only HTTP routes for course content."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from ..constants import ERROR_TASK_DECODE, ERROR_TASK_NOT_FOUND
from ..services.content_service import ContentService
from ..utils.errors import (
    DescriptorDecodeError,
    DescriptorNotFoundError,
    InvalidReferenceError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_content_service(request: Request) -> ContentService:
    return request.app.state.content_service


@router.get("/")
def course_info(service: ContentService = Depends(get_content_service)):
    return service.get_course_summary()


@router.get("/tasks")
def task_groups(service: ContentService = Depends(get_content_service)):
    return service.list_task_groups()


@router.get("/tasks/{task_id}")
async def task_info(task_id: str, service: ContentService = Depends(get_content_service)):
    try:
        task = await service.get_task_by_id(task_id)
    except (DescriptorNotFoundError, InvalidReferenceError) as e:
        logger.warning(f"Error while serving task info: {e}")
        raise HTTPException(status_code=404, detail=ERROR_TASK_NOT_FOUND)
    except DescriptorDecodeError as e:
        logger.error(f"Error while serving task info: {e}")
        raise HTTPException(status_code=500, detail=ERROR_TASK_DECODE)
    return task.to_dict()


@router.get("/achievements")
def achievements(service: ContentService = Depends(get_content_service)):
    return service.list_achievements()
