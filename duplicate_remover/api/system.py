"""Directory helper and health endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..models.system import DirectoryValidation, DirectoryValidationRequest, RecentDirectories
from ..services.recent_directories import RecentDirectories as RecentDirectoryList
from ..utils.permissions import validate_directory
from .deps import get_recent_directories

router = APIRouter(tags=["system"])


@router.post("/validate-directory", response_model=DirectoryValidation)
async def validate(request: DirectoryValidationRequest):
    return validate_directory(request.directory)


@router.get("/recent-directories", response_model=RecentDirectories)
async def recent_directories(recent: RecentDirectoryList = Depends(get_recent_directories)):
    return RecentDirectories(directories=recent.list())


@router.get("/health", response_class=PlainTextResponse)
async def health():
    return "OK"
