"""Duplicate deletion endpoint."""

from fastapi import APIRouter, Depends, HTTPException

from ..errors import ScanNotFoundError
from ..models.deletion import DeleteRequest, DeleteResult
from ..services.deletion_manager import DeletionManager
from .deps import get_deletion_manager

router = APIRouter(prefix="/duplicates", tags=["duplicates"])


@router.delete("/{scan_id}", response_model=DeleteResult)
async def delete_duplicates(
    scan_id: str,
    request: DeleteRequest,
    deleter: DeletionManager = Depends(get_deletion_manager),
):
    try:
        return await deleter.delete_duplicates(scan_id, request.file_paths)
    except ScanNotFoundError:
        raise HTTPException(status_code=404, detail="Scan not found")
