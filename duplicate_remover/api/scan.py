"""Scan API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from ..errors import InputError, ScanConflictError, ScanNotFoundError
from ..models.scan import ScanRequest, ScanResult, ScanStartResponse, ScanStats, ScanStatus
from ..services.scan_manager import ScanManager
from .deps import get_scan_manager

router = APIRouter(tags=["scan"])


@router.post("/scan", response_model=ScanStartResponse)
async def start_scan(request: ScanRequest, scans: ScanManager = Depends(get_scan_manager)):
    try:
        scan_id = await scans.start_scan(request.directory)
    except InputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ScanConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return ScanStartResponse(scan_id=scan_id, status=ScanStatus.PENDING)


@router.get("/scan/{scan_id}", response_model=ScanResult)
async def get_scan_result(scan_id: str, scans: ScanManager = Depends(get_scan_manager)):
    try:
        return await scans.get_result(scan_id)
    except ScanNotFoundError:
        raise HTTPException(status_code=404, detail="Scan not found")


@router.get("/scan/{scan_id}/stats", response_model=ScanStats)
async def get_scan_stats(scan_id: str, scans: ScanManager = Depends(get_scan_manager)):
    try:
        return await scans.get_stats(scan_id)
    except ScanNotFoundError:
        raise HTTPException(status_code=404, detail="Scan not found")


@router.get("/scans", response_model=list[ScanResult])
async def list_scan_results(scans: ScanManager = Depends(get_scan_manager)):
    return await scans.list_results()
