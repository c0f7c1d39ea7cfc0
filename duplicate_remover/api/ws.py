"""WebSocket endpoint for live scan progress."""

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ..errors import ScanNotFoundError
from ..models.scan import ScanResult
from ..services.scan_manager import ScanManager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["websocket"])


def progress_message(result: ScanResult) -> dict:
    return {
        "type": "scan_progress",
        "scanId": result.scan_id,
        "status": result.status.value,
        "totalFiles": result.total_files,
        "duplicateCount": result.duplicate_count,
        "warnings": len(result.warnings),
        "error": result.error,
    }


@router.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    scans: ScanManager = ws.app.state.scan_manager
    subscriptions = []
    await ws.accept()

    async def send_progress(result: ScanResult):
        await ws.send_json(progress_message(result))

    try:
        while True:
            data = await ws.receive_text()
            try:
                msg = json.loads(data)
            except json.JSONDecodeError:
                continue

            if msg.get("action") != "subscribe_scan":
                continue
            scan_id = msg.get("scan_id") or msg.get("scanId")
            if not scan_id:
                continue
            try:
                current = await scans.get_result(scan_id)
            except ScanNotFoundError:
                await ws.send_json({"type": "error", "scanId": scan_id, "detail": "Scan not found"})
                continue

            scans.add_progress_listener(scan_id, send_progress)
            subscriptions.append(scan_id)
            await send_progress(current)

    except WebSocketDisconnect:
        logger.debug("Progress socket disconnected")
    finally:
        for scan_id in subscriptions:
            scans.remove_progress_listener(scan_id, send_progress)
