"""REST API route handlers for session lifecycle and input."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from solo_snake.server.models import (
    CreateSessionRequest,
    KeyRequest,
    SessionSummary,
)
from solo_snake.server.sessions import SessionManager

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


@router.post("", status_code=201)
async def create_session(
    body: CreateSessionRequest, request: Request,
) -> SessionSummary:
    """Create a new single-player session and start its frame loop."""
    manager = _get_manager(request)
    try:
        session = manager.create_session(
            grid_width=body.grid_width,
            grid_height=body.grid_height,
            frame_rate=body.frame_rate,
            seed=body.seed,
        )
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return session.summary()


@router.get("")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List live sessions."""
    return _get_manager(request).list_sessions()


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Get session metadata and the current game snapshot."""
    session = _get_manager(request).get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    return {
        **session.summary().model_dump(),
        "state": session.engine.get_state(),
    }


@router.post("/{session_id}/keys")
async def press_key(
    session_id: str, body: KeyRequest, request: Request,
) -> dict:
    """Apply a key token; unknown keys are accepted and ignored."""
    try:
        session = _get_manager(request).apply_key(session_id, body.key)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"session_id": session_id, "phase": session.engine.phase.value}


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str, request: Request) -> None:
    """Stop and remove a session."""
    try:
        await _get_manager(request).delete_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
