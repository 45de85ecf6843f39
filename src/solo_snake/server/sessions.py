"""In-memory session registry, per-session frame loops and broadcasting."""

from __future__ import annotations

import asyncio
import json
import logging
import time
import uuid
from dataclasses import dataclass, field

from starlette.websockets import WebSocket, WebSocketState

from solo_snake.config import GameConfig
from solo_snake.engine import GameEngine, GameListener
from solo_snake.loop import FrameDriver
from solo_snake.server.models import SessionSummary
from solo_snake.state import Snapshot

logger = logging.getLogger(__name__)

_MAX_SESSIONS = 100
_IDLE_TIMEOUT = 300.0  # seconds without a socket or key input


class _OutboxListener(GameListener):
    """Queues engine events as JSON-ready messages for the next broadcast."""

    def __init__(self) -> None:
        self.outbox: list[dict] = []
        self.last_snapshot: Snapshot | None = None

    def on_score(self, score: int, level: int) -> None:
        self.outbox.append({"type": "score", "score": score, "level": level})

    def on_game_over(self, final_score: int, victory: bool) -> None:
        self.outbox.append(
            {"type": "game_over", "final_score": final_score, "victory": victory},
        )

    def on_pause(self, paused: bool) -> None:
        self.outbox.append({"type": "pause", "paused": paused})

    def on_reset(self) -> None:
        self.outbox.append({"type": "reset"})

    def on_start(self) -> None:
        self.outbox.append({"type": "start"})

    def on_render(self, snapshot: Snapshot) -> None:
        self.last_snapshot = snapshot

    def drain(self) -> list[dict]:
        messages, self.outbox = self.outbox, []
        return messages


@dataclass
class Session:
    """All state for one player's game."""

    session_id: str
    config: GameConfig
    engine: GameEngine
    listener: _OutboxListener
    sockets: list[WebSocket] = field(default_factory=list)
    created_at: float = field(default_factory=time.monotonic)
    last_active: float = field(default_factory=time.monotonic)
    finished_at: float | None = None
    driver: FrameDriver | None = None
    _task: asyncio.Task | None = field(default=None, repr=False)

    def touch(self) -> None:
        self.last_active = time.monotonic()

    def is_abandoned(self, now: float, idle_timeout: float) -> bool:
        """No socket attached and either finished or idle too long."""
        if self.sockets:
            return False
        return self.finished_at is not None or now - self.last_active >= idle_timeout

    def summary(self) -> SessionSummary:
        state = self.engine.state
        return SessionSummary(
            session_id=self.session_id,
            phase=state.phase.value,
            score=state.score,
            level=state.level,
            grid_width=self.config.grid_width,
            grid_height=self.config.grid_height,
            frame_rate=self.config.frame_rate,
        )


class SessionManager:
    """Central registry managing all game sessions."""

    def __init__(
        self,
        max_sessions: int = _MAX_SESSIONS,
        idle_timeout: float = _IDLE_TIMEOUT,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        if idle_timeout <= 0:
            raise ValueError("idle_timeout must be positive.")
        self._sessions: dict[str, Session] = {}
        self._max_sessions = max_sessions
        self._idle_timeout = idle_timeout

    def create_session(
        self,
        grid_width: int | None = None,
        grid_height: int | None = None,
        frame_rate: int | None = None,
        seed: int | None = None,
    ) -> Session:
        """Create a session and launch its frame loop.

        Must be called from a running event loop.
        """
        if len(self._sessions) >= self._max_sessions:
            self._prune_abandoned_sessions()
        if len(self._sessions) >= self._max_sessions:
            raise ValueError("Session limit reached. Try again later.")

        defaults = GameConfig()
        config = GameConfig(
            grid_width=grid_width or defaults.grid_width,
            grid_height=grid_height or defaults.grid_height,
            frame_rate=frame_rate or defaults.frame_rate,
            seed=seed,
        )
        listener = _OutboxListener()
        session = Session(
            session_id=uuid.uuid4().hex[:12],
            config=config,
            engine=GameEngine(config, listener=listener),
            listener=listener,
        )
        session.driver = FrameDriver(
            session.engine,
            config.frame_period,
            on_frame=lambda fired: self._broadcast_frame(session),
        )
        session._task = asyncio.create_task(self._frame_loop(session))
        self._sessions[session.session_id] = session
        logger.info(
            "Session %s created (%dx%d, %d fps).",
            session.session_id, config.grid_width, config.grid_height,
            config.frame_rate,
        )
        return session

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def list_sessions(self) -> list[SessionSummary]:
        return [s.summary() for s in self._sessions.values()]

    def apply_key(self, session_id: str, key: str) -> Session:
        """Feed a key token into a session's engine."""
        session = self._sessions.get(session_id)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        session.touch()
        session.engine.handle_key(key)
        return session

    async def delete_session(self, session_id: str) -> None:
        """Stop a session's frame loop, close its sockets and forget it."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        await self._shutdown(session)
        logger.info("Session %s deleted.", session_id)

    async def _frame_loop(self, session: Session) -> None:
        """Run the frame driver until it is stopped or cancelled."""
        assert session.driver is not None  # noqa: S101
        try:
            await session.driver.run()
        except asyncio.CancelledError:
            logger.info("Frame loop cancelled for session %s.", session.session_id)
        except Exception:
            logger.exception("Frame loop error in session %s.", session.session_id)

    async def _broadcast_frame(self, session: Session) -> None:
        """Send queued events and the latest frame to every socket."""
        now = time.monotonic()
        if session.engine.state.over:
            if session.finished_at is None:
                session.finished_at = now
        else:
            session.finished_at = None

        events = session.listener.drain()
        if not session.sockets:
            if now - session.last_active >= self._idle_timeout:
                self._forget(session)
                logger.info(
                    "Session %s reaped after %.0fs without a player.",
                    session.session_id, now - session.last_active,
                )
            return
        session.last_active = now
        snapshot = session.listener.last_snapshot
        messages = list(events)
        if snapshot is not None:
            messages.append({"type": "frame", **snapshot.to_dict()})
        for message in messages:
            await self.broadcast(session, message)

    def _prune_abandoned_sessions(self) -> None:
        """Forget the oldest abandoned sessions to make room for a new one."""
        now = time.monotonic()
        abandoned = [
            s for s in self._sessions.values()
            if s.is_abandoned(now, self._idle_timeout)
        ]
        overflow = min(len(self._sessions) - self._max_sessions + 1, len(abandoned))
        if overflow <= 0:
            return

        abandoned.sort(
            key=lambda s: s.finished_at if s.finished_at is not None else s.created_at,
        )
        for stale in abandoned[:overflow]:
            self._forget(stale)
        logger.info(
            "Pruned %d abandoned sessions (limit %d).", overflow, self._max_sessions,
        )

    def _forget(self, session: Session) -> None:
        """Drop *session* from the registry; its frame loop exits on its next frame."""
        self._sessions.pop(session.session_id, None)
        if session.driver is not None:
            session.driver.stop()

    async def broadcast(self, session: Session, message: dict) -> None:
        """Send *message* to all connected sockets, dropping dead ones."""
        payload = json.dumps(message, separators=(",", ":"))
        dead: list[WebSocket] = []

        # Snapshot the list so disconnect handlers can mutate it meanwhile.
        for ws in list(session.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            if ws in session.sockets:
                session.sockets.remove(ws)

    async def _shutdown(self, session: Session) -> None:
        if session.driver is not None:
            session.driver.stop()
        task = session._task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)

        for ws in list(session.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Session closed.")
            except Exception:
                logger.warning(
                    "Failed closing socket in session %s.", session.session_id,
                )
        session.sockets.clear()

    async def cleanup(self) -> None:
        """Stop every session's frame loop."""
        sessions = list(self._sessions.values())
        self._sessions.clear()
        for session in sessions:
            await self._shutdown(session)
        logger.info("SessionManager cleanup complete.")
