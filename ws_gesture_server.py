"""
Gitness WebSocket Server

Receives the watch's motion stream over WebSocket, runs the lateral-raise
rep counter on it, and fans out rep events so paired clients can play a
haptic cue.

Protocol (JSON text frames):
    client -> server
        {"type": "sample", "t": 1.23, "rot_y": -0.4, "grav_x": 0.1,
         "grav_y": -0.9, "grav_z": 0.2}
        {"type": "cmd", "action": "reset"}
        {"resetCounter": true}                  # paired-device reset
    server -> clients
        {"type": "gesture", "t": 1.23}          # broadcast per rep
        {"type": "reset"}                       # broadcast after reset
        {"type": "ack", "action": "reset", "ok": true}
        {"type": "error", "error": "..."}

Usage:
    python ws_gesture_server.py
"""

import asyncio
import json
import logging
import os
from datetime import datetime, timezone
from typing import List, Optional

import websockets
from websockets.exceptions import ConnectionClosed

from gitness import GestureConfig, GestureCounter, GestureError, GestureEvent, MotionSample
from gitness.recording import parse_sample

logger = logging.getLogger("gitness.server")

# =============================================================================
# Configuration
# =============================================================================

HOST = os.getenv("GITNESS_HOST", "0.0.0.0")
PORT = int(os.getenv("GITNESS_PORT", "8765"))

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SESS_DIR = os.getenv("GITNESS_SESSION_DIR", os.path.join(BASE_DIR, "sessions"))

# Log every received sample to sessions/session_<id>/raw.jsonl for replay
RECORD_SESSIONS = os.getenv("GITNESS_RECORD", "0").lower() in ("1", "true", "yes")


def make_session_id() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%SZ")


def is_command_message(msg: dict) -> bool:
    return msg.get("type") in ("cmd", "command")


# =============================================================================
# Session recording
# =============================================================================

class Session:
    """Raw sample log in the JSON Lines format run_gesture.py replays."""

    def __init__(self, root: str = SESS_DIR):
        self.root = root
        self.session_id = None
        self.raw_path = None
        self.f = None

    def start(self):
        sid = make_session_id()
        sdir = os.path.join(self.root, f"session_{sid}")
        os.makedirs(sdir, exist_ok=True)

        self.session_id = sid
        self.raw_path = os.path.join(sdir, "raw.jsonl")
        self.f = open(self.raw_path, "w", buffering=1, encoding="utf-8")

    def stop(self):
        if self.f:
            self.f.close()
        self.f = None

    def log(self, sample: MotionSample):
        if not self.f:
            return
        try:
            self.f.write(json.dumps(sample.to_dict()) + "\n")
        except OSError as e:
            logger.warning("session log disabled: %s", e)
            self.stop()


# =============================================================================
# Hub: counter + connected clients
# =============================================================================

class GestureHub:
    """
    Shared state for all connections.

    Every ingest/reset runs on the event loop thread, so the counter
    sees a single producer.
    """

    def __init__(self, config: Optional[GestureConfig] = None, session: Optional[Session] = None):
        self.counter = GestureCounter(config)
        self.session = session
        self.clients = set()
        self._outbox: List[dict] = []

        self.counter.on_gesture_detected(self._on_gesture)
        self.counter.on_reset(self._on_reset)

    def _on_gesture(self, event: GestureEvent):
        self._outbox.append({"type": "gesture", "t": event.timestamp})

    def _on_reset(self):
        self._outbox.append({"type": "reset"})

    def drain(self) -> List[dict]:
        """Pop the events queued by the counter callbacks."""
        out, self._outbox = self._outbox, []
        return out

    def handle_message(self, msg) -> Optional[dict]:
        """
        Apply one decoded client message.

        Returns:
            Direct reply for the sender, or None
        """
        if not isinstance(msg, dict):
            return {"type": "error", "error": "expected_object"}

        if msg.get("resetCounter") is True:
            self.counter.reset()
            return {"type": "ack", "action": "reset", "ok": True}

        if is_command_message(msg):
            action = msg.get("action")
            if action == "reset":
                self.counter.reset()
                return {"type": "ack", "action": "reset", "ok": True}
            return {"type": "error", "error": f"unknown_action:{action}"}

        if msg.get("type") == "sample":
            try:
                sample = parse_sample(msg)
            except GestureError as e:
                return {"type": "error", "error": f"bad_sample:{e}"}
            if self.session is not None:
                self.session.log(sample)
            self.counter.ingest(sample)
            return None

        return {"type": "error", "error": f"unknown_type:{msg.get('type')}"}

    async def broadcast(self, msg: dict):
        if not self.clients:
            return
        data = json.dumps(msg)
        dead = []
        for ws in list(self.clients):
            try:
                await ws.send(data)
            except ConnectionClosed:
                dead.append(ws)
        for ws in dead:
            self.clients.discard(ws)

    async def handle_client(self, ws):
        self.clients.add(ws)
        print("Client connected")

        try:
            async for raw in ws:
                try:
                    msg = json.loads(raw)
                except json.JSONDecodeError:
                    await ws.send(json.dumps({"type": "error", "error": "invalid_json"}))
                    continue

                reply = self.handle_message(msg)
                if reply is not None:
                    await ws.send(json.dumps(reply))

                for event in self.drain():
                    await self.broadcast(event)
        except ConnectionClosed:
            pass
        finally:
            self.clients.discard(ws)
            print("Client disconnected")


# =============================================================================
# Main
# =============================================================================

async def main():
    logging.basicConfig(level=os.getenv("GITNESS_LOG_LEVEL", "INFO").upper())

    config = GestureConfig.from_env()
    session = Session() if RECORD_SESSIONS else None
    if session is not None:
        session.start()

    hub = GestureHub(config, session)

    print("Gitness Server")
    print(f"WebSocket: ws://{HOST}:{PORT}")
    print(f"Mode: {config.mode.value}  latch: {config.latch_policy.value}  window: {config.window_size}")
    if session is not None:
        print(f"Recording to: {session.raw_path}")

    server = await websockets.serve(
        hub.handle_client, HOST, PORT,
        ping_interval=20,
        ping_timeout=20
    )
    try:
        await server.wait_closed()
    finally:
        if session is not None:
            session.stop()


if __name__ == "__main__":
    asyncio.run(main())
