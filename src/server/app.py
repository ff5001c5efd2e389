from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from dataclasses import asdict
from typing import Optional, Set

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from simulation import (
    ElevatorStatus,
    InvalidRequest,
    Simulation,
    SimulationConfig,
    TickLogWriter,
    TickSnapshot,
)

logger = logging.getLogger(__name__)


class RideRequest(BaseModel):
    origin: int
    destination: int


class RunRequest(BaseModel):
    steps: int = Field(default=5, ge=0, le=1000)


def status_payload(status: ElevatorStatus) -> dict:
    payload = asdict(status)
    payload["direction"] = status.direction.label
    return payload


def snapshot_payload(snapshot: TickSnapshot) -> dict:
    return {
        "time": snapshot.time_step,
        "elevators": [status_payload(status) for status in snapshot.elevators],
        "pending_requests": snapshot.pending_requests,
        "requests_assigned": snapshot.requests_assigned,
    }


class SimulationManager:
    """Owns one simulation and serialises commands issued over HTTP."""

    def __init__(self, config: Optional[SimulationConfig] = None) -> None:
        self.config = config
        self.simulation: Optional[Simulation] = None
        self.log: Optional[TickLogWriter] = None
        self.clients: Set[WebSocket] = set()
        self._lock = asyncio.Lock()

    async def start(self) -> None:
        config = self.config or SimulationConfig.from_env()
        self._lock = asyncio.Lock()
        self.simulation = Simulation.from_config(config)
        if config.log_path:
            self.log = TickLogWriter(config.log_path).open().attach(self.simulation)
        logger.info(
            "Simulation started with %s floors and %s elevators",
            config.num_floors,
            config.elevator_count,
        )

    async def stop(self) -> None:
        if self.log and self.simulation:
            self.log.close(self.simulation.current_time)
        self.log = None

    def _require(self) -> Simulation:
        if self.simulation is None:
            raise HTTPException(status_code=503, detail="Simulation not started")
        return self.simulation

    def current_state(self) -> dict:
        simulation = self._require()
        state = snapshot_payload(simulation.snapshot())
        state["num_floors"] = simulation.num_floors
        return state

    def summary(self) -> dict:
        return asdict(self._require().summary())

    async def add_request(self, origin: int, destination: int) -> dict:
        async with self._lock:
            request = self._require().add_request(origin, destination)
            state = self.current_state()
            state["request"] = asdict(request)
            return state

    async def step(self, steps: int = 1) -> dict:
        async with self._lock:
            simulation = self._require()
            for _ in range(steps):
                simulation.step()
            payload = self.current_state()
        await self.broadcast(payload)
        return payload

    async def broadcast(self, payload: dict) -> None:
        message = json.dumps(payload)
        disconnected: Set[WebSocket] = set()
        for client in set(self.clients):
            try:
                await client.send_text(message)
            except WebSocketDisconnect:
                disconnected.add(client)
        for client in disconnected:
            await self.unregister(client)

    async def register(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.clients.add(websocket)
        await websocket.send_text(json.dumps(self.current_state()))

    async def unregister(self, websocket: WebSocket) -> None:
        if websocket in self.clients:
            self.clients.remove(websocket)
        with contextlib.suppress(Exception):
            await websocket.close()


manager = SimulationManager()
app = FastAPI(title="LiftStep Simulation API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup() -> None:
    await manager.start()


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await manager.stop()


@app.get("/state")
async def get_state() -> dict:
    return manager.current_state()


@app.get("/summary")
async def get_summary() -> dict:
    return manager.summary()


@app.post("/requests")
async def add_request(request: RideRequest) -> dict:
    try:
        return await manager.add_request(request.origin, request.destination)
    except InvalidRequest as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.post("/step")
async def step() -> dict:
    return await manager.step()


@app.post("/run")
async def run(request: RunRequest) -> dict:
    return await manager.step(request.steps)


@app.websocket("/ws/stream")
async def websocket_endpoint(websocket: WebSocket) -> None:
    await manager.register(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        await manager.unregister(websocket)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
