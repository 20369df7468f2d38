"""Liveness endpoint polled by load balancers and Kubernetes probes.

The only thing asserted is that the process can run code: there are no
dependency checks, so the handler has no failure branch. An unhealthy process
shows up to the prober as a timeout or a refused connection.
"""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict

router = APIRouter()


class HealthStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["ok"] = "ok"


@router.get("/health", response_model=HealthStatus)
def health() -> HealthStatus:
    return HealthStatus()
