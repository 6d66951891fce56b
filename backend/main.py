"""
FastAPI Backend — Hex Map Layout API v1.

Stateless: every request runs a fresh layout.
No in-memory state between requests.

Endpoints:
  POST /layout             — entities → layout document
  POST /layout/from-nodes  — catalog rows → domain resolution → layout document
  GET  /health
"""
from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

env_path = os.path.join(os.path.dirname(__file__), ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from hexmap_kernel.catalog import (
    EntityValidationError,
    entities_from_records,
    validate_entities,
)
from hexmap_kernel.constants import HEX_SIZE, MAX_SEARCH_RADIUS, MIN_CLUSTER_GAP
from hexmap_kernel.domain_types import Entity, LayoutConfig
from hexmap_kernel.exporter import layout_to_document
from hexmap_kernel.invariants import LayoutInvariantError, validate_layout
from hexmap_kernel.observability import timed_build_layout

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

DEFAULT_HEX_SIZE = float(os.environ.get("HEXMAP_HEX_SIZE", HEX_SIZE))
DEFAULT_MIN_GAP = int(os.environ.get("HEXMAP_MIN_GAP", MIN_CLUSTER_GAP))
DEFAULT_MAX_SEARCH_RADIUS = int(os.environ.get("HEXMAP_MAX_SEARCH_RADIUS", MAX_SEARCH_RADIUS))
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")

# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="HexMap API",
    version="1.0.0",
    description="Deterministic hex-grid domain cluster layout",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        FRONTEND_URL,
        "http://localhost:3000",
        "http://localhost:3001",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class EntityModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    domain: Optional[str] = None
    sub_domain: Optional[str] = Field(default=None, alias="subDomain")
    quality_score: Optional[float] = Field(default=None, alias="qualityScore", ge=0, le=100)
    metadata: Dict[str, Any] = {}


class NodeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    type: str = "unknown"
    domain: Optional[str] = None
    sub_domain: Optional[str] = Field(default=None, alias="subDomain")
    quality_score: Optional[float] = Field(default=None, alias="qualityScore", ge=0, le=100)
    confidence: float = Field(default=0.5, ge=0, le=1)
    metadata: Dict[str, Any] = {}
    tags: List[str] = []


class LayoutRequest(BaseModel):
    entities: List[EntityModel]
    hex_size: Optional[float] = None
    min_gap: Optional[int] = None


class NodesLayoutRequest(BaseModel):
    nodes: List[NodeModel]
    hex_size: Optional[float] = None
    min_gap: Optional[int] = None


# ---------------------------------------------------------------------------
# Core helpers
# ---------------------------------------------------------------------------


def _build_config(hex_size: Optional[float], min_gap: Optional[int]) -> LayoutConfig:
    try:
        return LayoutConfig(
            hex_size=DEFAULT_HEX_SIZE if hex_size is None else hex_size,
            min_gap=DEFAULT_MIN_GAP if min_gap is None else min_gap,
            max_search_radius=DEFAULT_MAX_SEARCH_RADIUS,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


def _layout_response(entities: List[Entity], config: LayoutConfig) -> dict:
    """
    Validate → lay out → verify → export.
    This is the core stateless operation — called by every layout endpoint.
    """
    try:
        validate_entities(entities)
    except EntityValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    layout, metrics = timed_build_layout(entities, config)

    try:
        validate_layout(layout, entities)
    except LayoutInvariantError as exc:
        logger.error(f"Layout invariant violated: {exc}")
        raise HTTPException(status_code=500, detail=str(exc))

    logger.info(
        f"Layout built: {metrics.entity_count} assets, "
        f"{metrics.cluster_count} clusters in {metrics.layout_latency_ms} ms"
    )
    for warning in metrics.warnings:
        logger.warning(warning)

    return {
        "layout": layout_to_document(layout, layout_hash=metrics.layout_hash),
        "diagnostics": metrics.diagnostics,
        "metrics": {
            "layout_latency_ms": metrics.layout_latency_ms,
            "layout_hash": metrics.layout_hash,
        },
    }


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.post("/layout")
def create_layout(req: LayoutRequest):
    entities = [
        Entity(
            id=e.id,
            name=e.name,
            domain=e.domain or "",
            sub_domain=e.sub_domain or None,
            quality_score=e.quality_score,
            metadata=e.metadata,
        )
        for e in req.entities
    ]
    return _layout_response(entities, _build_config(req.hex_size, req.min_gap))


@app.post("/layout/from-nodes")
def create_layout_from_nodes(req: NodesLayoutRequest):
    entities = entities_from_records(n.model_dump() for n in req.nodes)
    return _layout_response(entities, _build_config(req.hex_size, req.min_gap))


@app.get("/health")
def health():
    return {"status": "ok", "version": "1.0.0"}
