"""
FastAPI backend for globe_graph - exposes the sphere graph as a REST API.
"""

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field
from typing import List, Optional
import json
import logging

from globe_graph import (
    ARC_SAMPLES,
    REFERENCE_CITIES,
    ArcPathBuilder,
    City,
    SphericalProjector,
    ValidationError,
    create_graph,
)
from globe_graph.projection import DEFAULT_RADIUS

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Globe Graph API",
    description="Cities and arcs projected on a sphere",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class CityIn(BaseModel):
    """A place to put on the globe."""
    name: str
    lat: float = Field(..., description="Latitude-like coordinate (deg), valid range -90..90")
    lng: float = Field(..., description="Longitude-like coordinate (deg), valid range -180..180")


class GraphRequest(BaseModel):
    """Input for graph generation."""
    cities: List[CityIn]
    limit: Optional[int] = Field(None, ge=0, description="Maximum number of nodes")
    samples: int = Field(ARC_SAMPLES, ge=2, le=5000, description="Points per arc")
    radius: float = Field(DEFAULT_RADIUS, gt=0, description="Sphere radius (scene units)")


class NodeData(BaseModel):
    """Projected node."""
    id: int
    label: str
    lat: float
    lng: float
    x: float
    y: float
    z: float


class EdgeData(BaseModel):
    """Edge with its sampled arc."""
    id: int
    source: int
    target: int
    length: float
    points: List[List[float]]


class GraphResult(BaseModel):
    """Complete graph result."""
    nodes: List[NodeData]
    edges: List[EdgeData]
    rejected: List[str] = []
    radius: float
    samples: int


# =============================================================================
# Graph Generation
# =============================================================================

def build_graph_result(request: GraphRequest) -> GraphResult:
    """Project the cities, connect every pair and sample the arcs."""
    projector = SphericalProjector(radius=request.radius, validate=True)
    builder = ArcPathBuilder(samples=request.samples)
    cities = [City(c.name, c.lat, c.lng) for c in request.cities]

    try:
        graph = create_graph(cities, projector, request.limit)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    accepted = {n.id for n in graph.nodes()}
    rejected = [c.name for i, c in enumerate(cities) if i not in accepted]

    nodes = [
        NodeData(
            id=n.id, label=n.label, lat=n.geo.x, lng=n.geo.y,
            x=round(n.position.x, 4), y=round(n.position.y, 4), z=round(n.position.z, 4),
        )
        for n in graph.nodes()
    ]

    edges = []
    for edge in graph.edges():
        try:
            arc = builder.build_edge(edge)
        except ValueError as e:
            # Two distinct cities at the same coordinate have no arc
            logger.warning("No arc for edge %s: %s", edge.id, e)
            continue
        edges.append(EdgeData(
            id=edge.id,
            source=edge.source.id,
            target=edge.target.id,
            length=round(arc.length, 4),
            points=arc.points.round(4).tolist(),
        ))

    return GraphResult(
        nodes=nodes,
        edges=edges,
        rejected=rejected,
        radius=request.radius,
        samples=request.samples,
    )


def reference_request(samples: int = ARC_SAMPLES, limit: Optional[int] = None) -> GraphRequest:
    return GraphRequest(
        cities=[CityIn(name=c.name, lat=c.lat, lng=c.lng) for c in REFERENCE_CITIES],
        samples=samples,
        limit=limit,
    )


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "Globe Graph API"}


@app.get("/api/graph/reference", response_model=GraphResult)
async def reference_graph(
    samples: int = Query(ARC_SAMPLES, ge=2, le=5000),
    limit: Optional[int] = Query(None, ge=0),
):
    """Graph of the seven reference cities."""
    return build_graph_result(reference_request(samples, limit))


@app.post("/api/graph", response_model=GraphResult)
async def generate_graph(request: GraphRequest):
    """Build a graph from posted cities."""
    return build_graph_result(request)


@app.post("/api/export/json")
async def export_json(request: GraphRequest):
    """Export graph as a downloadable JSON file."""
    result = build_graph_result(request)

    model = {
        "version": "1.0",
        "type": "sphere_graph",
        "graph": result.model_dump(),
    }

    return StreamingResponse(
        iter([json.dumps(model, indent=2)]),
        media_type="application/json",
        headers={"Content-Disposition": "attachment; filename=sphere_graph.json"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
