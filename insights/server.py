"""
Canvas Insights Server

FastAPI service exposing board classification, exports and scorecards.

Endpoints:
- GET /health: Health check
- GET /boards: List boards
- GET /boards/{board_id}/content: Extracted content bundle
- POST /boards/{board_id}/export: Render an export artifact
- GET /boards/{board_id}/scorecard: Metrics for one board
- GET /scorecard: Metrics for all boards combined

Pipeline:
1. Fetch a stable snapshot of the board's items from the store
2. Classify into an extracted-content bundle (exports)
3. Render the requested format, or compute metrics (scorecards)
"""

from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from .common.config import CanvasConfig, ensure_directories, load_config
from .common.schemas import (
    Board,
    BoardMetricsSnapshot,
    ExportConfig,
    ExtractedContentBundle,
    PeriodTrends,
    StatusSlice,
    WeekComparison,
)
from .common.store import JsonBoardStore
from .extractor import classify
from .exporter import export_filename, export_mime_type, render
from .scorecard import (
    VelocityEstimator,
    aggregate_snapshots,
    compute_board_metrics,
    compute_trends,
    get_velocity_estimator,
    status_distribution,
    week_comparison,
)


# Global state
config: Optional[CanvasConfig] = None
store: Optional[JsonBoardStore] = None
estimator: Optional[VelocityEstimator] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize components on startup"""
    global config, store, estimator

    print("[Canvas] Starting up...")

    ensure_directories()

    load_dotenv()
    config = load_config()
    store = JsonBoardStore(Path(config.store.path))
    print(f"[Canvas] Board store: {store.path} ({len(store.list_boards())} boards)")

    estimator = get_velocity_estimator(config.scorecard)
    print(f"[Canvas] Decision velocity estimator: {config.scorecard.velocity_mode}")

    print("[Canvas] Ready")

    yield

    print("[Canvas] Shutting down...")


app = FastAPI(
    title="Canvas Insights",
    description="Classification, export and scorecards for strategy canvases",
    version="0.1.0",
    lifespan=lifespan,
)


# =============================================================================
# Request/Response Models
# =============================================================================

class BoardSummary(BaseModel):
    id: str
    name: str
    item_count: int


class ExportResponse(BaseModel):
    """Rendered artifact plus the suggested download name"""
    filename: str
    mime_type: str
    content: str


class ScorecardResponse(BaseModel):
    metrics: BoardMetricsSnapshot
    trends: PeriodTrends
    distribution: List[StatusSlice]
    comparison: List[WeekComparison]


# =============================================================================
# Helpers
# =============================================================================

def _get_board(board_id: str) -> Board:
    if store is None:
        raise HTTPException(status_code=503, detail="Store not initialized")
    try:
        board = store.get_board(board_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Board not found: {board_id}")
    # Snapshot of the items at request time
    return board.model_copy(update={"items": store.list_items(board_id)})


def _scorecard(snapshot: BoardMetricsSnapshot) -> ScorecardResponse:
    return ScorecardResponse(
        metrics=snapshot,
        trends=compute_trends(snapshot),
        distribution=status_distribution(snapshot),
        comparison=week_comparison(snapshot),
    )


# =============================================================================
# Endpoints
# =============================================================================

@app.get("/health")
async def health():
    return {
        "status": "ok",
        "boards": len(store.list_boards()) if store else 0,
    }


@app.get("/boards", response_model=List[BoardSummary])
async def list_boards():
    if store is None:
        return []
    return [
        BoardSummary(id=b.id, name=b.name, item_count=len(b.items))
        for b in store.list_boards()
    ]


@app.get("/boards/{board_id}/content", response_model=ExtractedContentBundle)
async def board_content(board_id: str):
    board = _get_board(board_id)
    return classify(board.items, title=board.name)


@app.post("/boards/{board_id}/export", response_model=ExportResponse)
async def export_board(board_id: str, export_config: Optional[ExportConfig] = None):
    """Render an export; omitted options fall back to the configured defaults"""
    board = _get_board(board_id)

    if export_config is None:
        export_config = config.export.to_export_config() if config else ExportConfig()

    bundle = classify(board.items, title=board.name)
    return ExportResponse(
        filename=export_filename(board.name, export_config.format),
        mime_type=export_mime_type(export_config.format),
        content=render(bundle, export_config),
    )


@app.get("/boards/{board_id}/scorecard", response_model=ScorecardResponse)
async def board_scorecard(board_id: str):
    board = _get_board(board_id)
    snapshot = compute_board_metrics(board, datetime.now(), estimator=estimator)
    return _scorecard(snapshot)


@app.get("/scorecard", response_model=ScorecardResponse)
async def all_boards_scorecard():
    now = datetime.now()
    boards = store.list_boards() if store else []
    snapshots = [compute_board_metrics(b, now, estimator=estimator) for b in boards]
    return _scorecard(aggregate_snapshots(snapshots, now, estimator=estimator))


if __name__ == "__main__":
    import uvicorn

    cfg = load_config()
    print(f"[Canvas] Starting server on {cfg.server.host}:{cfg.server.port}")
    uvicorn.run(app, host=cfg.server.host, port=cfg.server.port)
