"""
api_endpoints.py - Layout token REST API routes v1.0

FastAPI endpoints for working with shareable layout tokens.

Endpoints:
- GET /api/v1/layouts/default - Empty layout of the configured default size
- GET /api/v1/layouts/catalog - Placeable items
- POST /api/v1/layouts/encode - Token for a layout description
- GET /api/v1/layouts/{token} - Decode a token
- POST /api/v1/layouts/{token}/operations - Apply one operation to a token
"""

from typing import List, Dict, Optional, Any
import logging

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from kitchenplan.bootstrap.config import KitchenPlanConfig, get_config
from kitchenplan.catalog.items import FALLBACK_IMAGE, placeable_items
from kitchenplan.codec.token import MAX_DIMENSION, decode_layout, encode_layout
from kitchenplan.errors.taxonomy import (
    CellCategoryError,
    CellRangeError,
    TokenDecodeError,
)
from kitchenplan.layout.grid import Layout
from kitchenplan.layout.operations import UnknownOperationError, apply_operation

__all__ = [
    'create_layout_router',
    'create_app',
    'RoomRequest',
    'WallRequest',
    'LayoutRequest',
    'OperationRequest',
    'LayoutResponse',
    'CatalogItemResponse',
]

logger = logging.getLogger(__name__)


# =============================================================================
# REQUEST/RESPONSE MODELS
# =============================================================================

class RoomRequest(BaseModel):
    """Item placed in a room cell."""
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    kind: str = Field(..., description="Item slug, e.g. fridge or range_hood")
    orientation: int = Field(0, description="Clockwise degrees: 0, 90, 180 or 270")


class WallRequest(BaseModel):
    """Wall segment content."""
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    type: str = Field("wall", description="none, wall or counter")


class LayoutRequest(BaseModel):
    """Sparse layout description to encode."""
    width: int = Field(..., ge=1, le=MAX_DIMENSION)
    height: int = Field(..., ge=1, le=MAX_DIMENSION)
    rooms: List[RoomRequest] = Field(default_factory=list)
    walls: List[WallRequest] = Field(default_factory=list)


class OperationRequest(BaseModel):
    """One named layout operation."""
    operation: str = Field(..., description="place, clear, rotate_left, rotate_right, swap, wall, remove_squares, remove_walls")
    row: Optional[int] = None
    col: Optional[int] = None
    row2: Optional[int] = None
    col2: Optional[int] = None
    item: Optional[str] = None
    orientation: int = 0
    wall: Optional[str] = None


class LayoutResponse(BaseModel):
    """Token plus the decoded layout view."""
    token: str
    width: int
    height: int
    item_count: int
    layout: Dict[str, Any]


class CatalogItemResponse(BaseModel):
    """Placeable catalog entry."""
    kind: str
    code: int
    label: str
    image: str
    fallback_image: str = FALLBACK_IMAGE


def _layout_response(layout: Layout) -> LayoutResponse:
    return LayoutResponse(
        token=encode_layout(layout),
        width=layout.width,
        height=layout.height,
        item_count=layout.item_count,
        layout=layout.to_dict(),
    )


# =============================================================================
# ROUTER FACTORY
# =============================================================================

def create_layout_router(config: Optional[KitchenPlanConfig] = None) -> APIRouter:
    """
    Create FastAPI router for layout token endpoints.

    Args:
        config: Configuration for default layout size (global config if omitted)

    Returns:
        FastAPI APIRouter
    """
    config = config or get_config()

    router = APIRouter(
        prefix="/api/v1/layouts",
        tags=["layouts"],
    )

    @router.get("/default", response_model=LayoutResponse)
    async def get_default_layout() -> LayoutResponse:
        """Empty layout of the configured default size."""
        return _layout_response(
            Layout.empty(config.grid.default_width, config.grid.default_height)
        )

    @router.get("/catalog", response_model=List[CatalogItemResponse])
    async def get_catalog() -> List[CatalogItemResponse]:
        """Items that can be placed in room cells."""
        return [
            CatalogItemResponse(
                kind=info.kind.value,
                code=info.code,
                label=info.label,
                image=info.image,
            )
            for info in placeable_items()
        ]

    @router.post("/encode", response_model=LayoutResponse)
    async def encode(request: LayoutRequest) -> LayoutResponse:
        """Encode a sparse layout description into a token."""
        try:
            layout = Layout.from_dict(request.model_dump())
        except (CellRangeError, CellCategoryError, ValueError) as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _layout_response(layout)

    @router.get("/{token}", response_model=LayoutResponse)
    async def decode(token: str) -> LayoutResponse:
        """Decode a token into its layout."""
        try:
            layout = decode_layout(token)
        except TokenDecodeError as e:
            logger.info(f"Rejected token: {e}")
            raise HTTPException(status_code=422, detail=e.error.to_dict())
        return _layout_response(layout)

    @router.post("/{token}/operations", response_model=LayoutResponse)
    async def apply(token: str, request: OperationRequest) -> LayoutResponse:
        """Apply one operation to a token's layout and return the new token."""
        try:
            layout = decode_layout(token)
        except TokenDecodeError as e:
            raise HTTPException(status_code=422, detail=e.error.to_dict())

        params = request.model_dump(exclude={"operation"})
        try:
            layout = apply_operation(layout, request.operation, params)
        except UnknownOperationError as e:
            raise HTTPException(status_code=400, detail=e.error.to_dict())
        except (CellRangeError, CellCategoryError) as e:
            raise HTTPException(status_code=400, detail=e.error.to_dict())
        except (KeyError, ValueError) as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _layout_response(layout)

    return router


def create_app(config: Optional[KitchenPlanConfig] = None) -> FastAPI:
    """FastAPI application serving the layout router."""
    config = config or get_config()

    app = FastAPI(title="Kitchen Plan API", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(create_layout_router(config))

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    return app
