"""FastAPI application for tube bender scoring, ranking and the finder."""

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bender_rank.api.dependencies import get_products
from bender_rank.api.routers import benders, finder
from bender_rank.config import get_settings
from bender_rank.finder import available_matchers
from bender_rank.scoring import SCORING_CRITERIA, Product

settings = get_settings()

app = FastAPI(
    title=f"{settings.app_name} API",
    description=(
        "Ranks tube benders on an 11-criterion, 100-point score, filters the "
        "catalog for comparison pages and shortlists benders from finder answers"
    ),
    version="0.1.0",
    docs_url="/api/docs" if settings.debug else None,
    redoc_url="/api/redoc" if settings.debug else None,
)

# The storefront is the only browser client
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(benders.router, prefix=settings.api_prefix)
app.include_router(benders.methodology_router, prefix=settings.api_prefix)
app.include_router(finder.router, prefix=settings.api_prefix)


@app.get("/health")
async def health_check(
    products: list[Product] = Depends(get_products),
) -> dict[str, object]:
    """Health check; also confirms the catalog loads."""
    return {
        "status": "healthy",
        "catalog_size": len(products),
        "criteria": len(SCORING_CRITERIA),
        "finders": available_matchers(),
    }
