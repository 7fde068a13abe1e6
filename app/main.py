from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from contextlib import asynccontextmanager

from app import models  # noqa: F401  registers tables on Base.metadata
from app.database import init_db
from app.logging_config import setup_logging
from app.routers import products_router

setup_logging()
logger = logging.getLogger("catalog.main")


# ----------------------------
# Startup
# ----------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()

    for route in app.routes:
        methods = ", ".join(sorted(route.methods)) if hasattr(route, "methods") else "N/A"
        logger.debug("Route %-30s %s", route.path, methods)

    yield


app = FastAPI(title="Product Catalog", lifespan=lifespan)

# ----------------------------
# CORS (allow the browser UI)
# ----------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ALLOW_ORIGINS", "*").split(","),
    allow_methods=["*"],
    allow_headers=["*"],
)

# ----------------------------
# Health endpoints
# ----------------------------
@app.get("/health")
def health():
    return {"ok": True}

# ----------------------------
# Routers
# ----------------------------
app.include_router(products_router.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "3000")))
