from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import db, schema, settings
from core.log import configure_logging
from owners import router as owners_router
from pets import router as pets_router

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        if settings.db_auto_migrate():
            await schema.ensure_schema()
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="pets-api", lifespan=lifespan)

# Allow local frontend dev servers to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pets_router.router, tags=["pets"])
app.include_router(owners_router.router, tags=["owners"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "pets api"}
