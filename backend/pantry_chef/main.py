from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pantry_chef.api.routes import router as api_router
from pantry_chef.config import settings
from pantry_chef.logging import configure_logging, get_logger
from pantry_chef.services.llm.dspy_client import configure_dspy
from pantry_chef.storage.db import create_db_and_tables, get_session
from pantry_chef.storage.repositories import seed_demo_data
from pantry_chef.storage.seed import INITIAL_PANTRY, INITIAL_RECIPES

app = FastAPI(title="Pantry Chef API")
logger = get_logger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup() -> None:
    configure_logging(settings.log_level)
    logger.info("startup: configuring services")
    configure_dspy()
    create_db_and_tables()
    if settings.seed_demo_data:
        with get_session() as session:
            seed_demo_data(session, INITIAL_PANTRY, INITIAL_RECIPES)


app.include_router(api_router)
