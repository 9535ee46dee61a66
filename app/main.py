"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

from app.adapters.inbound.http.exception_handlers import register_exception_handlers
from app.adapters.inbound.http.routes import router

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title="Mobil Marketplace",
    description="Classifieds marketplace API for buying and selling cars",
    version="0.1.0",
)

register_exception_handlers(app)
app.include_router(router)
