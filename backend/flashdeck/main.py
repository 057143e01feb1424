from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.middleware.cors import CORSMiddleware

from flashdeck.api.responses import REVALIDATE_HEADER, request_validation_handler
from flashdeck.api.routes import auth, cards, decks
from flashdeck.core.config import settings
from flashdeck.core.logging import configure_logging
from flashdeck.db.session import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_db()
    yield


app = FastAPI(title="Flashdeck API", lifespan=lifespan)
app.add_exception_handler(RequestValidationError, request_validation_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[REVALIDATE_HEADER],
)

app.include_router(auth.router, prefix="/auth", tags=["auth"])
app.include_router(decks.router, prefix="/decks", tags=["decks"])
app.include_router(cards.router, prefix="/decks/{deck_id}/cards", tags=["cards"])


@app.get("/health")
def health_check():
    return {"status": "ok"}
