"""
FastAPI backend: REST API over the contact store.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from contactdesk.application import ContactDraft, ContactStore, StoreError, validate_form
from contactdesk.infrastructure import InMemoryContactStore


def _log_level() -> int:
    """LOG_LEVEL from the environment; unknown names fall back to INFO."""
    name = os.environ.get("LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(name) if name else logging.INFO
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=_log_level(),
)
logger = logging.getLogger(__name__)

_FALSY = {"0", "false", "no", "off"}


def _mock_latency_enabled() -> bool:
    return os.environ.get("CONTACTS_MOCK_LATENCY", "1").strip().lower() not in _FALSY


def _build_store() -> InMemoryContactStore:
    if _mock_latency_enabled():
        return InMemoryContactStore()
    logger.info("Mock latency disabled (CONTACTS_MOCK_LATENCY)")
    return InMemoryContactStore.without_latency()


def get_store(app: FastAPI) -> ContactStore:
    if getattr(app.state, "store", None) is None:
        app.state.store = _build_store()
    return app.state.store


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store = _build_store()
    logger.info("Contact API ready: GET/POST /contacts, DELETE /contacts/{id}")
    yield


app = FastAPI(title="Contactdesk API", lifespan=lifespan)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


class CreateContactBody(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    message: str | None = None


@app.post("/contacts")
async def create_contact(body: CreateContactBody, request: Request):
    draft = ContactDraft(
        name=body.name,
        email=body.email,
        phone=body.phone,
        message=body.message or "",
    )
    errors = validate_form(draft)
    if errors:
        return JSONResponse(
            content={"success": False, "errors": dict(errors)},
            status_code=422,
        )
    store = get_store(request.app)
    try:
        contact = await store.create(draft)
    except StoreError as e:
        logger.exception("Error creating contact")
        raise HTTPException(status_code=503, detail=str(e)) from e
    return JSONResponse(
        content={"success": True, "data": contact.to_dict()},
        status_code=201,
    )


@app.get("/contacts")
async def list_contacts(request: Request):
    store = get_store(request.app)
    try:
        contacts = await store.list()
    except StoreError as e:
        logger.exception("Error fetching contacts")
        raise HTTPException(status_code=503, detail=str(e)) from e
    return {"success": True, "data": [c.to_dict() for c in contacts]}


@app.delete("/contacts/{contact_id}")
async def delete_contact(contact_id: str, request: Request):
    store = get_store(request.app)
    try:
        ok = await store.delete_by_id(contact_id)
    except StoreError as e:
        logger.exception("Error deleting contact %s", contact_id)
        raise HTTPException(status_code=503, detail=str(e)) from e
    return {"success": ok}
