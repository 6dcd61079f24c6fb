#!/usr/bin/env python3
import sys
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from errors import SehYaatriError
from Auth.auth import get_current_claims
from Auth.credentials import CredentialStore
from Auth.models import LoginIn, SignupIn, TokenOut
from Auth.security import create_access_token, using_default_secret
from Feedback.models import FeedbackIn
from Feedback.store import FeedbackStore
from Storage.database import init_db, get_credential_store, get_feedback_store

# ─── LOGGING ───────────────────────────────────────────────────────────────
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if using_default_secret():
        if config.ENVIRONMENT == "production":
            raise RuntimeError("JWT_SECRET must be set in production")
        logger.warning("JWT_SECRET not set, using the insecure development default")
    init_db()       # raises StorageError -> startup aborts
    yield


# ─── FASTAPI SETUP ─────────────────────────────────────────────────────────
app = FastAPI(
    title="SehYaatri",
    description="SehYaatri feedback collection and owner authentication",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SehYaatriError)
async def sehyaatri_error_handler(request, exc: SehYaatriError):
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request, exc: RequestValidationError):
    return JSONResponse({"error": "Invalid request body"}, status_code=400)


# ─── ROOT & HEALTH ─────────────────────────────────────────────────────────
@app.get("/", include_in_schema=False)
def root():
    return {"status": "ok"}


@app.get("/health", tags=["Health"])
def health_check():
    logger.info("Health check invoked")
    return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}


# ─── AUTH ──────────────────────────────────────────────────────────────────
@app.post("/api/auth/signup", response_model=TokenOut, tags=["Auth"])
def signup(body: SignupIn, store: CredentialStore = Depends(get_credential_store)):
    """Create an owner account and return a token for it."""
    account = store.signup(body.email, body.password, body.name)
    return {"token": create_access_token(account)}


@app.post("/api/auth/login", response_model=TokenOut, tags=["Auth"])
def login(body: LoginIn, store: CredentialStore = Depends(get_credential_store)):
    account = store.login(body.email, body.password)
    return {"token": create_access_token(account)}


# ─── FEEDBACK ──────────────────────────────────────────────────────────────
@app.post("/api/feedback", tags=["Feedback"])
def submit_feedback(body: FeedbackIn, store: FeedbackStore = Depends(get_feedback_store)):
    store.append(body.payload, body.email)
    return {"ok": True}


@app.get("/api/feedback", tags=["Feedback"])
def list_feedback(
    _: Dict[str, Any] = Depends(get_current_claims),
    store: FeedbackStore = Depends(get_feedback_store),
):
    """All feedback, newest first. Requires a bearer token."""
    return {"feedback": [record.public() for record in store.list_all()]}


# ─── Uvicorn LAUNCH (DEV ONLY) ─────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=config.PORT,
        reload=True
    )
