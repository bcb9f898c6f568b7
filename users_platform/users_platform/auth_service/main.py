"""
Users auth service - login, registration, identity lookup and refresh tokens
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from .config import settings
from .db import SessionLocal, init_db
from .hashing import HashService
from .repository import SqlAlchemyUserRepository
from .routes import auth, health
from .service import AuthService
from .tokens import TokenService

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger(__name__)


def build_auth_service(session_factory=SessionLocal) -> AuthService:
    return AuthService(
        users=SqlAlchemyUserRepository(session_factory),
        hash_service=HashService(),
        token_service=TokenService(),
    )


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Initialize database and the auth workflow on startup"""
    init_db()
    _app.state.auth_service = build_auth_service()
    logger.info("%s started", settings.SERVICE_NAME)
    yield


app = FastAPI(
    title="Users Auth Service",
    description="Username/password login with rotating refresh tokens",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(health.router)
