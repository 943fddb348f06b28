from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
import logging

from .config import get_settings
from .errors import PawSitError
from .routers import users, dogs, listings, bookings, messages, reviews

settings = get_settings()

# Configurar logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Configurar rate limiting
limiter = Limiter(key_func=get_remote_address)

app = FastAPI(title=settings.app_name)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(PawSitError)
async def pawsit_error_handler(request: Request, exc: PawSitError):
    if exc.status_code >= 500:
        logger.error(f"{exc.kind} en {request.method} {request.url.path}: {exc.detail}")
    else:
        logger.info(f"{exc.kind} en {request.method} {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Configuración de CORS según entorno
if settings.env == "dev":
    cors_origins = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    cors_regex = r"https?://(localhost|127\.0\.0\.1)(:\d+)?"
    cors_headers = ["Content-Type", "Accept", "Origin", "X-Requested-With"]
else:
    frontend_url = settings.frontend_base_url
    cors_origins = [frontend_url] if frontend_url else []
    cors_regex = None
    cors_headers = ["Content-Type", "Accept"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_origin_regex=cors_regex,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=cors_headers,
    expose_headers=["Content-Type"],
)


@app.get("/health")
async def health():
    return {"status": "ok", "env": settings.env}


# Routers
app.include_router(users.router, prefix="/users", tags=["users"])
app.include_router(dogs.router, prefix="/dogs", tags=["dogs"])
app.include_router(listings.router, prefix="/listings", tags=["listings"])
app.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
app.include_router(messages.router, prefix="/messages", tags=["messages"])
app.include_router(reviews.router, prefix="/reviews", tags=["reviews"])
