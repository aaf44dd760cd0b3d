from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from agroconnect.core.config import settings
from agroconnect.core.errors import register_exception_handlers
from agroconnect.core.logger import logger
from agroconnect.core.request_middleware import RequestLoggingMiddleware
from agroconnect.db.init import init_db
from agroconnect.api import crops, resources
from agroconnect.auth.jwt import router as auth_router

app = FastAPI(
    title=settings.APP_NAME,
    description="Marketplace API connecting farmers and buyers: crop listings, equipment rental and rental requests",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

# Initialize database
@app.on_event("startup")
async def startup_event():
    init_db()
    logger.info("Database schema ready")

# Include routers
app.include_router(auth_router, prefix="/auth", tags=["auth"])
app.include_router(crops.router, prefix="/crops", tags=["crops"])
app.include_router(resources.router, prefix="/resources", tags=["resources"])

@app.get("/")
def read_root():
    return {"message": "Welcome to AgroConnect API"}

@app.get("/health")
def health():
    return {"status": "ok"}
