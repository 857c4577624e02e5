from fastapi import FastAPI
from app.core.config import settings
from app.core.error_handlers import register_error_handlers
from app.core.init_db import init_db, close_db
from app.routes import api_router

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.PROJECT_DESCRIPTION,
    openapi_url="/openapi.json"
)

register_error_handlers(app)

# Include all API routes
app.include_router(api_router)

@app.get("/")
async def root():
    return {"message": "Welcome to Journey API"}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.on_event("startup")
async def startup_event():
    await init_db()

@app.on_event("shutdown")
async def shutdown_event():
    await close_db()
