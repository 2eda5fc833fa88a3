import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from edumarketer.config import get_settings
from edumarketer.routes.api import router as api_router

# --- env + logging ---
load_dotenv()
settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("main")

app = FastAPI(
    title=settings.APP_NAME,
    description="Marketing content generation for educational institutions",
    version="1.0.0",
    debug=settings.DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.on_event("startup")
async def startup():
    settings.log_summary()


@app.get("/health")
async def health():
    logger.info("Health check")
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("edumarketer.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
