import platform

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.settings import settings
from app.utils.dates import now

router = APIRouter()

APP_NAME = "FitCart"
VERSION = "0.1.0"
BUILD_TIME = now()


@router.get("/")
def home():
    return {
        "app_name": APP_NAME,
        "links": {
            "browse": "/exercise/body-parts",
            "cart": "/cart/",
            "session": "/session/",
            "nutrition": "/profile/energy",
        },
    }


@router.get("/healthz", response_class=JSONResponse)
def healthz():
    return {"status": "ok"}


@router.get("/meta")
async def get_meta():
    return {
        "app_name": APP_NAME,
        "version": VERSION,
        "build_time": BUILD_TIME,
        "python_version": platform.python_version(),
        "environment": settings.ENV,
    }
