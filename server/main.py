# server/main.py

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from api import auth, category, product
from core.config import Config, setup_logging
from core.errors import ShopError
from database import init_db


setup_logging()
logger = logging.getLogger(__name__)

init_db()

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ShopError)
async def shop_error_handler(request: Request, exc: ShopError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = [".".join(str(p) for p in err["loc"][1:]) or err["loc"][0] for err in exc.errors()]
    return JSONResponse(status_code=400, content={"message": f"Invalid fields: {', '.join(fields)}"})


@app.middleware("http")
async def internal_error_middleware(request: Request, call_next):
    # errors without a registered handler end here and are not re-raised
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


@app.get("/", response_class=PlainTextResponse)
def index():
    return "Hello World..."


app.include_router(auth.router, prefix="/user")
app.include_router(category.router, prefix="/user")
app.include_router(product.router, prefix="/user")

app.mount(Config.IMAGES_URL_PREFIX, StaticFiles(directory=Config.IMAGES_DIR), name="images")
