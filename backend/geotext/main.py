from geotext.core.log import setup_logging
from geotext.core.settings import Settings
from geotext.routers import (
    kml as kml_router,
    wkt as wkt_router,
)
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


async def lifespan(app: FastAPI):
    setup_logging(Settings.LOG_LEVEL)
    yield


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"], # Allows all methods
    allow_headers=["*"], # Allows all headers
)

app.include_router(kml_router.api_router, prefix='/kml', tags=['kml'])
app.include_router(wkt_router.api_router, prefix='/wkt', tags=['wkt'])
