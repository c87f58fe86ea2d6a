from geotext.core.constants import WKT_FILE_SUFFIX
from geotext.core.errors import MalformedGeometryText, ResourceAcquisitionFailure
from geotext.core.settings import Settings
from geotext.parsers.wkt_file import WktFileReader
from geotext.schemas import requests, responses
from geotext.utils import to_geojson
from fastapi import APIRouter, HTTPException, Query, status
from pathlib import Path
from shapely import Geometry
import io
import logging

logger = logging.getLogger(__name__)

api_router = APIRouter(prefix='')


def _to_feature_collection(geometries: list[Geometry], offset: int) -> responses.FeatureCollection:
    features = [
        responses.Feature(
            type='Feature',
            geometry=to_geojson(geometry),
            properties={'index': offset + i, 'geometry_type': geometry.geom_type}
        )
        for i, geometry in enumerate(geometries)
    ]
    return responses.FeatureCollection(
        type='FeatureCollection',
        features=features
    )


def _read(reader: WktFileReader) -> list[Geometry]:
    try:
        geometries = reader.read()
    except MalformedGeometryText as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except ResourceAcquisitionFailure as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    logger.info('Read %d geometries (offset=%d, limit=%d)', len(geometries), reader.offset, reader.limit)
    return geometries


@api_router.post('/read')
async def read_wkt(read: requests.ReadWkt) -> responses.FeatureCollection:
    reader = WktFileReader(io.StringIO(read.text), offset=read.offset, limit=read.limit)
    return _to_feature_collection(_read(reader), read.offset)


@api_router.get('/files')
def list_wkt_files() -> list[str]:
    folder = Path(Settings.WKT_FOLDER)
    if not folder.is_dir():
        return []
    return sorted(p.name for p in folder.iterdir() if p.is_file() and p.suffix.lower() == WKT_FILE_SUFFIX)


@api_router.get('/files/{filename}')
def read_wkt_file(filename: str, offset: int = Query(0, ge=0), limit: int = Query(-1, ge=-1)) -> responses.FeatureCollection:
    if Path(filename).name != filename or not filename.lower().endswith(WKT_FILE_SUFFIX):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f'WKT file not found: {filename}')

    reader = WktFileReader(Path(Settings.WKT_FOLDER) / filename, offset=offset, limit=limit)
    return _to_feature_collection(_read(reader), offset)
