from geotext.core.deps import get_default_writer_options
from geotext.core.errors import MalformedGeometryText, UnsupportedGeometryKind
from geotext.parsers.wkt_geometry import WktReader
from geotext.schemas import requests, responses
from geotext.writers.kml import KmlWriter
from fastapi import APIRouter, Depends, HTTPException, status


api_router = APIRouter(prefix='')


@api_router.post('')
async def write_kml(write: requests.WriteKml, default_options: requests.KmlWriterOptions = Depends(get_default_writer_options)) -> responses.KmlDocument:
    try:
        geometry = WktReader().read(write.wkt)
        kml = KmlWriter(write.options or default_options).write(geometry)
    except (MalformedGeometryText, UnsupportedGeometryKind) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    return responses.KmlDocument(
        geometry_type=geometry.geom_type,
        kml=kml
    )
