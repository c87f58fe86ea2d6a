from geotext.schemas.responses.geojson import Feature, FeatureCollection
from geotext.schemas.responses.kml import KmlDocument
