from geotext.schemas.requests.kml_writer_options import KmlWriterOptions
from geotext.schemas.requests.read_wkt import ReadWkt
from geotext.schemas.requests.write_kml import WriteKml
