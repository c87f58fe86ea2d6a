import os


def _split_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(',') if origin.strip()]


class _Settings:
    def __init__(self):
        self.WKT_FOLDER = os.getenv('WKT_FOLDER', 'data/wkt')
        self.LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
        self.CORS_ORIGINS = _split_origins(os.getenv(
            'CORS_ORIGINS',
            'http://localhost:5173,https://localhost:5173,http://localhost:3000,https://localhost:3000',
        ))
        self.KML_DEFAULT_PRECISION = int(os.getenv('KML_DEFAULT_PRECISION', '-1'))
        self.KML_MAX_COORDINATES_PER_LINE = int(os.getenv('KML_MAX_COORDINATES_PER_LINE', '5'))


Settings = _Settings()
