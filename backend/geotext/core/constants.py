INDENT_SIZE = 2
COORDINATE_SEPARATOR = ','
TUPLE_SEPARATOR = ' '
DEFAULT_MAX_COORDINATES_PER_LINE = 5

# Buffer size of streams opened from a path
MAX_LOOKAHEAD = 2048

WKT_FILE_SUFFIX = '.wkt'
