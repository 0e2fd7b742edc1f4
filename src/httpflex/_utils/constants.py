# Environment variables
ENV_BASE_URL = "HTTPFLEX_BASE_URL"
ENV_DEBUG = "HTTPFLEX_DEBUG"
ENV_TIMEOUT = "HTTPFLEX_TIMEOUT"
ENV_VERIFY_SSL = "HTTPFLEX_VERIFY_SSL"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"

# Defaults
LOGGER_NAME = "httpflex"
LOOPBACK_URL = "http://127.0.0.1"
DEFAULT_TIMEOUT = 30.0
MULTIPART_BOUNDARY_PREFIX = "-FormBoundary"
CHUNK_SIZE = 128 * 1024
DEBUG_BODY_PREVIEW = 200
