from ._base_service import BaseService
from .downloads import (
    get_file,
    get_file_bytes,
    get_file_stream,
    get_files,
    get_files_bytes,
    get_files_streams,
    get_json_string,
    get_query_params,
)
from .http_flex import HttpFlex

__all__ = [
    "BaseService",
    "HttpFlex",
    "get_file",
    "get_file_bytes",
    "get_file_stream",
    "get_files",
    "get_files_bytes",
    "get_files_streams",
    "get_json_string",
    "get_query_params",
]
