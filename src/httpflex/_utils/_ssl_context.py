import os
import ssl
from typing import Any, Dict, Optional


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


def create_ssl_context():
    # Try truststore first (system certificates)
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        # Fallback to manual certificate configuration
        import certifi

        ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
        requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
        ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )


def get_httpx_client_kwargs(
    *,
    timeout: Optional[float],
    verify_ssl: bool = True,
    follow_redirects: bool = True,
    retries: int = 0,
    proxy: Any = None,
) -> Dict[str, Any]:
    """Build the keyword arguments for ``httpx.Client``.

    The transport is created explicitly so connection retries (``retries``)
    are handled by httpx itself.
    """
    import httpx

    verify: Any = create_ssl_context() if verify_ssl else False

    kwargs: Dict[str, Any] = {
        "timeout": timeout,
        "follow_redirects": follow_redirects,
        "transport": httpx.HTTPTransport(verify=verify, retries=retries),
    }
    if proxy is not None:
        kwargs["mounts"] = {
            "all://": httpx.HTTPTransport(verify=verify, retries=retries, proxy=proxy)
        }
    return kwargs
