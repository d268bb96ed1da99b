"""Health-check payload."""

from fincalc import __version__
from fincalc.schemas.ping import PingResponse


def get_ping_message() -> str:
    return "pong"


def build_ping(service: str) -> PingResponse:
    """Report liveness together with the running service name and version."""
    return PingResponse(message=get_ping_message(), service=service, version=__version__)
