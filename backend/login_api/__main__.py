import uvicorn

from .core.config import get_settings


def main() -> None:
    settings = get_settings()
    # uvicorn's own "server" header is dropped at the source
    uvicorn.run(
        "login_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        server_header=False,
    )


if __name__ == "__main__":
    main()
