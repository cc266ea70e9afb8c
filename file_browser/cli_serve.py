import uvicorn

from file_browser.config.settings import settings


def main(argv: list[str] | None = None) -> int:
    # Run FastAPI app from file_browser.main:app
    uvicorn.run(
        "file_browser.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
