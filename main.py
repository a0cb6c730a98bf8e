# main.py

from uvicorn import run

from bloglist.configs import settings


def main() -> None:
    run(
        "bloglist:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
