from commands import cli
from lib.logger import setup_logging
from settings import APP, ENVIRONMENT, LOG_LEVEL, LOG_PATH, PROCESS


def main():
    setup_logging(
        env=ENVIRONMENT,
        app=APP,
        process=PROCESS,
        log_path=LOG_PATH,
        log_level=LOG_LEVEL,
    )
    cli()


if __name__ == "__main__":
    main()
