import os
from enum import StrEnum
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
ENVIRONMENT = os.getenv('ENVIRONMENT', 'local')

DEBUG = os.getenv('DEBUG', 'False') == 'True'
load_dotenv(dotenv_path=Path(BASE_DIR).resolve().joinpath('env', ENVIRONMENT, '.env'))

APP = 'awsab'
PROCESS = 'awsab_cli'
LOG_PATH = BASE_DIR / 'logs' / 'app.log'
LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'WARNING')

AWS_CLI_BINARY = os.getenv("AWS_CLI_BINARY", "aws")

# Every spawned aws process is killed after this many seconds
COMMAND_TIMEOUT_SECONDS = float(os.getenv("COMMAND_TIMEOUT_SECONDS", "60"))


class TimeUnit(StrEnum):
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"


AWS_TIME_UNIT = TimeUnit(os.getenv("AWS_TIME_UNIT", TimeUnit.SECONDS))
