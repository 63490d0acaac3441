import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

def _log_level(value) -> str:
    level = (value or "").strip().upper()
    if level not in LOG_LEVELS:
        return "INFO"
    return level


class Settings:
    # AWS
    AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID")
    AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY")
    AWS_REGION = os.getenv("AWS_REGION", "us-east-1")

    # DynamoDB
    DYNAMODB_ENDPOINT_URL = os.getenv("DYNAMODB_ENDPOINT_URL")
    USERS_TABLE_NAME = os.getenv("USERS_TABLE_NAME", "go-serverless-example")

    # Behaviour
    # False restores the old update check, which rejects users that already exist
    UPDATE_REQUIRES_EXISTING = _env_flag("UPDATE_REQUIRES_EXISTING", True)

    # API Gateway / logging
    API_GATEWAY_BASE_PATH = os.getenv("API_GATEWAY_BASE_PATH", "/")
    LOG_LEVEL = _log_level(os.getenv("LOG_LEVEL"))

settings = Settings()
