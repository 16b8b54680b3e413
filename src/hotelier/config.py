import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("HOTELIER_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()


@dataclass
class Config:
    environment: str
    database_url: str
    log_level: str
    default_page_size: int
    max_page_size: int

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            environment=env,
            database_url=os.environ.get(
                "DATABASE_URL", f"postgresql://localhost:5432/hotelier_{env}"
            ),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
            default_page_size=int(os.environ.get("DEFAULT_PAGE_SIZE", "20")),
            max_page_size=int(os.environ.get("MAX_PAGE_SIZE", "100")),
        )


config = Config.from_env()
