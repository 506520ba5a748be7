import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    admin_password: str
    database_url: str
    participants_file: str
    roster_file: Optional[str]
    shuffle_seed: int
    host: str
    port: int
    log_level: str
    log_path: str


def load_settings() -> Settings:
    admin_password = os.getenv("ADMIN_PASSWORD")
    database_url = os.getenv("DATABASE_URL", "sqlite:///santa.db")
    participants_file = os.getenv("PARTICIPANTS_FILE", "participants.json")
    roster_file = os.getenv("ROSTER_FILE") or None
    shuffle_seed = os.getenv("SHUFFLE_SEED", "2025")
    host = os.getenv("HOST", "0.0.0.0")
    port = os.getenv("PORT", "3000")
    log_level = os.getenv("LOG_LEVEL", "INFO")
    log_path = os.getenv("LOG_PATH", "logs/santa_raffle.log")

    if not admin_password:
        raise ValueError("ADMIN_PASSWORD is required. Set it in the environment or .env file.")
    try:
        seed_value = int(shuffle_seed)
        port_value = int(port)
    except ValueError as exc:
        raise ValueError("SHUFFLE_SEED and PORT must be integers.") from exc

    return Settings(
        admin_password=admin_password,
        database_url=database_url,
        participants_file=participants_file,
        roster_file=roster_file,
        shuffle_seed=seed_value,
        host=host,
        port=port_value,
        log_level=log_level,
        log_path=log_path,
    )
