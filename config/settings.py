from datetime import datetime
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Input
    snapshot_path: str = "data/properties.json"

    # Default brand scope for room classification (marriott, hyatt, hilton, ihg)
    brand_code: str = ""

    # Fixed "now" for reproducible runs; wall clock when unset
    as_of: Optional[datetime] = None

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}
