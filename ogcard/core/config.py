from pydantic_settings import SettingsConfigDict, BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server settings
    server_host: str = "0.0.0.0"
    server_port: int = 8000
    server_reload: bool = False

    # CORS settings
    cors_origins: List[str] = ["http://localhost:5173"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"

    # Fetching settings
    fetch_timeout: int = 30
    fetch_follow_redirects: bool = True
    fetch_verify_ssl: bool = True
    fetch_user_agent: str = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"
    facebook_user_agent: str = "facebookexternalhit/1.1 (+http://www.facebook.com/externalhit_uatext.php)"

    # Image probing
    image_probe_timeout: int = 10
    image_probe_max_bytes: int = 5 * 1024 * 1024
    min_image_width: int = 300
    placeholder_image_url: str = "https://dev.webbossuk.com/List-it/img/static.jpg"

    # Price formatting
    default_locale: str = "en-GB"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

# Create a single instance of settings
settings = Settings()
