from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    mongodb_uri: str = ""
    mongodb_db: str = ""  # Empty uses the database named in the URI

    # Cloudinary (all three credentials are required)
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""
    cloudinary_folder: str = "zumba-gallery"

    # Contact notifications (optional, disabled unless host and recipient are set)
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_secure: bool = False
    smtp_user: str = ""
    smtp_pass: str = ""
    smtp_ignore_tls_errors: bool = False
    contact_to_email: str = ""
    contact_from_email: str = ""

    # Application
    host: str = "0.0.0.0"
    port: int = 5000
    api_prefix: str = "/api"
    log_level: str = "INFO"
    cors_origins: str = "*"  # Comma separated

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @property
    def smtp_use_ssl(self) -> bool:
        """Implicit TLS is always used on the SMTPS port."""
        return self.smtp_secure or self.smtp_port == 465

    @property
    def mail_sender(self) -> str:
        return self.contact_from_email or self.smtp_user

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def log_format(self) -> str:
        return "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    def missing_required(self) -> list[str]:
        """Names of required environment variables that are not set."""
        required = {
            "MONGODB_URI": self.mongodb_uri,
            "CLOUDINARY_CLOUD_NAME": self.cloudinary_cloud_name,
            "CLOUDINARY_API_KEY": self.cloudinary_api_key,
            "CLOUDINARY_API_SECRET": self.cloudinary_api_secret,
        }
        return [name for name, value in required.items() if not value]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
