from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Wayback Snapshot Finder"
    log_level: str = "INFO"

    # Wayback Machine CDX server
    cdx_url: str = "http://web.archive.org/cdx/search/cdx"
    cdx_fields: str = "timestamp,original,statuscode,mimetype"
    record_limit: int = 1000
    request_timeout: int = 30
    user_agent: str = "WaybackSnapshotFinder/1.0"

    # Snapshot links point here: {prefix}{timestamp}/{original}
    archive_view_prefix: str = "https://web.archive.org/web/"

    default_sort: str = "newest"


settings = Settings()
