from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "codegate"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # policy used when a request names neither a forbidden list nor a policy
    default_policy: str = "default"
    default_block_patterns: list[str] = [
        "eval(",
        "exec(",
        "os.system",
        "subprocess",
        "__import__",
    ]

    # stored submissions for /scan/file and /scan/repo; paths may not escape it
    source_root: str = "./data/sources"


settings = Settings()
