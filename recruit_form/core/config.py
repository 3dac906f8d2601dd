import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from recruit_form.core.paths import resolve_repo_path


def _env_files() -> list[str]:
    base = resolve_repo_path(".env")
    env = os.getenv("RF_ENVIRONMENT", "").strip().lower()
    files = [str(base)]
    if env and env != "development":
        files.append(str(resolve_repo_path(f".env.{env}")))
    else:
        files.append(str(resolve_repo_path(".env.local")))
    return files


class Settings(BaseSettings):
    app_name: str = "Recruitment Application Form"
    environment: str = "development"

    submit_url: str = "https://designandbuildhqrecruitformbackend.onrender.com/api/applications/submit"
    # None waits for the intake endpoint indefinitely.
    submit_timeout_seconds: float | None = None

    draft_database_url: str = "sqlite:///recruit_form_drafts.db"

    success_banner_seconds: float = 5.0
    cv_max_bytes: int = 5 * 1024 * 1024

    model_config = SettingsConfigDict(env_prefix="RF_", env_file=_env_files(), extra="ignore")


settings = Settings()
