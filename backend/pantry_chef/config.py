from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "pantry-chef"
    env: str = "local"
    log_level: str = "INFO"

    # In-memory SQLite; pantry, recipes and meal plan live only for the process lifetime.
    database_url: str = "sqlite://"
    seed_demo_data: bool = True

    llm_provider: str = "gemini"
    llm_model: str = "gemini-2.5-flash"
    llm_api_key: str = ""
    llm_temperature: float = 0.7
    llm_timeout_s: int = 30
    llm_max_tokens: int = 1024

    default_recipe_type: str = "Dinner"

    class Config:
        env_file = ".env"


settings = Settings()
