from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str

    # Mailpit accepts plain SMTP on its local port
    MAILPIT_HOST: str = "localhost"
    MAILPIT_PORT: int = 1025
    MAIL_SENDER: str = "mailpit@journey.com"

    LOG_LEVEL: str = "INFO"

    PROJECT_NAME: str = "Journey API"
    PROJECT_VERSION: str = "1.0.0"
    PROJECT_DESCRIPTION: str = "Plan trips, invite participants and keep activities and links together"

    class Config:
        env_file = ".env"


settings = Settings()
