"""Application settings loaded from environment variables."""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application configuration settings."""
    
    # Server Configuration
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8000
    
    # Database (SQLAlchemy async URL)
    DATABASE_URL: str = "sqlite+aiosqlite:///./board.db"
    DATABASE_ECHO: bool = False  # SQL 로그 출력 여부
    
    # JWT 발급 설정
    JWT_SECRET_KEY: str = "CHANGE_ME_TO_A_LONG_RANDOM_SECRET_VALUE"  # 실 서비스에서는 반드시 교체
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: Optional[str] = None
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    
    # Password hashing (passlib scheme 목록, 콤마 구분)
    PASSWORD_HASH_SCHEMES: str = "pbkdf2_sha256"
    
    # 시작 시 RoleType 시드 데이터 생성 여부
    SEED_ROLES: bool = True
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
