"""
애플리케이션 설정 관리

Pydantic Settings를 사용하여 환경 변수를 로드합니다.
.env 파일 또는 시스템 환경 변수에서 설정을 읽어옵니다.
모든 항목에 기본값이 있으므로 환경 변수 없이도 핸들러가 동작합니다.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정 클래스"""

    # DynamoDB 설정
    table_name: str = "products"

    # Polly / S3 오디오 설정
    audio_bucket: str = "ecom-polly-audio"
    voice_id: str = "Joanna"
    audio_format: str = "mp3"
    audio_content_type: str = "audio/mp3"

    # AWS 설정 (None이면 런타임 기본값 사용)
    aws_region: str | None = None
    dynamodb_endpoint_url: str | None = None
    polly_endpoint_url: str | None = None
    s3_endpoint_url: str | None = None

    # CORS 응답 헤더
    cors_allow_origin: str = "*"
    cors_allow_methods: str = "GET,POST,PUT,DELETE,OPTIONS"
    cors_allow_headers: str = (
        "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token"
    )

    # 애플리케이션 설정
    app_env: str = "development"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 정의되지 않은 환경 변수 무시
    )

    @property
    def cors_headers(self) -> dict[str, str]:
        """
        모든 응답에 포함되는 CORS 헤더

        Returns:
            {"Access-Control-Allow-Origin": "*", ...}
        """
        return {
            "Access-Control-Allow-Origin": self.cors_allow_origin,
            "Access-Control-Allow-Methods": self.cors_allow_methods,
            "Access-Control-Allow-Headers": self.cors_allow_headers,
        }

    def audio_key(self, product_id: str) -> str:
        """상품 ID로 오디오 객체 키를 만듭니다 (예: "abc123.mp3")."""
        return f"{product_id}.{self.audio_format}"


@lru_cache
def get_settings() -> Settings:
    """
    Settings 인스턴스를 반환하는 팩토리 함수

    Lambda 컨테이너가 재사용되는 동안 같은 인스턴스를 돌려줍니다.
    """
    return Settings()
