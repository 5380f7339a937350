"""
서비스 의존성 구성

Lambda 핸들러와 FastAPI 앱이 같은 서비스 그래프를 사용합니다.
"""

from functools import lru_cache
from typing import Callable

from app.core.config import get_settings
from app.db.aws_clients import get_dynamodb_resource, get_polly_client, get_s3_client
from app.db.product_table import ProductTable
from app.services.audio_storage_service import AudioStorageService
from app.services.product_service import ProductService
from app.services.speech_service import SpeechService


@lru_cache
def get_product_service() -> ProductService:
    """
    프로세스 전역 ProductService를 반환합니다.

    처음 호출될 때 DynamoDB, Polly, S3 클라이언트를 생성하고 이후 재사용합니다.

    Example:
        @app.get("/products")
        def list_products(service: ProductService = Depends(get_product_service)):
            ...
    """
    settings = get_settings()
    return ProductService(
        table=ProductTable.from_resource(get_dynamodb_resource(), settings.table_name),
        speech=SpeechService(get_polly_client(), settings),
        audio_storage=AudioStorageService(get_s3_client(), settings),
    )


def get_service_factory() -> Callable[[], ProductService]:
    """
    FastAPI 의존성 주입용 ProductService 팩토리

    서비스 생성 자체는 라우터에서 수행해서, 생성 실패도
    Lambda와 같은 형식의 500 응답이 되도록 합니다.
    """
    return get_product_service
