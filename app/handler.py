"""
Lambda 진입점

API Gateway 프록시 통합 이벤트를 받아 라우터에 위임합니다.
"""

from typing import Any

from app.api.deps import get_product_service
from app.api.router import dispatch
from app.core.config import get_settings
from app.core.logger import configure_logging

configure_logging(get_settings())


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """
    Lambda 함수 진입점

    Args:
        event: API Gateway 프록시 이벤트
        context: Lambda 컨텍스트 (사용하지 않음)

    Returns:
        API Gateway 응답 딕셔너리
    """
    return dispatch(event, get_product_service, get_settings())
