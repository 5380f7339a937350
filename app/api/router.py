"""
API Gateway 프록시 이벤트 라우터

HTTP 메서드별로 상품 조회(GET), 생성(POST), 수정(PUT), 삭제(DELETE),
CORS preflight(OPTIONS)를 처리하고, 모든 결과를 같은 형식의 응답으로 만듭니다.
예외는 이 경계 밖으로 전파되지 않습니다.
"""

import base64
import json
import logging
from typing import Any, Callable

from pydantic import ValidationError

from app.core.config import Settings
from app.core.exceptions import (
    MethodNotAllowedException,
    ProductNotFoundException,
    ProductValidationException,
)
from app.core.security import extract_identity
from app.schemas.product import ProductCreateRequest, ProductWriteRequest
from app.services.product_service import ProductService

logger = logging.getLogger(__name__)

CREATE_VALIDATION_MESSAGE = "Missing productname, quantity, or price in request body"
UPDATE_VALIDATION_MESSAGE = "Missing product ID, productname, quantity, or price in request"
DELETE_VALIDATION_MESSAGE = "Missing product ID in path"

# 상태 코드를 직접 가지고 있는 예외들
CLIENT_ERRORS = (
    ProductValidationException,
    ProductNotFoundException,
    MethodNotAllowedException,
)


def format_response(settings: Settings, status_code: int, body: Any = None) -> dict:
    """
    표준 응답 객체를 생성합니다.

    204 응답은 Content-Type과 본문 없이 CORS 헤더만 포함합니다.

    Example:
        >>> format_response(settings, 200, {})
        {"statusCode": 200, "headers": {...}, "body": "{}"}
    """
    if status_code == 204:
        return {"statusCode": 204, "headers": dict(settings.cors_headers)}

    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **settings.cors_headers},
        "body": json.dumps(body),
    }


def parse_body(event: dict) -> dict:
    """
    요청 본문(JSON)을 딕셔너리로 파싱합니다.

    Raises:
        ProductValidationException: 본문이 올바른 JSON이 아닌 경우
    """
    raw = event.get("body")
    if not raw:
        return {}

    try:
        if event.get("isBase64Encoded"):
            raw = base64.b64decode(raw).decode("utf-8")
        body = json.loads(raw)
    except ValueError:
        raise ProductValidationException("Invalid JSON in request body")

    # 객체가 아닌 JSON은 필수 필드 누락으로 처리
    return body if isinstance(body, dict) else {}


def list_products(event: dict, service: ProductService, settings: Settings) -> dict:
    """GET: 토큰 사용자의 상품 목록 (search 쿼리로 필터)"""
    query_parameters = event.get("queryStringParameters") or {}
    user = extract_identity(event.get("headers"))
    search = query_parameters.get("search")

    try:
        products = service.list_products(user, search)
    except Exception as e:
        logger.exception("Error: %s", e)
        return format_response(
            settings, 500, {"message": f"Failed to retrieve products: {e}"}
        )

    return format_response(
        settings, 200, [p.model_dump(exclude_none=True) for p in products]
    )


def create_product(event: dict, service: ProductService, settings: Settings) -> dict:
    """POST: 상품 생성 (201)"""
    body = parse_body(event)
    try:
        request = ProductCreateRequest.model_validate(body)
    except ValidationError:
        raise ProductValidationException(CREATE_VALIDATION_MESSAGE)

    product = service.create_product(request)
    return format_response(settings, 201, product.model_dump(exclude_none=True))


def update_product(event: dict, service: ProductService, settings: Settings) -> dict:
    """PUT /products/{id}: 상품 수정 (200)"""
    product_id = (event.get("pathParameters") or {}).get("id")
    body = parse_body(event)
    try:
        request = ProductWriteRequest.model_validate(body)
    except ValidationError:
        raise ProductValidationException(UPDATE_VALIDATION_MESSAGE)
    if not product_id:
        raise ProductValidationException(UPDATE_VALIDATION_MESSAGE)

    product = service.update_product(product_id, request)
    return format_response(settings, 200, product.model_dump(exclude_none=True))


def delete_product(event: dict, service: ProductService, settings: Settings) -> dict:
    """DELETE /products/{id}: 상품 삭제 (204)"""
    product_id = (event.get("pathParameters") or {}).get("id")
    if not product_id:
        raise ProductValidationException(DELETE_VALIDATION_MESSAGE)

    service.delete_product(product_id)
    return format_response(settings, 204)


def preflight(event: dict, service: ProductService, settings: Settings) -> dict:
    """OPTIONS: CORS preflight, 저장소에 접근하지 않음"""
    return format_response(settings, 200, {})


HANDLERS = {
    "GET": list_products,
    "POST": create_product,
    "PUT": update_product,
    "DELETE": delete_product,
    "OPTIONS": preflight,
}


def handle_event(event: dict, service: ProductService, settings: Settings) -> dict:
    """
    프록시 이벤트 하나를 처리하고 응답 하나를 반환합니다.

    Args:
        event: API Gateway 프록시 이벤트 (httpMethod, pathParameters,
            queryStringParameters, headers, body)
        service: 상품 서비스
        settings: 애플리케이션 설정

    Returns:
        {"statusCode": int, "headers": dict, "body": str}
    """
    method = (event or {}).get("httpMethod")
    try:
        handler = HANDLERS.get(method)
        if handler is None:
            raise MethodNotAllowedException(method)
        return handler(event, service, settings)

    except CLIENT_ERRORS as e:
        return format_response(settings, e.status_code, {"message": e.message})

    except Exception as e:
        logger.exception("Error: %s", e)
        return format_response(
            settings, 500, {"message": f"Internal Server Error: {e}"}
        )


def dispatch(
    event: dict,
    service_factory: Callable[[], ProductService],
    settings: Settings,
) -> dict:
    """
    서비스를 얻은 뒤 이벤트를 처리합니다.

    Lambda 핸들러와 로컬 서버가 함께 사용합니다. 서비스 생성 실패
    (리전 미설정 등)도 500 응답으로 변환됩니다.

    Args:
        event: API Gateway 프록시 이벤트
        service_factory: ProductService를 반환하는 함수
        settings: 애플리케이션 설정
    """
    try:
        service = service_factory()
    except Exception as e:
        logger.exception("Error: %s", e)
        return format_response(
            settings, 500, {"message": f"Internal Server Error: {e}"}
        )

    return handle_event(event, service, settings)
