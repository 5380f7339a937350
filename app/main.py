"""
로컬 개발용 HTTP 서버

FastAPI 요청을 API Gateway 프록시 이벤트로 변환해서 Lambda와 같은 라우터로 처리합니다.
실행: uvicorn app.main:app --reload
"""

import base64
from typing import Callable

from fastapi import Depends, FastAPI, Request, Response
from fastapi.concurrency import run_in_threadpool

from app.api.deps import get_service_factory
from app.api.router import dispatch
from app.core.config import Settings, get_settings
from app.core.logger import configure_logging
from app.services.product_service import ProductService

configure_logging(get_settings())

app = FastAPI(
    title="Product Catalog API",
    description="상품 카탈로그 CRUD 및 상품명 음성(Polly) 오디오 생성 API",
    version="0.1.0",
)

# 지원하지 않는 메서드도 라우터까지 전달해서 405를 돌려줌
PROXY_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH", "HEAD"]


async def to_proxy_event(request: Request, product_id: str | None = None) -> dict:
    """
    FastAPI 요청을 API Gateway 프록시 이벤트로 변환합니다.

    본문은 인코딩과 무관하게 전달되도록 base64로 감쌉니다.
    """
    body = await request.body()
    return {
        "httpMethod": request.method,
        "path": request.url.path,
        "pathParameters": {"id": product_id} if product_id else None,
        "queryStringParameters": dict(request.query_params) or None,
        "headers": dict(request.headers),
        "body": base64.b64encode(body).decode("ascii") if body else None,
        "isBase64Encoded": bool(body),
    }


def to_response(result: dict) -> Response:
    """프록시 응답 딕셔너리를 FastAPI Response로 변환합니다."""
    return Response(
        content=result.get("body"),
        status_code=result["statusCode"],
        headers=result.get("headers"),
    )


@app.api_route("/products", methods=PROXY_METHODS)
async def products(
    request: Request,
    service_factory: Callable[[], ProductService] = Depends(get_service_factory),
    settings: Settings = Depends(get_settings),
):
    """상품 목록 조회(GET), 생성(POST), preflight(OPTIONS)"""
    event = await to_proxy_event(request)
    result = await run_in_threadpool(dispatch, event, service_factory, settings)
    return to_response(result)


@app.api_route("/products/{product_id}", methods=PROXY_METHODS)
async def product_detail(
    product_id: str,
    request: Request,
    service_factory: Callable[[], ProductService] = Depends(get_service_factory),
    settings: Settings = Depends(get_settings),
):
    """상품 수정(PUT), 삭제(DELETE)"""
    event = await to_proxy_event(request, product_id)
    result = await run_in_threadpool(dispatch, event, service_factory, settings)
    return to_response(result)


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "Product Catalog API",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트 (Docker 헬스체크용)"""
    return {"status": "healthy"}
