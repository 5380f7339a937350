"""
AWS 클라이언트 연결 관리

boto3 클라이언트는 커넥션 풀을 내부에서 관리하므로 프로세스당 한 번만
생성해서 재사용합니다. 명시적인 close는 필요 없습니다.
"""

from functools import lru_cache

import boto3

from app.core.config import Settings, get_settings


def _client_kwargs(settings: Settings, endpoint_url: str | None) -> dict:
    kwargs = {}
    if settings.aws_region:
        kwargs["region_name"] = settings.aws_region
    if endpoint_url:
        kwargs["endpoint_url"] = endpoint_url
    return kwargs


def create_dynamodb_resource(settings: Settings):
    """
    DynamoDB 리소스 생성

    Args:
        settings: 애플리케이션 설정 객체

    Returns:
        boto3 DynamoDB ServiceResource
    """
    return boto3.resource(
        "dynamodb", **_client_kwargs(settings, settings.dynamodb_endpoint_url)
    )


def create_polly_client(settings: Settings):
    """
    Polly 클라이언트 생성

    Args:
        settings: 애플리케이션 설정 객체

    Returns:
        boto3 Polly 클라이언트
    """
    return boto3.client("polly", **_client_kwargs(settings, settings.polly_endpoint_url))


def create_s3_client(settings: Settings):
    """
    S3 클라이언트 생성

    Args:
        settings: 애플리케이션 설정 객체

    Returns:
        boto3 S3 클라이언트
    """
    return boto3.client("s3", **_client_kwargs(settings, settings.s3_endpoint_url))


@lru_cache
def get_dynamodb_resource():
    """프로세스 전역 DynamoDB 리소스"""
    return create_dynamodb_resource(get_settings())


@lru_cache
def get_polly_client():
    """프로세스 전역 Polly 클라이언트"""
    return create_polly_client(get_settings())


@lru_cache
def get_s3_client():
    """프로세스 전역 S3 클라이언트"""
    return create_s3_client(get_settings())
