"""
pytest 픽스처 정의

DynamoDB, Polly, S3 대신 인메모리 가짜 객체를 사용합니다.
"""

import io
import json

import jwt
import pytest

from app.core.config import Settings
from app.services.product_service import ProductService


class FakeProductTable:
    """ProductTable과 같은 인터페이스를 가진 인메모리 테이블"""

    def __init__(self):
        self.items: dict[str, dict] = {}
        self.scan_calls = 0

    def put_product(self, item):
        self.items[item["productid"]] = dict(item)

    def update_product(self, product_id, fields):
        if product_id not in self.items:
            return None
        self.items[product_id].update(fields)
        return dict(self.items[product_id])

    def delete_product(self, product_id):
        return self.items.pop(product_id, None)

    def scan_products(self, owner, search=None):
        self.scan_calls += 1
        return [
            dict(item)
            for item in self.items.values()
            if item.get("userId") == owner
            and (not search or search in item.get("searchname", ""))
        ]


class FakeSpeechService:
    """합성 요청을 기록하고 텍스트를 바이트로 돌려주는 가짜 Polly"""

    def __init__(self):
        self.texts: list[str] = []
        self.error: Exception | None = None

    def synthesize(self, text):
        if self.error:
            raise self.error
        self.texts.append(text)
        return io.BytesIO(f"audio:{text}".encode("utf-8"))


class FakeAudioStorage:
    """업로드된 오디오를 키별로 보관하는 가짜 S3"""

    def __init__(self):
        self.objects: dict[str, bytes] = {}

    def upload(self, product_id, audio_stream):
        key = f"{product_id}.mp3"
        self.objects[key] = audio_stream.read()
        return key


@pytest.fixture(scope="session")
def settings():
    """테스트용 설정 객체 픽스처"""
    return Settings(
        table_name="products-test",
        audio_bucket="test-audio-bucket",
        aws_region="us-east-1",
        log_level="DEBUG",
    )


@pytest.fixture
def product_table():
    return FakeProductTable()


@pytest.fixture
def speech():
    return FakeSpeechService()


@pytest.fixture
def audio_storage():
    return FakeAudioStorage()


@pytest.fixture
def product_service(product_table, speech, audio_storage):
    """가짜 저장소로 구성한 ProductService"""
    return ProductService(
        table=product_table, speech=speech, audio_storage=audio_storage
    )


def make_token(claims: dict) -> str:
    """테스트용 JWT 생성 (서명 키는 검증되지 않음)"""
    return jwt.encode(claims, "any-secret-key-for-tests-only-32b", algorithm="HS256")


def make_event(
    method: str,
    body: dict | str | None = None,
    product_id: str | None = None,
    query: dict | None = None,
    headers: dict | None = None,
) -> dict:
    """API Gateway 프록시 이벤트 생성"""
    if isinstance(body, dict):
        body = json.dumps(body)
    return {
        "httpMethod": method,
        "pathParameters": {"id": product_id} if product_id else None,
        "queryStringParameters": query,
        "headers": headers or {},
        "body": body,
    }


@pytest.fixture
def auth_headers():
    """alice@example.com 토큰을 포함한 헤더"""
    token = make_token({"email": "alice@example.com"})
    return {"Authorization": f"Bearer {token}"}
