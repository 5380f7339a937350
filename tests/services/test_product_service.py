"""Tests for ProductService."""

from datetime import datetime

import pytest
from botocore.exceptions import ClientError

from app.core.exceptions import ProductNotFoundException
from app.schemas.product import ProductCreateRequest, ProductWriteRequest


def create_request(**overrides) -> ProductCreateRequest:
    body = {"productname": "Red Mug", "quantity": "3", "price": "9.99", "user": "alice"}
    body.update(overrides)
    return ProductCreateRequest.model_validate(body)


class TestCreateProduct:
    """Test: 상품 생성 테스트"""

    def test_create_product_success(self, product_service, product_table, audio_storage):
        """Test: 상품 생성 성공 (DB 저장 + 오디오 업로드)"""
        product = product_service.create_product(create_request())

        assert product.productid
        assert product.productname == "Red Mug"
        assert product.searchname == "red mug"
        assert product.quantity == 3
        assert product.price == 9.99
        assert product.userId == "alice"

        # createdAt은 UTC ISO-8601 (밀리초, Z)
        assert product.createdAt.endswith("Z")
        datetime.strptime(product.createdAt, "%Y-%m-%dT%H:%M:%S.%fZ")

        # DB 검증
        assert product_table.items[product.productid] == product.model_dump()

        # 오디오 검증
        assert audio_storage.objects[f"{product.productid}.mp3"] == b"audio:Red Mug"

    def test_create_product_unique_ids(self, product_service):
        """Test: 생성할 때마다 다른 productid"""
        first = product_service.create_product(create_request())
        second = product_service.create_product(create_request())

        assert first.productid != second.productid

    def test_create_product_speech_failure_keeps_record(
        self, product_service, product_table, speech, audio_storage
    ):
        """Test: 음성 합성 실패 시 예외 전파, 저장된 레코드는 롤백하지 않음"""
        speech.error = ClientError(
            {"Error": {"Code": "ServiceFailureException", "Message": "polly down"}},
            "SynthesizeSpeech",
        )

        with pytest.raises(ClientError):
            product_service.create_product(create_request())

        assert len(product_table.items) == 1
        assert audio_storage.objects == {}


class TestUpdateProduct:
    """Test: 상품 수정 테스트"""

    def test_update_product_success(self, product_service, audio_storage):
        """Test: productid, userId, createdAt은 유지되고 나머지는 변경"""
        created = product_service.create_product(create_request())

        updated = product_service.update_product(
            created.productid,
            ProductWriteRequest(productname="Blue Mug", quantity=5, price=12.5),
        )

        assert updated.productid == created.productid
        assert updated.userId == created.userId
        assert updated.createdAt == created.createdAt
        assert updated.productname == "Blue Mug"
        assert updated.searchname == "blue mug"
        assert updated.quantity == 5
        assert updated.price == 12.5

        # 같은 키의 오디오를 덮어씀
        assert audio_storage.objects[f"{created.productid}.mp3"] == b"audio:Blue Mug"
        assert len(audio_storage.objects) == 1

    def test_update_product_not_found(self, product_service, speech):
        """Test: 없는 상품 수정 시 예외, 오디오 생성 안 함"""
        with pytest.raises(ProductNotFoundException) as exc_info:
            product_service.update_product(
                "doesnotexist",
                ProductWriteRequest(productname="Blue Mug", quantity=5, price=12.5),
            )

        assert exc_info.value.message == "Item not found for update (or issue updating)"
        assert speech.texts == []


class TestDeleteProduct:
    """Test: 상품 삭제 테스트"""

    def test_delete_product_keeps_audio(self, product_service, product_table, audio_storage):
        """Test: 삭제 후 레코드는 없고 오디오는 남아 있음"""
        created = product_service.create_product(create_request())

        deleted = product_service.delete_product(created.productid)

        assert deleted["productid"] == created.productid
        assert created.productid not in product_table.items
        assert f"{created.productid}.mp3" in audio_storage.objects

    def test_delete_product_not_found(self, product_service):
        with pytest.raises(ProductNotFoundException) as exc_info:
            product_service.delete_product("doesnotexist")

        assert exc_info.value.message == "Item not found for deletion"


class TestListProducts:
    """Test: 상품 목록 조회 테스트"""

    def test_list_products_by_owner(self, product_service):
        mine = product_service.create_product(create_request())
        product_service.create_product(create_request(user="bob"))

        products = product_service.list_products("alice")

        assert [p.productid for p in products] == [mine.productid]

    def test_list_products_search_is_case_sensitive(self, product_service):
        """Test: searchname 기준 대소문자 구분 검색"""
        product_service.create_product(create_request(productname="Red Mug"))
        product_service.create_product(create_request(productname="Green Plate"))

        assert [p.productname for p in product_service.list_products("alice", "mug")] == [
            "Red Mug"
        ]
        assert product_service.list_products("alice", "Mug") == []

    def test_list_products_without_identity(self, product_service, product_table):
        """Test: 사용자 식별자가 없으면 스캔 없이 빈 리스트"""
        product_service.create_product(create_request(user=None))

        assert product_service.list_products(None) == []
        assert product_table.scan_calls == 0
