"""상품 관리 서비스."""

import logging
import uuid
from datetime import datetime, timezone

from app.core.exceptions import ProductNotFoundException
from app.db.product_table import ProductTable
from app.schemas.product import Product, ProductCreateRequest, ProductWriteRequest
from app.services.audio_storage_service import AudioStorageService
from app.services.speech_service import SpeechService

logger = logging.getLogger(__name__)


def utc_now_iso() -> str:
    """현재 UTC 시각을 밀리초 단위 ISO-8601 문자열로 반환합니다 (예: 2025-01-22T10:30:00.000Z)."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ProductService:
    """상품 조회, 생성, 수정, 삭제 및 상품명 오디오 생성 서비스."""

    def __init__(
        self,
        table: ProductTable,
        speech: SpeechService,
        audio_storage: AudioStorageService,
    ):
        self.table = table
        self.speech = speech
        self.audio_storage = audio_storage

    def list_products(self, owner: str | None, search: str | None = None) -> list[Product]:
        """
        소유자의 상품 목록을 조회합니다.

        Args:
            owner: 토큰에서 추출한 사용자 식별자
            search: searchname에 포함되어야 하는 검색어 (대소문자 구분, 선택)

        Returns:
            Product 리스트. owner가 없으면 스캔하지 않고 빈 리스트
        """
        if not owner:
            logger.warning("No user identity in request; returning no products.")
            return []

        if search:
            logger.info('Filtering products for user: %s with search term: "%s"', owner, search)
        else:
            logger.info("Filtering products for user: %s (no search term)", owner)

        items = self.table.scan_products(owner, search)
        return [Product.model_validate(item) for item in items]

    def create_product(self, request: ProductCreateRequest) -> Product:
        """
        상품을 생성하고 상품명 오디오를 S3에 저장합니다.

        DB 저장 후 음성 합성/업로드가 실패해도 레코드는 롤백하지 않습니다.
        예외는 그대로 전파되어 500 응답이 됩니다.

        Args:
            request: 검증된 상품 생성 요청

        Returns:
            생성된 Product
        """
        product = Product(
            productid=str(uuid.uuid4()),
            productname=request.productname,
            quantity=request.quantity,
            price=request.price,
            userId=request.user,
            searchname=request.searchname,
            createdAt=utc_now_iso(),
        )
        self.table.put_product(product.model_dump(exclude_none=True))

        self.store_audio(product.productid, product.productname)
        return product

    def update_product(self, product_id: str, request: ProductWriteRequest) -> Product:
        """
        상품명, 수량, 가격을 수정하고 오디오를 다시 생성합니다.

        productid, userId, createdAt은 변경하지 않습니다.

        Raises:
            ProductNotFoundException: 상품이 없는 경우
        """
        attributes = self.table.update_product(
            product_id,
            {
                "productname": request.productname,
                "quantity": request.quantity,
                "price": request.price,
                "searchname": request.searchname,
            },
        )
        if not attributes:
            raise ProductNotFoundException(
                product_id, "Item not found for update (or issue updating)"
            )

        self.store_audio(product_id, request.productname)
        return Product.model_validate(attributes)

    def delete_product(self, product_id: str) -> dict:
        """
        상품을 삭제합니다. S3의 오디오 파일은 삭제하지 않습니다.

        Returns:
            삭제 전 레코드

        Raises:
            ProductNotFoundException: 상품이 없는 경우
        """
        attributes = self.table.delete_product(product_id)
        if not attributes:
            raise ProductNotFoundException(product_id, "Item not found for deletion")
        return attributes

    def store_audio(self, product_id: str, productname: str) -> str:
        """상품명을 합성해서 "<productid>.mp3"로 업로드합니다."""
        audio_stream = self.speech.synthesize(productname)
        return self.audio_storage.upload(product_id, audio_stream)
