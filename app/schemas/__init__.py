"""
Pydantic 스키마 모듈
"""

from app.schemas.product import (
    Product,
    ProductCreateRequest,
    ProductWriteRequest,
)

__all__ = [
    "Product",
    "ProductCreateRequest",
    "ProductWriteRequest",
]
