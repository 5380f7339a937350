"""
상품 관련 Pydantic 스키마

요청 본문 검증 모델과 DynamoDB에 저장되는 상품 레코드 모델을 정의합니다.
"""

import math
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def parse_leading_int(value: Any) -> int:
    """
    값의 앞부분을 정수로 해석합니다.

    Example:
        >>> parse_leading_int("3")
        3
        >>> parse_leading_int("3.7")
        3
        >>> parse_leading_int(5.9)
        5

    Raises:
        ValueError: 정수로 해석할 수 없는 경우 (bool, None, "abc" 등)
    """
    if isinstance(value, bool):
        raise ValueError("quantity must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError("quantity must be a finite number")
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    raise ValueError("quantity must be a number")


def parse_leading_float(value: Any) -> float:
    """
    값의 앞부분을 실수로 해석합니다.

    Example:
        >>> parse_leading_float("9.99")
        9.99
        >>> parse_leading_float("12.5 USD")
        12.5

    Raises:
        ValueError: 실수로 해석할 수 없거나 유한하지 않은 경우
    """
    if isinstance(value, bool):
        raise ValueError("price must be a number")
    if isinstance(value, (int, float)):
        parsed = float(value)
    elif isinstance(value, str) and (match := _LEADING_FLOAT.match(value)):
        parsed = float(match.group(1))
    else:
        raise ValueError("price must be a number")

    if not math.isfinite(parsed):
        raise ValueError("price must be a finite number")
    return parsed


class ProductWriteRequest(BaseModel):
    """
    상품 수정 요청 스키마 (PUT)

    quantity, price는 숫자 또는 숫자 문자열을 허용합니다.

    Example:
        {
            "productname": "Blue Mug",
            "quantity": 5,
            "price": 12.5
        }
    """

    model_config = ConfigDict(extra="ignore")

    productname: StrictStr = Field(
        ...,
        min_length=1,
        description="상품명",
        examples=["Blue Mug"],
    )
    quantity: int = Field(..., description="재고 수량", examples=[5])
    price: float = Field(..., description="상품 가격", examples=[12.5])

    @field_validator("quantity", mode="before")
    @classmethod
    def parse_quantity(cls, value: Any) -> int:
        return parse_leading_int(value)

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, value: Any) -> float:
        return parse_leading_float(value)

    @property
    def searchname(self) -> str:
        """검색용 소문자 상품명"""
        return self.productname.lower()


class ProductCreateRequest(ProductWriteRequest):
    """
    상품 생성 요청 스키마 (POST)

    Example:
        {
            "productname": "Red Mug",
            "quantity": "3",
            "price": "9.99",
            "user": "alice"
        }
    """

    user: str | None = Field(None, description="소유자 식별자", examples=["alice"])


class Product(BaseModel):
    """
    DynamoDB에 저장되는 상품 레코드

    DynamoDB가 돌려주는 Decimal 값은 int/float으로 변환됩니다.

    Example:
        {
            "productid": "5b1f0c1e-...",
            "productname": "Red Mug",
            "quantity": 3,
            "price": 9.99,
            "userId": "alice",
            "searchname": "red mug",
            "createdAt": "2025-01-22T10:30:00.000Z"
        }
    """

    model_config = ConfigDict(extra="ignore")

    productid: str = Field(..., description="상품 ID (UUID)")
    productname: str = Field(..., description="상품명")
    quantity: int = Field(..., description="재고 수량")
    price: float = Field(..., description="상품 가격")
    userId: str | None = Field(None, description="소유자 식별자")
    searchname: str = Field(..., description="소문자 상품명 (검색용)")
    createdAt: str | None = Field(None, description="생성 일시 (ISO-8601)")
