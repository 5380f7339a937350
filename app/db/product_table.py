"""
DynamoDB 상품 테이블 접근 계층

products 테이블(파티션 키: productid)에 대한 쓰기, 수정, 삭제,
페이지네이션 스캔을 제공합니다.
"""

import logging
from decimal import Decimal
from typing import Any

from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

PRIMARY_KEY = "productid"


def to_dynamo_value(value: Any) -> Any:
    """DynamoDB는 float을 받지 않으므로 Decimal로 변환합니다."""
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class ProductTable:
    """상품 레코드를 DynamoDB 테이블에 저장/조회하는 클래스"""

    def __init__(self, table):
        """
        Args:
            table: boto3 DynamoDB Table 리소스
        """
        self.table = table

    @classmethod
    def from_resource(cls, dynamodb, table_name: str) -> "ProductTable":
        return cls(dynamodb.Table(table_name))

    def put_product(self, item: dict[str, Any]) -> None:
        """
        상품 레코드를 조건 없이 저장합니다.

        Args:
            item: 저장할 상품 레코드 (productid 포함)
        """
        self.table.put_item(Item={k: to_dynamo_value(v) for k, v in item.items()})

    def update_product(
        self, product_id: str, fields: dict[str, Any]
    ) -> dict[str, Any] | None:
        """
        기존 상품 레코드의 필드를 덮어씁니다.

        레코드가 없으면 새로 만들지 않도록 attribute_exists 조건을 사용합니다.

        Args:
            product_id: 상품 ID
            fields: 덮어쓸 필드 (productname, quantity, price, searchname)

        Returns:
            수정 후 레코드 (ALL_NEW), 레코드가 없으면 None
        """
        names = {}
        values = {}
        assignments = []
        for index, (name, value) in enumerate(fields.items()):
            names[f"#f{index}"] = name
            values[f":v{index}"] = to_dynamo_value(value)
            assignments.append(f"#f{index} = :v{index}")

        try:
            response = self.table.update_item(
                Key={PRIMARY_KEY: product_id},
                UpdateExpression="SET " + ", ".join(assignments),
                ConditionExpression=Attr(PRIMARY_KEY).exists(),
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
                ReturnValues="ALL_NEW",
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                return None
            raise

        return response.get("Attributes")

    def delete_product(self, product_id: str) -> dict[str, Any] | None:
        """
        상품 레코드를 삭제합니다.

        Returns:
            삭제 전 레코드 (ALL_OLD), 레코드가 없었으면 None
        """
        response = self.table.delete_item(
            Key={PRIMARY_KEY: product_id},
            ReturnValues="ALL_OLD",
        )
        return response.get("Attributes")

    def scan_products(
        self, owner: str, search: str | None = None
    ) -> list[dict[str, Any]]:
        """
        소유자(userId)가 일치하는 상품을 모두 스캔합니다.

        LastEvaluatedKey가 없어질 때까지 페이지를 이어서 읽고 결과를 합칩니다.
        search가 있으면 searchname에 대한 contains 조건을 추가합니다
        (대소문자 구분).

        Args:
            owner: 소유자 식별자
            search: 검색어 (선택)

        Returns:
            조건에 맞는 상품 레코드 리스트
        """
        filter_expression = Attr("userId").eq(owner)
        if search:
            filter_expression = filter_expression & Attr("searchname").contains(search)

        items: list[dict[str, Any]] = []
        scan_kwargs: dict[str, Any] = {"FilterExpression": filter_expression}
        while True:
            response = self.table.scan(**scan_kwargs)
            items.extend(response.get("Items", []))

            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            scan_kwargs["ExclusiveStartKey"] = last_key

        logger.debug("Scanned %d products for user %s", len(items), owner)
        return items
