"""
커스텀 예외 정의

라우터가 HTTP 응답으로 변환하는 예외 클래스들입니다.
여기에 없는 예외(boto3 ClientError 등)는 모두 500으로 처리됩니다.
"""


class ProductValidationException(Exception):
    """
    필수 입력값이 없거나 숫자로 해석할 수 없을 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Missing productname, quantity, or price in request body",
    ):
        self.message = message
        super().__init__(self.message)


class ProductNotFoundException(Exception):
    """
    상품을 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    status_code = 404

    def __init__(self, product_id: str, message: str = "Item not found"):
        self.product_id = product_id
        self.message = message
        super().__init__(self.message)


class MethodNotAllowedException(Exception):
    """
    지원하지 않는 HTTP 메서드로 요청했을 때 발생하는 예외

    HTTP Status Code: 405 Method Not Allowed
    """

    status_code = 405

    def __init__(self, method: str | None):
        self.method = method
        self.message = "Method Not Allowed"
        super().__init__(self.message)
