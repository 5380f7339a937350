"""
로깅 설정
"""

import logging

from app.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """
    app 패키지 로거의 레벨을 설정합니다.

    Lambda 런타임은 루트 로거에 자체 핸들러를 붙이므로,
    루트 핸들러가 없을 때(로컬 실행)에만 스트림 핸들러를 추가합니다.

    Args:
        settings: 애플리케이션 설정 (log_level 사용)

    Returns:
        설정된 "app" 로거
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)

    app_logger = logging.getLogger("app")
    app_logger.setLevel(settings.log_level.upper())
    return app_logger
