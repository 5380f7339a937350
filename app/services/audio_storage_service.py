"""합성된 오디오를 S3에 저장하는 서비스."""

import logging
from typing import BinaryIO

from app.core.config import Settings

logger = logging.getLogger(__name__)


class AudioStorageService:
    """상품 오디오 파일 업로드 서비스."""

    def __init__(self, s3_client, settings: Settings):
        self.s3 = s3_client
        self.settings = settings

    def upload(self, product_id: str, audio_stream: BinaryIO) -> str:
        """
        오디오 스트림을 "<productid>.mp3" 키로 업로드합니다.

        같은 키가 있으면 덮어씁니다. upload_fileobj는 큰 스트림을
        멀티파트로 나누어 전송합니다.

        Args:
            product_id: 상품 ID
            audio_stream: 읽기 가능한 오디오 스트림

        Returns:
            업로드된 S3 객체 키
        """
        key = self.settings.audio_key(product_id)
        try:
            self.s3.upload_fileobj(
                audio_stream,
                self.settings.audio_bucket,
                key,
                ExtraArgs={"ContentType": self.settings.audio_content_type},
            )
        finally:
            close = getattr(audio_stream, "close", None)
            if close is not None:
                close()

        logger.info("Uploaded audio to s3://%s/%s", self.settings.audio_bucket, key)
        return key
