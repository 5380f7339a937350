"""음성 합성(Polly) 서비스."""

import logging
from typing import BinaryIO

from app.core.config import Settings

logger = logging.getLogger(__name__)


class SpeechService:
    """상품명을 음성으로 합성하는 서비스."""

    def __init__(self, polly_client, settings: Settings):
        self.polly = polly_client
        self.settings = settings

    def synthesize(self, text: str) -> BinaryIO:
        """
        텍스트를 음성으로 합성합니다.

        Args:
            text: 합성할 텍스트 (상품명)

        Returns:
            오디오 바이트 스트림 (botocore StreamingBody)
        """
        request = {
            "OutputFormat": self.settings.audio_format,
            "Text": text,
            "VoiceId": self.settings.voice_id,
        }
        logger.info("Synthesizing speech: %s", request)
        response = self.polly.synthesize_speech(**request)
        return response["AudioStream"]
