"""비즈니스 로직 서비스."""

from app.services.audio_storage_service import AudioStorageService
from app.services.product_service import ProductService
from app.services.speech_service import SpeechService

__all__ = ["AudioStorageService", "ProductService", "SpeechService"]
