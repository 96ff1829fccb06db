"""TranscriptionClient — abstract base for speech-to-text backends."""
from abc import ABC, abstractmethod


class TranscriptionClient(ABC):
    @abstractmethod
    async def transcribe(self, audio: bytes, mime_type: str) -> str:
        """Convert raw audio bytes of the given media type to text. Raises on failure."""
        ...
