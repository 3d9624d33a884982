from pydantic import BaseModel, ConfigDict


class SpeechRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str = "tts-1"
    input: str
    voice: str = "onyx"
    speed: float = 1.0
