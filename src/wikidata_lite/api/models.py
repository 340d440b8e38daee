from pydantic import BaseModel, ConfigDict


class ClientConfig(BaseModel):
    api_url: str
    user_agent: str
    timeout: float = 30.0

    model_config = ConfigDict(frozen=True)
