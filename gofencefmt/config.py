from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    gofmt: str = Field(
        default="gofmt", description="Name or path of the gofmt binary"
    )
    timeout: float = Field(
        default=10.0, gt=0, description="Seconds to wait for each gofmt run"
    )

    model_config = SettingsConfigDict(
        env_prefix="GOFENCEFMT_",
        extra="ignore",
    )
