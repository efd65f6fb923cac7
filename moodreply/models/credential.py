"""
Pydantic model for API credentials held in process memory.
"""
from pydantic import BaseModel, ConfigDict, SecretStr

MASK = "•" * 4
VISIBLE_SUFFIX = 4


class Credential(BaseModel):
    """A named secret bound to a provider family."""

    id: int
    display_name: str
    secret: SecretStr
    provider_family: str

    model_config = ConfigDict(frozen=True)

    @property
    def masked_secret(self) -> str:
        """Bullets followed by the last four characters of the secret."""
        value = self.secret.get_secret_value()
        if len(value) <= VISIBLE_SUFFIX:
            return MASK
        return f"{MASK}{value[-VISIBLE_SUFFIX:]}"
