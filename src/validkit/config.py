from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .validations.format import ADDRESS_VERSIONS, CARD_MAX_DIGITS, CARD_MIN_DIGITS

# ---- Validator tuning (change accepted shapes without code changes) ----
class CreditCardConfig(BaseModel):
    min_digits: int = Field(default=CARD_MIN_DIGITS, ge=1)
    max_digits: int = Field(default=CARD_MAX_DIGITS, ge=1)

    @model_validator(mode="after")
    def _bounds_ordered(self) -> "CreditCardConfig":
        if self.min_digits > self.max_digits:
            raise ValueError("min_digits must not exceed max_digits")
        return self

class BitcoinAddressConfig(BaseModel):
    # 0 = mainnet P2PKH, 111 (0x6f) = testnet P2PKH
    versions: List[int] = Field(default_factory=lambda: list(ADDRESS_VERSIONS))

    @field_validator("versions")
    @classmethod
    def _byte_values(cls, v: List[int]) -> List[int]:
        if not v or any(not 0 <= b <= 255 for b in v):
            raise ValueError("versions must be a non-empty list of byte values (0-255)")
        return v

class LoggingConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    json_output: bool = Field(default=True, alias="json")  # False -> human-readable console logs

# ---- Root config ----
class ValidkitConfig(BaseModel):
    credit_card: CreditCardConfig = Field(default_factory=CreditCardConfig)
    bitcoin_address: BitcoinAddressConfig = Field(default_factory=BitcoinAddressConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

# ---- Loader ----
def load_config(path: Optional[Path]) -> ValidkitConfig:
    if not path:
        return ValidkitConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping, got {type(data).__name__}")
    return ValidkitConfig(**data)
