from pydantic import BaseModel, ConfigDict, Field, field_validator

from taixiu_api.core.labels import normalize_label


class OutcomeRecord(BaseModel):
    """One finished round as published by the upstream history feed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    round_id: int = Field(alias="Phien")
    result: str = Field(alias="Ket_qua")  # 'tai' | 'xiu'
    dice_1: int = Field(alias="Xuc_xac_1", ge=1, le=6)
    dice_2: int = Field(alias="Xuc_xac_2", ge=1, le=6)
    dice_3: int = Field(alias="Xuc_xac_3", ge=1, le=6)
    total: int = Field(alias="Tong", ge=3, le=18)

    @field_validator("result", mode="before")
    @classmethod
    def _normalize_result(cls, v):
        return normalize_label(v)

    @property
    def dice(self) -> tuple[int, int, int]:
        return (self.dice_1, self.dice_2, self.dice_3)
