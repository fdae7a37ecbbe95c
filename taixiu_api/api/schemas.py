from pydantic import BaseModel, field_serializer

from taixiu_api.db.history import HistoryEntry


def camelize(obj):
    """Recursively rename snake_case dict keys to camelCase."""
    if isinstance(obj, dict):
        out = {}
        for k, v in obj.items():
            head, *rest = k.split("_")
            out[head + "".join(w.title() for w in rest)] = camelize(v)
        return out
    if isinstance(obj, list):
        return [camelize(v) for v in obj]
    return obj


class PredictOut(BaseModel):
    phien: str
    du_doan: str
    ti_le: str
    id: str


class HistoryOut(BaseModel):
    type: str
    history: list[HistoryEntry]
    total: int


class AnalysisOut(BaseModel):
    prediction: str
    confidence: int
    factors: list[str]
    analysis: dict

    # findings go out with camelCase keys (isAlternating, pairCount, ...)
    @field_serializer("analysis")
    def _camel_analysis(self, analysis: dict) -> dict:
        return camelize(analysis)


class ErrorOut(BaseModel):
    error: str
