from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError, model_validator


class FitConfig(BaseModel):
    data: str | None = Field(
        default=None, description="Path to a CSV of observations; embedded sample when omitted"
    )
    degree: int = Field(1, ge=0, description="Degree of the fitted polynomial")
    lam: float | None = Field(
        default=None,
        ge=0.0,
        description="Ridge penalty on non-intercept coefficients; ordinary least squares when omitted",
    )
    x_col: int = Field(0, ge=0, description="Zero-based column index of x")
    y_col: int = Field(1, ge=0, description="Zero-based column index of y")
    delimiter: str = Field(",", min_length=1, max_length=1, description="CSV field delimiter")
    skip_header: bool = Field(False, description="Drop the first record of the CSV")
    precision: int = Field(4, ge=0, le=12, description="Decimals when printing numbers")
    evaluate_at: list[float] = Field(
        default_factory=list, description="Points at which to evaluate the fitted polynomial"
    )
    metrics: bool = Field(False, description="Report mae/rmse/r2 on the training data")
    plot: str | None = Field(default=None, description="Optional path for a PNG plot of the fit")

    @model_validator(mode="after")
    def distinct_columns(self) -> FitConfig:
        if self.x_col == self.y_col:
            raise ValueError("x_col and y_col must differ")
        return self

    @classmethod
    def json_schema(cls) -> dict:
        return cls.model_json_schema()


def validate_config_payload(payload: dict) -> FitConfig:
    try:
        return FitConfig.model_validate(payload)
    except ValidationError as e:
        # Raise a ValueError with concise message suitable for CLI output
        raise ValueError(e) from e
