from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

CategoryCode = Literal["OC", "BC", "BCM", "MBC", "SC", "SCA", "ST"]
CATEGORY_CODES: tuple[str, ...] = get_args(CategoryCode)


class Branch(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    branch_name: str
    cutoffs: dict[CategoryCode, float] = Field(default_factory=dict, alias="cutoffs_2024")

    @field_validator("cutoffs", mode="before")
    @classmethod
    def _drop_missing_cutoffs(cls, value: object) -> object:
        # A null cutoff means no seat was allotted for that category.
        if isinstance(value, dict):
            return {key: cutoff for key, cutoff in value.items() if cutoff is not None}
        return value

    @field_validator("cutoffs")
    @classmethod
    def _validate_cutoffs(cls, value: dict[str, float]) -> dict[str, float]:
        for code, cutoff in value.items():
            if cutoff < 0:
                raise ValueError(f"cutoff for {code} must be non-negative")
        return value

    def cutoff_for(self, category: str) -> float | None:
        return self.cutoffs.get(category)  # type: ignore[call-overload]


class College(BaseModel):
    model_config = ConfigDict(frozen=True)

    college_name: str
    address: str = ""
    branches: tuple[Branch, ...] = ()


class Catalog(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    colleges: tuple[College, ...] = Field(default=(), alias="tnea_colleges")

    def __len__(self) -> int:
        return len(self.colleges)

    @property
    def branch_count(self) -> int:
        return sum(len(college.branches) for college in self.colleges)
