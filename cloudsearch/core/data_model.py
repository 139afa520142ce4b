__all__ = ["DataModel", "DataModelField"]

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


class DataModel(BaseModel):
    """Data model."""

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        extra="ignore",
        populate_by_name=True,
    )

    def to_dict(
        self,
        exclude_none: bool = False,
        by_alias: bool = False,
    ) -> dict[str, Any]:
        return self.model_dump(
            mode="json",
            exclude_none=exclude_none,
            by_alias=by_alias,
        )

    @classmethod
    def from_dict(cls, obj: dict | None) -> Self:
        return cls.model_validate(obj)


def DataModelField(
    alias: str | None = None,
    exclude: bool | None = None,
    **kwargs,
) -> Any:
    return Field(
        alias=alias,
        exclude=exclude,
        **kwargs,
    )
