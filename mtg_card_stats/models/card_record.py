from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from mtg_card_stats.classify import classify


class CardRecord(BaseModel):
    """
    One <card> entry from the card document.

    color_category is derived from colors when the record is built and is
    never taken from the caller.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    colors: str = ""
    supertype: str = ""
    color_category: str = ""

    @model_validator(mode="before")
    @classmethod
    def _derive_color_category(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            for key in ("name", "colors", "supertype"):
                if data.get(key) is None:
                    data[key] = ""
            data["color_category"] = classify(data["colors"])
        return data
