from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryStyle:
    color_key: str
    icon_key: str
