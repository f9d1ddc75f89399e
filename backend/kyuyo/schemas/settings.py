from pydantic import BaseModel
from typing import Literal

Theme = Literal["light", "dark"]


class ThemeRead(BaseModel):
    theme: Theme


class ThemeUpdate(BaseModel):
    theme: str


class NavigationItem(BaseModel):
    id: int
    path: str
    label: str
    icon_name: str
    sort_order: int
    is_active: bool

    model_config = {
        "from_attributes": True,
    }
