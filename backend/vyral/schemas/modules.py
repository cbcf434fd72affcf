"""Module Schemas — public shape of a navigation module card."""

from pydantic import BaseModel

from vyral.core.module_catalog import ModuleCard


class ModuleCardResponse(BaseModel):
    id: str
    key: str
    module_key: str
    title: str
    description: str
    long_description: str = ""
    icon: str
    route_name: str
    action_label: str
    action_copy: str = ""

    @classmethod
    def from_card(cls, card: ModuleCard) -> "ModuleCardResponse":
        return cls(**card.as_dict())
