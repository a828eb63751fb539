"""Label data model."""

from .base import WireModel


class Label(WireModel):
    """A personal label. Tasks reference labels by name, not by id."""

    id: str
    name: str
    color: str = "charcoal"
    order: int = 0
    is_favorite: bool = False
