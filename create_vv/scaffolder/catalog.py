"""Static catalog of the templates bundled with create-vv."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from create_vv.errors import ScaffoldError


class TemplateRef(BaseModel):
    """One selectable template variant."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Unique key, also used in --template")
    display: str = Field(..., description="Label shown in the selection prompt")
    color: str = Field(default="white", description="Rich style for the label")


TEMPLATES: tuple[TemplateRef, ...] = (
    TemplateRef(name="vue-ts", display="TypeScript", color="blue"),
    TemplateRef(name="vue", display="JavaScript", color="yellow"),
)

TEMPLATE_NAMES: tuple[str, ...] = tuple(t.name for t in TEMPLATES)

# Files that cannot ship under their real name inside a published template.
RENAME_FILES: dict[str, str] = {
    "_gitignore": ".gitignore",
}


def find_template(name: str | None) -> TemplateRef | None:
    """Return the catalog entry called *name*, or ``None``."""
    for template in TEMPLATES:
        if template.name == name:
            return template
    return None


def get_template(name: str) -> TemplateRef:
    """Return the catalog entry called *name*.

    Raises:
        ScaffoldError: If no template has that name.
    """
    template = find_template(name)
    if template is None:
        raise ScaffoldError(
            f"Unknown template {name!r} (expected one of: {', '.join(TEMPLATE_NAMES)})"
        )
    return template
