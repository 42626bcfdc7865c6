"""create-vv configuration.

Typed settings for a scaffold run. All settings use Pydantic v2 models so
they are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from create_vv.scaffolder.catalog import TemplateRef


_BUNDLED_TEMPLATES_DIR = Path(__file__).parent / "templates"


class Config(BaseModel):
    """Global create-vv configuration.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and passed to the prompt flow and the generator.
    """

    default_target_dir: str = Field(
        default="vv-project",
        min_length=1,
        description="Directory used when no target directory is given",
    )
    templates_dir: Path = Field(
        default=_BUNDLED_TEMPLATES_DIR,
        description="Root directory holding the template-<name> trees",
    )
    manifest_name: str = Field(default="package.json")
    default_package_manager: str = Field(
        default="npm",
        min_length=1,
        description="Package manager assumed when none can be detected",
    )
    user_agent_env: str = Field(
        default="npm_config_user_agent",
        description="Environment variable carrying the package manager user agent",
    )

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def template_path(self, template: "TemplateRef") -> Path:
        """Directory of the bundled tree for *template*."""
        return self.templates_dir / f"template-{template.name}"

    def detected_user_agent(self) -> str | None:
        """Return the package manager user agent from the environment, if any."""
        return os.environ.get(self.user_agent_env) or None

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CREATE_VV_DEFAULT_DIR, CREATE_VV_TEMPLATES_DIR,
            CREATE_VV_PACKAGE_MANAGER.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("CREATE_VV_DEFAULT_DIR"):
            kwargs["default_target_dir"] = os.environ["CREATE_VV_DEFAULT_DIR"]
        if os.environ.get("CREATE_VV_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["CREATE_VV_TEMPLATES_DIR"])
        if os.environ.get("CREATE_VV_PACKAGE_MANAGER"):
            kwargs["default_package_manager"] = os.environ["CREATE_VV_PACKAGE_MANAGER"]
        return cls(**kwargs)
