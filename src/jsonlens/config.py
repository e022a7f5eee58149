"""
Global Configuration and Projection Defaults.

This module centralizes the literal defaults every projector relies on.
It protects the traversal from pathological nesting and keeps value text
short enough to render on a single line.

Defaults can be overridden per project with a `.jsonlens.yaml` file:

    traversal:
      max_depth: 10
      value_text_limit: 50
    outline:
      string_limit: 50
      string_cut: 47
    narrative:
      max_depth: null
    graph:
      style: network
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# --- Safety Limits ---
# Graph and outline traversal stops descending below this depth (root = 0)
MAX_TRAVERSAL_DEPTH = 10

# Scalar text carried on visit records and graph labels is cut here (no ellipsis)
VALUE_TEXT_LIMIT = 50

# --- Outline ---
# Quoted strings longer than the limit are cut and suffixed with an ellipsis
OUTLINE_STRING_LIMIT = 50
OUTLINE_STRING_CUT = 47
ELLIPSIS = "..."

# --- Narrative ---
# The narrative is textual and cheap, so it descends without a ceiling
NARRATIVE_MAX_DEPTH: Optional[int] = None
NARRATIVE_INDENT = "  "

# --- Table ---
PREVIEW_ENTRY_LIMIT = 3
PREVIEW_VALUE_LIMIT = 15
MISSING_CELL = "-"

# --- Graph ---
DEFAULT_GRAPH_STYLE = "network"

CONFIG_FILENAME = ".jsonlens.yaml"


class TraversalSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    max_depth: Optional[int] = MAX_TRAVERSAL_DEPTH
    value_text_limit: int = VALUE_TEXT_LIMIT


class OutlineSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    string_limit: int = OUTLINE_STRING_LIMIT
    string_cut: int = OUTLINE_STRING_CUT


class NarrativeSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    max_depth: Optional[int] = NARRATIVE_MAX_DEPTH
    truncate: Optional[int] = None


class GraphSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    style: str = DEFAULT_GRAPH_STYLE


class LensConfig(BaseModel):
    """
    Bundled projection settings.

    Every field defaults to the module constants above, so an empty
    config behaves exactly like the hard-coded defaults.
    """
    model_config = ConfigDict(extra="ignore")

    traversal: TraversalSettings = Field(default_factory=TraversalSettings)
    outline: OutlineSettings = Field(default_factory=OutlineSettings)
    narrative: NarrativeSettings = Field(default_factory=NarrativeSettings)
    graph: GraphSettings = Field(default_factory=GraphSettings)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LensConfig":
        return cls.model_validate(data or {})

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "LensConfig":
        """
        Load settings from a YAML file.

        A missing file yields the defaults. A file that cannot be read or
        parsed is reported and also yields the defaults.
        """
        config_path = Path(path) if path else Path(CONFIG_FILENAME)
        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to read {config_path}: {e}")
            return cls()

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {config_path}: expected a mapping at top level")
            return cls()

        return cls.from_dict(data)
