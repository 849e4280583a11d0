"""Referee configuration models, discovery and YAML loading."""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import InvalidConfig

logger = logging.getLogger(__name__)


class EmphasisConfig(BaseModel):
    """Emphasis factors applied to normalized priority weights.

    Keyed by the raw 1-5 priority value. A priority rated 5 gets three
    times the emphasis of one rated 1.
    """
    very_low: float = Field(0.5, description="Factor for priority 1")
    low: float = Field(0.8, description="Factor for priority 2")
    medium: float = Field(1.0, description="Factor for priority 3")
    high: float = Field(1.2, description="Factor for priority 4")
    very_high: float = Field(1.5, description="Factor for priority 5")

    def factor_for(self, priority: float) -> float:
        """Return the emphasis factor for a raw priority value."""
        return {
            1: self.very_low,
            2: self.low,
            3: self.medium,
            4: self.high,
            5: self.very_high,
        }.get(priority, 1.0)


class ContextAdjustmentsConfig(BaseModel):
    """Score deltas applied for situational constraints."""
    low_budget_cost: float = Field(10, description="Cost bonus when budget is low")
    high_budget_performance: float = Field(5, description="Performance bonus when budget is high")
    immediate_timeline_learning_curve: float = Field(
        15,
        description="Learning curve bonus when the timeline is immediate"
    )
    long_timeline_scalability: float = Field(10, description="Scalability bonus for long timelines")
    junior_learning_curve: float = Field(10, description="Learning curve bonus for junior teams")
    junior_maintainability: float = Field(5, description="Maintainability bonus for junior teams")
    senior_performance: float = Field(5, description="Performance bonus for senior teams")
    experience_learning_curve: float = Field(
        20,
        description="Learning curve bonus when the team already knows the option"
    )
    experience_maintainability: float = Field(
        10,
        description="Maintainability bonus when the team already knows the option"
    )
    high_scale_users: int = Field(100000, description="User count above which scale bonuses apply")
    high_scale_scalability: float = Field(15, description="Scalability bonus at high scale")
    high_scale_performance: float = Field(10, description="Performance bonus at high scale")


class TradeOffConfig(BaseModel):
    """Thresholds for compromise detection and narrative generation."""
    compromise_gap: float = Field(
        20.0,
        description="Points an option must trail the best other option by to count as a compromise"
    )
    high_impact_threshold: float = Field(0.15, description="Impact above which a compromise is high")
    medium_impact_threshold: float = Field(0.08, description="Impact above which a compromise is medium")
    key_difference_gap: float = Field(
        15.0,
        description="Minimum criterion gap between the top two options to call it a key difference"
    )


class ConfidenceConfig(BaseModel):
    """Parameters of the recommendation confidence estimate."""
    large_gap: float = Field(20.0, description="Score gap for very high base confidence")
    medium_gap: float = Field(10.0, description="Score gap for high base confidence")
    small_gap: float = Field(5.0, description="Score gap for moderate base confidence")
    large_gap_confidence: float = Field(0.9)
    medium_gap_confidence: float = Field(0.75)
    small_gap_confidence: float = Field(0.6)
    close_call_confidence: float = Field(0.4)
    single_option_confidence: float = Field(0.5)
    alignment_factor: float = Field(0.2, description="Multiplier for (alignment - 0.5)")
    consistency_target: float = Field(
        20.0,
        description="Standard deviation below which the top option earns a consistency bonus"
    )
    max_consistency_bonus: float = Field(0.2)
    minimum: float = Field(0.1, description="Confidence floor")
    maximum: float = Field(1.0, description="Confidence ceiling")
    low_confidence_warning: float = Field(
        0.6,
        description="Confidence below which the recommendation carries a warning"
    )


class ScenarioConfig(BaseModel):
    """Configuration for alternative scenario generation."""
    max_scenarios: int = Field(4, description="Maximum number of alternative scenarios")


class RefereeConfig(BaseModel):
    """Complete configuration for the technical referee."""
    emphasis: EmphasisConfig = Field(default_factory=EmphasisConfig)
    context_adjustments: ContextAdjustmentsConfig = Field(default_factory=ContextAdjustmentsConfig)
    trade_offs: TradeOffConfig = Field(default_factory=TradeOffConfig)
    confidence: ConfidenceConfig = Field(default_factory=ConfidenceConfig)
    scenarios: ScenarioConfig = Field(default_factory=ScenarioConfig)


CONFIG_ENV_VAR = "TECHNICAL_REFEREE_CONFIG"
LOCAL_CONFIG_NAMES = ("referee-config.yaml", "referee-config.yml")

CONFIG_HEADER = f"""# Technical Referee Configuration
# ===============================
#
# Every key is optional; anything left out keeps its default.
#
# The referee reads the first file it finds:
#   1. the file named by {CONFIG_ENV_VAR}
#   2. ./{LOCAL_CONFIG_NAMES[0]} or ./{LOCAL_CONFIG_NAMES[1]}
#   3. ~/.config/technical-referee/config.yaml
"""


def user_config_path() -> Path:
    return Path.home() / ".config" / "technical-referee" / "config.yaml"


def config_search_paths() -> list[Path]:
    """Candidate config locations, highest priority first."""
    paths = []
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        paths.append(Path(env_path))
    paths.extend(Path(name) for name in LOCAL_CONFIG_NAMES)
    paths.append(user_config_path())
    return paths


def find_config_file() -> Optional[Path]:
    """Return the first existing config file, or None."""
    for path in config_search_paths():
        if path.exists():
            return path
    return None


def load_config(path: Path) -> RefereeConfig:
    """Read a RefereeConfig from a YAML file.

    Raises:
        InvalidConfig: The file is not YAML, not a mapping, or holds values
            the config models reject.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfig(f"Config file {path} is not valid YAML: {e}", path=path) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidConfig(f"Config file {path} must contain a mapping", path=path)

    try:
        config = RefereeConfig.model_validate(data)
    except ValidationError as e:
        issues = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise InvalidConfig(
            f"Config file {path} is invalid: {'; '.join(issues)}",
            path=path,
            issues=issues,
        ) from e

    logger.debug("Loaded referee config from %s", path)
    return config


def resolve_config(path: Optional[Path] = None) -> RefereeConfig:
    """Config from an explicit path, else a discovered file, else defaults."""
    path = path or find_config_file()
    if path is None:
        return RefereeConfig()
    return load_config(path)


def render_default_config() -> str:
    """Default configuration as commented YAML.

    Each section is introduced by its model's summary line and each key
    by its field description, where one exists.
    """
    config = RefereeConfig()
    lines = [CONFIG_HEADER]

    for section_name in RefereeConfig.model_fields:
        section = getattr(config, section_name)
        summary = (type(section).__doc__ or "").strip().splitlines()
        if summary:
            lines.append(f"# {summary[0]}")
        lines.append(f"{section_name}:")

        for key, field in type(section).model_fields.items():
            if field.description:
                lines.append(f"  # {field.description}")
            value = yaml.safe_dump({key: getattr(section, key)}, default_flow_style=False)
            lines.append(f"  {value.strip()}")
        lines.append("")

    return "\n".join(lines)


def write_default_config(path: Path, force: bool = False) -> None:
    """Write the default configuration to path.

    Raises:
        FileExistsError: path exists and force is False.
    """
    if path.exists() and not force:
        raise FileExistsError(f"Config file already exists: {path}")

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_default_config())
