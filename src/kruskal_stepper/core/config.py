"""Configuration management for kruskal-stepper."""

from pathlib import Path
import json

from pydantic import BaseModel, Field


class PlaybackConfig(BaseModel):
    """Configuration for auto-play pacing."""

    delay_ms: int = Field(default=1500, ge=0, description="Delay between auto-play steps (ms)")
    max_steps: int = Field(default=1000, ge=1, description="Safety cap for unattended runs")


class DisplayConfig(BaseModel):
    """Configuration for terminal rendering."""

    show_edges_table: bool = Field(default=True, description="Render the edge table each step")
    show_components: bool = Field(default=False, description="Render current components")


class Config(BaseModel):
    """Main configuration for kruskal-stepper."""

    playback: PlaybackConfig = Field(default_factory=PlaybackConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    graph_file: Path | None = Field(default=None, description="Default graph JSON file")
    verbose: bool = Field(default=False, description="Enable verbose logging")

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a JSON file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(), f, indent=2, default=str)

    @classmethod
    def get_default(cls) -> "Config":
        """Get default configuration."""
        return cls()


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return default.

    Args:
        config_path: Path to configuration file. If None, the default
            locations are searched and the defaults used when none exists.

    Returns:
        Config object
    """
    if config_path is None:
        default_locations = [
            Path.home() / ".config" / "kruskal-stepper" / "config.json",
            Path.cwd() / "kruskal-stepper.json",
        ]

        for location in default_locations:
            if location.exists():
                return Config.load_from_file(location)

        return Config.get_default()

    return Config.load_from_file(config_path)
