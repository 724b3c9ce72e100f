"""
Configuration Management for Canvas Insights

Loads configuration from ~/.canvas/config.json and environment variables.
"""

import os
import json
import logging
from pathlib import Path
from dataclasses import dataclass, field

from .schemas.export_config import ExportConfig, ExportFormat, TemplateType, Tone

logger = logging.getLogger("canvas.common.config")

# Default config paths
CONFIG_DIR = Path.home() / ".canvas"
CONFIG_PATH = CONFIG_DIR / "config.json"
LOGS_DIR = CONFIG_DIR / "logs"
DEFAULT_STORE_PATH = CONFIG_DIR / "boards.json"

VELOCITY_MODES = ("random", "fixed")


@dataclass
class StoreConfig:
    """Board store location"""
    path: str = str(DEFAULT_STORE_PATH)


@dataclass
class ExportDefaults:
    """Export options used when a request does not supply its own"""
    format: str = ExportFormat.EMAIL.value
    template: str = TemplateType.EXECUTIVE_SUMMARY.value
    include_metrics: bool = True
    include_decisions: bool = True
    include_action_items: bool = True
    include_risks: bool = True
    tone: str = Tone.FORMAL.value

    def to_export_config(self) -> ExportConfig:
        """Build a fresh ExportConfig, falling back to defaults on bad values"""
        try:
            export_format = ExportFormat(self.format)
        except ValueError:
            logger.warning("Unknown export format %r, using email", self.format)
            export_format = ExportFormat.EMAIL
        try:
            template = TemplateType(self.template)
        except ValueError:
            logger.warning("Unknown template %r, using executive_summary", self.template)
            template = TemplateType.EXECUTIVE_SUMMARY
        try:
            tone = Tone(self.tone)
        except ValueError:
            tone = Tone.FORMAL

        return ExportConfig(
            format=export_format,
            template=template,
            include_metrics=self.include_metrics,
            include_decisions=self.include_decisions,
            include_action_items=self.include_action_items,
            include_risks=self.include_risks,
            tone=tone,
        )


@dataclass
class ScorecardConfig:
    """Scorecard configuration"""
    velocity_mode: str = "random"  # "random" placeholder or "fixed" stub
    fixed_velocity_days: float = 2.0


@dataclass
class ServerConfig:
    """HTTP service configuration"""
    host: str = "127.0.0.1"
    port: int = 8090


@dataclass
class CanvasConfig:
    """Main Canvas Insights configuration"""
    store: StoreConfig = field(default_factory=StoreConfig)
    export: ExportDefaults = field(default_factory=ExportDefaults)
    scorecard: ScorecardConfig = field(default_factory=ScorecardConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


def _parse_store_config(data: dict) -> StoreConfig:
    """Parse store section from config dict"""
    store_data = data.get("store", {})
    return StoreConfig(
        path=store_data.get("path", str(DEFAULT_STORE_PATH)),
    )


def _parse_export_defaults(data: dict) -> ExportDefaults:
    """Parse export section from config dict"""
    export_data = data.get("export", {})
    return ExportDefaults(
        format=export_data.get("format", ExportFormat.EMAIL.value),
        template=export_data.get("template", TemplateType.EXECUTIVE_SUMMARY.value),
        include_metrics=export_data.get("include_metrics", True),
        include_decisions=export_data.get("include_decisions", True),
        include_action_items=export_data.get("include_action_items", True),
        include_risks=export_data.get("include_risks", True),
        tone=export_data.get("tone", Tone.FORMAL.value),
    )


def _parse_scorecard_config(data: dict) -> ScorecardConfig:
    """Parse scorecard section from config dict"""
    scorecard_data = data.get("scorecard", {})
    mode = scorecard_data.get("velocity_mode", "random")
    if mode not in VELOCITY_MODES:
        logger.warning("Unknown velocity_mode %r, using random", mode)
        mode = "random"
    return ScorecardConfig(
        velocity_mode=mode,
        fixed_velocity_days=scorecard_data.get("fixed_velocity_days", 2.0),
    )


def _parse_server_config(data: dict) -> ServerConfig:
    """Parse server section from config dict"""
    server_data = data.get("server", {})
    return ServerConfig(
        host=server_data.get("host", "127.0.0.1"),
        port=server_data.get("port", 8090),
    )


def load_config() -> CanvasConfig:
    """
    Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (~/.canvas/config.json)
    3. Default values
    """
    config = CanvasConfig()

    # Load from config file if exists
    if CONFIG_PATH.exists():
        try:
            with open(CONFIG_PATH) as f:
                data = json.load(f)

            config.store = _parse_store_config(data)
            config.export = _parse_export_defaults(data)
            config.scorecard = _parse_scorecard_config(data)
            config.server = _parse_server_config(data)
        except (json.JSONDecodeError, IOError, AttributeError) as e:
            logger.warning("Failed to load config file: %s", e)

    # Environment variable overrides
    if os.getenv("CANVAS_STORE_PATH"):
        config.store.path = os.getenv("CANVAS_STORE_PATH")

    if os.getenv("CANVAS_EXPORT_FORMAT"):
        config.export.format = os.getenv("CANVAS_EXPORT_FORMAT")
    if os.getenv("CANVAS_EXPORT_TEMPLATE"):
        config.export.template = os.getenv("CANVAS_EXPORT_TEMPLATE")
    if os.getenv("CANVAS_EXPORT_TONE"):
        config.export.tone = os.getenv("CANVAS_EXPORT_TONE")

    if os.getenv("CANVAS_VELOCITY_MODE") in VELOCITY_MODES:
        config.scorecard.velocity_mode = os.getenv("CANVAS_VELOCITY_MODE")
    if os.getenv("CANVAS_FIXED_VELOCITY_DAYS"):
        try:
            config.scorecard.fixed_velocity_days = float(os.getenv("CANVAS_FIXED_VELOCITY_DAYS"))
        except ValueError:
            logger.warning("Ignoring non-numeric CANVAS_FIXED_VELOCITY_DAYS")

    if os.getenv("CANVAS_HOST"):
        config.server.host = os.getenv("CANVAS_HOST")
    if os.getenv("CANVAS_PORT"):
        try:
            config.server.port = int(os.getenv("CANVAS_PORT"))
        except ValueError:
            logger.warning("Ignoring non-numeric CANVAS_PORT")

    return config


def save_config(config: CanvasConfig) -> None:
    """Save configuration to file"""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    data = {
        "store": {
            "path": config.store.path,
        },
        "export": {
            "format": config.export.format,
            "template": config.export.template,
            "include_metrics": config.export.include_metrics,
            "include_decisions": config.export.include_decisions,
            "include_action_items": config.export.include_action_items,
            "include_risks": config.export.include_risks,
            "tone": config.export.tone,
        },
        "scorecard": {
            "velocity_mode": config.scorecard.velocity_mode,
            "fixed_velocity_days": config.scorecard.fixed_velocity_days,
        },
        "server": {
            "host": config.server.host,
            "port": config.server.port,
        },
    }

    with open(CONFIG_PATH, "w") as f:
        json.dump(data, f, indent=2)

    CONFIG_PATH.chmod(0o600)


def ensure_directories() -> None:
    """Ensure required directories exist"""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
