"""Core panel services: config, logging, metadata, tinting and widget builders."""

from .config import AppConfig, DiagnosticsConfig, LabelConfig, TintConfig, load_config, save_config
from .controller import PanelController
from .icon_builder import PanelIconBuilder
from .label_builder import PanelLabelBuilder
from .metadata import LabelRole, LabelType, PlaybackStatus, PlayerMetadata, PlayerState
from .panel import IconHandle, IconState, Panel
from .tinter import tint_labels

__all__ = [
    "AppConfig",
    "DiagnosticsConfig",
    "IconHandle",
    "IconState",
    "LabelConfig",
    "LabelRole",
    "LabelType",
    "Panel",
    "PanelController",
    "PanelIconBuilder",
    "PanelLabelBuilder",
    "PlaybackStatus",
    "PlayerMetadata",
    "PlayerState",
    "TintConfig",
    "load_config",
    "save_config",
    "tint_labels",
]
