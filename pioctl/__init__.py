"""Switch monitor, audio sink and workspace profiles on Hyprland with PipeWire."""

__version__ = "0.1.0"