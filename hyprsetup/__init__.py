"""Hyprland setup assistant for FreeBSD."""

__version__ = "0.1.0"
