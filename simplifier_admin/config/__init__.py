"""Configuration module for the Simplifier administration application."""
from .settings import AppConfig, load_settings

__all__ = ["AppConfig", "load_settings"]
