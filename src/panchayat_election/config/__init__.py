"""Config package — YAML-backed election settings."""
from __future__ import annotations

from panchayat_election.config.loader import ConfigLoader, ElectionConfig, RegistryConfig

__all__ = ["ConfigLoader", "ElectionConfig", "RegistryConfig"]
