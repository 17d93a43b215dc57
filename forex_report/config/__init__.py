"""Configuration."""

from forex_report.config.settings import Settings, RunConfig, prompt_run_config

__all__ = ["Settings", "RunConfig", "prompt_run_config"]
