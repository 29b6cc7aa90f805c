"""Configuration, errors, logging setup and command line options."""

__all__ = ["args", "config", "errors", "log_setup"]