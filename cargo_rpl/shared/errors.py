"""Custom exceptions for cargo-rpl."""

from __future__ import annotations


class RplError(Exception):
    """Base exception for cargo-rpl errors."""

    def __init__(self, message: str, context: str | None = None) -> None:
        self.context = context
        full_message = f"{message}" if not context else f"[{context}] {message}"
        super().__init__(full_message)


class LaunchError(RplError):
    """Raised when the build orchestrator cannot be started or awaited."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"could not run {command}: {reason}")


class ConfigError(RplError):
    """Raised when the configuration file is unreadable or invalid."""

    def __init__(self, message: str, config_path: str | None = None) -> None:
        self.config_path = config_path
        super().__init__(message, config_path)
