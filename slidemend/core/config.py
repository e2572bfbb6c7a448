"""
Configuration management for slidemend
"""

import os
import shlex
import yaml
from pathlib import Path
from typing import Optional, List, Union
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration"""

    # Build invocation
    BUILD_COMMAND: str = os.getenv('SLIDEMEND_BUILD_COMMAND', 'bun run slidev build --out dist --base /')
    BUILD_TIMEOUT: int = int(os.getenv('SLIDEMEND_BUILD_TIMEOUT', '600'))  # seconds per attempt
    SLIDES_PATH: str = os.getenv('SLIDEMEND_SLIDES_PATH', 'slides.md')

    # Diagnostics
    STDERR_PREVIEW_CHARS: int = int(os.getenv('SLIDEMEND_STDERR_PREVIEW_CHARS', '1000'))
    STDERR_FAILURE_CHARS: int = int(os.getenv('SLIDEMEND_STDERR_FAILURE_CHARS', '2000'))
    ERROR_CONTEXT_LINES: int = int(os.getenv('SLIDEMEND_ERROR_CONTEXT_LINES', '5'))

    # Fallback deck
    FALLBACK_EXCERPT_CHARS: int = 500
    FALLBACK_TITLE: str = os.getenv('SLIDEMEND_FALLBACK_TITLE', 'PR Review - Build Error')

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration values"""
        problems = []
        if not cls.BUILD_COMMAND.strip():
            problems.append('SLIDEMEND_BUILD_COMMAND is empty')
        if cls.BUILD_TIMEOUT <= 0:
            problems.append('SLIDEMEND_BUILD_TIMEOUT must be positive')
        if cls.ERROR_CONTEXT_LINES < 0:
            problems.append('SLIDEMEND_ERROR_CONTEXT_LINES must not be negative')

        if problems:
            raise ValueError(f"Invalid configuration: {', '.join(problems)}")

        return True

    @classmethod
    def get(cls, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get configuration value"""
        return getattr(cls, key, default)


@dataclass
class BuildProfile:
    """Per-deck build settings, usually loaded from slidemend.yml"""
    command: List[str] = field(default_factory=lambda: shlex.split(Config.BUILD_COMMAND))
    cwd: Optional[str] = None
    slides_path: str = Config.SLIDES_PATH
    timeout: int = Config.BUILD_TIMEOUT
    sanitize_first: bool = False
    fallback_title: str = Config.FALLBACK_TITLE


def load_build_profile(path: Union[str, Path]) -> BuildProfile:
    """
    Load a build profile from YAML.

    Keys that are missing fall back to Config defaults. `command` may be a
    string (split shell-style) or a list of arguments.

    Args:
        path: Path to the YAML profile

    Returns:
        BuildProfile instance

    Raises:
        FileNotFoundError: If the profile doesn't exist
        ValueError: If the profile is not a mapping or has bad values
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(
            f"Build profile not found at {config_path}\n"
            f"Create a slidemend.yml file next to the slides."
        )

    with open(config_path, 'r') as f:
        raw_config = yaml.safe_load(f) or {}

    if not isinstance(raw_config, dict):
        raise ValueError(f"Build profile {config_path} must be a mapping")

    profile = BuildProfile()

    command = raw_config.get('command')
    if isinstance(command, str):
        profile.command = shlex.split(command)
    elif isinstance(command, list):
        profile.command = [str(part) for part in command]
    elif command is not None:
        raise ValueError(f"Build profile 'command' must be a string or list, got {type(command).__name__}")

    if not profile.command:
        raise ValueError("Build profile 'command' is empty")

    profile.cwd = raw_config.get('cwd', profile.cwd)
    profile.slides_path = raw_config.get('slides', profile.slides_path)
    profile.timeout = int(raw_config.get('timeout', profile.timeout))
    profile.sanitize_first = bool(raw_config.get('sanitize_first', profile.sanitize_first))
    profile.fallback_title = raw_config.get('fallback_title', profile.fallback_title)

    if profile.timeout <= 0:
        raise ValueError("Build profile 'timeout' must be positive")

    return profile
