"""
Slide Build Service

Runs the external deck compiler (Slidev by default) and helps interpret its
failures:
- Invoking the build command and capturing its output
- Pulling the failing line number out of compiler stderr
- Rendering the document lines around that failure
- Producing the minimal error deck used as the last fallback

All subprocess calls are sync. Wrap with asyncio.to_thread() when calling
from async code.
"""

import logging
import re
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..core.config import Config

logger = logging.getLogger(__name__)

# e.g. "slides.md:42:7" or "/abs/slides.md?vue&type=template:42:7"
ERROR_LINE_PATTERN = re.compile(r"\.md[^:]*:(\d+):\d+")


@dataclass
class BuildResult:
    """Result from one build invocation."""
    success: bool
    stdout: str
    stderr: str
    returncode: Optional[int] = None


class SlideBuildService:
    """
    Service for invoking the deck build process.

    Example usage:
        service = SlideBuildService()
        result = service.run_build(cwd="decks/pr-1234")
        if not result.success:
            print(extract_error_line(result.stderr))
    """

    def __init__(
        self,
        command: Optional[Union[str, Sequence[str]]] = None,
        timeout: Optional[int] = None,
        timeout_attempts: int = 3,
        retry_wait=None,
    ):
        """
        Initialize SlideBuildService.

        Args:
            command: Build command as a string or argument list.
                If not provided, reads from SLIDEMEND_BUILD_COMMAND.
            timeout: Seconds before a single build run is abandoned.
            timeout_attempts: How many times a timed-out build is tried.
            retry_wait: tenacity wait strategy between timed-out attempts.
        """
        command = command or Config.BUILD_COMMAND
        self.command: List[str] = shlex.split(command) if isinstance(command, str) else list(command)
        self.timeout = timeout or Config.BUILD_TIMEOUT
        self.timeout_attempts = timeout_attempts
        self.retry_wait = retry_wait or wait_exponential(multiplier=2, min=2, max=8)
        logger.info(f"SlideBuildService initialized (command: {' '.join(self.command)})")

    def _invoke(self, cwd: Optional[Path]) -> subprocess.CompletedProcess:
        """Run the build command, retrying only when it times out."""
        for attempt in Retrying(
            stop=stop_after_attempt(self.timeout_attempts),
            wait=self.retry_wait,
            retry=retry_if_exception_type(subprocess.TimeoutExpired),
            reraise=True,
        ):
            with attempt:
                return subprocess.run(
                    self.command,
                    cwd=str(cwd) if cwd else None,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                )

    def run_build(self, cwd: Optional[Union[str, Path]] = None) -> BuildResult:
        """
        Run the build once (timeouts aside) and report the outcome.

        Args:
            cwd: Directory the build runs in (where the slides live)

        Returns:
            BuildResult; process-level failures become unsuccessful results
        """
        logger.info("Attempting Slidev build...")
        cwd_path = Path(cwd) if cwd else None

        try:
            completed = self._invoke(cwd_path)
        except subprocess.TimeoutExpired as e:
            logger.error(f"Build timed out after {self.timeout}s ({self.timeout_attempts} attempts)")
            return BuildResult(
                success=False,
                stdout=_as_text(e.stdout),
                stderr=f"Build timed out after {self.timeout}s",
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.error(f"Failed to start build command {self.command[0]!r}: {e}")
            return BuildResult(success=False, stdout="", stderr=str(e))

        success = completed.returncode == 0
        logger.info(f"Build finished with exit code {completed.returncode}")
        return BuildResult(
            success=success,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            returncode=completed.returncode,
        )


def _as_text(output) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


def extract_error_line(stderr: str) -> Optional[int]:
    """Try to extract the problematic line number from a compiler error."""
    match = ERROR_LINE_PATTERN.search(stderr or "")
    if match:
        return int(match.group(1))
    return None


def format_error_context(document: str, error_line: int, radius: int = 5) -> str:
    """
    Render the document lines around a failing line.

    Args:
        document: Full document text
        error_line: 1-based line number reported by the compiler
        radius: Lines to show on each side

    Returns:
        Numbered lines, the failing one prefixed with ">>> "
    """
    lines = document.split("\n")
    start = max(0, error_line - radius)
    end = min(len(lines), error_line + radius)

    rendered = []
    for i in range(start, end):
        prefix = ">>> " if i + 1 == error_line else "    "
        rendered.append(f"{prefix}{i + 1}: {lines[i]}")
    return "\n".join(rendered)


def build_fallback_deck(stderr: str, title: str = Config.FALLBACK_TITLE) -> str:
    """Minimal deck explaining that generation failed, with an error excerpt."""
    excerpt = (stderr or "")[:Config.FALLBACK_EXCERPT_CHARS].replace("`", "'")
    return f"""---
theme: default
colorSchema: dark
favicon: 'https://fav.farm/⚠️'
title: {title}
layout: cover
---

# Slide Generation Error

The presentation could not be generated due to a build error.

---

## What Happened

The AI-generated content contained HTML that could not be compiled by Slidev.

**Error excerpt:**
```
{excerpt}
```

---

## Next Steps

1. Check the GitHub Actions logs for details
2. Try regenerating with simpler instructions
3. Contact the repository maintainers if the issue persists
"""
