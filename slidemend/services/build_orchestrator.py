"""
Build Orchestrator - escalating build attempts for generated decks.

Strategy ladder, tried strictly in order until one compiles:
1. normal    - the deck as generated (optionally sanitized first)
2. stripped  - all HTML outside the frontmatter removed via strip_all()
3. minimal   - the deck replaced by a short error deck

Part of the Service Layer - contains orchestration logic, no CLI code.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..core.config import BuildProfile, Config
from ..core.observability import get_logfire
from .build_service import (
    BuildResult,
    SlideBuildService,
    build_fallback_deck,
    extract_error_line,
    format_error_context,
)
from .document_store import DocumentStore
from .markup_repair import sanitize, strip_all, validate
from .models import BuildAttempt, BuildOutcome

logger = logging.getLogger(__name__)


class BuildOrchestrator:
    """
    Runs the build ladder against a slides file.

    Example usage:
        orchestrator = BuildOrchestrator(profile=load_build_profile("slidemend.yml"))
        outcome = orchestrator.run()
        if not outcome.success:
            print(outcome.last_stderr)
    """

    def __init__(
        self,
        build_service: Optional[SlideBuildService] = None,
        store: Optional[DocumentStore] = None,
        profile: Optional[BuildProfile] = None,
    ):
        self.profile = profile or BuildProfile()
        self.build_service = build_service or SlideBuildService(
            command=self.profile.command,
            timeout=self.profile.timeout,
        )
        self.store = store or DocumentStore()

    def _resolve_paths(self, slides_path: Optional[Union[str, Path]]):
        path = Path(slides_path or self.profile.slides_path)
        if not path.is_absolute() and self.profile.cwd:
            path = Path(self.profile.cwd) / path
        cwd = Path(self.profile.cwd) if self.profile.cwd else path.parent
        return path, cwd

    def _attempt(self, outcome: BuildOutcome, strategy: str, cwd: Path) -> BuildResult:
        lf = get_logfire()
        with lf.span("build_attempt", strategy=strategy):
            result = self.build_service.run_build(cwd=cwd)
            lf.info(
                "Build attempt {strategy} success={success}",
                strategy=strategy,
                success=result.success,
            )

        outcome.attempts.append(BuildAttempt(
            strategy=strategy,
            success=result.success,
            returncode=result.returncode,
            stderr=result.stderr,
        ))
        if result.success:
            outcome.success = True
            outcome.strategy = strategy
        return result

    def _presanitize(self, outcome: BuildOutcome, path: Path) -> None:
        original = self.store.read(path)
        outcome.validation = validate(original)
        for error in outcome.validation.errors:
            logger.warning(f"Pre-check: {error}")

        repaired = sanitize(original)
        if repaired != original:
            self.store.write(path, repaired)
            logger.info(f"Wrote sanitized deck to {path}")

    def run(
        self,
        slides_path: Optional[Union[str, Path]] = None,
        sanitize_first: Optional[bool] = None,
    ) -> BuildOutcome:
        """
        Build the deck, escalating through fallbacks on failure.

        Args:
            slides_path: Slides file; defaults to the profile's slides path.
            sanitize_first: Run sanitize() before the first build.
                Defaults to the profile setting.

        Returns:
            BuildOutcome describing every attempt.
        """
        path, cwd = self._resolve_paths(slides_path)
        outcome = BuildOutcome()

        if sanitize_first is None:
            sanitize_first = self.profile.sanitize_first
        if sanitize_first:
            self._presanitize(outcome, path)

        logger.info("=== Build Attempt 1: Normal build ===")
        result = self._attempt(outcome, "normal", cwd)
        if result.success:
            logger.info("Build succeeded on first attempt!")
            return outcome

        logger.warning("First build failed. Analyzing error...")
        logger.warning(f"STDERR: {result.stderr[:Config.STDERR_PREVIEW_CHARS]}")

        original = self.store.read(path)
        error_line = extract_error_line(result.stderr)
        if error_line:
            outcome.error_line = error_line
            outcome.error_context = format_error_context(
                original, error_line, radius=Config.ERROR_CONTEXT_LINES
            )
            logger.warning(f"Error appears to be around line {error_line}\n{outcome.error_context}")

        logger.info("=== Build Attempt 2: Stripped HTML fallback ===")
        self.store.write(path, strip_all(original))
        result = self._attempt(outcome, "stripped", cwd)
        if result.success:
            logger.info("Build succeeded with stripped HTML!")
            logger.info("NOTE: Some formatting may be lost due to HTML stripping")
            return outcome

        logger.warning(f"Stripped build also failed. Error: {result.stderr[:Config.STDERR_FAILURE_CHARS]}")

        logger.info("=== Build Attempt 3: Minimal fallback ===")
        self.store.write(path, build_fallback_deck(result.stderr, title=self.profile.fallback_title))
        result = self._attempt(outcome, "minimal", cwd)
        if result.success:
            logger.info("Build succeeded with minimal fallback")
            return outcome

        logger.error(f"All build attempts failed!\n{result.stderr}")
        return outcome
