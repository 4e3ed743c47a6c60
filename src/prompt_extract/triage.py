from __future__ import annotations

from typing import TYPE_CHECKING

from prompt_extract.config import (
    LINE_THRESHOLD,
    TRIM_MARKER,
    ContentBlock,
    PolicyMode,
    TriageAction,
    TriagePolicy,
    TriageResponse,
)
from prompt_extract.file_manipulation import normalize_content, trim_lines
from prompt_extract.logging import logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from prompt_extract.config import FileCandidate

    AskFn = Callable[[str], str]

PROMPT_SUFFIX = "(y - all, n - skip all, number to trim): "
INVALID_NOTICE = "Invalid input. Skipping this file."

_POLICY_FOR_ACTION: dict[TriageAction, PolicyMode] = {
    TriageAction.EXTRACT_ALL: PolicyMode.EXTRACT_ALL,
    TriageAction.SKIP_ALL: PolicyMode.SKIP_ALL,
}


def build_prompt(candidate: FileCandidate) -> str:
    """Text shown when a long file needs a decision."""
    return (
        f'File "{candidate.rel}" has over {candidate.raw_line_count} lines. '
        f"Do you want to extract it? {PROMPT_SUFFIX}"
    )


def parse_response(answer: str) -> TriageResponse:
    """Interpret one line typed at the long-file prompt.

    "y" and "n" (any case) settle the policy for the rest of the run, a
    positive integer trims the current file, anything else is invalid.

    Args:
        answer (str): the raw answer, surrounding whitespace allowed

    Returns:
        TriageResponse: the parsed answer
    """
    value = answer.strip().lower()
    if value == "y":
        return TriageResponse(action=TriageAction.EXTRACT_ALL)
    if value == "n":
        return TriageResponse(action=TriageAction.SKIP_ALL)
    try:
        lines = int(value)
    except ValueError:
        return TriageResponse(action=TriageAction.INVALID)
    if lines <= 0:
        return TriageResponse(action=TriageAction.INVALID)
    return TriageResponse(action=TriageAction.TRIM, lines=lines)


class TriageController:
    """Decide how much of each file ends up in the output.

    Files at or under the threshold are always kept whole. Longer files are
    ruled by the run's policy; while the policy is unset the user is asked,
    one file at a time, in walk order.

    Attributes:
        threshold: Line count above which a file goes through triage.
        policy: The policy of the current run.
        prompts: Number of questions asked so far.
    """

    def __init__(self, threshold: int = LINE_THRESHOLD, ask: AskFn | None = None) -> None:
        self.threshold = threshold
        self.policy = TriagePolicy()
        self.prompts = 0
        self._ask = ask if ask is not None else input

    def ask(self, candidate: FileCandidate) -> TriageResponse:
        """Block on one answer for `candidate`; a closed input stream counts as invalid."""
        self.prompts += 1
        try:
            answer = self._ask(build_prompt(candidate))
        except EOFError:
            answer = ""
        return parse_response(answer)

    def process(self, candidate: FileCandidate, text: str) -> ContentBlock | None:
        """Turn a candidate into its output block, or None when it is left out.

        Args:
            candidate (FileCandidate): the file being processed
            text (str): its raw content

        Returns:
            ContentBlock | None: the normalized block, or None if the file is skipped
        """
        if candidate.raw_line_count <= self.threshold:
            return self._full(candidate, text)
        if self.policy.mode is PolicyMode.EXTRACT_ALL:
            return self._full(candidate, text)
        if self.policy.mode is PolicyMode.SKIP_ALL:
            return None

        response = self.ask(candidate)
        if response.action in _POLICY_FOR_ACTION:
            self.policy.mode = _POLICY_FOR_ACTION[response.action]
            logger.info("triage policy settled", mode=str(self.policy.mode), file=candidate.rel)
            if self.policy.mode is PolicyMode.SKIP_ALL:
                return None
            return self._full(candidate, text)
        if response.action is TriageAction.TRIM and response.lines is not None:
            trimmed = trim_lines(text, response.lines, TRIM_MARKER)
            return ContentBlock(rel=candidate.rel, text=normalize_content(trimmed))

        print(INVALID_NOTICE)
        logger.warning("invalid triage answer", file=candidate.rel)
        return None

    @staticmethod
    def _full(candidate: FileCandidate, text: str) -> ContentBlock:
        return ContentBlock(rel=candidate.rel, text=normalize_content(text))
