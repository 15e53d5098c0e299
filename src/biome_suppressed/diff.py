"""Baseline diffing: classify a run against the accepted baseline.

``evaluate`` is a pure function over (current findings, stored baseline) with
four outcomes, checked in this order:

1. No baseline: CREATE it. PASS only when there are no findings.
2. Fewer distinct fingerprints than the baseline: RATCHET the baseline down,
   unless the policy rejects or skips the update.
3. Every current fingerprint is already in the baseline: PASS.
4. Otherwise FAIL with the new findings. The baseline is left untouched.

The ratchet in (2) compares counts only, so a run that fixes several issues
while introducing one can absorb the new issue into the baseline. Set
``RatchetPolicy.strict`` to require that no new finding is present before
ratcheting; such runs then fall through to (4).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from biome_suppressed.fingerprint import fingerprint, fingerprint_set
from biome_suppressed.models import Baseline, Finding, sort_findings
from biome_suppressed.store.base import BaselineStore

logger = logging.getLogger(__name__)


class Status(Enum):
    """Outcome of a check run."""

    PASS = "pass"
    FAIL = "fail"


class Action(Enum):
    """What the run means for the stored baseline."""

    NONE = "none"
    """Baseline is left as is."""

    CREATE = "create"
    """No baseline existed; the current findings become the baseline."""

    RATCHET = "ratchet"
    """Finding count dropped; the baseline is overwritten with current findings."""

    RATCHET_SKIPPED = "ratchet_skipped"
    """Finding count dropped but updates are disabled for this run."""

    RATCHET_REJECTED = "ratchet_rejected"
    """Finding count dropped and the policy demands an explicit update."""

    @property
    def writes_baseline(self) -> bool:
        return self in (Action.CREATE, Action.RATCHET)


@dataclass(frozen=True)
class RatchetPolicy:
    """Controls how improvements are handled."""

    fail_on_improvement: bool = False
    skip_update: bool = False
    strict: bool = False


@dataclass(frozen=True)
class Evaluation:
    """Result of comparing a run against the baseline."""

    status: Status
    action: Action
    current_count: int
    baseline_count: int | None = None
    fixed_count: int = 0
    new_findings: Sequence[Finding] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return self.status is Status.PASS

    @property
    def exit_code(self) -> int:
        """Process exit code: 0 on pass, 1 on fail."""
        return 0 if self.passed else 1

    @property
    def writes_baseline(self) -> bool:
        return self.action.writes_baseline


def evaluate(
    current: Iterable[Finding],
    baseline: Baseline | None,
    policy: RatchetPolicy | None = None,
) -> Evaluation:
    """Classify the current findings against a baseline.

    Never raises and never mutates anything; the caller applies the action.

    Args:
        current: Findings from this run.
        baseline: The stored baseline, or None when there is none.
        policy: Improvement handling. Defaults to ``RatchetPolicy()``.

    Returns:
        The classification for this run.

    """
    policy = policy or RatchetPolicy()
    findings = sort_findings(current)
    current_fingerprints = fingerprint_set(findings)
    current_count = len(current_fingerprints)

    if baseline is None:
        return Evaluation(
            status=Status.PASS if not findings else Status.FAIL,
            action=Action.CREATE,
            current_count=current_count,
        )

    known = baseline.known_fingerprints()
    baseline_count = len(known)
    new_findings = tuple(f for f in findings if fingerprint(f) not in known)
    fixed_count = len(known - current_fingerprints)

    improved = current_count < baseline_count
    if improved and not (policy.strict and new_findings):
        if policy.fail_on_improvement:
            status, action = Status.FAIL, Action.RATCHET_REJECTED
        elif policy.skip_update:
            status, action = Status.PASS, Action.RATCHET_SKIPPED
        else:
            status, action = Status.PASS, Action.RATCHET
        return Evaluation(
            status=status,
            action=action,
            current_count=current_count,
            baseline_count=baseline_count,
            fixed_count=fixed_count,
            new_findings=new_findings,
        )

    return Evaluation(
        status=Status.FAIL if new_findings else Status.PASS,
        action=Action.NONE,
        current_count=current_count,
        baseline_count=baseline_count,
        fixed_count=fixed_count,
        new_findings=new_findings,
    )


class BaselineDiffEngine:
    """Runs evaluations against an injected store and applies their actions."""

    def __init__(
        self, store: BaselineStore, policy: RatchetPolicy | None = None
    ) -> None:
        self._store = store
        self._policy = policy or RatchetPolicy()

    @property
    def store(self) -> BaselineStore:
        return self._store

    @property
    def policy(self) -> RatchetPolicy:
        return self._policy

    def check(self, findings: Sequence[Finding]) -> Evaluation:
        """Evaluate ``findings`` and persist the baseline if the outcome calls for it.

        Raises:
            BaselineWriteError: If a required baseline write fails.

        """
        baseline = self._store.load()
        evaluation = evaluate(findings, baseline, self._policy)
        logger.debug(
            "Evaluation: status=%s action=%s current=%d baseline=%s fixed=%d new=%d",
            evaluation.status.value,
            evaluation.action.value,
            evaluation.current_count,
            evaluation.baseline_count,
            evaluation.fixed_count,
            len(evaluation.new_findings),
        )

        if evaluation.action is Action.RATCHET and evaluation.new_findings:
            logger.warning(
                "Ratchet absorbed %d finding(s) not present in the previous baseline",
                len(evaluation.new_findings),
            )

        if evaluation.writes_baseline:
            self._store.save(findings)
        return evaluation

    def init(self, findings: Sequence[Finding]) -> Baseline:
        """Create the baseline unconditionally."""
        return self._store.save(findings)

    def update(self, findings: Sequence[Finding]) -> Baseline:
        """Overwrite the baseline unconditionally."""
        return self._store.save(findings)

    def clear(self) -> bool:
        """Delete the baseline. Returns whether one existed."""
        return self._store.clear()

    def status(self) -> Baseline | None:
        """Return the stored baseline, if any."""
        return self._store.load()
