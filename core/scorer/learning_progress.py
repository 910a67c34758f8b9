#!/usr/bin/env python3
"""
Learning Path Progress - Aggregate module completions per learning path.

Completion records are append-only, so the same (path, module) pair can
appear more than once. Counts use set semantics.
"""

from typing import Dict, List, Optional, Sequence, Set, Tuple
import logging

from core.utils import round_half_up, clamp_percentage, require_sequence
from core.scorer.models import LearningPathProgress
from database.models import LearningPath, LearningModule, LearningProgress, LearningEnrollment

logger = logging.getLogger(__name__)


def group_completed_modules(
    records: Optional[Sequence[LearningProgress]]
) -> Dict[str, Set[str]]:
    """Map learning_path_id -> distinct completed module ids."""
    completed_by_path: Dict[str, Set[str]] = {}
    for record in require_sequence(records, "progress_records"):
        completed_by_path.setdefault(record.learning_path_id, set()).add(record.module_id)
    return completed_by_path


def calculate_path_progress(completed_count: int, total_modules: int) -> int:
    """
    Progress through a path as a percentage.

    Formula: round_half_up(completed / total * 100), 0 when total <= 0.
    Completion records for modules that were later removed from the path
    can push the ratio past 1; the result is clamped.
    """
    if total_modules <= 0:
        return 0
    return clamp_percentage(
        round_half_up(completed_count / total_modules * 100),
        "learning_path_progress"
    )


def aggregate_learning_paths(
    paths: Optional[Sequence[LearningPath]],
    progress_records: Optional[Sequence[LearningProgress]],
    enrollments: Optional[Sequence[LearningEnrollment]]
) -> List[LearningPathProgress]:
    """
    Build per-path progress for a student, in path order.

    A path is enrolled when any enrollment record names it, regardless
    of progress.
    """
    completed_by_path = group_completed_modules(progress_records)
    enrolled_ids = {e.learning_path_id for e in require_sequence(enrollments, "enrollments")}

    results = []
    for path in require_sequence(paths, "learning_paths"):
        completed = len(completed_by_path.get(path.id, ()))
        results.append(LearningPathProgress(
            id=path.id,
            title=path.title,
            description=path.description,
            total_modules=path.total_modules,
            completed_modules=completed,
            progress=calculate_path_progress(completed, path.total_modules),
            xp_reward=path.xp_reward,
            enrolled=path.id in enrolled_ids,
        ))

    logger.debug(f"Aggregated progress for {len(results)} learning paths")
    return results


def module_checklist(
    modules: Optional[Sequence[LearningModule]],
    progress_records: Optional[Sequence[LearningProgress]],
    learning_path_id: str
) -> List[Tuple[LearningModule, bool]]:
    """A path's modules in order_number order, each paired with its completed flag."""
    completed = group_completed_modules(progress_records).get(learning_path_id, set())
    path_modules = [
        m for m in require_sequence(modules, "modules")
        if m.learning_path_id == learning_path_id
    ]
    return [
        (module, module.id in completed)
        for module in sorted(path_modules, key=lambda m: m.order_number)
    ]
