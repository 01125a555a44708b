"""Ordering and filtering courses by their prerequisites.

Courses are grouped into *levels*: a course with no prerequisites is at level 0,
and every other course sits one level above its deepest prerequisite. Course
collections come straight from users, so they may reference courses that do not
exist or contain cycles. Neither is an error:

* A prerequisite id that is not in the collection is ignored.
* Courses are resolved depth-first in input order. A prerequisite that points
  back at a course whose level is still being resolved closes a cycle, and that
  edge is ignored. For A -> B -> C -> A resolved starting at A, C is placed at
  level 0, B at level 1, and A at level 2.

"""

import logging
import typing

import pandas as pd

from .core import Course, Courses

logger = logging.getLogger(__name__)

Levels = typing.List[typing.List[Course]]


# private helpers ======================================================================


def _resolve_levels(courses: typing.Sequence[Course]) -> typing.Dict[str, int]:
    """Map each course id to its level, using an explicit stack."""
    by_id: typing.Dict[str, Course] = {}
    for course in courses:
        by_id.setdefault(course.id, course)

    levels: typing.Dict[str, int] = {}

    for root in by_id.values():
        if root.id in levels:
            continue

        # each frame is a course id and an iterator over its unvisited prerequisites
        stack = [(root.id, iter(root.prerequisite_ids))]
        in_progress = {root.id}

        while stack:
            course_id, pending = stack[-1]

            for prerequisite_id in pending:
                if prerequisite_id not in by_id:
                    logger.debug(
                        "Ignoring missing prerequisite %s of course %s.",
                        prerequisite_id,
                        course_id,
                    )
                    continue

                if prerequisite_id in levels:
                    continue

                if prerequisite_id in in_progress:
                    logger.debug(
                        "Ignoring prerequisite %s of course %s; it closes a cycle.",
                        prerequisite_id,
                        course_id,
                    )
                    continue

                prerequisite = by_id[prerequisite_id]
                stack.append((prerequisite.id, iter(prerequisite.prerequisite_ids)))
                in_progress.add(prerequisite.id)
                break
            else:
                stack.pop()
                in_progress.discard(course_id)
                resolved = [
                    levels[p]
                    for p in by_id[course_id].prerequisite_ids
                    if p in levels
                ]
                levels[course_id] = max(resolved, default=-1) + 1

    return levels


# public functions =====================================================================


def sort_courses_by_prerequisites(courses: typing.Iterable[Course]) -> Levels:
    """Group courses into levels so that prerequisites come first.

    Every course's (resolvable, non-cyclic) prerequisites are in a strictly
    earlier level than the course itself. See the module documentation for how
    missing ids and cycles are handled.

    Parameters
    ----------
    courses : Iterable[Course or Mapping]
        The courses to order. Mappings are read with :meth:`Course.from_dict`.
        Not modified.

    Returns
    -------
    list[list[Course]]
        The levels, starting with level 0. Within a level, courses keep their
        input order. If two courses share an id, both are placed at the level
        computed for the first one.

    """
    courses = list(Courses(courses))
    if not courses:
        return []

    levels = _resolve_levels(courses)

    buckets: Levels = [[] for _ in range(max(levels.values()) + 1)]
    for course in courses:
        buckets[levels[course.id]].append(course)

    return buckets


def flatten_sorted_courses(
    levels: typing.Iterable[typing.Iterable[Course]],
) -> typing.List[Course]:
    """Concatenate levels into a single list, preserving their order."""
    return [course for level in levels for course in level]


def filter_courses(
    courses: typing.Iterable[Course], active_tab: str = "all", search_query: str = ""
) -> typing.List[Course]:
    """Filter courses by completion status and name.

    Parameters
    ----------
    courses : Iterable[Course]
        The courses to filter.
    active_tab : str
        ``"completed"`` keeps completed courses and ``"incomplete"`` keeps the
        rest. Anything else, including ``"all"``, keeps every course.
    search_query : str
        If non-empty, only courses whose names contain this string
        (case-insensitively) are kept.

    Returns
    -------
    list[Course]
        The matching courses in their original order.

    """
    query = search_query.lower() if search_query else ""

    def keep(course: Course) -> bool:
        if active_tab == "completed" and not course.completed:
            return False
        if active_tab == "incomplete" and course.completed:
            return False
        if query:
            return query in course.name.lower()
        return True

    return [c for c in Courses(courses) if keep(c)]


def is_prerequisite_for_other_courses(
    courses: typing.Iterable[Course], course_id: typing.Union[str, int]
) -> bool:
    """Whether any other course lists ``course_id`` as a prerequisite.

    Useful for warning before a course that others depend on is deleted. Ids
    are compared as strings, so the integer ids of an API payload work too.

    """
    course_id = str(course_id)
    return any(
        course.id != course_id and course_id in course.prerequisite_ids
        for course in Courses(courses)
    )


def levels_table(levels: typing.Iterable[typing.Iterable[Course]]) -> pd.DataFrame:
    """A table with one row per course, in flattened order.

    The columns are ``id``, ``name``, ``completed``, and ``level``.

    """
    rows = [
        {"id": c.id, "name": c.name, "completed": c.completed, "level": number}
        for number, level in enumerate(levels)
        for c in level
    ]
    return pd.DataFrame(rows, columns=["id", "name", "completed", "level"])
