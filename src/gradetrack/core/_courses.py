"""Represents courses and their prerequisites."""

import dataclasses
import typing
from collections.abc import Mapping


@dataclasses.dataclass(frozen=True)
class Prerequisite:
    """A reference to another course by id."""

    id: str
    name: typing.Optional[str] = None

    @classmethod
    def coerce(cls, obj) -> "Prerequisite":
        """Build a :class:`Prerequisite` from a prerequisite, a mapping, or a bare id."""
        if isinstance(obj, Prerequisite):
            return obj

        if isinstance(obj, Mapping):
            if obj.get("id") is None:
                raise ValueError(f"Prerequisite {obj!r} has no id.")
            return cls(str(obj["id"]), obj.get("name"))

        if isinstance(obj, (str, int)) and not isinstance(obj, bool):
            return cls(str(obj))

        raise TypeError(f"Cannot interpret {obj!r} as a prerequisite.")


@dataclasses.dataclass(frozen=True)
class Course:
    """A course that a user is tracking.

    Attributes
    ----------
    id : str
        Identifies the course within a user's collection.
    name : str
        The course's display name.
    completed : bool
        Whether the user has finished the course.
    prerequisites : tuple[Prerequisite, ...]
        References to other courses in the same collection. These may point at
        courses that do not exist, or form cycles.

    """

    id: str
    name: str
    completed: bool = False
    prerequisites: typing.Tuple[Prerequisite, ...] = ()

    def __post_init__(self):
        # normalize whatever sequence of references was given
        object.__setattr__(
            self,
            "prerequisites",
            tuple(Prerequisite.coerce(p) for p in self.prerequisites),
        )

    @classmethod
    def from_dict(cls, payload: Mapping) -> "Course":
        """Build a course from an API payload.

        Ids are converted to strings. A missing ``prerequisites`` key means no
        prerequisites and a missing ``completed`` key means ``False``.

        Raises
        ------
        ValueError
            If the payload has no id.

        """
        if payload.get("id") is None:
            raise ValueError(f"Course {payload!r} has no id.")

        return cls(
            id=str(payload["id"]),
            name=payload.get("name") or "",
            completed=bool(payload.get("completed", False)),
            prerequisites=tuple(payload.get("prerequisites") or ()),
        )

    @property
    def prerequisite_ids(self) -> typing.List[str]:
        return [p.id for p in self.prerequisites]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "completed": self.completed,
            "prerequisites": [{"id": p.id, "name": p.name} for p in self.prerequisites],
        }


class Courses(typing.Sequence[Course]):
    """A sequence of :class:`Course` instances.

    This behaves like a list of courses, but also provides a :meth:`find`
    method for looking up a course by (part of) its name.

    """

    def __init__(self, courses: typing.Iterable = ()):
        self._courses = [
            c if isinstance(c, Course) else Course.from_dict(c) for c in courses
        ]

    def __getitem__(self, ix):
        return self._courses[ix]

    def __len__(self):
        return len(self._courses)

    def __eq__(self, other):
        return list(self) == list(other)

    def __repr__(self):
        return f"Courses({[c.name for c in self._courses]!r})"

    @property
    def ids(self) -> typing.List[str]:
        return [c.id for c in self._courses]

    def find(self, pattern: str) -> Course:
        """Finds a course from a substring of its name.

        The search is case-insensitive.

        Parameters
        ----------
        pattern : str
            A pattern to search for in the course's name.

        Returns
        -------
        Course
            The matching course.

        Raises
        ------
        ValueError
            If no course matches, or if more than one course matches.

        """
        matches = [c for c in self._courses if pattern.lower() in c.name.lower()]

        if len(matches) == 0:
            raise ValueError(f"No names matched {pattern}.")

        if len(matches) > 1:
            names = [c.name for c in matches]
            raise ValueError(f'More than one name matched "{pattern}": {names}')

        return matches[0]

    def dependents_of(self, course_id: typing.Union[str, int]) -> "Courses":
        """The other courses that list ``course_id`` as a prerequisite."""
        course_id = str(course_id)
        return self.__class__(
            [
                c
                for c in self._courses
                if c.id != course_id and course_id in c.prerequisite_ids
            ]
        )
