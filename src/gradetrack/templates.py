"""Searching calculator templates.

A template is a shareable blueprint of assessment names and weights which can
be used to seed a new :class:`~gradetrack.Calculator`. This module ranks an
in-memory collection of templates the same way the template browser does:

1. by the number of fields matching the search (the *match score*),
2. then institution matches first,
3. then name matches first,
4. then term matches first,
5. then by vote count, highest first,
6. then by creation date, newest first.

"""

import dataclasses
import datetime
import logging
import typing
from collections.abc import Mapping

import pandas as pd

from ._util import ensure_df
from .core import RawValue

logger = logging.getLogger(__name__)


# public classes =======================================================================


@dataclasses.dataclass(frozen=True)
class TemplateAssessment:
    """An assessment in a template. Templates carry no grades."""

    name: str
    weight: RawValue = None

    @classmethod
    def coerce(cls, obj) -> "TemplateAssessment":
        if isinstance(obj, TemplateAssessment):
            return obj
        if isinstance(obj, Mapping):
            return cls(obj.get("name") or "", obj.get("weight"))
        raise TypeError(f"Cannot interpret {obj!r} as a template assessment.")


@dataclasses.dataclass(frozen=True)
class Template:
    """A shareable calculator blueprint.

    Attributes
    ----------
    id : str
    name : str
    term : Optional[str]
        E.g., ``"Fall"``.
    year : Optional[int]
    institution : Optional[str]
    vote_count : int
        The net number of votes.
    created_at : Optional[datetime.datetime]
    creator : Optional[str]
        The username of the template's author.
    deleted : bool
        Deleted templates never appear in search results.
    assessments : tuple[TemplateAssessment, ...]

    """

    id: str
    name: str
    term: typing.Optional[str] = None
    year: typing.Optional[int] = None
    institution: typing.Optional[str] = None
    vote_count: int = 0
    created_at: typing.Optional[datetime.datetime] = None
    creator: typing.Optional[str] = None
    deleted: bool = False
    assessments: typing.Tuple[TemplateAssessment, ...] = ()

    def __post_init__(self):
        object.__setattr__(
            self,
            "assessments",
            tuple(TemplateAssessment.coerce(a) for a in self.assessments),
        )

    @classmethod
    def from_dict(cls, payload: Mapping) -> "Template":
        """Build a template from an API payload.

        Raises
        ------
        ValueError
            If the payload has no id.

        """
        if payload.get("id") is None:
            raise ValueError(f"Template {payload!r} has no id.")

        return cls(
            id=str(payload["id"]),
            name=payload.get("name") or "",
            term=payload.get("term"),
            year=payload.get("year"),
            institution=payload.get("institution"),
            vote_count=int(payload.get("vote_count") or 0),
            created_at=payload.get("created_at"),
            creator=payload.get("creator") or payload.get("creator_name"),
            deleted=bool(payload.get("deleted", False)),
            assessments=tuple(payload.get("assessments") or ()),
        )


@dataclasses.dataclass(frozen=True)
class SearchOptions:
    """Configures :func:`search_templates`.

    Attributes
    ----------
    max_limit : int
        The largest page size that will be honored. Default: 100.
    default_limit : int
        The page size used when none (or an invalid one) is given. Default: 20.
    min_votes : int
        Templates with fewer votes than this are hidden. Default: -1.

    """

    max_limit: int = 100
    default_limit: int = 20
    min_votes: int = -1


@dataclasses.dataclass
class SearchResults:
    """One page of search results.

    Attributes
    ----------
    templates : list[Template]
        The templates on this page, best match first.
    total : int
        The number of matching templates across all pages.
    page : int
        The (1-based) page number actually used.
    limit : int
        The page size actually used.

    """

    templates: typing.List[Template]
    total: int
    page: int
    limit: int


# private helpers ======================================================================


def _positive_int_or(value, default: int) -> int:
    try:
        number = int(value)
    except (ValueError, TypeError):
        return default
    return number if number > 0 else default


def _like(column: pd.Series, pattern: typing.Optional[str]) -> pd.Series:
    """Case-insensitive substring match. Null values never match."""
    needle = (pattern or "").lower()
    haystack = column.fillna("").astype(str).str.lower()
    return column.notna() & haystack.str.contains(needle, regex=False)


def _templates_to_frame(templates: typing.Sequence[Template]) -> pd.DataFrame:
    table = pd.DataFrame(
        [
            {
                "name": t.name,
                "term": t.term,
                "year": t.year,
                "institution": t.institution,
                "vote_count": t.vote_count,
                "created_at": t.created_at,
                "deleted": t.deleted,
            }
            for t in templates
        ],
        columns=[
            "name",
            "term",
            "year",
            "institution",
            "vote_count",
            "created_at",
            "deleted",
        ],
    )
    table["year"] = pd.to_numeric(table["year"], errors="coerce")
    table["created_at"] = pd.to_datetime(table["created_at"], errors="coerce", utc=True)
    return table


# public functions =====================================================================


def search_templates(
    templates: typing.Iterable,
    query: typing.Optional[str] = None,
    term: typing.Optional[str] = None,
    year: typing.Optional[int] = None,
    institution: typing.Optional[str] = None,
    page=1,
    limit=20,
    options: typing.Optional[SearchOptions] = None,
) -> SearchResults:
    """Rank and paginate templates.

    A template is a candidate if it is not deleted, has at least
    ``options.min_votes`` votes, and matches on at least one field: its name
    contains ``query``, its term contains ``term``, its year equals ``year``,
    or its institution contains ``institution``. Substring matches are
    case-insensitive, and a missing pattern matches any non-empty field. See
    the module documentation for the ordering.

    Parameters
    ----------
    templates : Iterable[Template or Mapping]
        The templates to search.
    query : Optional[str]
        Matched against template names.
    term : Optional[str]
    year : Optional[int]
    institution : Optional[str]
    page : int
        1-based page number. Invalid values become 1.
    limit : int
        Page size, capped at ``options.max_limit``. Invalid values become
        ``options.default_limit``.
    options : Optional[SearchOptions]
        Default: ``SearchOptions()``.

    Returns
    -------
    SearchResults

    """
    if options is None:
        options = SearchOptions()

    templates = [
        t if isinstance(t, Template) else Template.from_dict(t) for t in templates
    ]

    limit = min(_positive_int_or(limit, options.default_limit), options.max_limit)
    page = _positive_int_or(page, 1)
    offset = (page - 1) * limit

    table = _templates_to_frame(templates)

    name_match = _like(table["name"], query)
    term_match = _like(table["term"], term)
    institution_match = _like(table["institution"], institution)
    year_match = table["year"] == _positive_int_or(year, 0)

    table["match_score"] = (
        name_match.astype(int)
        + term_match.astype(int)
        + year_match.astype(int)
        + institution_match.astype(int)
    )
    table["institution_rank"] = (~institution_match).astype(int)
    table["name_rank"] = (~name_match).astype(int)
    table["term_rank"] = (~term_match).astype(int)
    table["position"] = range(len(table))

    candidates = ensure_df(
        table[
            (table["match_score"] > 0)
            & (table["vote_count"] >= options.min_votes)
            & ~table["deleted"].astype(bool)
        ]
    )

    ranked = candidates.sort_values(
        by=[
            "match_score",
            "institution_rank",
            "name_rank",
            "term_rank",
            "vote_count",
            "created_at",
            "position",
        ],
        ascending=[False, True, True, True, False, False, True],
        na_position="last",
    )

    page_positions = ranked["position"].iloc[offset : offset + limit]
    results = [templates[i] for i in page_positions]

    logger.debug(
        "Found %d templates (total count: %d).", len(results), len(candidates)
    )

    return SearchResults(
        templates=results, total=len(candidates), page=page, limit=limit
    )
