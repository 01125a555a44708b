"""Read course collections from JSON."""

import json as _json
import pathlib as _pathlib
from collections.abc import Iterable, Mapping
from typing import Union

from ..core import Course, Courses


def from_records(records: Iterable[Mapping]) -> Courses:
    """Build courses from API-shaped records.

    Each record needs an ``id``, and may have ``name``, ``completed``, and
    ``prerequisites``; see :meth:`Course.from_dict`.

    """
    return Courses([Course.from_dict(r) for r in records])


def read_json(path: Union[str, _pathlib.Path]) -> Courses:
    """Read courses from a JSON file.

    The file holds either a list of course records or an object whose
    ``courses`` key holds that list.

    Raises
    ------
    ValueError
        If the file holds neither.

    """
    path = _pathlib.Path(path)

    with path.open() as fileobj:
        data = _json.load(fileobj)

    if isinstance(data, Mapping):
        data = data.get("courses")

    if not isinstance(data, list):
        raise ValueError(f"{path} does not contain a list of courses.")

    return from_records(data)
