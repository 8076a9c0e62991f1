"""JSONLines serialization for focusstudy records.

Participant and session records are stored one JSON object per line. The
condition sequence of a participant serializes as a JSON array of the
condition string literals and round-trips in order.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence


class SerializationError(Exception):
    """Exception raised when writing records to JSONLines fails."""

    pass


class DeserializationError(Exception):
    """Exception raised when reading records from JSONLines fails."""

    pass


def write_jsonlines[T: BaseModel](
    objects: Sequence[T],
    path: Path | str,
    append: bool = False,
) -> None:
    """Write Pydantic objects to a JSONLines file.

    Parameters
    ----------
    objects : Sequence[T]
        Pydantic model instances to serialize.
    path : Path | str
        Path to the output file.
    append : bool, optional
        Append to an existing file instead of overwriting (default: False).

    Raises
    ------
    SerializationError
        If writing fails.
    """
    path = Path(path)
    mode = "a" if append else "w"

    try:
        with path.open(mode, encoding="utf-8") as f:
            for obj in objects:
                f.write(obj.model_dump_json() + "\n")
    except (OSError, ValidationError) as e:
        raise SerializationError(f"Failed to write to {path}: {e}") from e


def read_jsonlines[T: BaseModel](
    path: Path | str,
    model_class: type[T],
    skip_errors: bool = False,
) -> list[T]:
    """Read a JSONLines file into a list of Pydantic objects.

    Empty lines are skipped.

    Parameters
    ----------
    path : Path | str
        Path to the input file.
    model_class : type[T]
        Pydantic model class to deserialize into.
    skip_errors : bool, optional
        Skip invalid lines instead of raising (default: False).

    Returns
    -------
    list[T]
        Deserialized objects in file order.

    Raises
    ------
    DeserializationError
        If the file cannot be read or a line fails validation
        (unless skip_errors=True).
    """
    path = Path(path)
    objects: list[T] = []

    try:
        with path.open("r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue

                try:
                    objects.append(model_class.model_validate_json(line))
                except ValidationError as e:
                    if skip_errors:
                        continue
                    raise DeserializationError(
                        f"Failed to parse line {line_num} in {path}: {e}"
                    ) from e
    except OSError as e:
        raise DeserializationError(f"Failed to read from {path}: {e}") from e

    return objects
