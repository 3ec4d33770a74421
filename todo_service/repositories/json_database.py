"""
Read-only JSON "database" base class.

Loads a JSON array of records from a file once, validates every record with
its Pydantic model, and keeps the result in memory as an immutable tuple.
Subclasses add the query methods for their record type.
"""

import re
from pathlib import Path
from typing import Dict, Generic, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..exceptions import BadRequestException, DataLoadException
from ..logging_config import get_logger

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

QueryParams = Mapping[str, Sequence[str]]

# Optional sign followed by ASCII digits only
INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+\Z")


class JsonDatabase(Generic[RecordT]):
    """
    In-memory collection of records read from a JSON array file.

    Attributes:
        data_file: Path the records were loaded from
        records: Every loaded record, in file order
    """

    record_type: Type[RecordT]
    resource_name: str = "record"

    def __init__(self, data_file: Union[str, Path]) -> None:
        """
        Load and validate the records in ``data_file``.

        Args:
            data_file: Path to a JSON file holding an array of records

        Raises:
            DataLoadException: If the file is missing, unreadable or malformed
        """
        self.data_file = Path(data_file)
        self.records: Tuple[RecordT, ...] = tuple(self._load(self.data_file))
        self._by_id: Dict[str, RecordT] = {}
        for record in self.records:
            # first occurrence of a duplicated id wins
            self._by_id.setdefault(record.id, record)

        logger.info(
            "Loaded JSON database",
            resource=self.resource_name,
            data_file=str(self.data_file),
            count=len(self.records),
        )

    def _load(self, data_file: Path) -> List[RecordT]:
        try:
            raw = data_file.read_bytes()
        except OSError as e:
            raise DataLoadException(str(data_file), e.strerror or str(e)) from e

        adapter = TypeAdapter(List[self.record_type])
        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            raise DataLoadException(
                str(data_file),
                f"{e.error_count()} validation error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e

    def size(self) -> int:
        """Number of records loaded."""
        return len(self.records)

    def get(self, record_id: str) -> Optional[RecordT]:
        """
        Look up a record by id.

        Args:
            record_id: The ``_id`` of the record

        Returns:
            The record, or None when no record has that id
        """
        return self._by_id.get(record_id)

    @staticmethod
    def first_value(query_params: QueryParams, key: str) -> Optional[str]:
        """
        Return the first value supplied for ``key``.

        Repeated query keys are allowed; only the first occurrence counts.
        """
        values = query_params.get(key)
        if not values:
            return None
        return values[0]

    @staticmethod
    def parse_int(parameter: str, value: str) -> int:
        """
        Parse a query parameter value as an integer.

        Raises:
            BadRequestException: If the value is not an integer
        """
        if not INTEGER_PATTERN.match(value):
            raise BadRequestException(
                parameter,
                value,
                f"Specified {parameter} '{value}' can't be parsed to an integer",
            )
        return int(value)
