# src/cache/record.py - v1
"""Schemaless record item: any JSON object with a string ``id``."""

from __future__ import annotations

import csv
import io
import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class RecordItem(BaseModel):
    """Generic cache item that keeps every field of the source object.

    The CSV form is two columns: the id, then the remaining fields as
    compact key-sorted JSON.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = Field(min_length=1)

    @property
    def payload(self) -> dict[str, Any]:
        """All fields except ``id``."""
        data = self.model_dump(mode="json")
        data.pop("id", None)
        return data

    def to_json_value(self) -> Any:
        return self.model_dump(mode="json")

    def to_csv_line(self) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="")
        writer.writerow(
            [self.id, json.dumps(self.payload, sort_keys=True, separators=(",", ":"))]
        )
        return buf.getvalue()

    @classmethod
    def parse_json(cls, value: Any) -> RecordItem | None:
        if not isinstance(value, dict):
            return None
        try:
            return cls.model_validate(value)
        except ValidationError:
            return None

    @classmethod
    def parse_csv(cls, line: str) -> RecordItem | None:
        rows = list(csv.reader([line]))
        if len(rows) != 1 or len(rows[0]) != 2:
            return None
        record_id, raw_fields = rows[0]
        try:
            fields = json.loads(raw_fields)
        except json.JSONDecodeError:
            return None
        if not isinstance(fields, dict) or "id" in fields:
            return None
        return cls.parse_json({"id": record_id, **fields})
