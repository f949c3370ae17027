from __future__ import annotations

import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from jsonschema import ValidationError
from jsonschema.validators import Draft202012Validator

from .errors import DiscordError, SchemaInvalid

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


@lru_cache(maxsize=None)
def _load_validator(schema_path: Path) -> Draft202012Validator:
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


@dataclass(frozen=True)
class SchemaRegistry:
    schemas_base_dir: Path = field(default=SCHEMAS_DIR)

    def validate(
        self,
        document: dict,
        schema_filename: str,
        *,
        error: type[DiscordError] = SchemaInvalid,
    ) -> None:
        validator = _load_validator(self.schemas_base_dir / schema_filename)
        try:
            validator.validate(document)
        except ValidationError as e:
            location = "/".join(str(p) for p in e.absolute_path) or "<root>"
            raise error(code="SCHEMA_INVALID", message=f"{location}: {e.message}") from e
        except RecursionError as e:
            raise error(code="SCHEMA_INVALID", message="document is nested too deeply") from e
