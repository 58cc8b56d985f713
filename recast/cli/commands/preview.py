"""Preview command - run a record through the configured transforms."""

import asyncio
import json
import sys
from pathlib import Path

import cyclopts
from pydantic import ValidationError as PydanticValidationError

from recast.application.di import create_container
from recast.cli.console import Console
from recast.domain.index.model.record import IndexRecord
from recast.domain.index.service.transform import IndexingTransformStage
from recast.domain.shared.error import RecastError

app = cyclopts.App(name="preview", help="Preview transforms on a record")


def load_record(path: Path) -> IndexRecord:
    """Load a record from a JSON file with id, category, item_type and fields."""
    return IndexRecord.model_validate(json.loads(path.read_text()))


async def _transform(index: str, record: IndexRecord) -> IndexRecord:
    container = create_container()
    try:
        stage = await container.get(IndexingTransformStage)
        return await stage.process(index, record)
    finally:
        await container.close()


@app.default
def preview(
    record_file: Path,
    /,
    index: str = "content",
    as_json: bool = False,
) -> None:
    """Run a record through the transforms registered on an index.

    Nothing is written to the index.

    Args:
        record_file: JSON file holding the record.
        index: Index whose transforms to apply.
        as_json: Print the transformed record as JSON.
    """
    console = Console()

    try:
        record = load_record(record_file)
    except (OSError, json.JSONDecodeError, PydanticValidationError) as e:
        console.error(f"Could not read record from {record_file}", hint=str(e))
        sys.exit(1)

    try:
        result = asyncio.run(_transform(index, record))
    except RecastError as e:
        console.error(e.message, hint=e.code)
        sys.exit(1)

    if as_json:
        print(result.model_dump_json(indent=2))
        return

    console.record(result, added=set(result.fields) - set(record.fields))
