"""Load and save the registry document."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from schemas.weekly import WeeklyConfig, WeeklyRecord

logger = logging.getLogger(__name__)


class ConfigStore:
    """Read and write a WeeklyConfig at a fixed path.

    Attributes:
        path: Location of the JSON document
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> WeeklyConfig:
        """Load the registry document.

        Only an unreadable file or malformed JSON empties the document.
        Records are validated one at a time; a record that cannot be read
        at all is dropped with a warning and the rest are kept.

        Returns:
            The parsed document, or an empty one if the file is missing,
            unreadable or not a JSON object
        """
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read config file {self.path}: {e}")
            return WeeklyConfig()

        if not isinstance(data, dict):
            logger.error(f"Failed to read config file {self.path}: not a JSON object")
            return WeeklyConfig()

        records = data.pop("weeklies", [])
        if not isinstance(records, list):
            logger.warning(f"Ignoring non-list weeklies in {self.path}")
            records = []

        settings = data.pop("settings", {})
        if not isinstance(settings, dict):
            logger.warning(f"Ignoring non-object settings in {self.path}")
            settings = {}

        weeklies = []
        for index, record in enumerate(records):
            try:
                weeklies.append(WeeklyRecord.model_validate(record))
            except ValidationError as e:
                logger.warning(f"Skipping unreadable weekly #{index}: {e}")

        return WeeklyConfig(weeklies=weeklies, settings=settings, **data)

    def save(self, config: WeeklyConfig) -> bool:
        """Overwrite the registry document.

        Args:
            config: Document to persist

        Returns:
            True if the file was written, False otherwise
        """
        try:
            self.path.write_text(
                config.model_dump_json(indent=2, by_alias=True, exclude_none=True),
                encoding="utf-8",
            )
        except OSError as e:
            logger.error(f"Failed to write config file {self.path}: {e}")
            return False
        logger.info("Config file updated")
        return True
