"""Weekly registry schemas.

The registry is a single JSON document listing every newsletter issue
("weekly") known to the site, together with an opaque settings mapping
used by the front end.

Document structure:
    weekly-config.json
    ├── weeklies              # list[WeeklyRecord], sorted by start date
    │   ├── date              # range start, YYYY-MM-DD
    │   ├── endDate           # range end, YYYY-MM-DD
    │   ├── filename          # weeklies/{start}-{end}issue-report.html
    │   └── ...
    └── settings              # passed through untouched
"""

import datetime

from pydantic import BaseModel, Field


class WeeklyRecord(BaseModel):
    """A single newsletter issue in the registry.

    Attributes:
        date: First day covered by the issue
        end_date: Last day covered by the issue
        filename: Canonical relative path of the issue HTML (unique key)
        title: Display title, normally "<product name> 第N期"
        summary: Short free-text description
        news_count: Estimated number of news items
        tool_count: Estimated number of tools mentioned
        tech_count: Estimated number of releases/launches mentioned
        published: Whether the issue HTML exists on disk
        blackboard_image: Relative path to the companion image, if any
    """

    # Hand-edited dates that do not parse are kept as written.
    date: datetime.date | str = Field(default="", union_mode="left_to_right")
    end_date: datetime.date | str | None = Field(
        default=None, alias="endDate", union_mode="left_to_right"
    )
    filename: str = ""
    title: str = ""
    summary: str = ""
    news_count: int = Field(default=0, alias="newsCount")
    tool_count: int = Field(default=0, alias="toolCount")
    tech_count: int = Field(default=0, alias="techCount")
    published: bool = False
    blackboard_image: str | None = Field(default=None, alias="blackboardImage")

    model_config = {"extra": "allow", "populate_by_name": True}


class WeeklyConfig(BaseModel):
    """The persisted registry document.

    Attributes:
        weeklies: Issue records, kept in ascending date order
        settings: Front-end settings, never interpreted by this tool
    """

    weeklies: list[WeeklyRecord] = []
    settings: dict = {}

    model_config = {"extra": "allow"}

    def find(self, filename: str) -> WeeklyRecord | None:
        """Return the record whose filename matches exactly, if any."""
        for weekly in self.weeklies:
            if weekly.filename == filename:
                return weekly
        return None
