"""Content statistics for issue HTML files.

The counts are editorial estimates rather than exact parses. News items are
counted from the card markup used by the issue templates; tools and releases
are estimated from keyword frequency, scaled down and capped so that one
keyword-dense paragraph cannot dominate the figure.
"""

import logging
import math
import re
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)

# Older templates use news-item, newer ones news-card.
NEWS_MARKERS = ('class="news-item"', 'class="news-card"')

TOOL_PATTERN = re.compile(
    r"工具|tool|AI.*生成器|生成.*工具|创作.*工具|AI.*助手",
    re.IGNORECASE,
)

RELEASE_PATTERN = re.compile(
    r"发布|推出|上线|更新|升级|推送|推广|release|launch|update",
    re.IGNORECASE,
)


class ContentStats(BaseModel):
    """Estimated statistics for one issue."""

    news_count: int = 0
    tool_count: int = 0
    tech_count: int = 0

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.news_count, self.tool_count, self.tech_count)

    def __str__(self) -> str:
        return f"{self.news_count}/{self.tool_count}/{self.tech_count}"


def estimate_count(
    text: str,
    pattern: re.Pattern,
    divisor: int,
    max_count: int,
) -> int:
    """Estimate mentions from keyword frequency.

    Args:
        text: Text to scan
        pattern: Compiled keyword pattern
        divisor: Number of matches that approximate one mention
        max_count: Upper bound for the estimate

    Returns:
        ceil(matches / divisor), capped at max_count

    Examples:
        >>> estimate_count("tool tool tool tool", re.compile("tool"), 3, 10)
        2
    """
    matches = len(pattern.findall(text))
    return min(math.ceil(matches / divisor), max_count)


class ContentAnalyzer:
    """Derive ContentStats from issue HTML.

    Attributes:
        divisor: Keyword matches that approximate one mention
        max_count: Upper bound for tool and release estimates
    """

    def __init__(self, divisor: int = 3, max_count: int = 10):
        if divisor < 1:
            raise ValueError(f"divisor must be positive, got {divisor}")
        self.divisor = divisor
        self.max_count = max_count

    def analyze_text(self, content: str) -> ContentStats:
        """Estimate statistics for already loaded HTML."""
        news_count = max(content.count(marker) for marker in NEWS_MARKERS)
        return ContentStats(
            news_count=news_count,
            tool_count=estimate_count(
                content, TOOL_PATTERN, self.divisor, self.max_count
            ),
            tech_count=estimate_count(
                content, RELEASE_PATTERN, self.divisor, self.max_count
            ),
        )

    def analyze(self, path: Path) -> ContentStats:
        """Estimate statistics for an issue file.

        Unreadable files yield all-zero statistics.

        Args:
            path: Path to the issue HTML

        Returns:
            ContentStats for the file
        """
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not analyze {path}: {e}")
            return ContentStats()
        return self.analyze_text(content)
