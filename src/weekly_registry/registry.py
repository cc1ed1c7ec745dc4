"""Operations on the weekly registry document.

Every operation receives the loaded WeeklyConfig, mutates it in place and
leaves persistence to the caller:

    store = ConfigStore(path)
    config = store.load()
    result = rescan(config, root)
    if result.changed:
        store.save(config)
"""

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from schemas.weekly import WeeklyConfig, WeeklyRecord

from .analyzer import ContentAnalyzer
from .exceptions import WeeklyNotFoundError
from .filenames import date_span, generate_filename, parse_filename
from .settings import DEFAULT_SETTINGS, RegistrySettings

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Outcome of a directory rescan.

    Attributes:
        added: Number of records created for newly found files
        updated: Number of changes applied to existing records
    """

    added: int = 0
    updated: int = 0

    @property
    def changed(self) -> bool:
        return self.added > 0 or self.updated > 0


def sort_weeklies(config: WeeklyConfig) -> None:
    """Order records by start date, earliest first.

    Dates are compared in ISO form so unparsed dates still sort.
    """
    config.weeklies.sort(key=lambda weekly: str(weekly.date))


def renumber(config: WeeklyConfig, settings: RegistrySettings = DEFAULT_SETTINGS) -> None:
    """Retitle every record after its position in the sorted list."""
    for index, weekly in enumerate(config.weeklies, start=1):
        weekly.title = settings.issue_title(index)


def add_or_update(
    config: WeeklyConfig,
    start: date,
    end: date,
    title: str,
    summary: str,
    news_count: int = 0,
    tool_count: int = 0,
    tech_count: int = 0,
    root: Path = Path("."),
    settings: RegistrySettings = DEFAULT_SETTINGS,
) -> WeeklyRecord:
    """Add an issue record, or overwrite the one with the same filename.

    The published flag reflects whether the issue file currently exists
    under root.

    Args:
        config: Registry document to modify
        start: First day covered by the issue
        end: Last day covered by the issue
        title: Display title; prefixed with the product name if unnumbered
        summary: Short description
        news_count: News item count
        tool_count: Tool count
        tech_count: Release count
        root: Project root that canonical filenames are relative to
        settings: Naming conventions

    Returns:
        The added or updated record
    """
    filename = generate_filename(start, end, settings.weekly_dir)
    fields = {
        "title": settings.normalize_title(title),
        "summary": summary,
        "news_count": news_count,
        "tool_count": tool_count,
        "tech_count": tech_count,
        "published": (root / filename).exists(),
    }

    weekly = config.find(filename)
    if weekly is not None:
        logger.warning(f"Weekly already exists, updating record: {filename}")
        for name, value in fields.items():
            setattr(weekly, name, value)
    else:
        weekly = WeeklyRecord(date=start, end_date=end, filename=filename, **fields)
        config.weeklies.append(weekly)

    sort_weeklies(config)
    return weekly


def find_image(
    images_dir: Path,
    span: str,
    settings: RegistrySettings = DEFAULT_SETTINGS,
) -> str | None:
    """Look for the companion image of an issue.

    Args:
        images_dir: Directory holding companion images
        span: Compact date range, e.g. "20251001-20251007"
        settings: Naming conventions

    Returns:
        Relative path of the first matching image, or None
    """
    base_name = f"{settings.image_prefix}_{span}"
    for extension in settings.image_extensions:
        name = f"{base_name}{extension}"
        if (images_dir / name).exists():
            return f"{settings.weekly_dir}/{settings.images_dir}/{name}"
    return None


def rescan(
    config: WeeklyConfig,
    root: Path = Path("."),
    settings: RegistrySettings = DEFAULT_SETTINGS,
    analyzer: ContentAnalyzer | None = None,
) -> ScanResult:
    """Reconcile the registry with the issue files on disk.

    New issue files are added as published records; known ones get fresh
    statistics, their latest companion image and the published flag. All
    titles are then renumbered in date order, replacing custom titles.

    Args:
        config: Registry document to modify
        root: Project root containing the issue directory
        settings: Naming conventions
        analyzer: Content analyzer (default: built from settings)

    Returns:
        ScanResult with added and updated counts
    """
    analyzer = analyzer or ContentAnalyzer(settings.count_divisor, settings.max_count)
    weekly_dir = root / settings.weekly_dir
    images_dir = weekly_dir / settings.images_dir

    if not weekly_dir.exists():
        weekly_dir.mkdir(parents=True)
        logger.info(f"Created directory {weekly_dir}")

    result = ScanResult()

    for path in sorted(weekly_dir.iterdir()):
        date_range = parse_filename(path.name)
        if date_range is None:
            logger.debug(f"Skipping {path.name}")
            continue
        start, end = date_range

        filename = f"{settings.weekly_dir}/{path.name}"
        stats = analyzer.analyze(path)
        image = find_image(images_dir, date_span(start, end), settings)

        weekly = config.find(filename)
        if weekly is None:
            config.weeklies.append(
                WeeklyRecord(
                    date=start,
                    end_date=end,
                    filename=filename,
                    title=settings.product_name,
                    summary=settings.summary_template.format(
                        year=start.year, month=f"{start.month:02d}"
                    ),
                    news_count=stats.news_count,
                    tool_count=stats.tool_count,
                    tech_count=stats.tech_count,
                    published=True,
                    blackboard_image=image,
                )
            )
            result.added += 1
            logger.info(f"Found new file: {filename} ({stats})")
            if image:
                logger.info(f"  Blackboard image: {image}")
            continue

        old_stats = (weekly.news_count, weekly.tool_count, weekly.tech_count)
        weekly.news_count = stats.news_count
        weekly.tool_count = stats.tool_count
        weekly.tech_count = stats.tech_count

        if image and weekly.blackboard_image != image:
            weekly.blackboard_image = image
            result.updated += 1
            logger.info(f"Updated blackboard image: {filename} -> {image}")

        if not weekly.published:
            weekly.published = True
            result.updated += 1
            logger.info(f"Marked as published: {filename}")

        if old_stats != stats.as_tuple():
            result.updated += 1
            logger.info(
                f"Updated stats: {filename} "
                f"({'/'.join(map(str, old_stats))} -> {stats})"
            )

    sort_weeklies(config)
    renumber(config, settings)
    return result


def mark_published(config: WeeklyConfig, filename: str) -> WeeklyRecord:
    """Flag the record with the given filename as published.

    Args:
        config: Registry document to modify
        filename: Exact canonical filename of the record

    Returns:
        The updated record

    Raises:
        WeeklyNotFoundError: If no record has this filename
    """
    weekly = config.find(filename)
    if weekly is None:
        raise WeeklyNotFoundError(filename)
    weekly.published = True
    return weekly
