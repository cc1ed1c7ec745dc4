"""Naming conventions and heuristic constants for the weekly registry."""

from pydantic import BaseModel


class RegistrySettings(BaseModel):
    """Conventions shared by the registry operations.

    Attributes:
        product_name: Newsletter name prefixed to every generated title
        issue_marker: Substring that marks a title as already numbered
        weekly_dir: Directory (relative to the project root) holding issues
        images_dir: Subdirectory of weekly_dir holding companion images
        image_prefix: Filename prefix of companion images
        image_extensions: Image extensions probed in order
        summary_template: Summary for issues discovered by a scan
        count_divisor: Keyword matches that approximate one mention
        max_count: Upper bound for keyword-based estimates
    """

    product_name: str = "AI圈热点周报"
    issue_marker: str = "第"
    weekly_dir: str = "weeklies"
    images_dir: str = "images"
    image_prefix: str = "ai_weekly_blackboard"
    image_extensions: tuple[str, ...] = (".png", ".jpg")
    summary_template: str = "{year}年{month}月的AI圈精彩内容，包含最新的技术突破和工具发布。"
    count_divisor: int = 3
    max_count: int = 10

    def issue_title(self, number: int) -> str:
        """Build the canonical title for the given 1-based issue number."""
        return f"{self.product_name} {self.issue_marker}{number}期"

    def normalize_title(self, title: str) -> str:
        """Prefix the product name unless the title is already numbered."""
        if self.issue_marker in title:
            return title
        return f"{self.product_name} {title}"


DEFAULT_SETTINGS = RegistrySettings()
