"""Pytest fixtures for weekly-registry tests."""

import json

import pytest


@pytest.fixture
def project_root(tmp_path):
    """Create a project root with an empty weeklies directory."""
    (tmp_path / "weeklies").mkdir()
    return tmp_path


@pytest.fixture
def config_path(project_root):
    """Path of the registry file inside the project root."""
    return project_root / "weekly-config.json"


@pytest.fixture
def sample_weekly_record():
    """Sample registry record as stored on disk."""
    return {
        "date": "2025-10-01",
        "endDate": "2025-10-07",
        "filename": "weeklies/20251001-20251007issue-report.html",
        "title": "AI圈热点周报 第8期",
        "summary": "十月第一周AI圈精彩内容",
        "newsCount": 15,
        "toolCount": 8,
        "techCount": 4,
        "published": True,
    }


@pytest.fixture
def sample_issue_html():
    """Issue HTML with two news cards, seven tool and three release keywords."""
    return """<!DOCTYPE html>
<html lang="zh-CN">
<body>
  <div class="news-card">
    <h2>OpenAI 发布 新模型</h2>
    <p>一款新的写作工具上线了。</p>
  </div>
  <div class="news-card">
    <h2>Tool roundup</h2>
    <p>Three tools worth a look, plus an update.</p>
  </div>
  <section class="tools">
    <p>工具</p>
    <p>工具</p>
    <p>tool</p>
  </section>
</body>
</html>
"""


@pytest.fixture
def write_config(config_path):
    """Write a registry document and return its path."""

    def _write(weeklies, settings=None):
        document = {"weeklies": weeklies, "settings": settings or {}}
        config_path.write_text(
            json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8"
        )
        return config_path

    return _write
