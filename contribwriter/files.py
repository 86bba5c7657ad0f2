"""Auxiliary files written next to the pattern history."""

from datetime import datetime
from pathlib import Path

from .config import PATTERN_DOC_FILE

DEFAULT_GITIGNORE = """__pycache__/
*.py[cod]
.DS_Store
*.log
.env
.venv/
.vscode/
dist/
tmp/
"""


def pattern_doc(plan, now: datetime) -> str:
    opts = plan.options
    return f"""# GitHub Activity Display

## Current Message: "{plan.message}"

This repository creates a GitHub activity graph pattern displaying "{plan.message}".

### Configuration
- **Message**: {plan.message}
- **Width**: {plan.width} weeks
- **Intensity**: {opts.intensity} ({opts.commits_per_day} commits per pixel)
- **Total Commits**: {len(plan.commits)}
- **Positioning**: {opts.positioning}
- **Auto-Refresh**: {'Enabled' if opts.keep_in_view else 'Disabled'}

### Current GitHub Window
- **Start**: {plan.window.start}
- **End**: {plan.window.end}
- **Pattern Start**: {plan.start_date}

### Message Replacement
To replace this message with a new one:
```bash
contribwriter replace "NEW MESSAGE" --intensity=ultra
```

### Created: {now.date()}
"""


def write_pattern_doc(repo_path, plan, now: datetime) -> Path:
    path = Path(repo_path) / PATTERN_DOC_FILE
    path.write_text(pattern_doc(plan, now), encoding='utf-8')
    return path


def ensure_readme(repo_path, plan, now: datetime) -> bool:
    """Write README.md from the pattern doc only if there is none yet."""
    path = Path(repo_path) / 'README.md'
    if path.exists():
        return False
    path.write_text(pattern_doc(plan, now), encoding='utf-8')
    return True


def ensure_gitignore(repo_path) -> bool:
    path = Path(repo_path) / '.gitignore'
    if path.exists():
        return False
    path.write_text(DEFAULT_GITIGNORE, encoding='utf-8')
    return True
