"""JSON snapshot of the configuration that generated the current pattern."""

import json
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

from .config import SNAPSHOT_FILE, Options
from .errors import MissingConfiguration
from .window import Window


@dataclass(frozen=True)
class Snapshot:
    version: str
    options: Options
    created: datetime
    message_width: int
    window: Optional[Window]
    refresh_schedule: List[date] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'version': self.version,
            'options': self.options.to_dict(),
            'created': self.created.isoformat(),
            'messageWidth': self.message_width,
            'refreshSchedule': [d.isoformat() for d in self.refresh_schedule],
            'windowInfo': {
                'startDate': datetime.combine(self.window.start, datetime.min.time()).isoformat(),
                'endDate': datetime.combine(self.window.end, datetime.min.time()).isoformat(),
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Snapshot':
        info = data.get('windowInfo') or {}
        window = Window(
            start=date.fromisoformat(info['startDate'][:10]),
            end=date.fromisoformat(info['endDate'][:10]),
        ) if info else None
        return cls(
            version=data['version'],
            options=Options.from_dict(data.get('options') or {}),
            created=datetime.fromisoformat(data['created']),
            message_width=int(data.get('messageWidth', 0)),
            window=window,
            refresh_schedule=[date.fromisoformat(d[:10]) for d in data.get('refreshSchedule') or []],
        )

    @property
    def next_refresh(self) -> Optional[date]:
        return self.refresh_schedule[0] if self.refresh_schedule else None


def snapshot_path(repo_path) -> Path:
    return Path(repo_path) / SNAPSHOT_FILE


def save_snapshot(repo_path, snapshot: Snapshot) -> Path:
    path = snapshot_path(repo_path)
    path.write_text(json.dumps(snapshot.to_dict(), indent=2) + '\n', encoding='utf-8')
    return path


def load_snapshot(repo_path) -> Snapshot:
    path = snapshot_path(repo_path)
    if not path.exists():
        raise MissingConfiguration(path)
    return Snapshot.from_dict(json.loads(path.read_text(encoding='utf-8')))
