"""
Configuration: module constants plus the immutable Options value.

Options is assembled once at the CLI boundary (or from a saved snapshot)
and passed by value into the engine. All defaulting lives here.
"""

from dataclasses import asdict, dataclass, replace
from datetime import date
from typing import Optional

from .errors import ConfigurationError

# Graph geometry
WINDOW_WEEKS = 53
DAYS_PER_WEEK = 7

# Files written into the target repository
SNAPSHOT_FILE = '.github-activity-config.json'
ACTIVITY_FILE = 'pattern-activity.txt'
PATTERN_DOC_FILE = 'ACTIVITY-PATTERN.md'

# Commit creation
BATCH_SIZE = 100
REPLACEMENT_BRANCH = 'contribwriter-new-pattern'
DEFAULT_BRANCH = 'main'

# Refresh planning
REFRESH_INTERVAL_WEEKS = 6
REFRESH_COUNT = 12

INTENSITY_LEVELS = {
    'low': 3,
    'medium': 8,
    'high': 15,
    'max': 20,
    'ultra': 25,
    'extreme': 30,
}
DEFAULT_INTENSITY = 'ultra'


def commits_for_intensity(intensity: str) -> int:
    try:
        return INTENSITY_LEVELS[intensity]
    except KeyError:
        choices = ', '.join(INTENSITY_LEVELS)
        raise ConfigurationError(f"Unknown intensity {intensity!r}. Choose one of: {choices}") from None


@dataclass(frozen=True)
class Options:
    """Effective settings for one run."""

    intensity: str = DEFAULT_INTENSITY
    commits_per_day: int = INTENSITY_LEVELS[DEFAULT_INTENSITY]
    center_message: bool = True
    force_replace: bool = False
    keep_in_view: bool = False
    use_utc: bool = False
    start_date: Optional[date] = None
    dry_run: bool = False
    seed: Optional[int] = None

    def __post_init__(self):
        if self.commits_per_day < 1:
            raise ConfigurationError(f"commits per day must be >= 1, got {self.commits_per_day}")

    @classmethod
    def build(cls, intensity=None, commits=None, **kwargs) -> 'Options':
        """An explicit `commits` count overrides the intensity level."""
        intensity = intensity or DEFAULT_INTENSITY
        per_day = commits_for_intensity(intensity)
        if commits is not None:
            per_day = int(commits)
        return cls(intensity=intensity, commits_per_day=per_day, **kwargs)

    @classmethod
    def from_args(cls, args) -> 'Options':
        return cls.build(
            intensity=getattr(args, 'intensity', None),
            commits=getattr(args, 'commits', None),
            center_message=not getattr(args, 'no_center', False),
            force_replace=getattr(args, 'force_replace', False),
            keep_in_view=getattr(args, 'keep_in_view', False),
            use_utc=getattr(args, 'use_utc', False),
            start_date=getattr(args, 'start_date', None),
            dry_run=getattr(args, 'dry_run', False),
            seed=getattr(args, 'seed', None),
        )

    def with_changes(self, **changes) -> 'Options':
        return replace(self, **changes)

    def overlay_args(self, args) -> 'Options':
        """Layer the flags given explicitly on the command line over these options."""
        changes = {}
        intensity = getattr(args, 'intensity', None)
        if intensity:
            changes['intensity'] = intensity
            changes['commits_per_day'] = commits_for_intensity(intensity)
        if getattr(args, 'commits', None) is not None:
            changes['commits_per_day'] = int(args.commits)
        if getattr(args, 'no_center', False):
            changes['center_message'] = False
        for flag in ('keep_in_view', 'use_utc', 'dry_run'):
            if getattr(args, flag, False):
                changes[flag] = True
        if getattr(args, 'start_date', None) is not None:
            changes['start_date'] = args.start_date
        if getattr(args, 'seed', None) is not None:
            changes['seed'] = args.seed
        return self.with_changes(**changes)

    def to_dict(self) -> dict:
        data = asdict(self)
        return {
            'intensity': data['intensity'],
            'commitsPerDay': data['commits_per_day'],
            'centerMessage': data['center_message'],
            'forceReplace': data['force_replace'],
            'keepInView': data['keep_in_view'],
            'useUtc': data['use_utc'],
            'startDate': self.start_date.isoformat() if self.start_date else None,
            'seed': data['seed'],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Options':
        start = data.get('startDate')
        return cls(
            intensity=data.get('intensity') or DEFAULT_INTENSITY,
            commits_per_day=int(data.get('commitsPerDay') or INTENSITY_LEVELS[DEFAULT_INTENSITY]),
            center_message=data.get('centerMessage', True),
            force_replace=data.get('forceReplace', False),
            keep_in_view=data.get('keepInView', False),
            use_utc=data.get('useUtc', False),
            start_date=date.fromisoformat(start[:10]) if start else None,
            seed=data.get('seed'),
        )

    @property
    def positioning(self) -> str:
        return 'Centered' if self.center_message else 'Left-aligned'
