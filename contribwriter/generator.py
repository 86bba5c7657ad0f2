"""
Build a pattern plan and turn it into git history.

PatternPlan carries everything one run needs: the composed grid, the
window, the placement and the commit schedule. The create/replace/refresh
flows below are the only places that touch the filesystem or git.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

from . import files
from .config import ACTIVITY_FILE, BATCH_SIZE, Options
from .errors import ConfigurationError, ContribWriterError
from .grid import Grid, compose, normalize
from .refresh import refresh_schedule
from .schedule import Jitter, RandomJitter, ScheduledCommit, active_dates, schedule
from .snapshot import Snapshot, load_snapshot, save_snapshot
from .window import Window, current_window, place


@dataclass(frozen=True)
class PatternPlan:
    message: str
    options: Options
    grid: Grid
    window: Window
    start_date: date
    commits: List[ScheduledCommit] = field(repr=False)
    refresh_dates: List[date] = field(default_factory=list)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def active_dates(self) -> List[date]:
        return active_dates(self.grid, self.start_date)

    def snapshot(self, created: datetime) -> Snapshot:
        return Snapshot(
            version=self.message,
            options=self.options,
            created=created,
            message_width=self.width,
            window=self.window,
            refresh_schedule=list(self.refresh_dates),
        )


def build_plan(message: str, options: Options, now: Optional[datetime] = None,
               jitter: Optional[Jitter] = None) -> PatternPlan:
    """
    Compose, place and schedule `message`. Raises ConfigurationError before
    anything is written when the message is empty or does not fit.
    """
    if not message or not message.strip():
        raise ConfigurationError("Please specify a message to render.")
    now = now or datetime.now()
    message = normalize(message)
    grid = compose(message)
    if grid.width == 0:
        raise ConfigurationError(f"Message {message!r} has no supported characters.")

    window = current_window(now)
    start = place(window, grid.width, center=options.center_message,
                  allow_overflow=options.force_replace, start_date=options.start_date)
    commits = schedule(grid, start, options.commits_per_day, use_utc=options.use_utc,
                       jitter=jitter or RandomJitter(options.seed))
    refresh = refresh_schedule(start, grid.width, now) if options.keep_in_view else []
    return PatternPlan(message=message, options=options, grid=grid, window=window,
                       start_date=start, commits=commits, refresh_dates=refresh)


def write_commits(plan: PatternPlan, writer, activity_path: Path,
                  batch_size: int = BATCH_SIZE, out=print) -> int:
    """
    Create one commit per scheduled timestamp, appending a line to the
    activity file first so every commit has a diff. Stops at the first
    failure or interrupt; commits already made are kept, and the activity
    line of the commit that did not complete is reported as left behind
    (the next run commits it along with its own first line).
    """
    total = len(plan.commits)
    batches = -(-total // batch_size)
    done = 0
    for b in range(batches):
        for item in plan.commits[b * batch_size:(b + 1) * batch_size]:
            stamp = item.timestamp
            line = f"{plan.message}: {stamp.date()} {stamp.strftime('%H:%M:%S')} | Commit {item.index}\n"
            with open(activity_path, 'a', encoding='utf-8') as f:
                f.write(line)
            try:
                writer.create(stamp, f"{plan.message}: activity {item.index}")
            except (ContribWriterError, KeyboardInterrupt):
                out(f"⚠️  Stopped after {done} commits; uncommitted line left in "
                    f"{Path(activity_path).name}: {line.strip()}")
                raise
            done += 1
        out(f"📈 Batch {b + 1}/{batches} complete ({round((b + 1) / batches * 100)}%)")
    return done


def create_pattern(repo_path, plan: PatternPlan, writer, now: Optional[datetime] = None,
                   out=print) -> int:
    """Write the auxiliary files and the commit history for `plan`."""
    repo_path = Path(repo_path)
    now = now or datetime.now()
    opts = plan.options

    out(f"🤖 Creating activity pattern: \"{plan.message}\"")
    out(f"🔥 Intensity: {opts.intensity} ({opts.commits_per_day} commits per pixel)")
    out(f"📅 {len(plan.commits)} total commits scheduled")
    out(f"📊 Message width: {plan.width} weeks")
    out(f"🎯 Message positioning: {opts.positioning}")
    out(f"📅 Current visible window: {plan.window.start} to {plan.window.end}")
    if opts.keep_in_view:
        out(f"🔄 Auto-refresh enabled - {len(plan.refresh_dates)} refresh points scheduled")

    writer.ensure_repository()
    replacing = opts.force_replace and bool(plan.commits)
    if replacing:
        out("🔄 Force replacing existing pattern...")
        writer.start_replacement()

    save_snapshot(repo_path, plan.snapshot(now))
    files.write_pattern_doc(repo_path, plan, now)
    if files.ensure_readme(repo_path, plan, now):
        out("📄 Created new README.md with activity pattern information")
    else:
        out("📄 Created ACTIVITY-PATTERN.md with pattern information (README.md preserved)")
    if files.ensure_gitignore(repo_path):
        out("📄 Created default .gitignore file")

    out(f"⚡ Creating {len(plan.commits)} commits...")
    done = write_commits(plan, writer, repo_path / ACTIVITY_FILE, out=out)

    if replacing:
        branch = writer.finish_replacement()
        out(f"✅ Updated {branch} branch with new pattern")
    out(f"✅ Activity pattern created: {done} commits")
    return done


def refresh_plan(repo_path, now: Optional[datetime] = None, jitter: Optional[Jitter] = None,
                 args=None) -> PatternPlan:
    """
    Plan for the saved pattern recentered on the current window, with any
    explicit command line flags in `args` layered over the saved options.
    Fails with MissingConfiguration, touching nothing, when no snapshot exists.
    """
    snap = load_snapshot(repo_path)
    options = snap.options.with_changes(start_date=None, force_replace=True)
    if args is not None:
        options = options.overlay_args(args)
    return build_plan(snap.version, options, now=now, jitter=jitter)


def refresh_pattern(repo_path, writer, now: Optional[datetime] = None,
                    jitter: Optional[Jitter] = None, args=None, out=print) -> int:
    """Regenerate the saved pattern; a dry run stops after planning."""
    plan = refresh_plan(repo_path, now=now, jitter=jitter, args=args)
    out(f"🔄 Refreshing \"{plan.message}\" pattern...")
    if plan.options.dry_run:
        out(f"[DRY-RUN] Would recreate {len(plan.commits)} commits")
        return 0
    return create_pattern(repo_path, plan, writer, now=now, out=out)


def replace_options(options: Options) -> Options:
    return options.with_changes(force_replace=True, center_message=True)
