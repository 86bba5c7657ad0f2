"""
Command line interface.

Usage:
  contribwriter preview "AWS HERO" --intensity=ultra
  contribwriter create AI --intensity=ultra
  contribwriter replace "NEW MESSAGE" --force-replace
  contribwriter refresh
  contribwriter status | window | versions | setup | help
"""

import argparse
import sys
import warnings
from datetime import date
from pathlib import Path

from .config import INTENSITY_LEVELS, WINDOW_WEEKS, Options
from .errors import ConfigurationError, ContribWriterError, ExternalCommandFailure, UnsupportedCharacterWarning
from .generator import build_plan, create_pattern, refresh_plan, replace_options
from .git import GitCommitWriter
from .preview import RECOMMENDED_VERSIONS, render_png, show_plan, show_versions
from .snapshot import load_snapshot
from .window import current_window

EXAMPLES = """
examples:
  contribwriter create AI --intensity=ultra
  contribwriter replace "AWS HERO" --intensity=ultra --force-replace
  contribwriter preview "AWS HERO" --intensity=extreme --png preview.png
  contribwriter window

after creating, push with: git push -f origin main
"""


def _date(value):
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--repo", default=".", help="Path of the target git repository.")
    common.add_argument("--intensity", choices=list(INTENSITY_LEVELS), default=None,
                        help="Brightness level (default: ultra).")
    common.add_argument("--commits", type=int, default=None,
                        help="Commits per pixel; overrides --intensity.")
    common.add_argument("--no-center", action="store_true", help="Left-align instead of centering.")
    common.add_argument("-f", "--force-replace", action="store_true",
                        help="Replace existing history; also allows oversized messages.")
    common.add_argument("-k", "--keep-in-view", action="store_true",
                        help="Plan periodic refreshes so the message stays visible.")
    common.add_argument("--use-utc", action="store_true", help="Schedule commits in UTC instead of local time.")
    common.add_argument("-d", "--dry-run", action="store_true", help="Preview only, don't create commits.")
    common.add_argument("--start-date", type=_date, default=None,
                        help="Explicit pattern start (YYYY-MM-DD); overrides centering.")
    common.add_argument("--seed", type=int, default=None, help="Seed for the minute/second jitter.")

    ap = argparse.ArgumentParser(prog="contribwriter", epilog=EXAMPLES,
                                 description="Write a message onto the GitHub activity graph with backdated commits.",
                                 formatter_class=argparse.RawDescriptionHelpFormatter)
    sub = ap.add_subparsers(dest="command")

    p = sub.add_parser("preview", aliases=["p"], parents=[common], help="Preview without creating commits.")
    p.add_argument("message")
    p.add_argument("--png", default=None, help="Also write the preview as a PNG image.")
    p.set_defaults(func=cmd_preview)

    p = sub.add_parser("create", aliases=["c", "generate"], parents=[common], help="Create the activity pattern.")
    p.add_argument("message")
    p.set_defaults(func=cmd_create)

    p = sub.add_parser("replace", aliases=["swap"], parents=[common], help="Replace the existing message.")
    p.add_argument("message")
    p.set_defaults(func=cmd_replace)

    p = sub.add_parser("refresh", aliases=["r"], parents=[common], help="Recenter the saved pattern.")
    p.set_defaults(func=cmd_refresh)

    p = sub.add_parser("status", aliases=["s"], help="Show the saved configuration.")
    p.add_argument("--repo", default=".", help="Path of the target git repository.")
    p.set_defaults(func=cmd_status)

    p = sub.add_parser("window", aliases=["w"], help="Show the current activity window.")
    p.set_defaults(func=cmd_window)

    p = sub.add_parser("setup", parents=[common], help="Interactive setup wizard.")
    p.set_defaults(func=cmd_setup)

    p = sub.add_parser("versions", aliases=["v", "list"], help="List recommended messages and levels.")
    p.set_defaults(func=cmd_versions)

    p = sub.add_parser("help", aliases=["h"], help="Show this help message.")
    p.set_defaults(func=lambda args: _help(ap))
    return ap


def _help(ap) -> int:
    ap.print_help()
    return 0


# ---------- commands ----------

def cmd_preview(args) -> int:
    plan = build_plan(args.message, Options.from_args(args))
    show_plan(plan, color=sys.stdout.isatty())
    if args.png:
        print(f"🖼️  Wrote {render_png(plan, args.png)}")
    return 0


def _create(args, options) -> int:
    plan = build_plan(args.message, options)
    show_plan(plan, color=sys.stdout.isatty())
    if options.dry_run:
        print(f"\n[DRY-RUN] Would create {len(plan.commits)} commits")
        return 0
    print("\n⏳ Creating commits...")
    create_pattern(args.repo, plan, GitCommitWriter(args.repo))
    push = "git push -f origin HEAD" if options.force_replace else "git push -u origin HEAD"
    print("\n🎯 Next steps:")
    print(f"1. Push your changes: {push}")
    print("2. Wait 5-10 minutes for GitHub to update the activity graph")
    print(f"3. Your activity graph will display: \"{plan.message}\"")
    return 0


def cmd_create(args) -> int:
    return _create(args, Options.from_args(args))


def cmd_replace(args) -> int:
    print(f"🔄 Replacing current message with \"{args.message.upper()}\"...\n")
    return _create(args, replace_options(Options.from_args(args)))


def cmd_refresh(args) -> int:
    plan = refresh_plan(args.repo, args=args)
    print(f"🔄 Refreshing \"{plan.message}\" pattern...\n")
    show_plan(plan, color=sys.stdout.isatty())
    if plan.options.dry_run:
        print(f"\n[DRY-RUN] Would recreate {len(plan.commits)} commits")
        return 0
    create_pattern(args.repo, plan, GitCommitWriter(args.repo))
    print("\n✅ Pattern refreshed! Push with: git push -f origin HEAD")
    return 0


def cmd_status(args) -> int:
    snap = load_snapshot(args.repo)
    opts = snap.options
    print("📊 Current Configuration:")
    print(f"   • Version: \"{snap.version}\"")
    print(f"   • Intensity: {opts.intensity}")
    print(f"   • Commits per pixel: {opts.commits_per_day}")
    print(f"   • Positioning: {opts.positioning}")
    print(f"   • Keep in view: {'Yes' if opts.keep_in_view else 'No'}")
    print(f"   • Message width: {snap.message_width} weeks")
    print(f"   • Created: {snap.created.date()}")
    if snap.window:
        print("\n📅 GitHub Window (when created):")
        print(f"   • Window start: {snap.window.start}")
        print(f"   • Window end: {snap.window.end}")
    if opts.keep_in_view and snap.next_refresh:
        days = (snap.next_refresh - date.today()).days
        print("\n🔄 Auto-refresh schedule:")
        print(f"   • Next refresh: {snap.next_refresh}")
        if days <= 0:
            print("   ⚠️  Refresh needed now! Run: contribwriter refresh")
        else:
            print(f"   • Days until refresh: {days}")

    writer = GitCommitWriter(args.repo)
    if not writer.is_repository():
        print("\n⚠️  Not a git repository")
    elif writer.is_clean():
        print("\n✅ Repository is up to date")
    else:
        print("\n📝 Uncommitted changes detected")
    return 0


def cmd_window(args) -> int:
    window = current_window()
    week = window.week_of(date.today())
    print("📅 Current GitHub Activity Window:")
    print(f"   • Start: {window.start}")
    print(f"   • End: {window.end}")
    print(f"   • Total weeks: {WINDOW_WEEKS}")
    print(f"   • Current position: Week {week + 1} of {WINDOW_WEEKS}")
    if week > 40:
        print("   ⚠️  Window is getting close to rollover - consider refreshing patterns")
    return 0


def cmd_versions(args) -> int:
    show_versions()
    return 0


SETUP_INTENSITIES = {'1': 'low', '2': 'medium', '3': 'high', '4': 'max', '5': 'ultra', '6': 'extreme'}


def _yes(answer, default):
    answer = answer.strip().lower()
    if not answer:
        return default
    return answer.startswith('y')


def run_setup(repo, ask=input, writer=None, now=None) -> int:
    """Interactive wizard: pick a message, intensity and placement, then create."""
    window = current_window(now)
    print(f"\n📅 Current GitHub Activity Window: {window.start} to {window.end}")
    versions = list(RECOMMENDED_VERSIONS)
    print("\n📋 Available versions:")
    for i, v in enumerate(versions, 1):
        print(f"{i}. {v}")

    choice = ask(f"\nChoose version (1-{len(versions)} or type custom): ").strip()
    if choice.isdigit() and 1 <= int(choice) <= len(versions):
        message = versions[int(choice) - 1]
    else:
        message = choice.upper() or 'AI'

    print("\n🔥 Intensity levels:")
    for key, name in SETUP_INTENSITIES.items():
        print(f"{key}. {name} ({INTENSITY_LEVELS[name]} commits per pixel)")
    intensity = SETUP_INTENSITIES.get(ask("\nChoose intensity (1-6): ").strip(), 'ultra')

    options = Options.build(
        intensity=intensity,
        center_message=_yes(ask("\nCenter message in GitHub window? (Y/n): "), True),
        force_replace=_yes(ask("\nReplace existing pattern completely? (y/N): "), False),
        keep_in_view=_yes(ask("\nKeep pattern always visible with auto-refresh? (y/N): "), False),
    )
    print("\n📋 Your configuration:")
    print(f"   • Version: \"{message}\"")
    print(f"   • Intensity: {options.intensity}")
    print(f"   • Positioning: {options.positioning}")
    print(f"   • Force replace: {'Yes' if options.force_replace else 'No'}")
    print(f"   • Keep in view: {'Yes' if options.keep_in_view else 'No'}")
    if not _yes(ask("\nProceed with this setup? (Y/n): "), True):
        print("❌ Setup cancelled.")
        return 0

    plan = build_plan(message, options, now=now)
    show_plan(plan, color=sys.stdout.isatty())
    create_pattern(repo, plan, writer or GitCommitWriter(repo), now=now)
    print("\n🎉 Setup complete!")
    return 0


def cmd_setup(args) -> int:
    return run_setup(args.repo)


# ---------- entry point ----------

def _show_warning(message, category, filename, lineno, file=None, line=None):
    sys.stderr.write(f"⚠️  {message}\n")


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if not getattr(args, "func", None):
        return _help(ap)
    if hasattr(args, "repo"):
        args.repo = str(Path(args.repo).resolve())

    with warnings.catch_warnings():
        warnings.simplefilter("always", UnsupportedCharacterWarning)
        warnings.showwarning = _show_warning
        try:
            return args.func(args)
        except ConfigurationError as e:
            sys.stderr.write(f"❌ {e}\n")
            if "too wide" in str(e):
                sys.stderr.write("💡 Try adding --force-replace to override size limits\n")
            return 1
        except ExternalCommandFailure as e:
            sys.stderr.write(f"❌ git error: {e}\n")
            return 1
        except ContribWriterError as e:
            sys.stderr.write(f"❌ {e}\n")
            return 1
        except KeyboardInterrupt:
            sys.stderr.write("\n👋 Interrupted; commits created so far were kept.\n")
            return 130
