"""Terminal and PNG previews of a plan laid over the current window."""

import sys
from pathlib import Path

from .config import DAYS_PER_WEEK, INTENSITY_LEVELS, WINDOW_WEEKS
from .grid import DAY_NAMES, message_width

# Pillow is used to draw the PNG preview. If missing, fail with a clear hint.
try:
    from PIL import Image, ImageDraw
except ImportError:
    sys.stderr.write("This tool needs Pillow. Install with: pip install pillow\n")
    raise

GREEN = "\x1b[32m"
RESET = "\x1b[0m"

# GitHub dark theme
C_BG = (13, 17, 23)
C_EMPTY = (22, 27, 34)
C_ON = (57, 211, 83)
CELL = 11
GAP = 3
PAD = 16

RECOMMENDED_VERSIONS = {
    'AI': 'Ultra clean and professional',
    'ML': 'Machine Learning focus',
    'DL': 'Deep Learning specialist',
    'LLM': 'Large Language Model expert',
    'GPT': 'Generative AI specialist',
    'NLP': 'Natural Language Processing',
    'AIE': 'AI Engineer abbreviated',
    'AIDEV': 'AI Developer - more descriptive',
    'NEURAL': 'Neural networks specialist',
    'BRAIN': 'Creative AI reference',
    'PROMPT': 'Prompt engineering focus',
    'AWS': 'Amazon Web Services',
    'HERO': 'Hero designation',
    'AWS HERO': 'AWS Hero - may need wrapping',
}

VISIBILITY_ICONS = {'excellent': '🟢', 'good': '🟡', 'fair': '🟠', 'challenging': '🔴'}


def visibility(width: int) -> str:
    if width <= 11:
        return 'excellent'
    if width <= 23:
        return 'good'
    if width <= 35:
        return 'fair'
    return 'challenging'


def window_cells(plan):
    """7 x 53 matrix of booleans: does the window cell carry commits?"""
    on = set(plan.active_dates)
    window = plan.window
    return [[window.cell_date(week, day) in on for week in range(WINDOW_WEEKS)]
            for day in range(DAYS_PER_WEEK)]


def render_terminal(plan, color=True) -> str:
    lines = []
    for day, row in enumerate(window_cells(plan)):
        cells = ''.join((f"{GREEN}█{RESET}" if color else '█') if bit else '·' for bit in row)
        lines.append(f"{DAY_NAMES[day]}: {cells}")
    return '\n'.join(lines)


def render_png(plan, path) -> Path:
    """Draw the window the way the graph shows it and save it as a PNG."""
    cells = window_cells(plan)
    w = PAD * 2 + WINDOW_WEEKS * (CELL + GAP) - GAP
    h = PAD * 2 + DAYS_PER_WEEK * (CELL + GAP) - GAP
    img = Image.new("RGB", (w, h), C_BG)
    draw = ImageDraw.Draw(img)
    for day, row in enumerate(cells):
        for week, bit in enumerate(row):
            x = PAD + week * (CELL + GAP)
            y = PAD + day * (CELL + GAP)
            draw.rounded_rectangle([x, y, x + CELL - 1, y + CELL - 1], radius=2,
                                   fill=C_ON if bit else C_EMPTY)
    path = Path(path)
    img.save(path)
    return path


def show_plan(plan, color=True, out=print):
    opts = plan.options
    out(f"🔍 PREVIEW: \"{plan.message}\" Pattern")
    out("=" * 50)
    out(f"📅 Current GitHub window: {plan.window.start} to {plan.window.end}")
    if plan.message in RECOMMENDED_VERSIONS:
        out(f"📊 {RECOMMENDED_VERSIONS[plan.message]}")
        out(f"📏 Width: {plan.width} weeks | Visibility: {visibility(plan.width)}")
    out(f"🔥 Intensity: {opts.intensity} ({opts.commits_per_day} commits per pixel)")
    out(f"🎯 Positioning: {opts.positioning}")
    out(f"🗓️ Pattern start: {plan.start_date}\n")
    out("GitHub Activity Graph Preview (53-week window):")
    out(render_terminal(plan, color=color))
    out(f"\n📈 Unique days with activity: {plan.grid.active_count}")
    out(f"🔥 Total commits: {len(plan.commits)} ({opts.commits_per_day} per day)")
    out(f"📅 Pattern span: {plan.width} weeks")
    if opts.keep_in_view and plan.refresh_dates:
        out(f"🔄 Next refresh needed: {plan.refresh_dates[0]}")


def show_versions(out=print):
    out("📋 RECOMMENDED VERSIONS:")
    for version, description in RECOMMENDED_VERSIONS.items():
        width = message_width(version)
        icon = VISIBILITY_ICONS[visibility(width)]
        out(f"{icon} \"{version}\" - {width} weeks - {description}")
    out("\n🔥 INTENSITY LEVELS:")
    for name, count in INTENSITY_LEVELS.items():
        note = " ⭐ recommended" if name == 'ultra' else ""
        out(f"• {name}: {count} commits per pixel{note}")
