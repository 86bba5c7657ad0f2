"""Tests for Options assembly and the snapshot file."""

import argparse
import json
from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from contribwriter.config import SNAPSHOT_FILE, Options, commits_for_intensity
from contribwriter.errors import ConfigurationError, MissingConfiguration
from contribwriter.generator import build_plan
from contribwriter.snapshot import load_snapshot, save_snapshot


class TestOptions:
    def test_defaults(self):
        opts = Options.build()
        assert opts.intensity == 'ultra'
        assert opts.commits_per_day == 25
        assert opts.center_message is True

    def test_intensity_levels(self):
        assert commits_for_intensity('low') == 3
        assert commits_for_intensity('extreme') == 30

    def test_unknown_intensity(self):
        with pytest.raises(ConfigurationError, match="Unknown intensity"):
            Options.build(intensity='blinding')

    def test_explicit_commits_override_intensity(self):
        assert Options.build(intensity='low', commits=12).commits_per_day == 12

    def test_commits_must_be_positive(self):
        with pytest.raises(ConfigurationError):
            Options.build(commits=0)

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            Options.build().intensity = 'low'

    def test_from_args(self):
        args = argparse.Namespace(intensity='high', commits=None, no_center=True, force_replace=True,
                                  keep_in_view=False, use_utc=True, start_date=date(2026, 1, 4),
                                  dry_run=False, seed=9)
        opts = Options.from_args(args)
        assert opts.commits_per_day == 15
        assert opts.center_message is False
        assert opts.positioning == 'Left-aligned'
        assert opts.start_date == date(2026, 1, 4)
        assert opts.seed == 9

    def test_overlay_args_keeps_unset_flags(self):
        saved = Options.build(intensity='low', center_message=False, keep_in_view=True, seed=3)
        args = argparse.Namespace(intensity=None, commits=7, no_center=False, force_replace=False,
                                  keep_in_view=False, use_utc=True, start_date=None, dry_run=True, seed=None)
        opts = saved.overlay_args(args)
        assert opts.intensity == 'low' and opts.commits_per_day == 7
        assert opts.center_message is False and opts.keep_in_view is True
        assert opts.use_utc and opts.dry_run
        assert opts.seed == 3

    def test_dict_uses_camel_case(self):
        data = Options.build(intensity='max', keep_in_view=True).to_dict()
        assert data['commitsPerDay'] == 20
        assert data['keepInView'] is True
        assert Options.from_dict(data) == Options.build(intensity='max', keep_in_view=True)


class TestSnapshot:
    def test_saved_fields(self, tmp_path, now):
        plan = build_plan("AI", Options.build(keep_in_view=True), now=now)
        save_snapshot(tmp_path, plan.snapshot(now))
        data = json.loads((tmp_path / SNAPSHOT_FILE).read_text())
        assert data['version'] == 'AI'
        assert data['messageWidth'] == 11
        assert data['created'].startswith('2026-10-18')
        assert len(data['refreshSchedule']) == 12
        assert data['windowInfo']['startDate'].startswith('2025-10-12')
        assert data['windowInfo']['endDate'].startswith('2026-10-18')
        assert data['options']['intensity'] == 'ultra'

    def test_no_refresh_schedule_without_keep_in_view(self, tmp_path, now):
        plan = build_plan("AI", Options.build(), now=now)
        save_snapshot(tmp_path, plan.snapshot(now))
        assert json.loads((tmp_path / SNAPSHOT_FILE).read_text())['refreshSchedule'] == []

    def test_load(self, tmp_path, now):
        plan = build_plan("AI", Options.build(keep_in_view=True), now=now)
        save_snapshot(tmp_path, plan.snapshot(now))
        snap = load_snapshot(tmp_path)
        assert snap.version == 'AI'
        assert snap.window == plan.window
        assert snap.next_refresh == plan.refresh_dates[0]

    def test_missing(self, tmp_path):
        with pytest.raises(MissingConfiguration, match="Run initial setup first"):
            load_snapshot(tmp_path)
