"""
Tests for the command-line interface.

Covers flag parsing into RunOptions, output selection, and conversion
of pipeline errors into exit status 1.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from pad2feed.cli import build_parser, main
from pad2feed.config import RunOptions
from pad2feed.errors import FetchError, MissingSectionError
from pad2feed.models.entities import AudioRef, EpisodeRecord

from conftest import EPISODE_PAD, EPISODE_URL, FakeFetcher


def _record() -> EpisodeRecord:
    return EpisodeRecord(
        uuid="nt-2023-05-10",
        title="CiR am 10.05.2023",
        subtitle="Der Chaostreff im Freien Radio Potsdam",
        summary="Kurz",
        publication_date="2023-05-10T00:00:00+02:00",
        audio=AudioRef(url="$media_base_url/2023_05_10-chaos-im-radio.mp3"),
        long_summary_md="**Shownotes:**\nLang",
    )


class TestBuildParser:
    """Tests for build_parser()."""

    def test_defaults(self):
        """Defaults: configured output, no link, quiet."""
        args = build_parser("../content.yaml").parse_args([])

        assert args.output == "../content.yaml"
        assert args.link == ""
        assert args.verbose is False
        assert args.timeout is None

    def test_flags(self):
        """Short flags map to their destinations."""
        args = build_parser("x").parse_args(
            ["-o", "out.yaml", "-l", "https://pad.ccc-p.org/CiR_2023-05-10", "-v",
             "--timeout", "5"]
        )

        assert args.output == "out.yaml"
        assert args.link == "https://pad.ccc-p.org/CiR_2023-05-10"
        assert args.verbose is True
        assert args.timeout == 5.0


class TestMain:
    """Tests for main()."""

    @patch("pad2feed.cli.run_pipeline")
    def test_prints_with_empty_output(self, mock_run, capsys):
        """-o '' prints the record to stdout."""
        mock_run.return_value = _record()

        assert main(["-o", ""]) == 0

        options = mock_run.call_args.args[0]
        assert options == RunOptions(output_path=None, episode_url=None, verbose=False)
        assert "uuid: nt-2023-05-10" in capsys.readouterr().out

    @patch("pad2feed.cli.run_pipeline")
    def test_appends_to_file(self, mock_run, temp_dir):
        """-o PATH appends to the given file."""
        mock_run.return_value = _record()
        content = temp_dir / "content.yaml"
        content.write_text("", encoding="utf-8")

        main(["-o", str(content), "-l", "https://pad.ccc-p.org/CiR_2023-05-10"])

        options = mock_run.call_args.args[0]
        assert options.output_path == Path(str(content))
        assert options.episode_url == "https://pad.ccc-p.org/CiR_2023-05-10"
        assert "uuid: nt-2023-05-10" in content.read_text(encoding="utf-8")

    @patch("pad2feed.cli.run_pipeline")
    def test_timeout_overrides_config(self, mock_run):
        """--timeout replaces the configured request timeout."""
        mock_run.return_value = _record()

        main(["-o", "", "--timeout", "7"])

        config = mock_run.call_args.args[1]
        assert config.request_timeout == 7.0

    @patch("pad2feed.cli.run_pipeline")
    def test_content_error_exits_1(self, mock_run, capsys):
        """Content errors end the process with status 1."""
        mock_run.side_effect = MissingSectionError("Summary")

        with pytest.raises(SystemExit) as exc_info:
            main(["-o", ""])

        assert exc_info.value.code == 1
        assert "ERROR: no Summary section in pad" in capsys.readouterr().err

    @patch("pad2feed.cli.run_pipeline")
    def test_fetch_error_exits_1(self, mock_run, capsys):
        """Fetch errors end the process with status 1."""
        mock_run.side_effect = FetchError("down", "https://pad.ccc-p.org/Radio/download")

        with pytest.raises(SystemExit) as exc_info:
            main(["-o", ""])

        assert exc_info.value.code == 1
        assert capsys.readouterr().out == ""

    @patch("pad2feed.cli.run_pipeline")
    def test_missing_output_file_exits_1(self, mock_run, temp_dir):
        """A missing output file ends the process with status 1."""
        mock_run.return_value = _record()

        with pytest.raises(SystemExit) as exc_info:
            main(["-o", str(temp_dir / "missing.yaml")])

        assert exc_info.value.code == 1

    def test_invalid_config_exits_1(self, monkeypatch, capsys):
        """Bad settings end the process with a diagnostic, not a traceback."""
        monkeypatch.setenv("PAD2FEED_REQUEST_TIMEOUT", "soon")

        with pytest.raises(SystemExit) as exc_info:
            main(["-o", ""])

        assert exc_info.value.code == 1
        assert "ERROR: invalid configuration" in capsys.readouterr().err

    @patch("pad2feed.pipeline.PadFetcher")
    def test_bad_audio_template_exits_1(self, mock_fetcher_cls, monkeypatch, capsys):
        """An unknown placeholder in the audio template is reported."""
        mock_fetcher_cls.return_value = FakeFetcher({EPISODE_URL: EPISODE_PAD})
        monkeypatch.setenv("PAD2FEED_AUDIO_URL_TEMPLATE", "{base}/{year}.mp3")

        with pytest.raises(SystemExit) as exc_info:
            main(["-o", "", "-l", EPISODE_URL])

        assert exc_info.value.code == 1
        assert "ERROR: audio_url_template" in capsys.readouterr().err
