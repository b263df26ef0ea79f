"""
Tests des commandes CLI via typer.testing.CliRunner.

Les commandes travaillent sur de vraies arborescences sous tmp_path,
seule l'inspection pymediainfo est mockee.
"""

from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from hvsort.main import app

runner = CliRunner()

PARSE = "hvsort.adapters.media.mediainfo_probe.PyMediaInfo.parse"


def _media_info(*tracks) -> MagicMock:
    media_info = MagicMock()
    media_info.tracks = list(tracks)
    return media_info


class TestGeneralCommands:
    """Tests pour version et info."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "hvsort v0.1.0" in result.output

    def test_info(self) -> None:
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert ".mp4" in result.output


class TestScanCommand:
    """Tests pour la commande scan."""

    def test_scan_project(self, project_tree) -> None:
        root = project_tree({"A - H.mp4": b"a", "B - V.mp4": b"b"})

        result = runner.invoke(app, ["scan", str(root), "--details"])

        assert result.exit_code == 0
        assert "Projet project" in result.output
        assert "A - H.mp4" in result.output
        assert "B - V.mp4" in result.output

    def test_scan_missing_directory(self, tmp_path) -> None:
        result = runner.invoke(app, ["scan", str(tmp_path / "absent")])

        assert result.exit_code == 1
        assert "Repertoire introuvable" in result.output


class TestOrganizeCommand:
    """Tests pour la commande organize."""

    def test_moves_into_canonical_folders(self, project_tree) -> None:
        root = project_tree({"A - H.mp4": b"a", "sub/A - V.mov": b"b", "notes.txt": b"n"})

        result = runner.invoke(app, ["organize", str(root)])

        assert result.exit_code == 0
        assert (root / "H" / "A - H.mp4").exists()
        assert (root / "V" / "A - V.mov").exists()
        assert (root / "notes.txt").exists()

    def test_second_run_moves_nothing(self, project_tree) -> None:
        root = project_tree({"A - H.mp4": b"a"})
        runner.invoke(app, ["organize", str(root)])

        result = runner.invoke(app, ["organize", str(root)])

        assert result.exit_code == 0
        assert [p.name for p in (root / "H").iterdir()] == ["A - H.mp4"]


class TestAutosortAndProbe:
    """Tests pour autosort et probe (pymediainfo mocke)."""

    def test_autosort(self, project_tree, make_video_track) -> None:
        root = project_tree({"phone.mp4": b"p"})
        vertical = _media_info(make_video_track(1080, 1920))

        with patch(PARSE, return_value=vertical):
            result = runner.invoke(app, ["autosort", str(root)])

        assert result.exit_code == 0
        assert (root / "V" / "phone.mp4").exists()
        assert (root / "H").is_dir()

    def test_autosort_reports_probe_errors(self, project_tree, general_track) -> None:
        root = project_tree({"broken.mp4": b"x"})

        with patch(PARSE, return_value=_media_info(general_track)):
            result = runner.invoke(app, ["autosort", str(root)])

        assert result.exit_code == 0
        assert (root / "broken.mp4").exists()
        assert "probe_error" in result.output

    def test_probe(self, project_tree, make_video_track) -> None:
        root = project_tree({"clip.mp4": b"c"})

        with patch(PARSE, return_value=_media_info(make_video_track())):
            result = runner.invoke(app, ["probe", str(root / "clip.mp4")])

        assert result.exit_code == 0
        assert "16:9" in result.output
        assert "1920x1080" in result.output

    def test_probe_missing_file(self, tmp_path) -> None:
        result = runner.invoke(app, ["probe", str(tmp_path / "absent.mp4")])
        assert result.exit_code == 1


class TestCreateCommand:
    """Tests pour la commande create."""

    def test_create_project(self, tmp_path) -> None:
        result = runner.invoke(app, ["create", str(tmp_path), "Tournage"])

        assert result.exit_code == 0
        assert (tmp_path / "Tournage" / "H").is_dir()
        assert (tmp_path / "Tournage" / "V").is_dir()

    def test_create_invalid_name(self, tmp_path) -> None:
        result = runner.invoke(app, ["create", str(tmp_path), "a/b"])
        assert result.exit_code == 1


class TestRenameCommands:
    """Tests pour les sous-commandes rename."""

    def test_append_keeps_extension_by_default(self, project_tree) -> None:
        root = project_tree({"clip.mp4": b"c"})

        result = runner.invoke(app, ["rename", "append", "_v2", str(root / "clip.mp4")])

        assert result.exit_code == 0
        assert (root / "clip_v2.mp4").exists()

    def test_append_on_full_name(self, project_tree) -> None:
        root = project_tree({"clip.mp4": b"c"})

        result = runner.invoke(
            app, ["rename", "append", "_v2", "--no-keep-extension", str(root / "clip.mp4")]
        )

        assert result.exit_code == 0
        assert (root / "clip.mp4_v2").exists()

    def test_prepend_with_root_rescans(self, project_tree) -> None:
        root = project_tree({"clip - H.mp4": b"c"})

        result = runner.invoke(
            app,
            ["rename", "prepend", "J1 ", "--root", str(root), str(root / "clip - H.mp4")],
        )

        assert result.exit_code == 0
        assert (root / "J1 clip - H.mp4").exists()
        assert "Projet project" in result.output

    def test_replace_literal_ignores_case(self, project_tree) -> None:
        root = project_tree({"Clip (1).mp4": b"c"})

        result = runner.invoke(
            app,
            ["rename", "replace", "-F", "CLIP (1)", "plan", str(root / "Clip (1).mp4")],
        )

        assert result.exit_code == 0
        assert (root / "plan.mp4").exists()

    def test_replace_case_sensitive(self, project_tree) -> None:
        root = project_tree({"CLIP.mp4": b"c"})

        result = runner.invoke(
            app, ["rename", "replace", "--case-sensitive", "clip", "plan", str(root / "CLIP.mp4")]
        )

        assert result.exit_code == 0
        assert (root / "CLIP.mp4").exists()
        assert not (root / "plan.mp4").exists()

    def test_replace_with_dollar_group(self, project_tree) -> None:
        root = project_tree({"A - H.mp4": b"c"})

        result = runner.invoke(
            app,
            ["rename", "replace", "^(.*) - H$", "$1 (prise) - H", str(root / "A - H.mp4")],
        )

        assert result.exit_code == 0
        assert (root / "A (prise) - H.mp4").exists()

    def test_remove(self, project_tree) -> None:
        root = project_tree({"clip_final.mp4": b"c"})

        result = runner.invoke(app, ["rename", "remove", "_final", str(root / "clip_final.mp4")])

        assert result.exit_code == 0
        assert (root / "clip.mp4").exists()

    def test_dry_run_does_not_rename(self, project_tree) -> None:
        root = project_tree({"clip.mp4": b"c"})

        result = runner.invoke(
            app, ["rename", "replace", "clip", "plan", "--dry-run", str(root / "clip.mp4")]
        )

        assert result.exit_code == 0
        assert "plan.mp4" in result.output
        assert (root / "clip.mp4").exists()

    def test_invalid_pattern(self, project_tree) -> None:
        root = project_tree({"clip.mp4": b"c"})

        result = runner.invoke(app, ["rename", "replace", "([", "x", str(root / "clip.mp4")])

        assert result.exit_code == 1
        assert "Motif invalide" in result.output
        assert (root / "clip.mp4").exists()

    def test_empty_text_rejected(self, project_tree) -> None:
        root = project_tree({"clip.mp4": b"c"})

        result = runner.invoke(app, ["rename", "append", "", str(root / "clip.mp4")])

        assert result.exit_code == 1

    def test_missing_file_is_ignored(self, project_tree) -> None:
        root = project_tree({"clip.mp4": b"c"})

        result = runner.invoke(
            app, ["rename", "append", "_x", str(root / "absent.mp4"), str(root / "clip.mp4")]
        )

        assert result.exit_code == 0
        assert "introuvable" in result.output
        assert (root / "clip_x.mp4").exists()
