import io
import os
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from invoke import Context

from rupaul.config.exceptions import ManifestError, NotLoggedInError
from rupaul.program import program, split_extra_args
from rupaul.tasks.drag import drag


class TestDragTask(unittest.TestCase):
    """Test the drag task's error reporting and exit codes."""

    def run_task(self, *args, **kwargs):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            drag(Context(), *args, **kwargs)
        return stdout.getvalue(), stderr.getvalue()

    @patch('rupaul.pipeline.drag')
    def test_success(self, mock_drag):
        stdout, stderr = self.run_task("nais.yaml")

        self.assertIn("Random RuPaul quote", stdout)
        self.assertEqual(stderr, "")
        self.assertEqual(mock_drag.call_args[0][0], "nais.yaml")

    @patch('rupaul.pipeline.drag', side_effect=ManifestError("No such file", path="nais.yaml"))
    def test_failure_exits_with_error_prefix(self, mock_drag):
        stderr = io.StringIO()
        with redirect_stdout(io.StringIO()), redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as cm:
                drag(Context(), "nais.yaml")

        self.assertEqual(cm.exception.code, 1)
        self.assertTrue(stderr.getvalue().startswith("ERROR: "))
        self.assertIn("nais.yaml", stderr.getvalue())

    @patch('rupaul.pipeline.drag', side_effect=NotLoggedInError())
    def test_not_logged_in_guidance(self, mock_drag):
        stderr = io.StringIO()
        with redirect_stdout(io.StringIO()), redirect_stderr(stderr):
            with self.assertRaises(SystemExit):
                drag(Context(), "nais.yaml")

        self.assertIn('Run "vault login -method=oidc" to login.', stderr.getvalue())

    @patch('rupaul.pipeline.drag')
    def test_debug_sets_log_level(self, mock_drag):
        with patch.dict(os.environ, {}, clear=False):
            self.run_task("nais.yaml", debug=True)
            self.assertEqual(os.environ['LOG_LEVEL'], 'DEBUG')


class TestProgram(unittest.TestCase):

    def test_missing_manifest_argument(self):
        with redirect_stdout(io.StringIO()), redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                program.run(["rupaul", "drag"])
        self.assertNotEqual(cm.exception.code, 0)

    def test_list_shows_drag(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                program.run(["rupaul", "--list"])
        self.assertIn(cm.exception.code, (0, None))
        self.assertIn("drag", stdout.getvalue())

    @patch('rupaul.pipeline.drag')
    def test_extra_arguments_are_ignored(self, mock_drag):
        with redirect_stdout(io.StringIO()), redirect_stderr(io.StringIO()):
            try:
                program.run(["rupaul", "drag", "nais.yaml", "extra", "words"])
            except SystemExit as e:
                self.assertIn(e.code, (0, None))

        self.assertEqual(mock_drag.call_args[0][0], "nais.yaml")


class TestSplitExtraArgs(unittest.TestCase):
    """Test moving words after the manifest into invoke's remainder."""

    def test_no_extra_words(self):
        argv = ["rupaul", "drag", "--debug", "nais.yaml"]
        self.assertEqual(split_extra_args(argv), argv)

    def test_extra_words_follow_double_dash(self):
        self.assertEqual(
            split_extra_args(["rupaul", "drag", "nais.yaml", "a", "--debug", "b"]),
            ["rupaul", "drag", "nais.yaml", "--debug", "--", "a", "b"],
        )

    def test_existing_remainder_is_kept(self):
        self.assertEqual(
            split_extra_args(["rupaul", "drag", "nais.yaml", "a", "--", "b"]),
            ["rupaul", "drag", "nais.yaml", "--", "a", "b"],
        )

    def test_manifest_given_as_flag(self):
        self.assertEqual(
            split_extra_args(["rupaul", "drag", "--manifest", "nais.yaml", "a"]),
            ["rupaul", "drag", "--manifest", "nais.yaml", "--", "a"],
        )

    def test_other_commands_untouched(self):
        argv = ["rupaul", "--list"]
        self.assertEqual(split_extra_args(argv), argv)


if __name__ == '__main__':
    unittest.main()
