import contextlib
import io
import os
import tempfile
import unittest

from spell import main


def _run(argv):
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        code = main(argv)
    return code, out.getvalue()


class TestSpellCommandLine(unittest.TestCase):
    def test_spell_numbers(self):
        code, output = _run(["--spell", "4", "42", "15"])
        self.assertEqual(code, 0)
        self.assertEqual(output.splitlines(), ["4: four", "42: forty-two", "15: fifteen"])

    def test_spell_capitalized(self):
        code, output = _run(["--spell", "42", "--capitalize"])
        self.assertEqual(code, 0)
        self.assertEqual(output.strip(), "42: Forty-two")

    def test_spell_out_of_range(self):
        code, output = _run(["--spell", "100"])
        self.assertEqual(code, 1)
        self.assertTrue(output.startswith("ERROR:"))

    def test_plot(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "lengths.png")
            code, output = _run(["--plot", path])
            self.assertEqual(code, 0)
            self.assertTrue(os.path.isfile(path))
            self.assertIn("Saved plot to", output)

    def test_plot_capitalized(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "lengths.png")
            code, _ = _run(["--plot", path, "--capitalize"])
            self.assertEqual(code, 0)
            self.assertTrue(os.path.isfile(path))

    def test_dataset_options_are_not_accepted(self):
        for argv in (["--generate-data"], ["--output-dir", "data"]):
            with self.subTest(argv=argv):
                with contextlib.redirect_stderr(io.StringIO()):
                    with self.assertRaises(SystemExit):
                        main(argv)

    def test_no_action_prints_help(self):
        code, output = _run([])
        self.assertEqual(code, 0)
        self.assertIn("usage:", output)


if __name__ == "__main__":
    unittest.main()
