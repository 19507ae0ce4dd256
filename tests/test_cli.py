import io
import os
import subprocess
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from tempfile import TemporaryDirectory

from bin2c.cli import main
from bin2c.encoder import decode_tokens


class TestMain(unittest.TestCase):

    def setUp(self):
        self.tmpdir = TemporaryDirectory()
        self.input = os.path.join(self.tmpdir.name, 'my-script.lua')
        self.output = os.path.join(self.tmpdir.name, 'my_script.c')
        with open(self.input, 'wb') as f:
            f.write(b'print("hi")\r\nreturn 0\n')

    def tearDown(self):
        self.tmpdir.cleanup()

    def _run(self, argv):
        out = io.StringIO()
        err = io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            ret = main(argv)
        return ret, out.getvalue(), err.getvalue()

    def test_stdout(self):
        ret, out, err = self._run([self.input])
        self.assertEqual(ret, 0)
        self.assertEqual(err, '')
        self.assertIn('const size_t my_script_lua_len = 22;', out)
        self.assertIn('const unsigned char my_script_lua[23] = {', out)
        self.assertTrue(out.endswith('  0 };\n\n'))

    def test_text_mode_stdout(self):
        ret, out, _ = self._run(['-t', '-lf', '-s', '-n', 'script', self.input])
        self.assertEqual(ret, 0)
        self.assertIn('static const size_t script_len = 21;', out)
        body = out[out.index('= {\n') + 4:]
        self.assertEqual(decode_tokens([body]), b'print("hi")\nreturn 0\n')

    def test_usage_errors(self):
        cases = [
            [],
            ['-b', '-t', self.input],
            ['-b', '-lf', self.input],
            ['-t', '-lf', '-crlf', self.input],
            [self.input, '-n'],
            ['-n', self.input],
            [os.path.join(self.tmpdir.name, 'missing')],
        ]
        for argv in cases:
            ret, out, err = self._run(argv)
            self.assertEqual(ret, 2)
            self.assertEqual(out, '')
            self.assertIn('Usage :', err)

    def test_error_message(self):
        _, _, err = self._run(['-b', '-t', self.input])
        self.assertTrue(err.startswith('Error: Only use -b or -t flags'))

    def test_output_file(self):
        ret, out, _ = self._run(['-o', self.output, self.input])
        self.assertEqual(ret, 0)
        self.assertIn('Updating file', out)

        _, stdout_content, _ = self._run([self.input])
        with open(self.output, newline='') as f:
            self.assertEqual(f.read(), stdout_content)

        ret, out, _ = self._run(['-o', self.output, self.input])
        self.assertEqual(ret, 0)
        self.assertIn('No changes to file', out)

        ret, out, _ = self._run(['-w', '-o', self.output, self.input])
        self.assertIn('Updating file', out)

        ret, out, _ = self._run(['-t', '-o', self.output, self.input])
        self.assertIn('Updating file', out)

    def test_write_failure(self):
        output = os.path.join(self.tmpdir.name, 'nodir', 'out.c')
        ret, out, err = self._run(['-o', output, self.input])
        self.assertEqual(ret, 1)
        self.assertIn('Unable to open file for writing', err)
        self.assertNotIn('Updating', out)

    def test_undecodable_input_name(self):
        path = os.path.join(os.fsencode(self.tmpdir.name), b'caf\xe9.bin')
        try:
            with open(path, 'wb') as f:
                f.write(b'x')
        except (OSError, UnicodeError):
            self.skipTest('filesystem rejects non UTF-8 file names')

        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding='utf-8')
        with redirect_stdout(stream), redirect_stderr(io.StringIO()):
            ret = main([os.fsdecode(path)])
        stream.flush()

        self.assertEqual(ret, 0)
        self.assertIn(b"/* Original filename: 'caf\xe9.bin' */\n",
                      raw.getvalue())
        self.assertIn(b'const size_t caf__bin_len = 1;', raw.getvalue())


class TestWrapperScript(unittest.TestCase):

    def test_run_script(self):
        root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        script = os.path.join(root, 'tools', 'run_bin2c.py')
        env = dict(os.environ)
        env['PYTHONPATH'] = os.pathsep.join(
            filter(None, [root, env.get('PYTHONPATH')]))

        with TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, 'res.txt')
            with open(path, 'wb') as f:
                f.write(b'ab')
            proc = subprocess.run([sys.executable, script, '-s', path],
                                  capture_output=True, env=env, check=False)

        self.assertEqual(proc.returncode, 0, proc.stderr)
        self.assertIn(b'static const size_t res_txt_len = 2;', proc.stdout)
        self.assertIn(b' 97, 98,\n  0 };\n\n', proc.stdout)
