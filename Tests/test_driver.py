from contextlib import redirect_stdout
import io
import logging
import os
import tempfile
import unittest
from unittest import mock

from treewalk import driver
from treewalk.AST import Let, StringLiteral


class Driver(unittest.TestCase):

    def run_driver(self, args):
        out = io.StringIO()
        with redirect_stdout(out):
            program = driver.run(args)
        return program, out.getvalue()

    def write_source(self, directory, source):
        filename = os.path.join(directory, 'prog.tw')
        with open(filename, 'w', encoding='utf-8') as f:
            f.write(source)
        return filename

    def test_fixture(self):
        program, output = self.run_driver([])
        self.assertEqual(program, [Let('foo')])
        self.assertEqual(output, "Let(name='foo', value=None)\n")

    def test_file(self):
        with tempfile.TemporaryDirectory() as directory:
            filename = self.write_source(directory, 'let a = "b"\nlet c\n')
            program, output = self.run_driver([filename])
        self.assertEqual(program, [Let('a', StringLiteral('b')), Let('c')])
        self.assertEqual(output.splitlines(),
                         ["Let(name='a', value=StringLiteral(text='b'))",
                          "Let(name='c', value=None)"])

    def test_missing_file(self):
        with self.assertRaises(SystemExit) as context:
            driver.run(['does/not/exist.tw'])
        self.assertEqual(context.exception.code,
                         'File "does/not/exist.tw" not found')

    def test_syntax_error(self):
        with tempfile.TemporaryDirectory() as directory:
            filename = self.write_source(directory, 'let a\nlet "b"\n')
            with self.assertRaises(SystemExit) as context:
                driver.run([filename])
        message = context.exception.code
        self.assertIn('TreewalkUnexpectedToken', message)
        self.assertIn(f' File: {filename}\n Line: 2\n', message)
        self.assertIn('let "b"\n    ^\n', message)

    def test_too_many_arguments(self):
        with self.assertRaises(SystemExit):
            driver.run(['a.tw', 'b.tw'])

    def test_main_debug_logging(self):
        out = io.StringIO()
        with mock.patch.dict(os.environ, {'TREEWALK_DEBUG': '1'}), \
                mock.patch('sys.argv', ['treewalk']), \
                mock.patch('logging.basicConfig') as basic_config, \
                redirect_stdout(out), \
                self.assertLogs('treewalk.parsing', 'DEBUG') as logs:
            driver.main()
        basic_config.assert_called_once_with(level=logging.DEBUG)
        self.assertEqual(out.getvalue(), "Let(name='foo', value=None)\n")
        self.assertEqual(logs.output,
                         ['DEBUG:treewalk.parsing:Parsed 1 statements from '
                          '2 tokens'])

    def test_main_without_debug_logging(self):
        environ = {k: v for k, v in os.environ.items()
                   if k != 'TREEWALK_DEBUG'}
        with mock.patch.dict(os.environ, environ, clear=True), \
                mock.patch('sys.argv', ['treewalk']), \
                mock.patch('logging.basicConfig') as basic_config, \
                redirect_stdout(io.StringIO()):
            driver.main()
        basic_config.assert_not_called()


if __name__ == '__main__':
    unittest.main()
