"""Tests for the command interpreter and the built-in commands."""

import unittest

from vshell.filesystem import Directory, FileType, TextFile
from vshell.shell import CommandRegistry, CommandResult, CommandSpec
from vshell.tests.helpers import make_session


SEED = {
    'about.txt': ['line one', 'line two'],
    'projects': {
        'shell.txt': ['a shell'],
    },
}


class InterpreterTestCase(unittest.TestCase):

    def setUp(self):
        self.session = make_session(seed=SEED)
        self.root = self.session.fs.root

    def run_line(self, line) -> CommandResult:
        return self.session.execute(line)


class TestDispatch(InterpreterTestCase):

    def test_unknown_command(self):
        res = self.run_line("foo bar")
        self.assertEqual(res.std_out, [])
        self.assertEqual(res.std_err, ['foo: command not found'])

    def test_blank_line(self):
        res = self.run_line("   ")
        self.assertEqual(res.std_out, [])
        self.assertEqual(res.std_err, [])

    def test_handler_fault_becomes_stderr(self):
        """An unexpected error in a handler is reported, not raised."""
        def broken(session, cmd):
            raise RuntimeError("boom")

        session = make_session(registry=CommandRegistry([CommandSpec('broken', broken)]))
        res = session.execute("broken")
        self.assertEqual(res.std_err, ['broken: boom'])

    def test_registry_lookup(self):
        registry = self.session.registry
        self.assertIn('ls', registry)
        self.assertNotIn('rm', registry)
        self.assertEqual(registry.accepted_types('cat'), [FileType.TEXT])
        self.assertEqual(registry.accepted_types('pwd'), [])
        self.assertIsNone(registry.accepted_types('echo'))
        self.assertIsNone(registry.accepted_types('unknown'))


class TestSimpleCommands(InterpreterTestCase):

    def test_pwd(self):
        self.assertEqual(self.run_line("pwd").std_out, ['~'])
        self.run_line("cd projects")
        self.assertEqual(self.run_line("pwd").std_out, ['~/projects'])

    def test_whoami(self):
        res = self.run_line("whoami")
        self.assertEqual(res.std_out, ['guest'])
        self.assertEqual(res.std_err, [])

    def test_echo(self):
        self.assertEqual(self.run_line("echo  hello   world").std_out, ['hello world'])
        self.assertEqual(self.run_line("echo").std_out, [''])

    def test_clear(self):
        display = self.session.display
        display.print("something")
        res = self.run_line("clear")
        self.assertEqual(display.lines, [])
        self.assertEqual(display.clear_count, 1)
        self.assertEqual(res.std_out, [])
        self.assertEqual(res.std_err, [])

    def test_help(self):
        res = self.run_line("help")
        self.assertEqual(res.std_err, [])
        text = '\n'.join(res.std_out)
        for name in ('ls', 'cd', 'cat', 'help'):
            self.assertIn(name, text)


class TestCd(InterpreterTestCase):

    def test_cd_and_back(self):
        self.run_line("cd projects")
        self.assertEqual(self.session.current_dir.path, '~/projects')
        self.run_line("cd ..")
        self.assertIs(self.session.current_dir, self.root)

    def test_cd_dotdot_at_root(self):
        res = self.run_line("cd ..")
        self.assertEqual(res.std_err, [])
        self.assertIs(self.session.current_dir, self.root)

    def test_cd_without_args_goes_to_root(self):
        self.run_line("cd projects")
        self.run_line("cd")
        self.assertIs(self.session.current_dir, self.root)

    def test_cd_missing(self):
        res = self.run_line("cd nowhere")
        self.assertEqual(res.std_err, ['nowhere: directory not found'])
        self.assertIs(self.session.current_dir, self.root)

    def test_cd_into_file(self):
        res = self.run_line("cd about.txt")
        self.assertEqual(res.std_err, ['about.txt: directory not found'])

    def test_prompt_follows_directory(self):
        self.run_line("cd projects")
        self.assertEqual(self.session.prompt, 'guest@www.carlegbert.com:~/projects$ ')


class TestLs(InterpreterTestCase):

    def test_ls_current(self):
        self.assertEqual(self.run_line("ls").std_out, ['about.txt  projects/'])

    def test_ls_one_argument(self):
        self.assertEqual(self.run_line("ls projects").std_out, ['shell.txt'])

    def test_ls_several_arguments(self):
        res = self.run_line("ls projects .")
        self.assertEqual(res.std_out, ['projects: shell.txt', '.: about.txt  projects/'])

    def test_ls_missing(self):
        res = self.run_line("ls nonexistent")
        self.assertEqual(res.std_out, [])
        self.assertEqual(res.std_err, ['ls: cannot access nonexistent: no such file or directory'])

    def test_ls_partial_success(self):
        res = self.run_line("ls projects nope")
        self.assertEqual(res.std_out, ['projects: shell.txt'])
        self.assertEqual(res.std_err, ['ls: cannot access nope: no such file or directory'])


class TestCat(InterpreterTestCase):

    def test_cat_file(self):
        self.assertEqual(self.run_line("cat about.txt").std_out, ['line one', 'line two'])

    def test_cat_several(self):
        res = self.run_line("cat about.txt projects/shell.txt")
        self.assertEqual(res.std_out, ['line one', 'line two', 'a shell'])

    def test_cat_directory(self):
        res = self.run_line("cat projects")
        self.assertEqual(res.std_err, ['cat: projects: Is a directory'])

    def test_cat_missing(self):
        res = self.run_line("cat nope.txt")
        self.assertEqual(res.std_err, ['cat: nope.txt: No such file or directory'])

    def test_cat_no_args(self):
        res = self.run_line("cat")
        self.assertEqual((res.std_out, res.std_err), ([], []))


class TestTouchAndMkdir(InterpreterTestCase):

    def test_touch_creates_empty_file(self):
        res = self.run_line("touch x")
        node = self.root.get_child('x')
        self.assertIsInstance(node, TextFile)
        self.assertEqual(node.contents, [])
        self.assertIs(res.data, node)

    def test_touch_twice_updates_timestamp(self):
        self.run_line("touch x")
        node = self.root.get_child('x')
        node.last_modified = 0.0
        self.run_line("touch x")
        self.assertGreater(node.last_modified, 0.0)
        self.assertEqual([c.name for c in self.root.children].count('x'), 1)

    def test_touch_in_missing_directory(self):
        res = self.run_line("touch nope/x.txt")
        self.assertEqual(res.std_err, ['nope: Directory not found'])

    def test_touch_several_with_partial_failure(self):
        res = self.run_line("touch a.txt nope/b.txt projects/c.txt")
        self.assertEqual(res.std_err, ['nope: Directory not found'])
        self.assertIsNotNone(self.root.get_child('a.txt'))
        self.assertIsNotNone(self.root.get_child('projects').get_child('c.txt'))

    def test_mkdir_twice(self):
        self.run_line("mkdir a")
        res = self.run_line("mkdir a")
        self.assertEqual(res.std_err, [])
        dirs = [c for c in self.root.children if c.name == 'a']
        self.assertEqual(len(dirs), 1)
        self.assertIsInstance(dirs[0], Directory)

    def test_mkdir_nested(self):
        self.run_line("mkdir projects/new")
        res = self.run_line("ls projects")
        self.assertEqual(res.std_out, ['shell.txt  new/'])

    def test_mkdir_missing_parent(self):
        res = self.run_line("mkdir a/b/c")
        self.assertEqual(res.std_err, ['a/b: Directory not found'])


class TestRedirection(InterpreterTestCase):

    def test_truncate_then_append(self):
        res = self.run_line("echo hi > f.txt")
        self.assertEqual(res.std_out, [])
        self.assertEqual(self.run_line("cat f.txt").std_out, ['hi'])

        self.run_line("echo bye >> f.txt")
        self.assertEqual(self.run_line("cat f.txt").std_out, ['hi', 'bye'])

    def test_truncate_replaces_content(self):
        self.run_line("echo one > f.txt")
        self.run_line("echo two > f.txt")
        self.assertEqual(self.run_line("cat f.txt").std_out, ['two'])

    def test_redirect_into_existing_file(self):
        self.run_line("cat projects/shell.txt >> about.txt")
        node = self.root.get_child('about.txt')
        self.assertEqual(node.contents, ['line one', 'line two', 'a shell'])

    def test_redirect_forwards_stderr_only(self):
        res = self.run_line("cat about.txt nope > out.txt")
        self.assertEqual(res.std_out, [])
        self.assertEqual(res.std_err, ['cat: nope: No such file or directory'])
        self.assertEqual(self.root.get_child('out.txt').contents, ['line one', 'line two'])

    def test_redirect_target_in_missing_directory(self):
        res = self.run_line("echo hi > nope/f.txt")
        self.assertEqual(res.std_out, [])
        self.assertEqual(res.std_err, ['bash: nope/f.txt: No such file or directory'])

    def test_redirect_to_directory(self):
        res = self.run_line("echo hi > projects")
        self.assertEqual(res.std_err, ['bash: projects: Is a directory'])

    def test_redirect_to_directory_creates_nothing(self):
        before = [child.name for child in self.root.children]
        for line in ("echo hi >> projects", "echo hi > projects/", "echo hi > .", "echo hi > ~"):
            res = self.run_line(line)
            self.assertEqual(len(res.std_err), 1, line)
            self.assertTrue(res.std_err[0].endswith(': Is a directory'), line)
        self.assertEqual([child.name for child in self.root.children], before)
        self.assertIsInstance(self.root.get_child('projects'), Directory)
        self.assertEqual(self.root.get_child('projects').get_child('shell.txt').contents, ['a shell'])

    def test_tokens_after_target(self):
        self.run_line("echo hi > f.txt there")
        self.assertEqual(self.root.get_child('f.txt').contents, ['hi there'])

    def test_missing_target(self):
        res = self.run_line("echo hi >")
        self.assertEqual(len(res.std_err), 1)
        self.assertIn('syntax error', res.std_err[0])

    def test_unknown_command_redirected(self):
        res = self.run_line("nope > f.txt")
        self.assertEqual(res.std_err, ['nope: command not found'])
        self.assertEqual(self.root.get_child('f.txt').contents, [])


class TestCommandResult(unittest.TestCase):

    def test_combine_keeps_order(self):
        first = CommandResult.of(['a'], ['x'])
        second = CommandResult.of(['b'], ['y'])
        first.combine(second)
        self.assertEqual(first.std_out, ['a', 'b'])
        self.assertEqual(first.std_err, ['x', 'y'])

    def test_render(self):
        self.assertEqual(CommandResult.of('out', 'err').render(), ['out', 'err'])


if __name__ == '__main__':
    unittest.main()
